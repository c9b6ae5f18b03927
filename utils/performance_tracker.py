#!/usr/bin/env python3
"""
Performance tracking utilities for the maps tools.
Records timing and outcome of each tool call with context manager support.
"""

import json
import logging
import os
import time
from contextlib import asynccontextmanager
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Optional

from config import Config

logger = logging.getLogger("mcp.tools")


@dataclass
class CallMetrics:
    """Container for the metrics of a single tool call."""

    tool: str
    start_time: float
    end_time: float = 0.0
    duration_seconds: float = 0.0
    success: bool = False
    error: Optional[str] = None

    def to_dict(self):
        """Convert to dictionary for JSON serialization."""
        return {
            **asdict(self),
            "start_time_iso": datetime.fromtimestamp(self.start_time).isoformat(),
            "duration_formatted": f"{self.duration_seconds:.3f}s",
        }


class CallTracker:
    """Tracks one tool call; the caller records the envelope outcome."""

    def __init__(self, tool, log_file=None):
        self.metrics = CallMetrics(tool=str(tool), start_time=time.time())
        self._log_file = log_file

    def record(self, result):
        """Record the outcome of an OperationResult."""
        self.metrics.success = result.success
        self.metrics.error = result.error

    def finish(self):
        """Finalize metrics and calculate duration."""
        self.metrics.end_time = time.time()
        self.metrics.duration_seconds = self.metrics.end_time - self.metrics.start_time

    def save_to_file(self):
        """Append metrics to the JSONL log file, if one is configured."""
        if not self._log_file:
            return
        try:
            directory = os.path.dirname(self._log_file)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(self._log_file, "a") as f:
                f.write(json.dumps(self.metrics.to_dict()) + "\n")
        except OSError as e:
            logger.warning(f"Could not save call metrics: {e}")

    def log_summary(self):
        m = self.metrics
        if m.success:
            logger.info(f"{m.tool} succeeded in {m.duration_seconds:.3f}s")
        else:
            logger.warning(f"{m.tool} failed in {m.duration_seconds:.3f}s: {m.error}")


@asynccontextmanager
async def track_call(tool, log_file=None):
    """Async context manager for tracking a tool call."""
    tracker = CallTracker(tool, log_file or Config.PERFORMANCE_LOG_FILE)
    try:
        yield tracker
    finally:
        tracker.finish()
        tracker.log_summary()
        tracker.save_to_file()
