"""Unit tests for per-call tracking."""
import asyncio
import json
import logging

from utils.models import OperationResult
from utils.performance_tracker import track_call


def test_track_call_writes_jsonl(tmp_path):
    log_file = tmp_path / "calls" / "metrics.jsonl"

    async def _run():
        async with track_call("maps_geocode", log_file=str(log_file)) as tracker:
            tracker.record(OperationResult.failure("Address not found"))
        return tracker

    tracker = asyncio.run(_run())
    assert tracker.metrics.duration_seconds >= 0
    entry = json.loads(log_file.read_text().strip())
    assert entry["tool"] == "maps_geocode"
    assert entry["success"] is False
    assert entry["error"] == "Address not found"


def test_track_call_logs_outcome(caplog):
    async def _run():
        async with track_call("maps_elevation") as tracker:
            tracker.record(OperationResult.ok([]))

    with caplog.at_level(logging.INFO, logger="mcp.tools"):
        asyncio.run(_run())
    assert "maps_elevation succeeded" in caplog.text


def test_dispatch_is_tracked(dispatcher, caplog):
    with caplog.at_level(logging.INFO, logger="mcp.tools"):
        asyncio.run(dispatcher.dispatch("maps_geocode", {"address": "Atlantis"}))
    assert "maps_geocode failed" in caplog.text
