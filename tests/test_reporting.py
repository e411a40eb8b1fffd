"""Tests for text and JSON report output."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

from reputation_scanner.core.models import CheckResult, ReputationReport
from reputation_scanner.reporting import (
    format_batch_line,
    format_report,
    reports_to_json,
    save_json_results,
)
from reputation_scanner.reporting.helpers import _format_time, _risk_emoji, _status_icon

from conftest import FIXED_TIME, VALID_ADDRESS, ZERO_ADDRESS


@pytest.mark.parametrize(
    "level,emoji",
    [("low", "🟢"), ("medium", "🟡"), ("high", "🟠"), ("critical", "🔴"), ("unknown", "⚪")],
)
def test_risk_emoji(level, emoji):
    assert _risk_emoji(level) == emoji


@pytest.mark.parametrize("status,icon", [("pass", "✓"), ("warning", "⚠️"), ("fail", "✗")])
def test_status_icon(status, icon):
    assert _status_icon(status) == icon


@pytest.mark.parametrize(
    "timestamp",
    [
        FIXED_TIME,
        FIXED_TIME.astimezone(timezone(timedelta(hours=2))),
        datetime(2024, 5, 1, 12, 30, 0),
    ],
)
def test_format_time_is_marked_utc(timestamp):
    assert _format_time(timestamp) == "2024-05-01 12:30:00 UTC"


def test_format_report_full_scan(scanner):
    text = format_report(scanner.run_full_scan(ZERO_ADDRESS, "ethereum"))

    assert "  REPUTATION REPORT" in text
    assert f"Address: {ZERO_ADDRESS}" in text
    assert "Network: ethereum" in text
    assert "Time:    2024-05-01 12:30:00 UTC" in text
    assert "Overall Score: 50/100" in text
    assert "Risk Level:    🟠 HIGH" in text
    assert f"  ✓ {'Address Format':<25} [100%] pass" in text
    assert f"  ⚠️ {'Contract Check':<25} [50%] warning" in text
    assert f"  ✗ {'Known Patterns':<25} [0%] fail" in text
    assert "     └─ Matches known malicious pattern" in text
    assert "  ⚠️  Known Patterns: Matches known malicious pattern" in text
    assert text.startswith("═" * 60 + "\n")
    assert text.endswith("═" * 60 + "\n")


def test_format_report_sections_in_order(scanner):
    text = format_report(scanner.run_quick_scan(VALID_ADDRESS, "base"))
    assert text.index("CHECKS:") < text.index("RECOMMENDATIONS:") < text.index("automated assessment")


def test_format_batch_line(scanner):
    report = scanner.run_quick_scan(VALID_ADDRESS, "ethereum")
    assert format_batch_line(report) == f"{VALID_ADDRESS[:20]}... [low] Score: 100/100 🟢"


def test_save_json_results(tmp_path, scanner):
    reports = [scanner.run_quick_scan(VALID_ADDRESS, "ethereum"), scanner.run_quick_scan(ZERO_ADDRESS, "base")]
    output = tmp_path / "results.json"
    save_json_results(reports, output)

    data = json.loads(output.read_text(encoding="utf-8"))
    assert [item["address"] for item in data] == [VALID_ADDRESS, ZERO_ADDRESS]
    assert data[1] == {
        "address": ZERO_ADDRESS,
        "network": "base",
        "timestamp": data[1]["timestamp"],
        "overall_score": 50,
        "risk_level": "high",
        "checks": [
            {"name": "Address Format", "status": "pass", "score": 100, "details": "Valid checksummed address"},
            {"name": "Known Patterns", "status": "fail", "score": 0, "details": "Matches known malicious pattern"},
        ],
        "recommendations": ["⚠️  Known Patterns: Matches known malicious pattern"],
    }


def test_saved_json_round_trips_into_reports(tmp_path, scanner):
    report = scanner.run_full_scan(VALID_ADDRESS, "ethereum")
    output = tmp_path / "results.json"
    save_json_results([report], output)

    loaded = ReputationReport.model_validate(json.loads(output.read_text(encoding="utf-8"))[0])
    assert loaded == report


def test_save_json_results_unwritable_path(tmp_path, scanner):
    with pytest.raises(OSError):
        save_json_results([], tmp_path / "missing-dir" / "results.json")


def test_reports_to_json_empty():
    assert reports_to_json([]) == []


def test_format_report_without_checks():
    report = ReputationReport.from_checks("0x1", "ethereum", [], timestamp=FIXED_TIME)
    text = format_report(report)
    assert "Overall Score: 0/100" in text
    assert "🔴 CRITICAL" in text


def test_format_report_custom_score():
    check = CheckResult(name="Custom", status="warning", score=73, details="partial data")
    report = ReputationReport.from_checks("0x1", "ethereum", [check], timestamp=FIXED_TIME)
    assert f"  ⚠️ {'Custom':<25} [73%] warning" in format_report(report)
