"""Tests for batch input parsing, throttling and batch runs."""

from __future__ import annotations

import pytest

from reputation_scanner.batch import (
    FixedDelayThrottle,
    NoThrottle,
    Throttle,
    read_address_file,
    run_batch,
)

from conftest import VALID_ADDRESS, ZERO_ADDRESS


class CountingThrottle(Throttle):
    def __init__(self):
        self.calls = 0

    def wait(self):
        self.calls += 1


def test_read_address_file_skips_blank_and_non_hex_lines(tmp_path):
    path = tmp_path / "addresses.txt"
    path.write_text(
        f"{VALID_ADDRESS}\n\n   \nvitalik.eth\n  {ZERO_ADDRESS}  \n0xshort\n",
        encoding="utf-8",
    )
    assert read_address_file(path) == [VALID_ADDRESS, ZERO_ADDRESS, "0xshort"]


def test_read_address_file_missing(tmp_path):
    with pytest.raises(OSError):
        read_address_file(tmp_path / "missing.txt")


def test_run_batch_quick_scans_in_order(scanner):
    reports = run_batch(scanner, [VALID_ADDRESS, ZERO_ADDRESS, "0xshort"], network="base")

    assert [r.address for r in reports] == [VALID_ADDRESS, ZERO_ADDRESS, "0xshort"]
    assert all(r.network == "base" for r in reports)
    assert all(len(r.checks) == 2 for r in reports)
    assert [r.risk_level for r in reports] == ["low", "high", "high"]


def test_run_batch_full_mode(scanner):
    reports = run_batch(scanner, [VALID_ADDRESS], full=True)
    assert len(reports[0].checks) == 6


def test_run_batch_throttles_between_addresses(scanner):
    throttle = CountingThrottle()
    run_batch(scanner, [VALID_ADDRESS, ZERO_ADDRESS, VALID_ADDRESS], throttle=throttle)
    assert throttle.calls == 2


def test_run_batch_reports_progress(scanner):
    seen = []
    run_batch(scanner, [VALID_ADDRESS, ZERO_ADDRESS], on_report=lambda r: seen.append(r.address))
    assert seen == [VALID_ADDRESS, ZERO_ADDRESS]


def test_run_batch_empty(scanner):
    throttle = CountingThrottle()
    assert run_batch(scanner, [], throttle=throttle) == []
    assert throttle.calls == 0


def test_fixed_delay_throttle_sleeps():
    sleeps = []
    FixedDelayThrottle(0.2, sleep=sleeps.append).wait()
    assert sleeps == [0.2]


def test_fixed_delay_throttle_zero_delay_does_not_sleep():
    sleeps = []
    FixedDelayThrottle(0, sleep=sleeps.append).wait()
    assert sleeps == []


def test_fixed_delay_throttle_rejects_negative_delay():
    with pytest.raises(ValueError):
        FixedDelayThrottle(-1)


def test_no_throttle_is_noop():
    assert NoThrottle().wait() is None
