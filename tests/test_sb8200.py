"""Tests for the SB8200 parser."""

from __future__ import annotations

import pytest
from bs4.builder import ParserRejectedMarkup

from surfer.err.exceptions import DocumentParseError, SignalParseError, TableLayoutError
from surfer.modem.signal import Downstream, Upstream
from surfer.sb8200 import SB8200
from surfer.sb8200.parse import parse_status


def test_channel_counts(sb8200_page):
    got = parse_status(sb8200_page)
    assert len(got.downstream) == 33
    assert set(got.downstream) == {str(ch) for ch in range(1, 33)} | {"159"}
    assert list(got.upstream) == ["1", "2", "3", "4", "5"]


def test_downstream_rows(sb8200_page):
    got = parse_status(sb8200_page)
    assert got.downstream["29"] == Downstream(
        frequency="639000000 Hz",
        modulation="QAM256",
        power_level=1.5,
        snr=39.4,
        correctable=1643,
        uncorrectable=3047,
    )
    assert got.downstream["14"].power_level == -0.3
    # The OFDM channel
    assert got.downstream["159"] == Downstream(
        frequency="722000000 Hz",
        modulation="Other",
        power_level=2.8,
        snr=36.2,
        correctable=1179900627,
        uncorrectable=0,
    )


def test_upstream_rows(sb8200_page):
    got = parse_status(sb8200_page)
    assert got.upstream["1"] == Upstream(
        frequency="23700000 Hz",
        power_level=42,
        modulation="SC-QAM Upstream",
        lock_status="Locked",
    )
    assert got.upstream["5"] == Upstream(
        frequency="41200000 Hz",
        power_level=41,
        modulation="SC-QAM Upstream",
        lock_status="Locked",
    )
    # Not reported by this model
    assert all(us.symbol_rate == 0 for us in got.upstream.values())


def test_channel_label_is_the_first_column(sb8200_page):
    # Upstream "Channel" 3 is channel id 1; we key by what the UI calls the channel
    assert parse_status(sb8200_page).upstream["3"].frequency == "30100000 Hz"


def test_garbage_cell_leaves_only_that_field_at_zero(sb8200_page):
    page = sb8200_page.replace(b"<td>39.4 dB</td><td>1643</td>", b"<td>---- dB</td><td>1643</td>")
    ds = parse_status(page).downstream["29"]
    assert ds.snr == 0
    assert ds.power_level == 1.5
    assert ds.correctable == 1643


def test_missing_table_is_fatal(sb8200_page):
    page = sb8200_page.replace(b'<table class="simpleTable">', b"<table>", 1)
    with pytest.raises(TableLayoutError, match="Found 2 '.simpleTable' tables, expected 3"):
        parse_status(page)


def test_duplicate_channel_is_fatal(sb8200_page):
    page = sb8200_page.replace(b"<tr><td>30</td>", b"<tr><td>29</td>")
    with pytest.raises(TableLayoutError, match="Duplicate channel '29'"):
        parse_status(page)


def test_not_a_status_page():
    with pytest.raises(SignalParseError):
        parse_status(b"<html><body><h1>Login</h1></body></html>")


def test_fingerprint(sb6121_page, sb6183_page, sb8200_page):
    assert SB8200.matches(sb8200_page)
    assert not SB8200.matches(sb6121_page)
    assert not SB8200.matches(sb6183_page)


def test_fixture_modem(page_path):
    modem = SB8200.from_fixture(page_path("SB8200.html"))
    assert modem.name == "SB8200"
    assert modem.signal_url == "http://192.168.100.1/cmconnectionstatus.html"


def test_heading_cells_outside_of_a_row(sb8200_page):
    # The page closes the title row and then the heading cells' row a second time
    assert b"</th></tr>\n<td><strong>Channel ID</strong>" in sb8200_page
    got = parse_status(sb8200_page)
    # First data row in each table
    assert got.downstream["29"].frequency == "639000000 Hz"
    assert got.upstream["1"].frequency == "23700000 Hz"


def test_rejected_markup_is_fatal(monkeypatch, sb8200_page):
    def _reject(*args, **kwargs):
        raise ParserRejectedMarkup("bad markup")

    monkeypatch.setattr("surfer.modem.document.BeautifulSoup", _reject)
    with pytest.raises(DocumentParseError, match="Unable to parse status page"):
        parse_status(sb8200_page)
