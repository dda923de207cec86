"""Tests for the Modem contract shared by every model."""

from __future__ import annotations

import pytest

from surfer.err.exceptions import ModemNotOkError, TableLayoutError
from surfer.sb6121 import SB6121
from surfer.sb8200 import SB8200

from conftest import SB6121_PAGE


async def test_fixture_status_never_fetches(page_path, poisoned_session):
    modem = SB6121.from_fixture(page_path(SB6121_PAGE))
    first = await modem.status(poisoned_session)
    second = await modem.status()
    assert first == second
    assert first.downstream["11"].snr == 37
    poisoned_session.get.assert_not_called()


async def test_live_status_needs_a_session():
    with pytest.raises(ValueError, match="needs a ClientSession"):
        await SB8200().status()


async def test_live_and_fixture_agree(modem_server, client_session, sb8200_page):
    modem_server.pages["/cmconnectionstatus.html"] = sb8200_page
    live = SB8200(base_url=modem_server.base_url)
    fixture = SB8200(fixture=sb8200_page)
    assert await live.status(client_session) == await fixture.status()
    assert modem_server.requests == ["/cmconnectionstatus.html"]


async def test_live_status_errors_propagate(modem_server, client_session, sb6183_page):
    live = SB8200(base_url=modem_server.base_url)
    with pytest.raises(ModemNotOkError):
        await live.status(client_session)

    # Right path, wrong page
    modem_server.pages["/cmconnectionstatus.html"] = sb6183_page.replace(b"simpleTable", b"other")
    with pytest.raises(TableLayoutError):
        await live.status(client_session)


def test_urls():
    assert SB8200().signal_url == "http://192.168.100.1/cmconnectionstatus.html"
    assert SB6121(base_url="http://10.0.0.1/").signal_url == "http://10.0.0.1/cmSignalData.htm"
    assert SB6121.url_for("http://modem.lan") == "http://modem.lan/cmSignalData.htm"


def test_repr():
    assert repr(SB8200()) == "SB8200(http://192.168.100.1/cmconnectionstatus.html)"
    assert repr(SB8200(fixture=b"")) == "SB8200(fixture)"
