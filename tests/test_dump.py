from __future__ import annotations

import json

from surfer.dump import dump

from conftest import SB6121_PAGE


async def test_dump_fixture(page_path, capsys):
    assert await dump("http://192.168.100.1", str(page_path(SB6121_PAGE))) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["model"] == "SB6121"
    assert out["downstream"]["11"]["unerrored"] == 262486
    assert out["upstream"]["4"]["lock_status"] == "Success"


async def test_dump_live(modem_server, sb8200_page, capsys):
    modem_server.pages["/cmconnectionstatus.html"] = sb8200_page

    assert await dump(modem_server.base_url, None) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["model"] == "SB8200"
    assert len(out["downstream"]) == 33


async def test_dump_nothing_found(tmp_path, capsys):
    path = tmp_path / "other.html"
    path.write_text("<html></html>")
    assert await dump("http://192.168.100.1", str(path)) == 1
    assert capsys.readouterr().out == ""
