from __future__ import annotations

from flight_planner.cli import main


def test_plan_and_export(tmp_path, capsys):
    rc = main(["KJFK", "EGLL", "--sources", "builtin", "--export", "pmdg,xplane,json,pdf", "--out", str(tmp_path)])
    assert rc == 0
    assert (tmp_path / "KJFKEGLL.rte").read_text(encoding="utf-8").startswith("KJFK MERIT")
    assert (tmp_path / "KJFKEGLL.fms").exists()
    assert (tmp_path / "FlightPlan_KJFK_EGLL.json").exists()
    assert (tmp_path / "OFP-KJFKEGLL.pdf").read_bytes().startswith(b"%PDF")
    out = capsys.readouterr().out
    assert "MERIT" in out


def test_naming_override(tmp_path):
    rc = main(["LTFM", "EDDF", "--sources", "builtin", "--naming", "sequential", "--export", "pmdg", "--out", str(tmp_path)])
    assert rc == 0
    first = (tmp_path / "LTFMEDDF.rte").read_text(encoding="utf-8").splitlines()[0]
    assert first.split()[1] == "WP01"


def test_unknown_airport(capsys):
    assert main(["KJFK", "ZZZZ", "--sources", "builtin"]) == 2
    assert "ZZZZ" in capsys.readouterr().out
