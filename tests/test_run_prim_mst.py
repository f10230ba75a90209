import json
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from scripts import run_prim_mst


def _write_config(tmp_path, points):
    path = tmp_path / "primmst.json"
    path.write_text(json.dumps({"primmst": {"points": points, "grid": {"rows": 20, "columns": 20}}}))
    return str(path)


def test_swapped_bounds_reported_in_status(tmp_path, monkeypatch, capsys):
    cfg = _write_config(tmp_path, {"vertices": 6, "xmin": 10.0, "ymin": 0.0, "xmax": 0.0, "ymax": 10.0, "seed": 1})
    monkeypatch.setattr(run_prim_mst, "setup_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr(sys, "argv", ["run_prim_mst.py", "--config", cfg, "--downsample", "1"])
    assert run_prim_mst.main() == 0
    out = capsys.readouterr().out
    assert "Status: Swapped inverted bounds to x 0.00..10.00, y 0.00..10.00" in out


def test_default_status_when_bounds_ordered(tmp_path, monkeypatch, capsys):
    cfg = _write_config(tmp_path, {"vertices": 6, "seed": 1})
    monkeypatch.setattr(run_prim_mst, "setup_logging", lambda *args, **kwargs: None)
    monkeypatch.setattr(sys, "argv", ["run_prim_mst.py", "--config", cfg, "--start", "random"])
    assert run_prim_mst.main() == 0
    assert "Status: Check new start vertex" in capsys.readouterr().out
