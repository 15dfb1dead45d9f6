"""Tests for the section_index_report CLI."""
from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SCRIPT = ROOT / "scripts" / "section_index_report.py"


def _write_json(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2))


def _run(*args: str) -> subprocess.CompletedProcess[str]:
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(ROOT / "src"), env.get("PYTHONPATH", "")) if p
    )
    return subprocess.run(
        [sys.executable, str(SCRIPT), *args],
        cwd=str(ROOT),
        capture_output=True,
        text=True,
        check=False,
        env=env,
    )


def _snapshot(tmp_path: Path) -> Path:
    path = tmp_path / "sections.json"
    _write_json(
        path,
        [
            {"key": "C", "items": ["c1", "c2", "c3", "c4", "c5"]},
            {"key": "A", "items": ["a1", "a2", "a3"]},
            {"key": "B", "items": []},
        ],
    )
    return path


def test_report_sorted_lookups(tmp_path: Path) -> None:
    proc = _run(
        "--sections", str(_snapshot(tmp_path)),
        "--sort",
        "--position", "3",
        "--position", "8",
        "--section", "1",
        "--section", "3",
    )
    assert proc.returncode == 0, proc.stderr
    payload = json.loads(proc.stdout)
    assert payload["index"]["sections"] == ["A", "B", "C"]
    assert payload["index"]["starts"] == [0, 3, 3]
    assert payload["positions"] == {"3": 2, "8": -1}
    assert payload["sections"] == {"1": 3, "3": -1}
    assert "Cannot get section index for position 8" in proc.stderr


def test_report_unsorted_warns(tmp_path: Path) -> None:
    proc = _run("--sections", str(_snapshot(tmp_path)))
    assert proc.returncode == 0, proc.stderr
    assert "not sorted by key" in proc.stderr
    assert json.loads(proc.stdout)["index"]["sections"] == ["C", "A", "B"]


def test_report_headers_to_output_file(tmp_path: Path) -> None:
    out = tmp_path / "report.json"
    proc = _run(
        "--sections", str(_snapshot(tmp_path)),
        "--sort",
        "--headers",
        "--section", "2",
        "--output", str(out),
    )
    assert proc.returncode == 0, proc.stderr
    payload = json.loads(out.read_text())
    assert payload["index"]["sizes"] == [4, 1, 6]
    assert payload["sections"] == {"2": 5}


def test_missing_snapshot_exits_nonzero(tmp_path: Path) -> None:
    proc = _run("--sections", str(tmp_path / "missing.json"))
    assert proc.returncode == 1
    assert "not found" in proc.stderr


def test_malformed_snapshot_exits_nonzero(tmp_path: Path) -> None:
    path = tmp_path / "bad.json"
    _write_json(path, {"key": "A"})
    proc = _run("--sections", str(path))
    assert proc.returncode == 1
    assert "Cannot load" in proc.stderr


def test_mixed_key_types_exit_nonzero(tmp_path: Path) -> None:
    path = tmp_path / "mixed.json"
    _write_json(path, [{"key": 1, "items": ["x"]}, {"key": "A", "items": ["y"]}])
    for extra in ([], ["--sort"]):
        proc = _run("--sections", str(path), *extra)
        assert proc.returncode == 1
        assert "Cannot order section keys" in proc.stderr
        assert "Traceback" not in proc.stderr
