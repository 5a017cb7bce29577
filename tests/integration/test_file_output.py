from pathlib import Path
from .conftest import run_cli, load_json, assert_exit_ok


def test_writes_records_to_file(appsettings: Path, out_dir: Path):
    dest = out_dir / "appservice.json"
    proc = run_cli(["-i", appsettings, "-k", "file", "-o", dest, "--ss"])
    assert_exit_ok(proc)
    assert proc.stdout == ""

    records = load_json(dest)
    assert records[2] == {"name": "AllowedHosts", "value": "*", "slotSetting": True}


def test_refuses_to_overwrite_existing_file(appsettings: Path, out_dir: Path):
    dest = out_dir / "env.txt"
    dest.write_text("keep me")
    proc = run_cli(["-i", appsettings, "-k", "file", "-o", dest, "-f", "docker-compose"])
    assert proc.returncode == 1
    assert "already exists" in proc.stderr
    assert dest.read_text() == "keep me"


def test_overwrite_flag_replaces_file(appsettings: Path, out_dir: Path):
    dest = out_dir / "env.txt"
    dest.write_text("stale content " * 100)
    proc = run_cli(["-i", appsettings, "-k", "file", "-o", dest, "-f", "docker-compose", "--oef"])
    assert_exit_ok(proc)
    text = dest.read_text(encoding="utf-8")
    assert "stale" not in text
    assert text.startswith("- Logging:LogLevel:Default=Information\n")
