import json
import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]

APPSETTINGS = """{
  /* sample service configuration */
  "Logging": {
    "LogLevel": { "Default": "Information", "Microsoft": "Warning" }
  },
  "AllowedHosts": "*",
  "Endpoints": [
    { "Name": "primary", "Url": "https://api.example.com//v1" },
    { "Name": "fallback", "Url": "https://backup.example.com" }
  ],
  "Retry": { "Count": 3, "Jitter": 0.25, "Enabled": false, "Token": null } // trailing note
}
"""


def run_cli(args, cwd=None, env=None, timeout=60):
    """
    Run the CLI as a subprocess: python -m settingsflat.cli <args>
    Returns CompletedProcess with stdout/stderr text captured.
    """
    cmd = [sys.executable, "-m", "settingsflat.cli"] + list(map(str, args))
    return subprocess.run(cmd, cwd=cwd or PROJECT_ROOT, env=env, capture_output=True, text=True, timeout=timeout)


@pytest.fixture()
def appsettings(tmp_path: Path) -> Path:
    p = tmp_path / "appsettings.json"
    p.write_text(APPSETTINGS, encoding="utf-8")
    return p


@pytest.fixture()
def out_dir(tmp_path: Path) -> Path:
    d = tmp_path / "out"
    d.mkdir(parents=True, exist_ok=True)
    return d


def load_json(p: Path):
    with p.open("r", encoding="utf-8") as f:
        return json.load(f)


def assert_exit_ok(proc):
    assert proc.returncode == 0, f"Non-zero exit:\nSTDOUT:\n{proc.stdout}\nSTDERR:\n{proc.stderr}"
