# tests/test_deploy.py

import re
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _uvicorn_commands(text: str):
    return [line for line in text.splitlines() if "uvicorn app." in line]


def test_uvicorn_access_log_disabled_under_supervisord():
    commands = _uvicorn_commands((ROOT / "deploy" / "supervisord.conf").read_text())

    assert len(commands) == 2
    assert all("--no-access-log" in c for c in commands)


def test_uvicorn_access_log_disabled_in_image():
    commands = [
        c for c in _uvicorn_commands((ROOT / "Dockerfile").read_text())
        if re.match(r"^CMD ", c)
    ]

    assert len(commands) == 2
    assert all("--no-access-log" in c for c in commands)
