"""End-to-end tests driving main.py through a pseudo-terminal."""

import sys
from pathlib import Path

import pexpect
import pytest

MAIN_PY = Path(__file__).resolve().parent.parent / "main.py"
TIMEOUT = 10

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="pexpect.spawn needs a pty")


def run_session(cwd, answers):
    """Answer each prompt in turn and return everything printed after the last one."""
    proc = pexpect.spawn(
        sys.executable,
        [str(MAIN_PY)],
        cwd=str(cwd),
        timeout=TIMEOUT,
        encoding="utf-8",
    )
    try:
        for prompt, answer in zip(("first name", "surname", "age"), answers):
            proc.expect(f"Enter your {prompt}: ")
            proc.sendline(answer)
        proc.expect(pexpect.EOF)
        output = proc.before
    finally:
        proc.close()
    assert proc.exitstatus == 0
    return output


def test_session_saves_record(tmp_path):
    output = run_session(tmp_path, ["Jane", "Doe", "30"])

    assert "User info saved to my_user.txt" in output
    assert (tmp_path / "my_user.txt").read_text(encoding="utf-8") == "Name: Jane\nSurname: Doe\nAge: 30\n---\n"


def test_session_rejects_bad_age(tmp_path):
    output = run_session(tmp_path, ["Jane", "Doe", "abc"])

    assert "Invalid age. Please enter a number." in output
    assert not (tmp_path / "my_user.txt").exists()
