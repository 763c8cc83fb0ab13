import io
import logging
import sys
from pathlib import Path

import pytest

from seabattle import main as entry


@pytest.fixture
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SEABATTLE_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setattr(entry, "load_default_env_files", lambda: None)
    yield tmp_path
    root.handlers[:] = handlers
    root.setLevel(level)


def test_main_aborts_cleanly_on_end_of_input(
    isolated_env: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert entry.main(["--seed", "3"]) == 130
    out = capsys.readouterr().out
    assert "Let's play Sea Battle!" in out
    assert "Game aborted." in out
    assert list((isolated_env / "logs").glob("seabattle_run_*.jsonl"))


def test_main_reports_bad_configuration(isolated_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SEABATTLE_BOARD_SIZE", "twelve")
    assert entry.main([]) == 1
