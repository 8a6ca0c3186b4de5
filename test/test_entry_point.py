"""
Entry point: module-level run(), main() argument handling, and log output staying out of the prompts.
"""
import io
import logging
import sys

import pytest

from _helper import CapturedOutput, ScriptedInput
from pizzeria.config import settings
from pizzeria.main import main, run

# Place order, bad mode entry, delivery, then stdin closes at the crust prompt
BAD_MODE_INPUT = "1\nx\n1\n"


@pytest.fixture
def bare_root_logger(monkeypatch):
    """Root logger without pytest's capture handlers, so basicConfig installs its stdout handler."""
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    return root


def test_run_builds_session_for_configured_customer():
    scripted, out = ScriptedInput("3"), CapturedOutput()
    session = run(input_fn=scripted, output_fn=out)
    assert session.profile.name == settings.customer_name
    assert out.lines[-1] == "Thank you for using the Pizza Ordering System! Goodbye!"


def test_rejected_input_logged_below_warning(caplog):
    caplog.set_level(logging.DEBUG, logger="pizzeria")
    run(input_fn=ScriptedInput("1", "x", "9", "1"), output_fn=CapturedOutput())
    rejected = [r for r in caplog.records if r.getMessage().startswith("Rejected input")]
    assert len(rejected) == 2
    assert all(r.levelno < logging.WARNING for r in caplog.records if r.name.startswith("pizzeria"))


def test_main_keeps_log_lines_out_of_prompts(monkeypatch, capsys, bare_root_logger):
    # pytest's logging plugin re-adds its handlers for the call phase; clear them again here
    monkeypatch.setattr(bare_root_logger, "handlers", [])
    monkeypatch.setattr(sys, "stdin", io.StringIO(BAD_MODE_INPUT))
    assert main(["--log-level", "WARNING"]) == 0
    stdout = capsys.readouterr().out
    assert "Please enter a number between 1 and 2." in stdout
    assert "[WARNING]" not in stdout
    assert "[INFO]" not in stdout
    assert stdout.rstrip().endswith("Thank you for using the Pizza Ordering System! Goodbye!")


def test_main_log_level_flag_enables_info(monkeypatch, capsys, bare_root_logger):
    # pytest's logging plugin re-adds its handlers for the call phase; clear them again here
    monkeypatch.setattr(bare_root_logger, "handlers", [])
    monkeypatch.setattr(sys, "stdin", io.StringIO(BAD_MODE_INPUT))
    assert main(["--log-level", "info"]) == 0
    assert "[INFO] Rejected input 'x'" in capsys.readouterr().out


def test_main_rejects_unknown_argument(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--bogus"])
    assert exc.value.code == 2
