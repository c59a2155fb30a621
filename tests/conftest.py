import contextlib
import io
import logging
import sys
from pathlib import Path
from typing import Sequence

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import speechline.__main__ as speechline_main
from speechline.domain import WordToken


@pytest.fixture
def run_cli(monkeypatch):
    """Run the speechline CLI with a custom argv list."""

    def _run_cli(args: Sequence[str], *, expect_exit: bool = True) -> tuple[int, str]:
        argv = ["speechline", *args]
        monkeypatch.setattr(sys, "argv", argv)
        monkeypatch.setattr(speechline_main, "load_dotenv", lambda: None)
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout), contextlib.redirect_stderr(stdout):
            try:
                speechline_main.main()
            except SystemExit as exc:  # pragma: no cover - exercised in tests
                return exc.code, stdout.getvalue()
        if expect_exit:
            raise AssertionError("CLI did not exit as expected")
        return 0, stdout.getvalue()

    return _run_cli


@pytest.fixture(autouse=True)
def _silence_halo(monkeypatch):
    """Replace Halo spinners with a no-op context manager for tests."""

    class _DummyHalo:
        def __init__(self, *args, **kwargs):
            self.text = kwargs.get("text")

        def __enter__(self):
            return self

        def __exit__(self, exc_type, exc, tb):
            return False

    monkeypatch.setattr("speechline.utils.timeline_utils.Halo", _DummyHalo, raising=False)


@pytest.fixture
def scenario_words() -> list[WordToken]:
    """Two sentences from speaker A, a 3.2s pause, then speaker B."""
    return [
        WordToken("Hello", 0.0, 0.5, "A"),
        WordToken("there.", 0.5, 1.0, "A"),
        WordToken("Hi", 4.2, 4.5, "B"),
    ]


@pytest.fixture
def caplog_info(caplog):
    caplog.set_level(logging.INFO)
    return caplog
