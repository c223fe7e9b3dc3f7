import json
import logging
from pathlib import Path

import pytest

from threshold_secrets.utils import configure_logging, get_logger


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    logging.basicConfig(level=logging.WARNING, handlers=[logging.NullHandler()], force=True)


def test_json_output_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "shares.log"
    configure_logging(level="DEBUG", json_output=True, log_file=str(log_file))
    get_logger("threshold_secrets.test").debug("split %d shares", 3)
    for handler in logging.getLogger().handlers:
        handler.flush()
    record = json.loads(log_file.read_text().strip().splitlines()[-1])
    assert record["level"] == "DEBUG"
    assert record["name"] == "threshold_secrets.test"
    assert record["message"] == "split 3 shares"


def test_level_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    configure_logging()
    assert logging.getLogger().level == logging.ERROR


def test_explicit_level_wins_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    configure_logging(level="debug")
    assert logging.getLogger().level == logging.DEBUG
