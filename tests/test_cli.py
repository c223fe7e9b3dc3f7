import io
import json
import logging
from pathlib import Path

import pytest

from threshold_secrets.cli import main


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("THRESHOLD_SECRETS_CONFIG", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    yield
    logging.basicConfig(level=logging.WARNING, handlers=[logging.NullHandler()], force=True)


def test_split_then_combine_hex(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["split", "--shares", "5", "--threshold", "3", "--secret-hex", "4849"]) == 0
    shares = capsys.readouterr().out.split()
    assert len(shares) == 5
    assert all(len(share) == 6 for share in shares)

    assert main(["combine", *shares[1:4]]) == 0
    assert capsys.readouterr().out.strip() == "4849"


def test_split_reads_secret_from_stdin(capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("hunter2\n"))
    assert main(["split", "--shares", "3", "--threshold", "2"]) == 0
    shares = capsys.readouterr().out.split()
    assert main(["combine", shares[0], shares[2]]) == 0
    assert bytes.fromhex(capsys.readouterr().out.strip()) == b"hunter2"


def test_config_supplies_defaults(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "sharing.json"
    config.write_text(json.dumps({"share_count": 4, "threshold": 2, "log_level": "WARNING"}))
    assert main(["--config", str(config), "split", "--secret-hex", "00ff"]) == 0
    assert len(capsys.readouterr().out.split()) == 4


def test_invalid_threshold_exits_with_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["split", "--shares", "3", "--threshold", "1", "--secret-hex", "01"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "threshold" in captured.err


def test_combine_rejects_duplicate_shares(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["combine", "01aa", "01bb"]) == 2
    assert "duplicate" in capsys.readouterr().err


def test_bad_secret_hex(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["split", "--secret-hex", "xyz"]) == 2
    assert "hex" in capsys.readouterr().err
