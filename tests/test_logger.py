"""Tests for loguru setup driven by settings."""

import pytest
from loguru import logger

from config.settings import Settings
from solbot.utils.logger import setup_logger


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger.remove()


def test_env_file_log_level_reaches_console(tmp_path, monkeypatch, capsys) -> None:
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_LEVEL=DEBUG\nPOST_INTERVAL_SEC=60\n")

    s = Settings(_env_file=env_file)
    assert s.log_level == "DEBUG"
    assert s.post_interval_sec == 60

    setup_logger(level=s.log_level, log_dir=tmp_path / "logs")
    logger.debug("debug line visible")

    assert "debug line visible" in capsys.readouterr().out


def test_info_level_hides_debug_on_console(tmp_path, capsys) -> None:
    setup_logger(level="info", log_dir=tmp_path / "logs")
    logger.debug("hidden debug line")
    logger.info("shown info line")

    out = capsys.readouterr().out
    assert "hidden debug line" not in out
    assert "shown info line" in out


def test_file_sink_captures_debug(tmp_path) -> None:
    log_dir = tmp_path / "logs"
    setup_logger(level="WARNING", log_dir=log_dir)
    logger.debug("file only line")
    logger.remove()

    files = list(log_dir.glob("solbot_*.log"))
    assert len(files) == 1
    assert "file only line" in files[0].read_text()
