import io
import logging

from mazegen.logging_config import configure_logging


def test_env_level_overrides_default(monkeypatch, restore_root_logger):
    monkeypatch.setenv("MAZEGEN_LOG_LEVEL", "debug")
    configure_logging(logging.WARNING, stream=io.StringIO())
    assert restore_root_logger.level == logging.DEBUG


def test_unknown_env_level_keeps_default(monkeypatch, restore_root_logger):
    monkeypatch.setenv("MAZEGEN_LOG_LEVEL", "chatty")
    configure_logging(logging.ERROR, stream=io.StringIO())
    assert restore_root_logger.level == logging.ERROR


def test_repeated_configuration_keeps_one_handler(monkeypatch, restore_root_logger):
    monkeypatch.delenv("MAZEGEN_LOG_LEVEL", raising=False)
    stream = io.StringIO()
    configure_logging(logging.INFO, stream=stream)
    configure_logging(logging.INFO, stream=stream)
    assert len(restore_root_logger.handlers) == 1
    logging.getLogger("mazegen.test").info("hello")
    assert stream.getvalue().count("hello") == 1
