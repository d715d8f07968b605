# tests/test_logging.py
import logging
from pathlib import Path

import pytest

import fnvhash.utils.logging as log_mod
from fnvhash.utils.config import ParametersConfig


@pytest.fixture(autouse=True)
def _fresh_root(monkeypatch):
    """
    Reset the module flag; restore the root level and drop file handlers added by each test.
    pytest's own capture handlers are left alone.
    """
    monkeypatch.setattr(log_mod, "_CONFIGURED", False, raising=True)
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield
    for h in list(root.handlers):
        if isinstance(h, logging.FileHandler) and h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


def _file_handlers(path: Path):
    target = path.resolve()
    return [
        h
        for h in logging.getLogger().handlers
        if isinstance(h, logging.FileHandler) and Path(h.baseFilename).resolve() == target
    ]


def test_repeated_configure_keeps_handler_count():
    log_mod.configure_logging(level="INFO")
    n = len(logging.getLogger().handlers)

    log_mod.configure_logging(level="DEBUG")
    assert len(logging.getLogger().handlers) == n
    assert logging.getLogger().level == logging.DEBUG


def test_log_file_handler_added_once_and_written(tmp_path: Path):
    log_file = tmp_path / "logs" / "fnvhash.log"

    log_mod.configure_logging(level="INFO", log_file=str(log_file))
    log_mod.configure_logging(level="INFO", log_file=str(log_file))
    assert len(_file_handlers(log_file)) == 1

    log_mod.get_logger("fnvhash.test").info("hashed %d bytes", 3)
    for h in _file_handlers(log_file):
        h.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "| INFO | fnvhash.test | hashed 3 bytes" in text


def test_get_logger_configures_on_first_use():
    assert log_mod._CONFIGURED is False
    lg = log_mod.get_logger("fnvhash.core")
    assert lg is logging.getLogger("fnvhash.core")
    assert log_mod._CONFIGURED is True


def test_configure_logging_from_params_applies_logging_block(tmp_path: Path):
    log_file = tmp_path / "run.log"
    params = ParametersConfig.model_validate(
        {"logging": {"level": "warning", "log_file": str(log_file)}}
    )

    log_mod.configure_logging_from_params(params)
    assert logging.getLogger().level == logging.WARNING
    assert len(_file_handlers(log_file)) == 1


def test_configure_logging_invalid_level_raises():
    with pytest.raises(ValueError):
        log_mod.configure_logging(level="NOT_A_LEVEL")
