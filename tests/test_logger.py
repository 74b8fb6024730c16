import json
import logging

from securegen.config import load_config
from securegen.logger import JsonFormatter, setup_logger


def test_json_formatter_fields():
    record = logging.LogRecord("securegen", logging.WARNING, __file__, 12, "hello %s", ("world",), None)
    record.extra = {"command": "encrypt"}
    payload = json.loads(JsonFormatter().format(record))
    assert payload["level"] == "WARNING"
    assert payload["message"] == "hello world"
    assert payload["line"] == 12
    assert payload["command"] == "encrypt"
    assert payload["timestamp"].endswith("Z")


def test_setup_logger_writes_json_file(key_env, tmp_path):
    log_file = tmp_path / "logs" / "securegen.log"
    settings = load_config(
        dict(key_env, SECUREGEN_LOG_FILE=str(log_file), SECUREGEN_LOG_JSON="1", SECUREGEN_LOG_LEVEL="DEBUG")
    )
    logger = setup_logger(settings)
    logger.info("file entry")
    for handler in logger.handlers:
        handler.flush()

    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert lines[-1]["message"] == "file entry"
    assert logger.level == logging.DEBUG

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_logger_console_only(key_env):
    logger = setup_logger(load_config(key_env))
    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO
