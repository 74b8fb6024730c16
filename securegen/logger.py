#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import json
import logging
import logging.handlers
import sys
from datetime import datetime, timezone

from securegen.config import Settings


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_record["exception"] = self.formatException(record.exc_info)
        if hasattr(record, "extra"):
            log_record.update(record.extra)
        return json.dumps(log_record, ensure_ascii=False)


def setup_logger(settings: Settings) -> logging.Logger:
    log_level = getattr(logging, settings.log_level, logging.INFO)

    logger = logging.getLogger("securegen")
    logger.setLevel(log_level)

    if logger.hasHandlers():
        logger.handlers.clear()

    console_formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(name)s - %(message)s')

    # stdout is reserved for the result line
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        if settings.log_json:
            file_formatter = JsonFormatter()
        else:
            file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        file_handler = logging.handlers.RotatingFileHandler(
            settings.log_file, maxBytes=10*1024*1024, backupCount=5, encoding='utf-8'
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logger initialized. Level: {settings.log_level}, File: {settings.log_file}")
    return logger
