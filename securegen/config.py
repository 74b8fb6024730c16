#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import base64
from pathlib import Path
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from securegen.transport import Transport

PUBLIC_KEY_VAR = "PGP_PUBLIC_KEY_BASE64"
PRIVATE_KEY_VAR = "PGP_PRIVATE_KEY_BASE64"
PASSPHRASE_VAR = "PGP_PRIVATE_KEY_PASSPHRASE"
TRANSPORT_VAR = "SECUREGEN_TRANSPORT"
LOG_LEVEL_VAR = "SECUREGEN_LOG_LEVEL"
LOG_FILE_VAR = "SECUREGEN_LOG_FILE"
LOG_JSON_VAR = "SECUREGEN_LOG_JSON"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"", "0", "false", "no", "off"}
_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ConfigError(RuntimeError):
    pass


class MissingKeysError(ConfigError):
    def __init__(self):
        super().__init__("Missing PGP keys in environment variables.")


class Settings(BaseModel):
    """Key material and runtime options, read once at startup."""

    model_config = ConfigDict(frozen=True)

    public_key_armored: str = Field(..., min_length=1)
    private_key_armored: str = Field(..., min_length=1, repr=False)
    private_key_passphrase: Optional[str] = Field(None, repr=False)
    transport: Transport = Transport.ESCAPED
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    log_json: bool = False

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in _LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return value


def decode_key(name: str, value: str) -> str:
    """Decodes a base64 environment value to armored key text."""
    compact = "".join(value.split())
    try:
        armored = base64.b64decode(compact, validate=True).decode("utf-8")
    except ValueError as exc:
        raise ConfigError(f"{name} is not valid base64-encoded UTF-8 text") from exc
    if not armored.strip():
        raise ConfigError(f"{name} decodes to empty text")
    return armored


def _flag(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ConfigError(f"{name} must be a boolean flag, got {value!r}")


def load_config(environ: Mapping[str, str]) -> Settings:
    public_b64 = (environ.get(PUBLIC_KEY_VAR) or "").strip()
    private_b64 = (environ.get(PRIVATE_KEY_VAR) or "").strip()
    if not public_b64 or not private_b64:
        raise MissingKeysError()

    log_file = environ.get(LOG_FILE_VAR) or None
    try:
        return Settings(
            public_key_armored=decode_key(PUBLIC_KEY_VAR, public_b64),
            private_key_armored=decode_key(PRIVATE_KEY_VAR, private_b64),
            private_key_passphrase=environ.get(PASSPHRASE_VAR) or None,
            transport=(environ.get(TRANSPORT_VAR) or Transport.ESCAPED.value).strip().lower(),
            log_level=environ.get(LOG_LEVEL_VAR) or "INFO",
            log_file=Path(log_file) if log_file else None,
            log_json=_flag(LOG_JSON_VAR, environ.get(LOG_JSON_VAR, "")),
        )
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
