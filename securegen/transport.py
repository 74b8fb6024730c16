#!/usr/bin/env python3
# -*- coding: utf-8 -*-

import base64
import json
from enum import Enum

ARMOR_HEADER = "-----BEGIN PGP MESSAGE-----"


class Transport(str, Enum):
    """How an armored block travels through a shell argument."""

    ESCAPED = "escaped"
    BASE64 = "base64"


def escape_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\n", "\\n")


def unescape_newlines(text: str) -> str:
    """Turns literal ``\\n`` (and ``\\r\\n``) sequences back into newlines."""
    return text.replace("\\r\\n", "\n").replace("\\n", "\n").replace("\r\n", "\n")


def pack(armored: str, transport: Transport = Transport.ESCAPED) -> str:
    """
    Prepares an armored block for the result line.

    ESCAPED leaves the text as is: the JSON line escapes its newlines.
    """
    if transport is Transport.BASE64:
        return base64.b64encode(armored.encode("utf-8")).decode("ascii")
    return armored


def _from_base64(text: str):
    compact = "".join(text.split())
    try:
        decoded = base64.b64decode(compact, validate=True).decode("utf-8")
    except ValueError:
        return None
    return decoded if ARMOR_HEADER in decoded else None


def unpack(text: str) -> str:
    """
    Restores an armored block from whatever reached the command line.

    Accepts the escaped form, real newlines, a base64-encoded block, or the
    whole ``{"encrypted": ...}`` line printed by ``encrypt``.
    """
    candidate = text.strip()

    if candidate.startswith("{"):
        try:
            payload = json.loads(candidate)
        except json.JSONDecodeError:
            payload = None
        if isinstance(payload, dict) and isinstance(payload.get("encrypted"), str):
            candidate = payload["encrypted"].strip()

    if ARMOR_HEADER not in candidate:
        decoded = _from_base64(candidate)
        if decoded is not None:
            candidate = decoded.strip()

    return unescape_newlines(candidate).strip()
