"""Generic helpers for file and data handling."""

from __future__ import annotations

import json
import os
from typing import Any

from .config import JSON_INDENT, LOG_PREFIX
from .logger import logger


def read_text(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as handle:
            return handle.read()
    except OSError as exc:
        logger.warning(f"{LOG_PREFIX}: Failed to read {path}: {exc}")
        return ""


def write_text(path: str, text: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(text)


def read_json(path: str) -> Any:
    text = read_text(path)
    if not text:
        return {}
    try:
        return json.loads(text)
    except ValueError as exc:
        logger.warning(f"{LOG_PREFIX}: Invalid JSON in {path}: {exc}")
        return {}


def write_json(path: str, data: Any) -> None:
    try:
        write_text(path, json.dumps(data, indent=JSON_INDENT) + "\n")
    except OSError as exc:
        logger.error(f"{LOG_PREFIX}: Failed to write {path}: {exc}")
        raise


__all__ = [
    "read_json",
    "read_text",
    "write_json",
    "write_text",
]
