from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Optional

from ..core.models import DocumentError, JsonNumber, JsonObject
from ..core.utils import MAX_INPUT_BYTES, read_text, strip_json_comments

DEFAULT_LOGGER_NAME = "settingsflat"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON value")


def parse_document(text: str, path: Optional[Path] = None) -> Any:
    """Decode JSON text, skipping comments.

    Objects come back as JsonObject pairs so repeated property names survive
    to the flattener, and numbers come back as JsonNumber holding their
    source text.
    """
    try:
        return json.loads(
            strip_json_comments(text),
            object_pairs_hook=JsonObject,
            parse_int=JsonNumber,
            parse_float=JsonNumber,
            parse_constant=_reject_constant,
        )
    except json.JSONDecodeError as exc:
        raise DocumentError(path, f"invalid JSON: {exc.msg} (line {exc.lineno}, column {exc.colno})") from exc
    except ValueError as exc:
        raise DocumentError(path, f"invalid JSON: {exc}") from exc
    except RecursionError as exc:
        raise DocumentError(path, "invalid JSON: document is nested too deeply") from exc


class JSONParser:
    NAME = "json"

    def __init__(self, *, logger: Optional[logging.Logger] = None, max_bytes: int = MAX_INPUT_BYTES) -> None:
        base_logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)
        self.logger = base_logger.getChild(self.__class__.__name__.lower())
        self.max_bytes = max_bytes

    def parse(self, path: Path) -> Any:
        if self.logger.isEnabledFor(logging.DEBUG):
            try:
                self.logger.debug("Reading %s (%s bytes)", path, f"{path.stat().st_size:,}")
            except OSError as exc:
                self.logger.debug("Unable to stat %s: %s", path, exc)
        text, encoding = read_text(path, max_bytes=self.max_bytes)
        self.logger.info("Parsing %s as %s", path, encoding)
        return parse_document(text, path)
