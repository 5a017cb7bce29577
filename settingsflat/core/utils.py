from __future__ import annotations
import codecs
import re
import chardet  # type: ignore
from pathlib import Path
from typing import List, Optional, Tuple

from .models import DocumentError

BINARY_BYTES = bytes(range(0, 32)) + b"\x7f"
MAX_INPUT_BYTES = 20_000_000

# Checked longest first: the UTF-32 LE mark starts with the UTF-16 LE one.
BOMS: List[Tuple[bytes, str]] = [
    (codecs.BOM_UTF32_LE, "utf-32"),
    (codecs.BOM_UTF32_BE, "utf-32"),
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
]

# Strings are matched first so comment markers inside them are left alone.
COMMENT_RE = re.compile(r'"(?:\\.|[^"\\])*"|//[^\n]*|/\*.*?\*/', re.DOTALL)


def is_likely_binary(data: bytes, control_threshold: float = 0.30) -> bool:
    if not data:
        return False
    if 0 in data:
        return True
    control = sum(1 for b in data if b in BINARY_BYTES and b not in (9, 10, 13))
    return (control / len(data)) > control_threshold


def sniff_bom(data: bytes) -> Optional[str]:
    for bom, encoding in BOMS:
        if data.startswith(bom):
            return encoding
    return None


def read_text(path: Path, max_bytes: int = MAX_INPUT_BYTES) -> Tuple[str, str]:
    """Read ``path`` as text and return ``(text, encoding)``.

    A byte-order mark wins; otherwise UTF-8 is tried before the encoding
    guessed by chardet. Raises DocumentError for oversized, binary or
    undecodable files.
    """
    try:
        with path.open("rb") as f:
            data = f.read(max_bytes + 1)
    except OSError as exc:
        raise DocumentError(path, f"unable to read file ({exc.strerror or exc})") from exc
    if len(data) > max_bytes:
        raise DocumentError(path, f"file is larger than {max_bytes:,} bytes")

    bom_encoding = sniff_bom(data)
    if bom_encoding is not None:
        try:
            return data.decode(bom_encoding), bom_encoding
        except UnicodeDecodeError as exc:
            raise DocumentError(path, f"invalid {bom_encoding} text: {exc.reason}") from exc

    if is_likely_binary(data[:4096]):
        raise DocumentError(path, "file looks like binary data, not JSON text")

    try:
        return data.decode("utf-8", errors="strict"), "utf-8"
    except UnicodeDecodeError:
        pass

    guessed = chardet.detect(data).get("encoding")
    if guessed and guessed.lower() not in ("utf-8", "ascii"):
        try:
            return data.decode(guessed, errors="strict"), guessed
        except (LookupError, UnicodeDecodeError):
            pass
    raise DocumentError(path, "unable to detect the text encoding")


def _blank_comment(match: re.Match) -> str:
    token = match.group(0)
    if token.startswith('"'):
        return token
    # keep newlines so decoder errors still point at the right line
    return "\n" * token.count("\n") or " "


def strip_json_comments(text: str) -> str:
    """Remove ``//`` and ``/* */`` comments that sit outside of JSON strings."""
    return COMMENT_RE.sub(_blank_comment, text)
