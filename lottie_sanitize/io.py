"""JSON document IO helpers."""
from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from loguru import logger


@dataclass
class LoadedDocument:
    path: Path
    text: str
    data: Any

    @property
    def size(self) -> int:
        return len(self.text.encode("utf-8"))


class ParseError(ValueError):
    def __init__(self, path: Path, message: str, line: int = 0, column: int = 0) -> None:
        self.path = path
        self.line = line
        self.column = column
        location = f"{path}:{line}:{column}" if line else str(path)
        super().__init__(f"Invalid JSON in {location}: {message}")


def read_json(path: Path | str) -> LoadedDocument:
    """Read and parse a UTF-8 JSON document.

    Missing or unreadable files raise the underlying ``OSError``; text that
    is not valid JSON, including the ``NaN`` / ``Infinity`` extensions the
    ``json`` module accepts by default, raises :class:`ParseError`.
    """

    src = Path(path)
    logger.debug("Reading {}", src)
    try:
        text = src.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ParseError(src, f"not UTF-8 text ({exc.reason})") from exc
    def reject_constant(name: str) -> Any:
        raise ParseError(src, f"invalid constant {name}")

    try:
        data = json.loads(text, parse_constant=reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(src, exc.msg, exc.lineno, exc.colno) from exc
    return LoadedDocument(path=src, text=text, data=data)


def dump_json(data: Any, indent: Optional[int] = None) -> str:
    """Serialize ``data``; NaN and infinities raise ``ValueError``."""

    if indent is None:
        return json.dumps(data, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    return json.dumps(data, ensure_ascii=False, indent=indent, allow_nan=False)


def write_json(path: Path | str, text: str) -> Path:
    """Atomically write ``text`` to ``path``.

    The content goes to a temporary file next to the destination which is
    then moved into place, so a failed write leaves the destination as it was.
    """

    dest = Path(path)
    dest.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{dest.name}.", suffix=".tmp", dir=dest.parent)
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        os.replace(tmp, dest)
    except BaseException:
        safe_remove(tmp)
        raise
    logger.debug("Wrote {} bytes to {}", len(text.encode("utf-8")), dest)
    return dest


def safe_remove(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        return
    except OSError as exc:
        logger.warning("Failed to remove {}: {}", path, exc)
