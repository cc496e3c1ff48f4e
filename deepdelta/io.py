"""Load JSON documents into value trees."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from deepdelta.exceptions import DocumentParseError, DocumentReadError

logger = logging.getLogger(__name__)


def parse_document(text: str, *, source: str = "<string>") -> Any:
    """Parse JSON text into a value tree."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as error:
        raise DocumentParseError(
            f"Document is not valid JSON: {source} ({error})",
            source=source,
            line=error.lineno,
            column=error.colno,
        ) from error


def load_document(path: str | Path) -> Any:
    """Read a UTF-8 JSON document from disk."""
    target = Path(path)
    logger.debug("loading document %s", target)
    try:
        raw_text = target.read_text(encoding="utf-8")
    except FileNotFoundError as error:
        raise DocumentReadError(f"Document not found: {target}") from error
    except IsADirectoryError as error:
        raise DocumentReadError(f"Document path is a directory: {target}") from error
    except UnicodeDecodeError as error:
        raise DocumentReadError(f"Document is not valid UTF-8 text: {target}") from error
    except OSError as error:
        raise DocumentReadError(f"Document could not be read: {target} ({error})") from error

    return parse_document(raw_text, source=str(target))
