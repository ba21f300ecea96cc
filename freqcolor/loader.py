"""
File loading for freqcolor.

The whole input is read in one synchronous call. Any failure to open,
read or decode the file becomes a FileReadError; there is no retry and
no partial content.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from .config import DEFAULT_PATH, ENCODING
from .domain import Document, FileReadError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_content(path: PathLike = DEFAULT_PATH) -> str:
    """
    Read the entire file as UTF-8 text.

    Args:
        path: File to read (defaults to declaration.txt)

    Returns:
        The file content

    Raises:
        FileReadError: If the file is missing, unreadable or not valid UTF-8
    """
    try:
        content = Path(path).read_text(encoding=ENCODING)
    except FileNotFoundError as exc:
        raise FileReadError(str(path), "file not found") from exc
    except PermissionError as exc:
        raise FileReadError(str(path), "permission denied") from exc
    except IsADirectoryError as exc:
        raise FileReadError(str(path), "is a directory") from exc
    except UnicodeDecodeError as exc:
        raise FileReadError(str(path), f"not valid {ENCODING} text ({exc.reason})") from exc
    except OSError as exc:
        raise FileReadError(str(path), exc.strerror or str(exc)) from exc

    logger.debug("Loaded %d characters from %s", len(content), path)
    return content


def load_document(path: PathLike = DEFAULT_PATH) -> Document:
    """Read the file and wrap it as a Document."""
    return Document(text=load_content(path), source=str(path))
