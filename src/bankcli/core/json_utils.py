#!/usr/bin/env python3
"""
JSON Utilities Module

Provides centralized JSON reading and writing functions with consistent formatting.
All store documents go through these helpers so that every file on disk is
pretty-printed, UTF-8 encoded, owner-only and replaced atomically.
"""

import contextlib
import json
import os
from pathlib import Path
from typing import Any

# Owner read/write only
SECURE_FILE_MODE = 0o600


def ensure_directory(directory: str | Path) -> Path:
    """
    Create a directory (and missing parents) if it does not exist.

    Args:
        directory: Directory to create

    Returns:
        The directory as a Path

    Raises:
        NotADirectoryError: If the path exists but is not a directory
        OSError: If the directory cannot be created
    """
    directory = Path(directory)
    if directory.exists() and not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def write_json(
    filepath: str | Path,
    data: Any,
    ensure_ascii: bool = False,
    sort_keys: bool = False,
    mode: int = SECURE_FILE_MODE,
) -> None:
    """
    Write data to a JSON file with standard pretty-printing.

    The document is written to a sibling ``.tmp`` file first and then moved
    into place with ``os.replace`` so readers never see a partial document.

    Args:
        filepath: Path to the JSON file
        data: Data to write to the file
        ensure_ascii: If True, escape non-ASCII characters (default: False)
        sort_keys: If True, sort dictionary keys (default: False)
        mode: File permission bits for the written file (default: 0o600)
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)
    tmp = filepath.with_suffix(filepath.suffix + ".tmp")

    try:
        fd = os.open(tmp, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=ensure_ascii, sort_keys=sort_keys)
            f.write("\n")
        os.chmod(tmp, mode)
        os.replace(tmp, filepath)
    except Exception:
        with contextlib.suppress(FileNotFoundError):
            tmp.unlink()
        raise


def read_json(filepath: str | Path) -> Any:
    """
    Read data from a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        The parsed JSON data
    """
    with open(filepath, encoding="utf-8") as f:
        return json.load(f)


def format_json(data: Any, ensure_ascii: bool = False, sort_keys: bool = False, default: Any = None) -> str:
    """
    Format data as a pretty-printed JSON string.

    Args:
        data: Data to format
        ensure_ascii: If True, escape non-ASCII characters (default: False)
        sort_keys: If True, sort dictionary keys (default: False)
        default: Function to serialize non-JSON types (default: None)

    Returns:
        Pretty-printed JSON string
    """
    if default is not None:
        return json.dumps(data, indent=2, ensure_ascii=ensure_ascii, sort_keys=sort_keys, default=default)
    return json.dumps(data, indent=2, ensure_ascii=ensure_ascii, sort_keys=sort_keys)
