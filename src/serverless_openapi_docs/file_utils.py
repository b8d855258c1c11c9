"""
File helpers: output format detection and the write sink.
"""

import logging
import os
from typing import Optional, Protocol

logger = logging.getLogger(__name__)

YAML_EXTENSIONS = ("yml", "yaml")


def get_file_extension(filename: Optional[str]) -> str:
    """Return the last extension of a filename without the leading dot.

    Args:
        filename: File name or path, may be None

    Returns:
        str: The extension, or an empty string if there is none
    """
    return os.path.splitext(filename or "")[1].lstrip(".")


def is_yaml_file_extension(extension: str) -> bool:
    return extension in YAML_EXTENSIONS


class FileSink(Protocol):
    """Destination for a rendered document."""

    def write(self, path: str, content: str) -> None:
        ...


class LocalFileSink:
    """Writes documents to the local file system.

    Parent directories are not created; a missing directory raises the
    underlying OSError.
    """

    def write(self, path: str, content: str) -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        logger.info("Wrote %d characters to %s", len(content), path)
