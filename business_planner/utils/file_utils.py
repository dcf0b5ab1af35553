"""
File utilities for saving generated plans

The only module that touches the filesystem. Errors are raised as
FilesystemError; the save tool decides how to present them.
"""

import logging
from pathlib import Path
from typing import Optional

from ..config import Config
from ..errors import FilesystemError

logger = logging.getLogger(__name__)

# Output format -> file extension
EXTENSIONS = {
    "markdown": ".md",
    "html": ".html",
    "text": ".txt",
}
DEFAULT_FORMAT = "markdown"


def extension_for(format: Optional[str]) -> str:
    return EXTENSIONS.get(format or DEFAULT_FORMAT, EXTENSIONS[DEFAULT_FORMAT])


def validate_filename(filename: str) -> str:
    """
    Validate a caller-supplied base filename

    Args:
        filename: Name without extension

    Returns:
        The filename, stripped of surrounding whitespace

    Raises:
        FilesystemError: If the name would escape the output directory
    """
    name = filename.strip()
    if not name or name in (".", ".."):
        raise FilesystemError(f"Invalid filename: {filename!r}")
    if "/" in name or "\\" in name:
        raise FilesystemError(f"Filename must not contain path separators: {filename!r}")
    return name


def resolve_output_dir(output_dir: Optional[Path] = None) -> Path:
    """Absolute output directory (Config.OUTPUT_DIR, relative to the working directory)"""
    return Path(output_dir or Config.OUTPUT_DIR).resolve()


def write_document(content: str, filename: str, extension: str,
                   output_dir: Optional[Path] = None) -> Path:
    """
    Write content to <output_dir>/<filename><extension>, creating the directory

    Args:
        content: Text to write (UTF-8)
        filename: Base filename, validated with validate_filename()
        extension: Extension including the dot
        output_dir: Override for Config.OUTPUT_DIR

    Returns:
        Path of the written file

    Raises:
        FilesystemError: If the directory cannot be created or the write fails
    """
    directory = resolve_output_dir(output_dir)
    path = directory / f"{validate_filename(filename)}{extension}"

    try:
        directory.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as e:
        logger.error(f"Failed to write {path}: {e}", exc_info=True)
        raise FilesystemError(str(e), path=path) from e

    logger.info(f"Saved {len(content)} characters to {path}")
    return path
