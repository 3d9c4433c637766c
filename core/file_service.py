"""
Vigenere Breaker - Text file source and sink.
Failures are logged and reported as None / False so callers can abort cleanly.
"""

from pathlib import Path
from typing import Optional, Union

from loguru import logger


def read_text(file_path: Union[str, Path]) -> Optional[str]:
    """Whole file as a string, or None if it cannot be read."""
    try:
        return Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading file: {file_path} ({e})")
        return None


def write_text(file_path: Union[str, Path], content: str) -> bool:
    """Create or truncate file_path with content. True on success."""
    try:
        Path(file_path).write_text(content, encoding="utf-8")
        return True
    except OSError as e:
        logger.error(f"Error writing to file: {file_path} ({e})")
        return False
