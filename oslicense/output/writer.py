"""Write license text to a file or standard output."""
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

from oslicense.constants import DEFAULT_OUTPUT_FILENAME
from oslicense.exceptions import FileWriteError, LicenseFileExistsError

logger = logging.getLogger(__name__)


def _with_trailing_newline(text: str) -> str:
    return text.rstrip("\n") + "\n"


def resolve_output_path(
    path: Union[str, Path, None] = None,
    default_filename: str = DEFAULT_OUTPUT_FILENAME,
) -> Path:
    """Work out the absolute path a license file should be written to.

    Args:
        path: Requested file or directory. Defaults to the working directory.
        default_filename: File name used when ``path`` is omitted or is an
            existing directory.

    Returns:
        Absolute target path.
    """
    target = Path(path) if path else Path(default_filename)
    target = target.expanduser().absolute()
    if target.is_dir():
        target = target / default_filename
    return target


def write_license_file(
    text: str,
    path: Union[str, Path, None] = None,
    default_filename: str = DEFAULT_OUTPUT_FILENAME,
) -> Path:
    """Write license text to a new file.

    Args:
        text: The license text.
        path: Target file, or an existing directory to write
            ``default_filename`` into. Defaults to ``default_filename``
            in the working directory.
        default_filename: File name used when ``path`` is omitted or is a
            directory.

    Returns:
        Absolute path of the written file.

    Raises:
        LicenseFileExistsError: If the target file already exists. The
            existing file is left untouched.
        FileWriteError: If the file cannot be written.
    """
    target = resolve_output_path(path, default_filename)

    try:
        # Exclusive mode so an existing file is never overwritten
        with target.open("x", encoding="utf-8") as f:
            f.write(_with_trailing_newline(text))
    except FileExistsError as e:
        raise LicenseFileExistsError(str(target)) from e
    except OSError as e:
        raise FileWriteError(
            f"License file could not be written at '{target}': {e}"
        ) from e

    logger.debug("Wrote %d characters to %s", len(text), target)
    return target


def echo_license(text: str, stream: Optional[TextIO] = None) -> None:
    """Write license text to standard output.

    Args:
        text: The license text.
        stream: Stream to write to. Defaults to sys.stdout.
    """
    out = stream if stream is not None else sys.stdout
    out.write(_with_trailing_newline(text))
    out.flush()
