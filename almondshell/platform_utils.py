"""Console detection and resource directory lookup."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, TextIO, Union

PathLike = Union[str, os.PathLike]


def is_console_application(stream: Optional[TextIO] = None) -> bool:
    """Return True if the stream (standard output by default) is a terminal."""
    stream = sys.stdout if stream is None else stream
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False


def _default_app_dir() -> Path:
    return Path(sys.argv[0] or ".").resolve().parent


def find_resource_dir(
    folder_name: PathLike,
    working_dir: Optional[PathLike] = None,
    app_dir: Optional[PathLike] = None,
) -> Optional[Path]:
    """Look for a folder in the working dir, the app dir and up to three levels above it."""
    working = Path.cwd() if working_dir is None else Path(working_dir)
    app = _default_app_dir() if app_dir is None else Path(app_dir)
    candidates = [working / folder_name, app / folder_name]
    candidates += [app.joinpath(*[".."] * levels, folder_name) for levels in (1, 2, 3)]
    for candidate in candidates:
        if candidate.is_dir():
            return candidate.resolve()
    return None


def search_and_set_resource_dir(
    folder_name: PathLike, app_dir: Optional[PathLike] = None
) -> bool:
    """Find the resource folder and make it the working directory; return whether it was found."""
    found = find_resource_dir(folder_name, app_dir=app_dir)
    if found is None:
        return False
    os.chdir(found)
    return True