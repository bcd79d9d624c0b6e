"""Resolution of the photo directory given on the command line."""

import errno
import os
import stat
from pathlib import Path

from photo_orphans.core.errors import InvalidPathError


def resolve_photo_dir(path: str) -> Path:
    """
    Turn a user supplied path into the directory to scan.

    An empty string means the current directory. Paths starting with a dot
    are canonicalized; anything else is used as given.

    Args:
        path: Path string from the command line

    Returns:
        Directory path

    Raises:
        InvalidPathError: If the path is missing, not a directory, or not
            readable and writable
    """
    if not path:
        directory = Path.cwd()
    elif path.startswith("."):
        try:
            directory = Path(path).resolve(strict=True)
        except OSError as e:
            raise InvalidPathError("Not a valid path", Path(path), e) from e
    else:
        directory = Path(path)

    try:
        mode = directory.stat().st_mode
    except OSError as e:
        raise InvalidPathError("Not a valid path", directory, e) from e

    if not stat.S_ISDIR(mode):
        cause = OSError(errno.ENOTDIR, os.strerror(errno.ENOTDIR))
        raise InvalidPathError("Not a directory", directory, cause)
    if not os.access(directory, os.R_OK | os.W_OK | os.X_OK):
        cause = OSError(errno.EACCES, os.strerror(errno.EACCES))
        raise InvalidPathError("Directory is not readable and writable", directory, cause)

    return directory
