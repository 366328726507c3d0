"""JSON file access under advisory locks."""

import fcntl
import json
import os
from pathlib import Path
from typing import Any, Union

PathLike = Union[str, "os.PathLike[str]"]


def read_json_locked(path: PathLike) -> Any:
    """
    Read and parse a JSON document while holding a shared lock.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the contents are not valid JSON
        OSError: For any other I/O failure
    """
    with open(path, "r", encoding="utf-8") as f:
        fcntl.flock(f.fileno(), fcntl.LOCK_SH)
        try:
            contents = f.read()
        finally:
            fcntl.flock(f.fileno(), fcntl.LOCK_UN)
    return json.loads(contents)


def write_json_locked(path: PathLike, data: Any) -> None:
    """
    Replace the file contents with ``data`` while holding an exclusive lock.

    The parent directory is created when missing. The file is truncated only
    after the lock is held so readers never see a partial document.
    """
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(data, indent=2, sort_keys=True)

    fd = os.open(path, os.O_WRONLY | os.O_CREAT, 0o644)
    with os.fdopen(fd, "w", encoding="utf-8") as f:
        fcntl.flock(f.fileno(), fcntl.LOCK_EX)
        try:
            f.seek(0)
            f.truncate()
            f.write(payload)
            f.flush()
        finally:
            fcntl.flock(f.fileno(), fcntl.LOCK_UN)
