"""A JSON document on disk shared by every repository that opens it.

Route handlers run in a threadpool, so each repository must hold ``lock``
for the whole read-modify-write (id allocation included). Writes go to a
temporary file in the same directory and are moved into place with
``os.replace``, so readers only ever see a complete document.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any

_locks: dict[Path, threading.RLock] = {}
_locks_guard = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _locks_guard:
        return _locks.setdefault(path, threading.RLock())


class JsonFile:

    def __init__(self, path: Path) -> None:
        self.path = path
        self.lock = _lock_for(path.resolve())
        with self.lock:
            if not self.path.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.write([])

    def read(self) -> list[dict[str, Any]]:
        with self.lock:
            return json.loads(self.path.read_text(encoding="utf-8"))

    def write(self, records: list[dict[str, Any]]) -> None:
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(json.dumps(records, indent=2) + "\n")
            with self.lock:
                os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
