import json
import logging
import os
import tempfile
import threading
from typing import Any


class BlobStore:
    """Key/value store of JSON-encoded blobs.

    Values go through `json.dumps` on every save and `json.loads` on every load, so
    callers never share mutable state with the store. Read-modify-write cycles must
    hold `lock`.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.logger = logging.getLogger(self.__class__.__name__)

    def _read(self, key: str) -> str | None:
        raise NotImplementedError  # pragma: no cover

    def _write(self, key: str, blob: str) -> None:
        raise NotImplementedError  # pragma: no cover

    def remove(self, key: str) -> None:
        raise NotImplementedError  # pragma: no cover

    def clear(self) -> None:
        raise NotImplementedError  # pragma: no cover

    def load(self, key: str) -> Any | None:
        blob = self._read(key)

        if blob is None:
            return None

        try:
            return json.loads(blob)
        except json.JSONDecodeError:
            self.logger.warning('Discarding unreadable blob stored under %s', key)
            self.remove(key)
            return None

    def save(self, key: str, value: Any) -> None:
        self._write(key, json.dumps(value))


class MemoryBlobStore(BlobStore):
    def __init__(self) -> None:
        super().__init__()
        self.blobs: dict[str, str] = {}

    def _read(self, key: str) -> str | None:
        return self.blobs.get(key)

    def _write(self, key: str, blob: str) -> None:
        self.blobs[key] = blob

    def remove(self, key: str) -> None:
        self.blobs.pop(key, None)

    def clear(self) -> None:
        self.blobs.clear()


class FileBlobStore(BlobStore):
    """All blobs in a single JSON object on disk, replaced atomically on each write."""

    def __init__(self, path: str) -> None:
        super().__init__()
        self.path = path

    def _read_all(self) -> dict[str, str]:
        try:
            with open(self.path, encoding='utf-8') as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except json.JSONDecodeError:
            self.logger.error('Storage file %s is corrupt, starting from an empty store', self.path)
            return {}

        if not isinstance(data, dict):
            self.logger.error('Storage file %s does not hold a JSON object, starting from an empty store', self.path)
            return {}

        return data

    def _write_all(self, blobs: dict[str, str]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix='.corehr-', suffix='.json')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(blobs, f)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise

    def _read(self, key: str) -> str | None:
        return self._read_all().get(key)

    def _write(self, key: str, blob: str) -> None:
        with self.lock:
            blobs = self._read_all()
            blobs[key] = blob
            self._write_all(blobs)

    def remove(self, key: str) -> None:
        with self.lock:
            blobs = self._read_all()
            if key in blobs:
                del blobs[key]
                self._write_all(blobs)

    def clear(self) -> None:
        with self.lock:
            self._write_all({})
