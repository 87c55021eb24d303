"""
Key-value stores for list persistence.
A store maps string keys to raw bytes; callers own the encoding.
"""

import base64
import json
import logging
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional


class KeyValueStore(ABC):
    """Abstract base class for key-value storage backends"""

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """Return the bytes stored under key, or None if absent"""
        pass

    @abstractmethod
    def put(self, key: str, value: bytes):
        """Store bytes under key, replacing any previous value"""
        pass

    @abstractmethod
    def name(self) -> str:
        """Get store name (for logging)"""
        pass


class MemoryStore(KeyValueStore):
    """In-memory store, nothing survives the process"""

    def __init__(self, initial: Optional[Dict[str, bytes]] = None):
        self.data: Dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> Optional[bytes]:
        return self.data.get(key)

    def put(self, key: str, value: bytes):
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError(f"Store values must be bytes, got {type(value).__name__}")
        self.data[key] = bytes(value)

    def name(self) -> str:
        return "Memory"


class JsonFileStore(KeyValueStore):
    """
    Store backed by a single JSON file.

    Values are kept base64-encoded so any byte string survives the trip
    through JSON. Writes replace the file atomically.
    """

    def __init__(self, path: str):
        """
        Initialize file store

        Args:
            path: Path to the JSON file (created on first write)
        """
        self.logger = logging.getLogger(__name__)
        self.path = path
        self.lock = threading.Lock()

    def _read_all(self) -> Dict[str, str]:
        """Read the whole document, empty on missing or corrupt file"""
        if not os.path.exists(self.path):
            return {}

        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except Exception as e:
            self.logger.warning(f"Unreadable store file {self.path}: {e}")
            return {}

        if not isinstance(data, dict):
            self.logger.warning(f"Store file {self.path} is not a JSON object, ignoring")
            return {}
        return data

    def _write_all(self, data: Dict[str, str]):
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix='.store-', suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_path, self.path)
        except Exception:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def get(self, key: str) -> Optional[bytes]:
        with self.lock:
            encoded = self._read_all().get(key)

        if encoded is None:
            return None

        try:
            return base64.b64decode(encoded, validate=True)
        except Exception as e:
            self.logger.warning(f"Corrupt value for '{key}' in {self.path}: {e}")
            return None

    def put(self, key: str, value: bytes):
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError(f"Store values must be bytes, got {type(value).__name__}")

        with self.lock:
            data = self._read_all()
            data[key] = base64.b64encode(bytes(value)).decode('ascii')
            self._write_all(data)

        self.logger.debug(f"Stored {len(value)} bytes under '{key}' in {self.path}")

    def name(self) -> str:
        return f"JsonFile({self.path})"
