"""
Persistence of OAuth tokens between runs.
"""

import asyncio
import json
import os
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from ..constants import DEFAULT_TOKEN_DIR, TOKEN_FILE_NAME, REFRESH_BUFFER_MS
from ..models import TokenData


def now_ms() -> int:
    return int(time.time() * 1000)


class TokenStorage(ABC):
    """Raw storage backend for a single token record."""

    @abstractmethod
    def read(self) -> Optional[Dict[str, Any]]:
        """Return the stored record, or None when nothing usable is stored."""
        pass

    @abstractmethod
    def write(self, record: Dict[str, Any]) -> None:
        pass

    @abstractmethod
    def delete(self) -> None:
        pass


class FileTokenStorage(TokenStorage):
    """Stores the token record as JSON in a file under the user's home directory."""

    def __init__(self, path: Optional[str] = None):
        if path is None:
            path = os.path.join(DEFAULT_TOKEN_DIR, TOKEN_FILE_NAME)
        self.path = Path(os.path.expanduser(path))

    def read(self) -> Optional[Dict[str, Any]]:
        try:
            record = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return None
        return record if isinstance(record, dict) else None

    def write(self, record: Dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(record, indent=2), encoding="utf-8")
        try:
            os.chmod(self.path, 0o600)
        except OSError:
            pass  # not supported on every platform

    def delete(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass


class MemoryTokenStorage(TokenStorage):
    def __init__(self, record: Optional[Dict[str, Any]] = None):
        self.record = record

    def read(self) -> Optional[Dict[str, Any]]:
        return self.record

    def write(self, record: Dict[str, Any]) -> None:
        self.record = dict(record)

    def delete(self) -> None:
        self.record = None


class TokenStore:
    """Async facade over a TokenStorage backend."""

    def __init__(self, storage: Optional[TokenStorage] = None):
        self.storage = storage or FileTokenStorage()

    async def save(self, tokens: TokenData) -> None:
        await asyncio.to_thread(self.storage.write, tokens.to_record())

    async def load(self) -> Optional[TokenData]:
        """Load stored tokens; a missing or malformed record yields None."""
        record = await asyncio.to_thread(self.storage.read)
        if record is None:
            return None
        try:
            return TokenData.model_validate(record)
        except ValidationError:
            return None

    async def clear(self) -> None:
        await asyncio.to_thread(self.storage.delete)

    @staticmethod
    def is_expired(tokens: TokenData, current_ms: Optional[int] = None) -> bool:
        current_ms = now_ms() if current_ms is None else current_ms
        return current_ms >= tokens.expires_at

    @staticmethod
    def is_expiring_soon(tokens: TokenData, buffer_ms: int = REFRESH_BUFFER_MS,
                         current_ms: Optional[int] = None) -> bool:
        current_ms = now_ms() if current_ms is None else current_ms
        return current_ms >= tokens.expires_at - buffer_ms
