"""
Persisted key-value storage for session identities.

Two backends share one async interface:
  - memory://   process-local dict (development, tests)
  - redis://    Redis via redis.asyncio, survives API restarts

Values are opaque strings; callers serialize to JSON themselves.
"""
from typing import Dict, Optional, Protocol

import redis.asyncio as redis


class KeyValueStore(Protocol):
    async def get(self, key: str) -> Optional[str]: ...

    async def set(self, key: str, value: str) -> None: ...

    async def delete(self, key: str) -> None: ...

    async def ping(self) -> bool: ...

    async def close(self) -> None: ...


class MemoryKeyValueStore:
    """Dict-backed store. Lives as long as the process."""

    def __init__(self):
        self._data: Dict[str, str] = {}

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        self._data.clear()


class RedisKeyValueStore:
    """Redis-backed store."""

    def __init__(self, url: str):
        self._client = redis.from_url(url, decode_responses=True)

    async def get(self, key: str) -> Optional[str]:
        return await self._client.get(key)

    async def set(self, key: str, value: str) -> None:
        await self._client.set(key, value)

    async def delete(self, key: str) -> None:
        await self._client.delete(key)

    async def ping(self) -> bool:
        return bool(await self._client.ping())

    async def close(self) -> None:
        await self._client.close()


def create_kv_store(url: str) -> KeyValueStore:
    """Build the backend named by a storage URL."""
    if url.startswith("memory://"):
        return MemoryKeyValueStore()
    if url.startswith(("redis://", "rediss://", "unix://")):
        return RedisKeyValueStore(url)
    raise ValueError(f"Unsupported session storage URL: {url}")
