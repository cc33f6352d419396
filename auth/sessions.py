from typing import Optional

from redis.asyncio import Redis


class SessionStore:
    """Хранилище сессий в Redis: token -> user id с ограниченным временем жизни.

    Истёкшие записи удаляет сам Redis, отдельная очистка не нужна.
    """

    def __init__(self, redis: Redis, ttl: int, prefix: str = "auth_"):
        self.redis = redis
        self.ttl = ttl
        self.prefix = prefix

    def _make_key(self, token: str) -> str:
        return f"{self.prefix}{token}"

    async def set(self, token: str, user_id: int) -> None:
        await self.redis.setex(self._make_key(token), self.ttl, str(user_id))

    async def get(self, token: str) -> Optional[int]:
        value = await self.redis.get(self._make_key(token))
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None

    async def delete(self, token: str) -> None:
        await self.redis.delete(self._make_key(token))
