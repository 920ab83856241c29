"""Redis PUBLISH transport. This is the bus the Socket.IO Redis adapter
subscribes to, and the default backend.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

import redis

from ... import config
from ..base import (
    Publisher as BasePublisher,
    TransportConnectionError,
    TransportPublishError,
)

logger = logging.getLogger(__name__)


class Publisher(BasePublisher):
    """Publish via a redis-py client.

    An existing *client* is used as-is. Otherwise one is created from *url*
    (or SIOEMITTER_REDIS_URL) if available, or from the remaining keyword
    arguments (host, port, password, ...), which are passed to
    :class:`redis.Redis` without interpretation. redis-py connects lazily,
    so no connection is attempted until the first publish.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        client: Optional[redis.Redis] = None,
        **params: Any,
    ):
        if client is None:
            if url is None and not params:
                url = config.redis_url()

            if url is None:
                client = redis.Redis(**params)
            else:
                client = redis.Redis.from_url(url, **params)

        self.client = client

    def publish(self, channel: Union[str, bytes], message: bytes) -> int:
        """Return the number of subscribers that received the message, as
        reported by the server."""

        try:
            receivers = self.client.publish(channel, message)
        except redis.exceptions.ConnectionError as exc:
            raise TransportConnectionError(f"redis connection failed: {exc}") from exc
        except redis.exceptions.RedisError as exc:
            raise TransportPublishError(f"redis publish failed: {exc}") from exc

        logger.debug("redis: %s reached %s subscriber(s)", channel, receivers)
        return receivers

    def close(self) -> None:
        self.client.close()
