"""Publisher interface.

This is the (small) contract that publisher implementations should follow.
It lives outside :mod:`sioemitter.protocol` so the protocol remains
transport-agnostic. Nothing in the protocol requires a subclass of
:class:`Publisher`; any object with a compatible ``publish`` method will do.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Union

from ..protocol.errors import EmitterError


# Transport agnostic exceptions

class TransportError(EmitterError):
    """Base class for all transport-layer errors."""


class TransportConnectionError(TransportError):
    """The transport could not establish or maintain a connection."""


class TransportPublishError(TransportError):
    """The transport refused or failed to publish a message."""


class Publisher(ABC):
    """Minimal contract for a fire-and-forget pub/sub publisher."""

    @abstractmethod
    def publish(self, channel: Union[str, bytes], message: bytes) -> Any:
        """Publish *message* on *channel*. No acknowledgement is awaited."""

    def close(self) -> None:
        """Release the underlying connection/socket, if any."""


def as_bytes(channel: Union[str, bytes]) -> bytes:
    if isinstance(channel, bytes):
        return channel
    return channel.encode()
