"""ZeroMQ PUB transport.

Each message is a two-frame multipart: the channel name, then the
envelope. ZeroMQ subscriptions are prefix matches against the first frame;
every channel name ends with the separator, so a subscriber for
``socket.io#/nsp#`` never picks up traffic for ``/nsp2``. A namespace
subscription does include that namespace's single-room channels.
"""

from __future__ import annotations

import atexit
import logging
import threading
from typing import Optional, Union

import zmq

from ... import config
from ..base import (
    Publisher as BasePublisher,
    TransportConnectionError,
    TransportPublishError,
    as_bytes,
)

logger = logging.getLogger(__name__)
zmq_context = zmq.Context()


class Publisher(BasePublisher):
    """PUB socket. By default it connects to the endpoint *url* (an XSUB proxy,
    or a subscriber that binds); with *bind* set it listens on *url*
    instead."""

    def __init__(self, url: Optional[str] = None, bind: bool = False):
        if url is None:
            url = config.zmq_address()

        address = url
        self.address = address
        self.socket = zmq_context.socket(zmq.PUB)
        self.socket.setsockopt(zmq.LINGER, 0)

        # The lock around the ZeroMQ socket is necessary in a multithreaded
        # application; otherwise, if two different threads both invoke
        # send_multipart(), the message parts can get mixed together.
        self.socket_lock = threading.Lock()

        try:
            if bind:
                self.socket.bind(address)
            else:
                self.socket.connect(address)
        except zmq.ZMQError as exc:
            self.socket.close()
            raise TransportConnectionError(
                f"cannot {'bind' if bind else 'connect'} {address}: {exc}"
            ) from exc

    def publish(self, channel: Union[str, bytes], message: bytes) -> None:
        frames = (as_bytes(channel), message)

        try:
            with self.socket_lock:
                self.socket.send_multipart(frames)
        except zmq.ZMQError as exc:
            raise TransportPublishError(f"zmq publish failed: {exc}") from exc

        logger.debug("zmq: %d bytes on %s", len(message), channel)

    def close(self) -> None:
        with self.socket_lock:
            self.socket.close()


def _cleanup() -> None:
    # Closes any sockets still open, so that termination cannot block.
    zmq_context.destroy(linger=0)


atexit.register(_cleanup)
