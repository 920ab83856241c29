"""RabbitMQ publish transport, for adapters consuming from a topic exchange.

The channel name is used verbatim as the routing key.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional, Union

import pika

from ... import config
from ..base import (
    Publisher as BasePublisher,
    TransportConnectionError,
    TransportPublishError,
)

logger = logging.getLogger(__name__)


def _broker_params(url: Optional[str], host: Optional[str], port: Optional[int], **params) -> pika.connection.Parameters:
    if url is not None:
        return pika.URLParameters(url)

    params.setdefault("heartbeat", 600)
    params.setdefault("blocked_connection_timeout", 300)

    return pika.ConnectionParameters(
        host=host if host is not None else config.amqp_host(),
        port=port if port is not None else config.amqp_port(),
        **params,
    )


class Publisher(BasePublisher):
    """Publish to a non-durable topic exchange.

    The connection is opened on the first publish. An amqp:// *url* takes
    precedence over everything else; otherwise any keyword arguments beyond
    *host*, *port* and *exchange* are passed to
    :class:`pika.ConnectionParameters`.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        host: Optional[str] = None,
        port: Optional[int] = None,
        exchange: Optional[str] = None,
        **params,
    ):
        self.parameters = _broker_params(url, host, port, **params)
        self.exchange = exchange if exchange is not None else config.amqp_exchange()

        # A BlockingConnection is not thread-safe.
        self._lock = threading.Lock()
        self._connection = None
        self._channel = None

    def _open(self) -> None:
        try:
            self._connection = pika.BlockingConnection(self.parameters)
            self._channel = self._connection.channel()
            self._channel.exchange_declare(
                exchange=self.exchange, exchange_type="topic", durable=False
            )
        except pika.exceptions.AMQPError as exc:
            self._connection = None
            self._channel = None
            raise TransportConnectionError(f"rabbitmq connection failed: {exc}") from exc

    def publish(self, channel: Union[str, bytes], message: bytes) -> None:
        if isinstance(channel, bytes):
            channel = channel.decode()

        with self._lock:
            if self._channel is None:
                self._open()

            try:
                self._channel.basic_publish(
                    exchange=self.exchange,
                    routing_key=channel,
                    body=message,
                )
            except pika.exceptions.AMQPConnectionError as exc:
                # Drop the dead connection; the next publish opens a new one.
                self._connection = None
                self._channel = None
                raise TransportConnectionError(f"rabbitmq connection lost: {exc}") from exc
            except pika.exceptions.AMQPChannelError as exc:
                # The broker closes the channel on a channel-level error.
                connection = self._connection
                self._connection = None
                self._channel = None
                try:
                    connection.close()
                except pika.exceptions.AMQPError:
                    # Already closed by the broker.
                    pass
                raise TransportPublishError(f"rabbitmq publish failed: {exc}") from exc
            except pika.exceptions.AMQPError as exc:
                raise TransportPublishError(f"rabbitmq publish failed: {exc}") from exc

        logger.debug("rabbitmq: %d bytes on %s", len(message), channel)

    def close(self) -> None:
        with self._lock:
            if self._connection is not None and self._connection.is_open:
                self._connection.close()
            self._connection = None
            self._channel = None
