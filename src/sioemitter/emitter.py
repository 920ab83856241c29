""" Implementation of the :class:`Emitter`, the principal entry point for
    processes that want to reach Socket.IO clients without running a
    Socket.IO server themselves.
"""

import logging

from . import config
from . import transport
from .operator import BroadcastOperator
from .protocol import channel

logger = logging.getLogger(__name__)


class Emitter:
    """ The :class:`Emitter` holds a publisher and a channel prefix, and
        hands out :class:`BroadcastOperator` instances bound to a namespace.

        The *publisher* can be any object with a ``publish(channel, message)``
        method, such as a :class:`redis.Redis` client. If it is a string it
        is treated as a connection URL; if it is None a publisher is created
        by :func:`sioemitter.transport.connect`. In both of those cases any
        additional keyword arguments are handed to the transport without
        interpretation::

            emitter = sioemitter.Emitter(host='localhost', port=6379)
            emitter = sioemitter.Emitter('redis://localhost:6379/0')
            emitter = sioemitter.Emitter(redis.Redis())

        The *prefix* is the first component of every channel name; if not
        specified, the SIOEMITTER_PREFIX environment variable is used, and
        failing that, 'socket.io'.

        Whether the publisher can actually publish is not checked here; a
        publisher without a ``publish()`` method is reported the first time
        anything is emitted.

        The targeting and emit methods of the operator bound to the default
        *namespace* are available directly on the :class:`Emitter`::

            emitter.emit('ping', 42)
            emitter.to('lobby').emit('message', 'hello')
            emitter.of('/chat').except_(sid).emit('message', 'hi')
    """

    def __init__(self, publisher=None, prefix=None, namespace=None, **params):

        if publisher is None:
            publisher = transport.connect(**params)
        elif isinstance(publisher, str):
            publisher = transport.connect(url=publisher, **params)
        elif params:
            raise TypeError('connection parameters are only accepted when no publisher is provided')

        if prefix is None:
            prefix = config.prefix()

        self.publisher = publisher
        self.prefix = prefix
        self.namespace = channel.normalize_namespace(namespace)
        self.root = BroadcastOperator(publisher, prefix, self.namespace)

        logger.debug('emitter on %s with %s', channel.channel_for(prefix, self.namespace), repr(publisher))


    def of(self, namespace):
        """ Return a :class:`BroadcastOperator` for the given *namespace*. A
            missing leading slash is added; 'chat' and '/chat' are the same
            namespace, and an empty namespace is the root namespace.
        """

        namespace = channel.normalize_namespace(namespace)
        return BroadcastOperator(self.publisher, self.prefix, namespace)


    def close(self):
        """ Close the publisher, if it supports being closed.
        """

        try:
            close = self.publisher.close
        except AttributeError:
            return

        close()


    # Shortcuts for the operator bound to the default namespace.

    def to(self, room):
        return self.root.to(room)

    def in_(self, room):
        return self.root.in_(room)

    def except_(self, sid):
        return self.root.except_(sid)

    def flag(self, name, value=True):
        return self.root.flag(name, value)

    @property
    def broadcast(self):
        return self.root.broadcast

    @property
    def volatile(self):
        return self.root.volatile

    @property
    def local(self):
        return self.root.local

    def compress(self, value=True):
        return self.root.compress(value)

    def emit(self, event, *args):
        return self.root.emit(event, *args)

    def custom_request(self, data):
        return self.root.custom_request(data)

    def remote_join(self, sid, room):
        return self.root.remote_join(sid, room)

    def remote_leave(self, sid, room):
        return self.root.remote_leave(sid, room)

    def remote_disconnect(self, sid, close=False):
        return self.root.remote_disconnect(sid, close)


# end of class Emitter


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
