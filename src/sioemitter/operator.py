""" The :class:`BroadcastOperator` accumulates the targeting for an
    emission: which rooms to deliver to, which sockets to skip, and which
    delivery flags to apply. It never talks to the bus until one of its
    terminal methods is invoked.
"""

import logging

from .protocol import channel
from .protocol import fields
from .protocol import packet
from .protocol import request
from .protocol.errors import ConfigurationError, ValidationError

logger = logging.getLogger(__name__)


class BroadcastOperator:
    """ An immutable targeting descriptor bound to a *publisher*, a channel
        *prefix*, and a *namespace*. The namespace is expected to be
        normalized already; :meth:`sioemitter.Emitter.of` takes care of that.

        Every narrowing method (:func:`to`, :func:`except_`, :func:`flag`,
        and the flag properties) returns a new operator with the additional
        targeting; the original is left untouched, so a partially narrowed
        operator can be safely reused or shared between threads::

            room = emitter.of('/chat').to('lobby')
            room.emit('message', 'hello')
            room.volatile.emit('typing', 'someone')

        The terminal methods (:func:`emit`, :func:`custom_request`, and the
        other remote requests) publish exactly once. They return whatever the
        publisher's ``publish()`` returns; with an asyncio publisher that is
        an awaitable the caller is responsible for.

        :ivar rooms: The rooms to deliver to, in the order they were added.
        :ivar excluded: The socket or room identifiers to skip.
        :ivar flags: A read-only copy of the delivery flags.
    """

    def __init__(self, publisher, prefix=fields.DEFAULT_PREFIX, namespace=fields.ROOT_NAMESPACE, rooms=(), excluded=(), flags=None):

        self.publisher = publisher
        self.prefix = prefix
        self.namespace = namespace
        self.rooms = tuple(rooms)
        self.excluded = tuple(excluded)

        if flags is None:
            flags = dict()

        self._flags = dict(flags)


    def __repr__(self):

        return 'BroadcastOperator(%s, rooms=%s, except=%s, flags=%s)' % (repr(self.namespace), repr(self.rooms), repr(self.excluded), repr(self._flags))


    @property
    def flags(self):
        return dict(self._flags)


    def _narrow(self, rooms=None, excluded=None, flags=None):
        """ Return a copy of this operator with the given fields replaced.
        """

        if rooms is None:
            rooms = self.rooms
        if excluded is None:
            excluded = self.excluded
        if flags is None:
            flags = self._flags

        return BroadcastOperator(self.publisher, self.prefix, self.namespace, rooms, excluded, flags)


    def to(self, room):
        """ Deliver to *room* in addition to any rooms already selected. A
            list, tuple, or set of rooms is also accepted. Adding a room that
            is already selected has no effect.
        """

        rooms = list(self.rooms)

        for name in _identifiers('room', room):
            if name in rooms:
                continue
            logger.debug('room %s', name)
            rooms.append(name)

        return self._narrow(rooms=rooms)

    in_ = to


    def except_(self, sid):
        """ Skip the socket (or room) identified by *sid*. As with :func:`to`,
            multiple identifiers may be passed as a list, tuple, or set.
        """

        excluded = list(self.excluded)

        for name in _identifiers('excluded identifier', sid):
            if name in excluded:
                continue
            logger.debug('except %s', name)
            excluded.append(name)

        return self._narrow(excluded=excluded)


    def flag(self, name, value=True):
        """ Set the delivery flag *name* to *value*. Only the flags known to
            the cluster adapter are accepted.
        """

        if name not in fields.FLAGS:
            raise ValidationError('unknown flag: ' + repr(name))

        value = bool(value)
        logger.debug('flag %s %s', name, 'on' if value else 'off')

        flags = dict(self._flags)
        flags[name] = value
        return self._narrow(flags=flags)


    @property
    def broadcast(self):
        return self.flag(fields.BROADCAST)


    @property
    def volatile(self):
        """ The event may be dropped if a recipient is not ready for it.
        """

        return self.flag(fields.VOLATILE)


    @property
    def local(self):
        """ Only the cluster member receiving the message delivers it.
        """

        return self.flag(fields.LOCAL)


    def compress(self, value=True):
        return self.flag(fields.COMPRESS, value)


    def emit(self, event, *args):
        """ Emit *event* with any number of *args* to every socket matching
            the accumulated targeting. Arguments may be any combination of
            None, booleans, numbers, strings, lists, tuples, dictionaries, and
            binary buffers (bytes, bytearray, memoryview, array.array, ...).
        """

        flags = dict(self._flags)
        flags[fields.BROADCAST] = True

        event_packet, options = packet.build(self.namespace, event, args, self.rooms, self.excluded, flags)
        envelope = packet.encode(event_packet, options)
        destination = channel.channel_for(self.prefix, self.namespace, self.rooms)

        return self._publish(destination, envelope)


    def custom_request(self, data):
        """ Hand *data*, unchanged, to the custom request hook of the
            adapter on every cluster member. This bypasses the event packet
            entirely; *data* must be representable as JSON.
        """

        return self._request(request.custom(data))


    def remote_join(self, sid, room):
        """ Ask the cluster member holding socket *sid* to add it to *room*.
        """

        return self._request(request.join(sid, room))


    def remote_leave(self, sid, room):
        return self._request(request.leave(sid, room))


    def remote_disconnect(self, sid, close=False):
        """ Ask the cluster member holding socket *sid* to disconnect it.
            See :func:`sioemitter.protocol.request.disconnect`.
        """

        return self._request(request.disconnect(sid, close))


    def _request(self, pending):

        destination = channel.request_channel(self.prefix, self.namespace)
        return self._publish(destination, pending.encode())


    def _publish(self, destination, message):

        try:
            publish = self.publisher.publish
        except AttributeError:
            publish = None

        if not callable(publish):
            raise ConfigurationError('publisher has no usable publish() method: ' + repr(self.publisher))

        logger.debug('publish %d bytes on %s', len(message), destination)
        return publish(destination, message)


# end of class BroadcastOperator



def _identifiers(name, value):
    """ Return *value* as a list of identifier strings, raising
        :class:`ValidationError` if any of them is not a non-empty string.
    """

    if isinstance(value, (list, tuple, set, frozenset)):
        values = list(value)
    else:
        values = [value]

    for item in values:
        if isinstance(item, str) and item != '':
            continue
        raise ValidationError('%s must be a non-empty string, not %s' % (name, repr(item)))

    return values


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
