""" Control-plane requests. These are not client events: they ask every
    cluster member to do something on the caller's behalf, such as making
    a socket join a room, or hand an arbitrary payload to the adapter's
    custom request hook. Requests are published as JSON on the namespace's
    request channel.
"""

import itertools
import threading
from collections.abc import Mapping

from .. import json
from . import fields
from .errors import SerializationError, ValidationError


valid_types = set((
    fields.REMOTE_JOIN,
    fields.REMOTE_LEAVE,
    fields.CUSTOM_REQUEST,
    fields.REMOTE_DISCONNECT,
))


class Request:
    """ A single control-plane request. The *type* is one of the request
        type constants in :mod:`sioemitter.protocol.fields`; any additional
        keyword arguments become fields of the encoded request, alongside
        the uid, request id and type.

        Every request gets a locally unique identification number at
        construction time; the adapter uses it to correlate responses, which
        this package never waits for.

        :ivar id: The identification number, as an eight digit hex string.
        :ivar body: The type-specific request fields.
    """

    def __init__(self, type, uid=fields.UID, **kwargs):

        if type in valid_types:
            pass
        else:
            raise ValidationError('invalid request type: ' + repr(type))

        self.id = _id_next()
        self.type = type
        self.uid = uid
        self.body = kwargs

        self._encoded = None


    def __repr__(self):
        return 'Request(%d, %s)' % (self.type, repr(self.to_dict()))


    def to_dict(self):
        request = dict()
        request['uid'] = self.uid
        request['requestId'] = self.id
        request['type'] = self.type
        request.update(self.body)
        return request


    def encode(self):
        """ Return the JSON encoding of this request as bytes. Calling this
            method multiple times returns the cached encoding rather than
            generating it anew.
        """

        if self._encoded is not None:
            return self._encoded

        request = self.to_dict()
        _reject_binary(request)

        try:
            encoded = json.dumps(request)
        except json.EncodeErrors as e:
            raise SerializationError('cannot serialize request: ' + str(e)) from e

        self._encoded = encoded
        return encoded


# end of class Request



def custom(data):
    """ A request that hands *data*, unchanged, to the adapter's custom
        request hook on every cluster member.
    """

    return Request(fields.CUSTOM_REQUEST, data=data)


def join(sid, room):
    _check_identifier('socket id', sid)
    _check_identifier('room', room)
    return Request(fields.REMOTE_JOIN, sid=sid, room=room)


def leave(sid, room):
    _check_identifier('socket id', sid)
    _check_identifier('room', room)
    return Request(fields.REMOTE_LEAVE, sid=sid, room=room)


def disconnect(sid, close=False):
    """ Disconnect the socket identified by *sid*. If *close* is True the
        underlying connection is closed as well, rather than just the
        socket's membership in the namespace.
    """

    _check_identifier('socket id', sid)
    return Request(fields.REMOTE_DISCONNECT, sid=sid, close=bool(close))


def _reject_binary(value):
    """ Raise :class:`SerializationError` if *value* contains anything
        exposing the buffer protocol. JSON has no binary type, so binary
        values are refused rather than converted to text.
    """

    if value is None or isinstance(value, (str, bool, int, float)):
        return

    if isinstance(value, Mapping):
        for item in value.values():
            _reject_binary(item)
        return

    if isinstance(value, (list, tuple)):
        for item in value:
            _reject_binary(item)
        return

    try:
        memoryview(value)
    except TypeError:
        # Not binary; left for the JSON library to accept or refuse.
        return

    raise SerializationError('binary values cannot be sent in a request: ' + type(value).__name__)


def _check_identifier(name, value):

    if isinstance(value, str) and value != '':
        return

    raise ValidationError('%s must be a non-empty string, not %s' % (name, repr(value)))


_id_min = 0
_id_max = 0xFFFFFFFF
_id_lock = threading.Lock()
_id_ticker = itertools.count(_id_min)


def _id_next():
    """ Return the next request identification number.
    """

    global _id_ticker

    with _id_lock:
        id = next(_id_ticker)

        if id >= _id_max:
            _id_ticker = itertools.count(_id_min)

    return '%08x' % (id)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
