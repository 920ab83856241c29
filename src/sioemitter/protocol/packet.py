""" The event packet and its targeting options, and the MessagePack codec
    that turns the pair into the envelope published for the cluster adapter.

    The envelope is a three element array::

        [uid, {type, data, nsp}, {rooms, except, flags}]

    Only the encode direction lives here; decoding belongs to whatever is
    subscribed on the other side of the bus.
"""

from collections.abc import Mapping, Sequence as SequenceABC
from types import MappingProxyType
from typing import Any, Dict, NamedTuple, Sequence, Tuple

import msgpack

from . import fields
from .errors import SerializationError, ValidationError


class Packet(NamedTuple):
    """ A Socket.IO packet. The first element of *data* is always the
        event name, the remainder are the arguments in the order they
        were given.
    """

    namespace: str
    data: Tuple[Any, ...]
    type: int = fields.EVENT

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': self.type,
            'data': [normalize(item) for item in self.data],
            'nsp': self.namespace,
        }


# end of class Packet



class Options(NamedTuple):
    """ Targeting for a single emission: the rooms to deliver to, the
        identifiers to skip, and the delivery flags. Overlap between
        *rooms* and *excluded* is left for the subscriber to resolve.
    """

    rooms: Tuple[str, ...] = ()
    excluded: Tuple[str, ...] = ()
    flags: Mapping = MappingProxyType({})

    def to_dict(self) -> Dict[str, Any]:
        return {
            'rooms': list(self.rooms),
            'except': list(self.excluded),
            'flags': dict(self.flags),
        }


# end of class Options



def validate(packet: Packet) -> None:
    """ Raise :class:`ValidationError` if the *packet* cannot be sent. The
        checks are limited to the event name; arguments are only checked
        when they are serialized.
    """

    if not packet.data:
        raise ValidationError('an event name is required')

    event = packet.data[0]

    if not isinstance(event, str):
        raise ValidationError('event name must be a string, not ' + type(event).__name__)

    if event == '':
        raise ValidationError('event name cannot be empty')

    if event in fields.RESERVED_EVENTS:
        raise ValidationError('"%s" is a reserved event name' % (event))


def normalize(value: Any) -> Any:
    """ Return *value* in a form MessagePack can represent directly. Any
        object exposing the buffer protocol (bytearray, memoryview,
        array.array, and so on) becomes :class:`bytes` with the same length
        and byte order, so the subscriber always sees a plain binary blob.
        Sequences and mappings are walked recursively; every other ordered
        sequence (tuple, deque, range, ...) becomes a list.
    """

    if value is None or isinstance(value, (str, bytes, bool, int, float)):
        return value

    if isinstance(value, Mapping):
        return {key: normalize(item) for key, item in value.items()}

    if isinstance(value, (list, tuple)):
        return [normalize(item) for item in value]

    try:
        view = memoryview(value)
    except TypeError:
        view = None

    if view is not None:
        with view:
            return view.tobytes()

    # Any other ordered sequence (deque, range, ...) goes out as an array.

    if isinstance(value, SequenceABC):
        return [normalize(item) for item in value]

    raise SerializationError('cannot serialize value of type ' + type(value).__name__)


def encode(packet: Packet, options: Options, uid: str = fields.UID) -> bytes:
    """ Validate and serialize the *packet* and its *options*. The return
        value is the complete envelope, ready to publish; if anything in
        the packet cannot be represented a :class:`SerializationError` is
        raised and no bytes are produced.
    """

    validate(packet)

    try:
        envelope = [uid, packet.to_dict(), options.to_dict()]
        return msgpack.packb(envelope, use_bin_type=True)
    except RecursionError as e:
        raise SerializationError('cannot serialize packet: nested too deeply') from e
    except (TypeError, ValueError, OverflowError) as e:
        raise SerializationError('cannot serialize packet: ' + str(e)) from e


def build(namespace: str, event: str, args: Sequence[Any] = (), rooms=(), excluded=(), flags=None) -> Tuple[Packet, Options]:
    """ Convenience constructor for a :class:`Packet` and its
        :class:`Options`, as used by :func:`encode`.
    """

    packet = Packet(namespace, (event,) + tuple(args))
    options = Options(tuple(rooms), tuple(excluded), MappingProxyType(dict(flags or {})))
    return packet, options


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
