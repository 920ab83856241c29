""" Pub/sub channel naming. The cluster adapter subscribes to one channel
    per namespace, plus one channel per room it has local members in; an
    emission aimed at exactly one room goes to that room's channel, so that
    cluster members with nobody in the room never see it.

    Namespace-wide, multi-room, and exclusion filtering are all resolved by
    the subscriber after it decodes the envelope; only the single-room case
    is filtered by the transport.
"""

from typing import Collection, Optional

from . import fields
from .errors import ValidationError


def normalize_namespace(namespace: Optional[str]) -> str:
    """ Return the *namespace* with its leading separator. An empty or
        missing namespace is the root namespace.
    """

    if namespace is None:
        return fields.ROOT_NAMESPACE

    if not isinstance(namespace, str):
        raise ValidationError('namespace must be a string, not ' + type(namespace).__name__)

    if namespace == '':
        return fields.ROOT_NAMESPACE

    if namespace.startswith('/'):
        return namespace

    return '/' + namespace


def channel_for(prefix: str, namespace: str, rooms: Collection[str] = ()) -> str:
    """ Return the channel an emission should be published on. The
        *namespace* is expected to be normalized already.
    """

    channel = prefix + fields.SEPARATOR + namespace + fields.SEPARATOR

    if len(rooms) == 1:
        (room,) = rooms
        channel = channel + room + fields.SEPARATOR

    return channel


def request_channel(prefix: str, namespace: str) -> str:
    """ Return the channel for control-plane requests in *namespace*, of
        the form ``<prefix>#<namespace>#request#``.
    """

    return channel_for(prefix, namespace, (fields.REQUEST_SUFFIX,))


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
