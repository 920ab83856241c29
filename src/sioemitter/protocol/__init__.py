"""
sioemitter Protocol Layer
=========================

This package defines what gets put on the pub/sub bus: the packet and
targeting structures for client events, the envelope codec, the channel
naming convention, and the control-plane requests. It has no knowledge of
any particular bus; the only thing it produces is a channel name and a
byte string.

---------------------------------------------------------------------

Layer Overview
--------------

Emitter / BroadcastOperator (sioemitter.emitter, sioemitter.operator)
    Fluent targeting API; accumulates rooms, exclusions, flags

    │
    ▼
Packet Codec (packet.py)
    Packet + Options -> MessagePack envelope
    Binary normalization, event name validation

    │
    ▼
Channel Router (channel.py)
    Namespace / single-room / request channel names

    │
    ▼
Publisher (sioemitter.transport)
    publish(channel, bytes)
    - Redis
    - ZeroMQ
    - RabbitMQ
    - anything else with a publish() method

Requests (request.py) take the same path but are JSON encoded and always
go to the request channel.

---------------------------------------------------------------------
"""

from . import errors
from . import fields
from . import channel
from . import packet
from . import request

from .errors import EmitterError, ValidationError, SerializationError, ConfigurationError
from .packet import Packet, Options, encode
from .channel import channel_for, request_channel, normalize_namespace

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
