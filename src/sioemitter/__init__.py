""" Python implementation of a Socket.IO emitter. This lets any process
    send events to the clients of a Socket.IO cluster, without running a
    Socket.IO server of its own, by publishing on the pub/sub bus that the
    cluster adapter is listening to.
"""

# Utility components.

from . import json
from . import config

# Submodules used by multiple other components.

from . import protocol
from . import transport

# Primary public-facing interfaces.

from .protocol.errors import EmitterError, ValidationError, SerializationError, ConfigurationError
from .transport import TransportError, TransportConnectionError, TransportPublishError
from .operator import BroadcastOperator
from .emitter import Emitter

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
