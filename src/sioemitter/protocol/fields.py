"""Protocol constants.

Keep these in one place to avoid stringly-typed message handling. The
numeric values must match what the Socket.IO parser and the cluster
adapter expect on the other side of the bus.
"""

# Envelope origin. The adapter drops envelopes carrying its own server uid;
# this value never collides with one.
UID = "emitter"

DEFAULT_PREFIX = "socket.io"
ROOT_NAMESPACE = "/"
SEPARATOR = "#"
REQUEST_SUFFIX = "request"

# Socket.IO parser packet types
EVENT = 2

# Control-plane request types, as numbered by the cluster adapter
REMOTE_JOIN = 3
REMOTE_LEAVE = 4
CUSTOM_REQUEST = 5
REMOTE_DISCONNECT = 6

# Delivery flags
BROADCAST = "broadcast"
VOLATILE = "volatile"
COMPRESS = "compress"
LOCAL = "local"

FLAGS = frozenset((BROADCAST, VOLATILE, COMPRESS, LOCAL))

# Event names a client library reserves for itself
RESERVED_EVENTS = frozenset((
    "connect",
    "connect_error",
    "disconnect",
    "disconnecting",
    "newListener",
    "removeListener",
))
