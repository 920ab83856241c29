"""Publisher implementations for the pub/sub buses a cluster adapter can
listen on. Only the backend actually requested is imported.
"""

from urllib.parse import urlsplit

from .base import (
    Publisher,
    TransportError,
    TransportConnectionError,
    TransportPublishError,
)
from .. import config
from ..protocol.errors import ConfigurationError


backends = ("redis", "zmq", "rabbitmq")

_SCHEMES = {
    "redis": "redis",
    "rediss": "redis",
    "unix": "redis",
    "tcp": "zmq",
    "ipc": "zmq",
    "inproc": "zmq",
    "amqp": "rabbitmq",
    "amqps": "rabbitmq",
}


def backend_for(url):
    """Return the backend implied by the scheme of *url*."""

    scheme = urlsplit(url).scheme.lower()

    try:
        return _SCHEMES[scheme]
    except KeyError:
        raise ConfigurationError(f"no transport backend for URL scheme {scheme!r}") from None


def connect(backend=None, url=None, **params):
    """Return a :class:`Publisher` for the named *backend*. If no backend is
    named it is inferred from the scheme of *url*, or failing that, taken
    from the SIOEMITTER_TRANSPORT environment variable. The *url* and any
    *params* are handed unchanged to the publisher's constructor.
    """

    if backend is None:
        if url is None:
            backend = config.backend()
        else:
            backend = backend_for(url)

    backend = str(backend).lower()

    if backend == "redis":
        from .redis import publish
    elif backend == "zmq":
        from .zmq import publish
    elif backend == "rabbitmq":
        from .rabbitmq import publish
    else:
        raise ConfigurationError(f"unknown transport backend: {backend!r}")

    if url is not None:
        params["url"] = url

    return publish.Publisher(**params)
