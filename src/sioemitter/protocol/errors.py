"""Protocol-level exceptions.

Everything raised on purpose by this package derives from
:class:`EmitterError`, so callers can catch the whole family at once.
"""


class EmitterError(Exception):
    """Base class for all sioemitter errors."""


class ValidationError(EmitterError, ValueError):
    """A request was rejected before anything was encoded."""


class SerializationError(EmitterError, TypeError):
    """A value could not be represented in the wire format."""


class ConfigurationError(EmitterError):
    """The emitter was set up with something it cannot use."""
