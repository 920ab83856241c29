''' JSON handling for control-plane requests. The cluster adapter parses
    anything arriving on a request channel as JSON, so request messages are
    encoded here rather than with MessagePack.

    The fastest library available is used: :mod:`msgspec` if installed, then
    :mod:`orjson`, then the standard library. Regardless of the choice,
    :func:`dumps` always returns bytes, :func:`loads` accepts bytes or str,
    and a failure to encode raises something in :data:`EncodeErrors`.
'''

msgspec = None
orjson = None
stdlib = None

try:
    import msgspec
except ImportError:
    pass

if msgspec is None:
    try:
        import orjson
    except ImportError:
        pass

if msgspec is None and orjson is None:
    import json as stdlib


def _stdlib_dumps(value):
    # Compact separators, to match the output of the other two libraries.
    return stdlib.dumps(value, separators=(',', ':')).encode()


if msgspec is not None:
    backend = 'msgspec'
    _encoder = msgspec.json.Encoder()
    _decoder = msgspec.json.Decoder()
    dumps = _encoder.encode
    loads = _decoder.decode
    EncodeErrors = (msgspec.EncodeError, TypeError, OverflowError)
elif orjson is not None:
    backend = 'orjson'
    dumps = orjson.dumps
    loads = orjson.loads
    EncodeErrors = (orjson.JSONEncodeError, TypeError)
else:
    backend = 'json'
    dumps = _stdlib_dumps
    loads = stdlib.loads
    EncodeErrors = (TypeError, ValueError)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
