import array
import collections

import msgpack
import pytest

import sioemitter
from sioemitter.protocol import fields
from sioemitter.protocol import packet


def decode(message):
    return msgpack.unpackb(message, raw=False)


def test_envelope_shape():

    event, options = packet.build('/', 'ping', (42,))
    envelope = decode(packet.encode(event, options))

    assert envelope == [
        'emitter',
        {'type': 2, 'data': ['ping', 42], 'nsp': '/'},
        {'rooms': [], 'except': [], 'flags': {}},
    ]


def test_options_on_the_wire():

    options = packet.Options(('a', 'b'), ('sid1',), {'broadcast': True, 'compress': False})
    event = packet.Packet('/chat', ('message', 'hi'))

    uid, wire_packet, wire_options = decode(packet.encode(event, options))

    assert uid == fields.UID
    assert wire_packet['nsp'] == '/chat'
    assert wire_options['rooms'] == ['a', 'b']
    assert wire_options['except'] == ['sid1']
    assert wire_options['flags'] == {'broadcast': True, 'compress': False}


def test_any_kind_of_data():

    buffer = 'asdfasdf'.encode()
    bytes_array = bytearray((1, 2, 3, 4))

    event, options = packet.build('/', 'payload', (1, '2', [3], buffer, bytes_array, None, True, 35.5))
    envelope = decode(packet.encode(event, options))
    data = envelope[1]['data']

    assert data == ['payload', 1, '2', [3], b'asdfasdf', b'\x01\x02\x03\x04', None, True, 35.5]
    assert isinstance(data[4], bytes)
    assert isinstance(data[5], bytes)


def test_binary_views():

    typed = array.array('H', (1, 258, 65535))
    view = memoryview(b'0123456789')[2:6]

    event, options = packet.build('/', 'views', (typed, view))
    data = decode(packet.encode(event, options))[1]['data']

    assert data[1] == typed.tobytes()
    assert len(data[1]) == 6
    assert data[2] == b'2345'


def test_nested_binary():

    value = {
        'list': [bytearray(b'\x00\xff'), {'deep': memoryview(b'abc')}],
        'tuple': (1, b'raw'),
    }

    event, options = packet.build('/', 'nested', (value,))
    data = decode(packet.encode(event, options))[1]['data']

    assert data[1] == {
        'list': [b'\x00\xff', {'deep': b'abc'}],
        'tuple': [1, b'raw'],
    }


def test_normalize():

    assert packet.normalize(None) is None
    assert packet.normalize('text') == 'text'
    assert packet.normalize(b'bytes') == b'bytes'
    assert packet.normalize(bytearray(b'ba')) == b'ba'
    assert packet.normalize((1, (2, 3))) == [1, [2, 3]]

    empty = packet.normalize(memoryview(b''))
    assert empty == b''
    assert isinstance(empty, bytes)


def test_event_name_validation():

    for bad in (None, 42, b'bytes', ''):
        event, options = packet.build('/', bad)
        with pytest.raises(sioemitter.ValidationError):
            packet.encode(event, options)

    with pytest.raises(sioemitter.ValidationError):
        packet.encode(packet.Packet('/', ()), packet.Options())


def test_reserved_event_names():

    for reserved in fields.RESERVED_EVENTS:
        event, options = packet.build('/', reserved)
        with pytest.raises(sioemitter.ValidationError):
            packet.encode(event, options)


def test_unserializable_arguments():

    for bad in (object(), set((1, 2)), {'nested': object()}, [1, [2, object()]]):
        event, options = packet.build('/', 'bad', (bad,))
        with pytest.raises(sioemitter.SerializationError):
            packet.encode(event, options)

    event, options = packet.build('/', 'overflow', (2 ** 70,))
    with pytest.raises(sioemitter.SerializationError):
        packet.encode(event, options)


def test_error_hierarchy():

    assert issubclass(sioemitter.ValidationError, ValueError)
    assert issubclass(sioemitter.SerializationError, TypeError)
    assert issubclass(sioemitter.ValidationError, sioemitter.EmitterError)
    assert issubclass(sioemitter.SerializationError, sioemitter.EmitterError)



def test_default_flags_are_not_shared():

    first = packet.Options()

    with pytest.raises(TypeError):
        first.flags['volatile'] = True

    assert packet.Options().flags == {}

    event, options = packet.build('/', 'event', flags={'local': True})

    with pytest.raises(TypeError):
        options.flags['volatile'] = True

    assert decode(packet.encode(event, options))[2]['flags'] == {'local': True}


def test_other_sequences():

    assert packet.normalize(collections.deque((1, b'a'))) == [1, b'a']
    assert packet.normalize(range(3)) == [0, 1, 2]

    event, options = packet.build('/', 'seq', (collections.deque([bytearray(b'z')]),))
    assert decode(packet.encode(event, options))[1]['data'] == ['seq', [b'z']]


def test_deep_nesting():

    value = list()
    for level in range(100000):
        value = [value]

    event, options = packet.build('/', 'deep', (value,))

    with pytest.raises(sioemitter.SerializationError):
        packet.encode(event, options)

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
