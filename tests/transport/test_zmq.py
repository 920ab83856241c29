from unittest import mock

import msgpack
import pytest
import zmq

import sioemitter
from sioemitter.transport.zmq import publish


def test_frames():

    publisher = publish.Publisher(url='inproc://sioemitter-frames', bind=True)
    real_socket = publisher.socket
    publisher.socket = mock.Mock()

    publisher.publish('socket.io#/#', b'envelope')
    publisher.publish(b'socket.io#/nsp#', b'other')

    calls = publisher.socket.send_multipart.call_args_list
    assert calls[0] == mock.call((b'socket.io#/#', b'envelope'))
    assert calls[1] == mock.call((b'socket.io#/nsp#', b'other'))

    real_socket.close()


def test_publish_error():

    publisher = publish.Publisher(url='inproc://sioemitter-error', bind=True)
    real_socket = publisher.socket
    publisher.socket = mock.Mock()
    publisher.socket.send_multipart.side_effect = zmq.ZMQError(zmq.EAGAIN)

    with pytest.raises(sioemitter.TransportPublishError):
        publisher.publish('socket.io#/#', b'envelope')

    real_socket.close()


def test_bad_endpoint():

    with pytest.raises(sioemitter.TransportConnectionError):
        publish.Publisher(url='bogus://nowhere')


def test_delivery():

    publisher = publish.Publisher(url='inproc://sioemitter-delivery', bind=True)

    subscriber = publish.zmq_context.socket(zmq.SUB)
    subscriber.setsockopt(zmq.LINGER, 0)
    subscriber.connect('inproc://sioemitter-delivery')
    subscriber.setsockopt(zmq.SUBSCRIBE, b'socket.io#/nsp#')

    poller = zmq.Poller()
    poller.register(subscriber, zmq.POLLIN)

    emitter = sioemitter.Emitter(publisher)

    # Subscriptions propagate asynchronously; keep emitting until the
    # subscriber is listening.

    parts = None
    for attempt in range(50):
        emitter.of('nsp').emit('event', b'\x01\x02')
        if poller.poll(100):
            parts = subscriber.recv_multipart()
            break

    subscriber.close()
    publisher.close()

    assert parts is not None
    channel, message = parts
    assert channel == b'socket.io#/nsp#'

    envelope = msgpack.unpackb(message, raw=False)
    assert envelope[1]['data'] == ['event', b'\x01\x02']


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
