import msgpack
import pytest

import sioemitter


class RecordingPublisher:
    """ Stand-in for a pub/sub client: remembers every publish, and returns
        a subscriber count the way redis-py does.
    """

    def __init__(self):
        self.published = list()

    def publish(self, channel, message):
        self.published.append((channel, message))
        return 1


@pytest.fixture
def publisher():
    return RecordingPublisher()


@pytest.fixture
def emitter(publisher):
    return sioemitter.Emitter(publisher)


@pytest.fixture
def decode():
    """ Decode an event envelope the way the cluster adapter does.
    """

    def decode(message):
        return msgpack.unpackb(message, raw=False)

    return decode


@pytest.fixture
def published(publisher, decode):
    """ Return a callable producing the (channel, decoded envelope) pairs
        published so far.
    """

    def published():
        return [(channel, decode(message)) for channel, message in publisher.published]

    return published


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
