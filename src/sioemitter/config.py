""" Runtime configuration. Every setting here can be overridden by an
    explicit argument to :class:`sioemitter.Emitter` or to a publisher; the
    environment is only consulted when the caller does not say otherwise.
    Values are read at call time, not import time.
"""

import os

from .protocol import fields


def prefix():
    """ The channel name prefix; SIOEMITTER_PREFIX, or 'socket.io'.
    """

    value = os.environ.get('SIOEMITTER_PREFIX', '')
    value = value.strip()

    if value == '':
        value = fields.DEFAULT_PREFIX

    return value


def backend():
    """ The publisher backend to use when none is specified, as named by
        SIOEMITTER_TRANSPORT. The default is 'redis'.
    """

    value = os.environ.get('SIOEMITTER_TRANSPORT', '')
    value = value.strip().lower()

    if value == '':
        value = 'redis'

    return value


def redis_url():
    value = os.environ.get('SIOEMITTER_REDIS_URL', '')
    value = value.strip()

    if value == '':
        return None

    return value


def zmq_address():
    return os.environ.get('SIOEMITTER_ZMQ_ADDRESS', 'tcp://localhost:10139')


def amqp_host():
    return os.environ.get('SIOEMITTER_AMQP_HOST', 'localhost')


def amqp_port():
    return int(os.environ.get('SIOEMITTER_AMQP_PORT', '5672'))


def amqp_exchange():
    return os.environ.get('SIOEMITTER_AMQP_EXCHANGE', fields.DEFAULT_PREFIX)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
