"""ZeroMQ PUB socket publisher."""
