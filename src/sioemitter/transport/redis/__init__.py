"""Redis pub/sub publisher."""
