"""RabbitMQ topic exchange publisher."""
