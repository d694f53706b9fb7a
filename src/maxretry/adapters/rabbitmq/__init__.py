"""RabbitMQ adapter – aio-pika producer, topology, error sink and worker."""
from maxretry.adapters.rabbitmq.bus import RabbitMQMessageBus
from maxretry.adapters.rabbitmq.error_sink import RabbitMQErrorSink
from maxretry.adapters.rabbitmq.topology import declare_topology
from maxretry.adapters.rabbitmq.worker import RabbitMQWorker

__all__ = ["RabbitMQErrorSink", "RabbitMQMessageBus", "RabbitMQWorker", "declare_topology"]
