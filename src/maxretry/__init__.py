"""
maxretry – bounded message redelivery with retry and error queues.

Import path convention::

    from maxretry.config import MaxRetrySettings, EnvSettingsLoader
    from maxretry.consumer import ConsumerHarness
    from maxretry.adapters.rabbitmq import RabbitMQWorker
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
