"""Consumer – harness settling each delivery and the worker pool."""
from maxretry.consumer.harness import ConsumerHarness, Disposition, Handler
from maxretry.consumer.worker import WorkerPool

__all__ = ["ConsumerHarness", "Disposition", "Handler", "WorkerPool"]
