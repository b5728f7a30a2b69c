"""Consumer types, composition and the safe-invocation adapter."""

from .base import BaseConsumer, ConsumerLike, FunctionConsumer, as_consumer, consumer, invoke
from .composed import ComposedConsumer, compose, compose_all
from .safe import SafeConsumer, make_safe

__all__ = [
    "BaseConsumer",
    "ComposedConsumer",
    "ConsumerLike",
    "FunctionConsumer",
    "SafeConsumer",
    "as_consumer",
    "compose",
    "compose_all",
    "consumer",
    "invoke",
    "make_safe",
]
