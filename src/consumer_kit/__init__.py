"""consumer-kit: Composable single-argument callbacks with error containment.

Consumers:
    BaseConsumer, FunctionConsumer, ComposedConsumer, SafeConsumer,
    as_consumer, consumer, invoke, compose, compose_all, make_safe

Drivers:
    for_each, for_each_entry, for_each_line

Error Sinks:
    logging_sink, stderr_sink, CollectingSink

Protocols (extension points):
    Consumer, ErrorSink, DriverCallback

Models:
    ErrorInfo, DriveResult

Exceptions:
    ConsumerKitError, CompositionError, SourceReadError
"""

from importlib.metadata import PackageNotFoundError, version

from consumer_kit.consumers import (
    BaseConsumer,
    ComposedConsumer,
    ConsumerLike,
    FunctionConsumer,
    SafeConsumer,
    as_consumer,
    compose,
    compose_all,
    consumer,
    invoke,
    make_safe,
)
from consumer_kit.drivers import for_each, for_each_entry, for_each_line
from consumer_kit.exceptions import CompositionError, ConsumerKitError, SourceReadError
from consumer_kit.models import DriveResult, ErrorInfo
from consumer_kit.protocols import Consumer, DriverCallback, ErrorSink
from consumer_kit.sinks import CollectingSink, logging_sink, stderr_sink

try:
    __version__ = version("consumer-kit")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "BaseConsumer",
    "CollectingSink",
    "ComposedConsumer",
    "CompositionError",
    "Consumer",
    "ConsumerKitError",
    "ConsumerLike",
    "DriveResult",
    "DriverCallback",
    "ErrorInfo",
    "ErrorSink",
    "FunctionConsumer",
    "SafeConsumer",
    "SourceReadError",
    "__version__",
    "as_consumer",
    "compose",
    "compose_all",
    "consumer",
    "for_each",
    "for_each_entry",
    "for_each_line",
    "invoke",
    "logging_sink",
    "make_safe",
    "stderr_sink",
]
