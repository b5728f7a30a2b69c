"""Driver observer notification."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Literal, get_args

from consumer_kit.protocols.driver import DriverCallback

DriverHook = Literal["on_item_start", "on_item_end", "on_item_error", "on_drive_end"]
DRIVER_HOOKS: frozenset[str] = frozenset(get_args(DriverHook))


def notify_observers(
    observers: Sequence[DriverCallback],
    hook: DriverHook,
    *args: Any,
    logger: logging.Logger | None = None,
    log_level: int = logging.WARNING,
) -> None:
    """Call ``hook`` on every observer that implements it.

    Observers may implement any subset of the ``DriverCallback`` hooks.
    An observer that raises is logged (when ``logger`` is given) and the
    remaining observers are still notified.

    Parameters:
        observers: ``DriverCallback`` implementations, notified in order.
        hook: Name of the ``DriverCallback`` hook to call.
        *args: Positional arguments forwarded to the hook.
        logger: Optional logger for recording observer failures.
        log_level: Log level for failure messages (default ``WARNING``).

    Raises:
        ValueError: If ``hook`` is not a ``DriverCallback`` hook name.
    """
    if hook not in DRIVER_HOOKS:
        msg = f"Unknown driver hook {hook!r}; expected one of {sorted(DRIVER_HOOKS)}"
        raise ValueError(msg)
    for observer in observers:
        fn = getattr(observer, hook, None)
        if fn is None or not callable(fn):
            continue
        try:
            fn(*args)
        except Exception:
            if logger:
                logger.log(log_level, "Driver observer %r.%s failed", observer, hook, exc_info=True)
