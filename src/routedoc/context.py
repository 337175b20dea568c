"""
The active route slot used by parameter declaration blocks.

While a block runs inside `active_route(route)`, parameters created with the
module level `parameter()` factory are appended to that route. The slot is
process wide and guarded by a single lock, so blocks from different threads
run one after another.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Tuple

logger = logging.getLogger(__name__)

_lock = threading.RLock()

# (route, ident of the thread that published it)
_slot: Optional[Tuple[Any, int]] = None


@contextmanager
def active_route(route: Any) -> Iterator[Any]:
    """Publish a route as the target of `parameter()` for the enclosed block.

    The slot is restored when the block exits, also when it raises. A nested
    block on the same thread targets its own route and hands the slot back to
    the outer route on exit.

    Args:
        route: The route new parameters should be attached to

    Yields:
        The same route
    """
    global _slot
    with _lock:
        previous = _slot
        _slot = (route, threading.get_ident())
        logger.debug("Entered parameter block for route %r", route)
        try:
            yield route
        finally:
            _slot = previous
            logger.debug("Left parameter block for route %r", route)


def current_route() -> Optional[Any]:
    """Return the route published by the calling thread, if any."""
    slot = _slot
    if slot is None:
        return None
    route, owner = slot
    if owner != threading.get_ident():
        return None
    return route
