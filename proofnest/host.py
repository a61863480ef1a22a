"""
Host boundary collaborators: caller identity and clock.

The registry core never looks these up itself. The HTTP layer resolves them
once per request and passes them in as a ``CallContext``.
"""

import logging
import time
from dataclasses import dataclass
from threading import Lock

from .config import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallContext:
    """Identity and time of the call being served.

    Attributes:
        caller: Opaque principal of the caller.
        timestamp: Call time in nanoseconds since the Unix epoch.
    """

    caller: str
    timestamp: int


class MonotonicClock:
    """
    Wall clock in nanoseconds that never goes backwards.

    If the system clock steps back, the last returned value is repeated
    until real time catches up.
    """

    def __init__(self, source=time.time_ns):
        self._source = source
        self._last = 0
        self._lock = Lock()

    def now(self) -> int:
        with self._lock:
            current = self._source()
            if current < self._last:
                logger.debug(f"System clock went backwards by {self._last - current}ns")
                current = self._last
            self._last = current
            return current


# Global clock instance
clock = MonotonicClock()


def caller_from_request(request) -> str:
    """
    Resolve the caller principal for an incoming request.

    The header named by ``config.CALLER_HEADER`` is only read when
    ``config.TRUST_CALLER_HEADER`` is set, i.e. when a fronting proxy
    authenticates callers and overwrites the header. Otherwise, and for
    requests without the header, the caller is ``config.ANONYMOUS_PRINCIPAL``.

    Args:
        request: Flask request object

    Returns:
        Caller principal as a string
    """
    if not config.TRUST_CALLER_HEADER:
        return config.ANONYMOUS_PRINCIPAL
    caller = request.headers.get(config.CALLER_HEADER, "").strip()
    if not caller:
        return config.ANONYMOUS_PRINCIPAL
    return caller


def context_from_request(request) -> CallContext:
    """Build the ``CallContext`` for ``request`` using the global clock."""
    return CallContext(caller=caller_from_request(request), timestamp=clock.now())
