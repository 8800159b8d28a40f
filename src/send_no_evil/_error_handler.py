"""Error handling for the host-facing send hook."""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar

from send_no_evil.exceptions import ConfigError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def fail_open(func: Callable[..., T]) -> Callable[..., T | None]:
    """Wrap a send hook so no exception reaches the host's send path.

    Configuration problems are logged as warnings; anything else is logged with
    its traceback. Either way the wrapper returns None and the send proceeds.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T | None:
        try:
            return func(*args, **kwargs)
        except ConfigError as e:
            logger.warning("Send check skipped, configuration unavailable: %s", e)
            return None
        except Exception:
            logger.exception("Unexpected error in send check %s", func.__name__)
            return None

    return wrapper
