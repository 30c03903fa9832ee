"""Decorator that makes sure the object is 'connected' according to it's connected predicate."""

from functools import wraps
from typing import Any, Callable, TypeVar, cast

from log import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def connection(f: F) -> F:
    """Decorate a method so the storage is (re)connected before the call.

    The decorated object needs to provide `is_open()` and `connect()` methods.
    Errors raised by `connect()` are propagated to the caller. Several threads
    can find the storage closed at once, so `connect()` has to serialize the
    reconnection and do nothing when the storage is open already.

    Example:
    ```python
    @connection
    def find_by_account(self, account_id: str) -> Optional[Credential]:
        ...
    ```
    """

    @wraps(f)
    def wrapper(storage: Any, *args: Any, **kwargs: Any) -> Any:
        if not storage.is_open():
            logger.warning(
                "%s is not connected, reconnecting", type(storage).__name__
            )
            storage.connect()
        return f(storage, *args, **kwargs)

    return cast(F, wrapper)
