"""Capability lookup on arbitrary receiver objects.

Calendar and time zone layers accept user-supplied objects and call
optional methods on them. MethodRecord looks those methods up once,
records which are present, and calls them later.

Examples:
    >>> class Calendar:
    ...     def date_until(self, one, two):
    ...         return two - one
    >>> record = MethodRecord(Calendar(), ["date_until", "date_add"])
    >>> record.get("date_add") is None
    True
    >>> record.call("date_until", 1, 5)
    4
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable

from timeduration.errors import InvalidArgumentError


def get_method(receiver: object, name: str) -> Callable[..., Any] | None:
    """Look up a callable attribute on receiver.

    Args:
        receiver: The object to inspect.
        name: Attribute name.

    Returns:
        The bound method, or None if the attribute is absent, None, or
        not callable.
    """
    method = getattr(receiver, name, None)
    if not callable(method):
        return None
    return method


class MethodRecord:
    """The looked-up methods of one receiver.

    Attributes:
        receiver: The inspected object.
    """

    __slots__ = ("receiver", "_methods")

    def __init__(self, receiver: object, methods: Iterable[str] = ()) -> None:
        self.receiver = receiver
        self._methods: dict[str, Callable[..., Any] | None] = {}
        for name in methods:
            self.lookup(name)

    def lookup(self, name: str) -> None:
        """Look up name on the receiver and record the result."""
        self._methods[name] = get_method(self.receiver, name)

    def get(self, name: str) -> Callable[..., Any] | None:
        """Return the recorded method, or None if absent or never looked up."""
        return self._methods.get(name)

    def __getitem__(self, name: str) -> Callable[..., Any] | None:
        return self._methods[name]

    def __contains__(self, name: object) -> bool:
        return name in self._methods

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Call a recorded method.

        Raises:
            InvalidArgumentError: If the receiver has no such method.
        """
        method = self._methods.get(name)
        if method is None:
            raise InvalidArgumentError(
                f"{type(self.receiver).__name__} has no method {name!r}"
            )
        return method(*args, **kwargs)

    def __repr__(self) -> str:
        return f"MethodRecord({self.receiver!r}, {list(self._methods)!r})"


__all__ = [
    "get_method",
    "MethodRecord",
]
