""" Window arguments: `first`, `after`, `last`, `before` of a single request """

from __future__ import annotations

import dataclasses
from collections import abc
from types import MappingProxyType
from typing import Optional

from relaycc import exc
from relaycc.typing import CursorValue


# The parameter contract: names of bind parameters, in slot order
# [1] = first (forward count), [2] = after (cursor), [3] = last (backward count), [4] = before (cursor)
PARAMETER_SLOTS = ('first', 'after', 'last', 'before')


@dataclasses.dataclass(frozen=True)
class WindowArgs:
    """ Pagination arguments of a single request

    The object is immutable: every builder method returns a new object.
    Make a new one for every request.

    Example:
        args = WindowArgs().first(10).after(cursor)
    """
    # How many rows to take from the head of the window
    forward_count: Optional[int] = None

    # Cursor of the row to start after
    after_cursor: Optional[CursorValue] = None

    # How many rows to take from the tail of the window
    backward_count: Optional[int] = None

    # Cursor of the row to stop before
    before_cursor: Optional[CursorValue] = None

    # Additional bind parameters: used by the textual filter or source
    extra: abc.Mapping = dataclasses.field(default_factory=dict)

    def __post_init__(self):
        _validate_count('first', self.forward_count)
        _validate_count('last', self.backward_count)

        # Extra parameters must not overwrite the slots
        conflicts = set(self.extra) & set(PARAMETER_SLOTS)
        if conflicts:
            raise exc.ArgumentError(f'Extra parameters conflict with pagination parameters: {sorted(conflicts)}')

        # Read-only copy
        object.__setattr__(self, 'extra', MappingProxyType(dict(self.extra)))

    def __hash__(self):
        return hash((self.forward_count, self.after_cursor, self.backward_count, self.before_cursor, tuple(self.extra.items())))

    def first(self, count: Optional[int]) -> WindowArgs:
        """ Get `count` rows from the beginning """
        return dataclasses.replace(self, forward_count=count)

    def after(self, cursor: Optional[CursorValue]) -> WindowArgs:
        """ Start after the row identified by `cursor` """
        return dataclasses.replace(self, after_cursor=cursor)

    def last(self, count: Optional[int]) -> WindowArgs:
        """ Get `count` rows from the end """
        return dataclasses.replace(self, backward_count=count)

    def before(self, cursor: Optional[CursorValue]) -> WindowArgs:
        """ Stop before the row identified by `cursor` """
        return dataclasses.replace(self, before_cursor=cursor)

    def with_extra(self, **params) -> WindowArgs:
        """ Add extra bind parameters """
        return dataclasses.replace(self, extra={**self.extra, **params})

    def slots(self) -> tuple:
        """ Get values for the parameter slots, in order """
        return (self.forward_count, self.after_cursor, self.backward_count, self.before_cursor)

    def params(self) -> dict:
        """ Get bind parameters: the slots by name, and the extras """
        return {
            **self.extra,
            **dict(zip(PARAMETER_SLOTS, self.slots())),
        }


def window_args(first: int = None, after: CursorValue = None, last: int = None, before: CursorValue = None, **extra) -> WindowArgs:
    """ Make WindowArgs from Relay-style arguments

    Example:
        window_args(first=10, after=cursor)
        window_args(last=10, before=cursor, owner_id=1)
    """
    return WindowArgs(
        forward_count=first,
        after_cursor=after,
        backward_count=last,
        before_cursor=before,
        extra=extra,
    )


def _validate_count(name: str, count: Optional[int]):
    if count is None:
        return

    # NOTE: bool is a subclass of int
    if isinstance(count, bool) or not isinstance(count, int):
        raise exc.ArgumentError(f'"{name}" must be an integer, got {type(count).__name__}')

    if count < 0:
        raise exc.ArgumentError(f'"{name}" must not be negative, got {count}')
