""" Pagination spec: what to paginate, and how to sort it """

from __future__ import annotations

from collections import abc
from dataclasses import dataclass
from typing import Optional, Union

import sqlalchemy as sa

from relaycc.typing import SQLExpression, SQLSource, Projection
from .sort import SortKey


@dataclass(frozen=True)
class PaginationSpec:
    """ Declarative pagination spec: compiled once into a CompiledQuery

    Example:
        spec = PaginationSpec(
            source='town',
            projection='id, name, created',
            cursor='id',
            sort_keys=['created-', 'id+'],
            filter='country = :country',
        )

    The `cursor`, combined with `sort_keys`, must yield a total order across all the rows matching `filter`:
    that is, the cursor must be unique.
    """
    # Table to paginate: table name, SQL text, a Table, or a model
    source: SQLSource

    # Columns to select: a comma-separated string, or a list of expressions
    projection: Projection

    # Cursor expression: unique, comparable, identifies every row
    cursor: SQLExpression

    # Sort keys, ordered
    # The cursor is used as the final tiebreak: if it's not among the keys, it's added in ASC order
    sort_keys: abc.Sequence[Union[SortKey, SQLExpression, tuple]] = ()

    # Optional WHERE condition
    # A string is textual SQL: every `:name` is a bind parameter, even inside a string literal.
    # Escape literal colons with a backslash: r"tag = 'a\:b'"
    filter: Optional[SQLExpression] = None

    # Optional JOIN clause, added to a textual `source`
    join: Optional[str] = None

    # Optional GROUP BY clause
    group_by: Optional[Union[str, abc.Sequence[SQLExpression]]] = None

    # The type of cursor values. Used for `after` and `before` parameters
    cursor_type: Optional[sa.types.TypeEngine] = None

    def __post_init__(self):
        # Make everything immutable & hashable
        if isinstance(self.sort_keys, (str, SortKey)):
            sort_keys = (self.sort_keys,)
        else:
            sort_keys = self.sort_keys
        object.__setattr__(self, 'sort_keys', tuple(SortKey.parse(key) for key in sort_keys))

        if isinstance(self.projection, abc.Sequence) and not isinstance(self.projection, str):
            object.__setattr__(self, 'projection', tuple(self.projection))

        if isinstance(self.group_by, abc.Sequence) and not isinstance(self.group_by, str):
            object.__setattr__(self, 'group_by', tuple(self.group_by))

    def export(self) -> dict:
        """ Export the PaginationSpec as a dict of strings: for logging and debugging """
        return {
            'source': str(self.source),
            'projection': str(self.projection),
            'cursor': str(self.cursor),
            'sort_keys': [key.export() for key in self.sort_keys],
            'filter': None if self.filter is None else str(self.filter),
        }
