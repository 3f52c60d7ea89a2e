from __future__ import annotations

import sqlalchemy as sa

from relaycc.spec import NormalizedSpec
from relaycc.spec.normalize import CURSOR_LABEL

from .base import Operation, QueryParams, ONE, ZERO, NO_LIMIT
from .rows import RowsOperation
from .sort import get_sort_columns_with_direction
from .predicate import beyond_boundary, FORWARD, BACKWARD


class EdgesOperation(Operation):
    """ Edges operation: pick the rows of the current page

    Builds:
    * __forward__: window rows from the head, in natural order, LIMIT `first`
    * __backward__: window rows from the tail, in reverse order, LIMIT `last`. Only when `last` comes without `first`.
    * __head__: the last `last` rows of __forward__: for a bounded window
    * __edges__: __head__ UNION ALL __backward__

    The window is the rows after the `after` row and before the `before` row.
    Both scans are ordered and limited, so the database reads as many rows as the page has, not the whole window.
    Only one of them returns rows: the other one is cut off by its condition.
    The result is always in natural order.
    """
    rows_op: RowsOperation

    forward: sa.sql.CTE
    backward: sa.sql.CTE
    head: sa.sql.CTE
    edges: sa.sql.CTE

    def __init__(self, spec: NormalizedSpec, params: QueryParams, rows_op: RowsOperation):
        super().__init__(spec, params)
        self.rows_op = rows_op

        self.forward = self._forward_statement().cte('__forward__')
        self.backward = self._backward_statement().cte('__backward__')
        self.head = self._head_statement().cte('__head__')
        self.edges = sa.union_all(
            sa.select(self.head),
            sa.select(self.backward),
        ).cte('__edges__')

    __slots__ = 'rows_op', 'forward', 'backward', 'head', 'edges'

    def statement(self) -> sa.sql.Select:
        """ The edges query: cursor and projection of every row on the page, in natural order """
        return sa.select(
            self.edges.c[CURSOR_LABEL],
            *(self.edges.c[name] for name in self.spec.projection_names),
        ).order_by(
            *get_sort_columns_with_direction(self.edges.c, self.spec.sort_keys)
        )

    def window_statement(self, *, only_count: bool = False) -> sa.sql.Select:
        """ Rows between `after` and `before`, in no particular order

        Args:
            only_count: select `1` instead of the columns: for counting rows
        """
        rows = self.rows_op.rows()
        stmt = sa.select(ONE) if only_count else sa.select(rows)
        return stmt.select_from(rows).where(
            beyond_boundary(rows, self.rows_op.after, self.spec.sort_keys, towards=FORWARD),
            beyond_boundary(rows, self.rows_op.before, self.spec.sort_keys, towards=BACKWARD),
        )

    def _forward_statement(self) -> sa.sql.Select:
        """ Forward scan: `first` rows from the head. No limit when there's no `first` """
        first, last = self.params.first, self.params.last
        stmt = self.window_statement()
        return (
            stmt
            .where(sa.or_(first.is_not(None), last.is_(None)))
            .order_by(*get_sort_columns_with_direction(stmt.selected_columns, self.spec.sort_keys))
            .limit(sa.func.coalesce(first, NO_LIMIT))
        )

    def _backward_statement(self) -> sa.sql.Select:
        """ Backward scan: `last` rows from the tail, when `last` is given without `first` """
        first, last = self.params.first, self.params.last
        stmt = self.window_statement()
        return (
            stmt
            .where(first.is_(None), last.is_not(None))
            .order_by(*get_sort_columns_with_direction(stmt.selected_columns, self.spec.sort_keys, reverse=True))
            .limit(sa.func.coalesce(last, ZERO))
        )

    def _head_statement(self) -> sa.sql.Select:
        """ The last `last` rows of the forward scan: a bounded window. All of them when there's no `last` """
        return (
            sa.select(self.forward)
            .order_by(*get_sort_columns_with_direction(self.forward.c, self.spec.sort_keys, reverse=True))
            .limit(sa.func.coalesce(self.params.last, NO_LIMIT))
        )
