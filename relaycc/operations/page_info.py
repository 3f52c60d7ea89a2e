from __future__ import annotations

import sqlalchemy as sa

from relaycc.spec import NormalizedSpec
from relaycc.spec.normalize import CURSOR_LABEL

from .base import Operation, QueryParams, ONE
from .rows import RowsOperation
from .edges import EdgesOperation
from .sort import get_sort_columns_with_direction
from .predicate import beyond_boundary, FORWARD, BACKWARD


class PageInfoOperation(Operation):
    """ Page info operation: is there a next page? a previous page? where does this one start and end?

    Every flag reads a bounded number of rows: counting stops at `LIMIT n + 1`, EXISTS stops at the first row.
    """
    rows_op: RowsOperation
    edges_op: EdgesOperation

    def __init__(self, spec: NormalizedSpec, params: QueryParams, rows_op: RowsOperation, edges_op: EdgesOperation):
        super().__init__(spec, params)
        self.rows_op = rows_op
        self.edges_op = edges_op

    __slots__ = 'rows_op', 'edges_op'

    def statement(self) -> sa.sql.Select:
        """ The page info query: a single row with four columns """
        return sa.select(
            self.has_next_page().label('has_next_page'),
            self.has_previous_page().label('has_previous_page'),
            self.boundary_cursor().label('start_cursor'),
            self.boundary_cursor(last=True).label('end_cursor'),
        )

    def has_next_page(self) -> sa.sql.ColumnElement:
        """ Has next page?

        first=M: are there more than M rows in the window? Counts up to M+1 rows.
        before=C: is there any row after C?
        Otherwise: no; the page goes all the way to the end.
        """
        first, before = self.params.first, self.params.before

        return sa.case(
            (
                first.is_not(None),
                self._count_window_rows(limit=first + ONE) > first,
            ),
            (
                before.is_not(None),
                self._row_beyond(self.rows_op.before, towards=FORWARD),
            ),
            else_=sa.false(),
        )

    def has_previous_page(self) -> sa.sql.ColumnElement:
        """ Has previous page?

        last=N: are there more than N rows in the window? Counts up to N+1 rows.
        first=M, last=N: a bounded window. It only looks at the first M rows of the window,
            and checks whether any of them were dropped from the head: are there more than N of them?
            Rows of the window beyond the first M do not count.
        after=C: is there any row before C?
        Otherwise: no; the page starts at the beginning.
        """
        first, last, after = self.params.first, self.params.last, self.params.after
        forward = self.edges_op.forward

        return sa.case(
            (
                sa.and_(last.is_not(None), first.is_(None)),
                self._count_window_rows(limit=last + ONE) > last,
            ),
            (
                last.is_not(None),
                sa.select(sa.func.count()).select_from(forward).scalar_subquery() > last,
            ),
            (
                after.is_not(None),
                self._row_beyond(self.rows_op.after, towards=BACKWARD),
            ),
            else_=sa.false(),
        )

    def boundary_cursor(self, last: bool = False) -> sa.sql.ColumnElement:
        """ Cursor of the first (or the last) edge. NULL when there are no edges """
        edges = self.edges_op.edges
        return (
            sa.select(edges.c[CURSOR_LABEL])
            .order_by(*get_sort_columns_with_direction(edges.c, self.spec.sort_keys, reverse=last))
            .limit(ONE)
            .scalar_subquery()
        )

    def _count_window_rows(self, *, limit: sa.sql.ColumnElement) -> sa.sql.ColumnElement:
        """ Count window rows, but no more than `limit` """
        window = self.edges_op.window_statement(only_count=True).limit(limit).subquery()
        return sa.select(sa.func.count()).select_from(window).scalar_subquery()

    def _row_beyond(self, boundary: sa.sql.CTE, *, towards: int) -> sa.sql.ColumnElement:
        """ Condition: there is a row beyond the boundary row """
        rows = self.rows_op.rows()
        return (
            sa.select(rows.c[CURSOR_LABEL])
            .where(beyond_boundary(rows, boundary, self.spec.sort_keys, towards=towards))
            .exists()
        )
