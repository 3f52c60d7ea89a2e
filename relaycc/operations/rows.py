from __future__ import annotations

import sqlalchemy as sa

from relaycc.spec import NormalizedSpec
from relaycc.spec.normalize import CURSOR_LABEL

from .base import Operation, QueryParams, ONE


class RowsOperation(Operation):
    """ Rows operation: the source rows, and the boundary rows

    Builds:
    * rows(): every row matching the filter, with sort keys and the cursor as labeled columns
    * __after__, __before__: the rows pointed to by the `after` and `before` cursors (zero or one row)
    * the total count statement

    Rows are not a CTE: a CTE referenced many times gets materialized, and every row of the table would be computed.
    As a subquery, it gets inlined: the database pushes the filter, ORDER BY, and LIMIT down into the source.
    """
    # SELECT ... FROM source
    rows_statement: sa.sql.Select

    # Boundary rows
    after: sa.sql.CTE
    before: sa.sql.CTE

    def __init__(self, spec: NormalizedSpec, params: QueryParams):
        super().__init__(spec, params)

        self.rows_statement = self._rows_statement()
        self.after = self._boundary_row(self.params.after).cte('__after__')
        self.before = self._boundary_row(self.params.before).cte('__before__')

    __slots__ = 'rows_statement', 'after', 'before'

    def rows(self) -> sa.sql.Subquery:
        """ Rows matching the filter: a new subquery every time """
        return self.rows_statement.subquery()

    def total_count_statement(self) -> sa.sql.Select:
        """ Count rows matching the filter. Ignores the window arguments. """
        return sa.select(sa.func.count().label('total_count')).select_from(self.rows())

    def _rows_statement(self) -> sa.sql.Select:
        """ SELECT sort keys, cursor, projection FROM source WHERE filter GROUP BY ... """
        stmt = sa.select(
            *(key.expression.label(key.label) for key in self.spec.sort_keys),
            self.spec.cursor.label(CURSOR_LABEL),
            *self.spec.projection,
        ).select_from(self.spec.source)

        if self.spec.filter is not None:
            stmt = stmt.where(self.spec.filter)

        if self.spec.group_by:
            stmt = stmt.group_by(*self.spec.group_by)

        return stmt

    def _boundary_row(self, cursor: sa.sql.BindParameter) -> sa.sql.Select:
        """ The row identified by the cursor: zero or one row """
        rows = self.rows()
        return (
            sa.select(rows)
            .where(rows.c[CURSOR_LABEL] == cursor)
            .limit(ONE)
        )
