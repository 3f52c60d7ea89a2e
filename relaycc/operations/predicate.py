""" Keyset predicates: compare rows to a boundary row, in the declared sort order """

from __future__ import annotations

import operator
from collections import abc

import sqlalchemy as sa

from relaycc.spec import NormalizedSortKey, SortingDirection
from relaycc.spec.normalize import CURSOR_LABEL


# Scan direction
FORWARD, BACKWARD = +1, -1


def keyset_predicate(columns: abc.Sequence[sa.sql.ColumnElement],
                     directions: abc.Sequence[SortingDirection],
                     boundary: abc.Sequence[sa.sql.ColumnElement],
                     *, towards: int) -> sa.sql.ColumnElement:
    """ Build a condition: "row is strictly beyond the boundary row", in the declared sort order

    With keys k1..kn, it is:

        (k1 > b1) OR (k1 = b1 AND k2 > b2) OR ... OR (k1 = b1 AND ... AND kn > bn)

    where `>` becomes `<` for DESC keys, and everything is the other way around when looking BACKWARD.
    Tuple comparison `(k1, k2) > (b1, b2)` can't do that: it only works when all keys have the same direction.

    Args:
        columns: Row values of sort keys
        directions: Sorting direction for every key
        boundary: Boundary row values for every key
        towards: FORWARD: rows after the boundary; BACKWARD: rows before the boundary
    """
    assert len(columns) == len(directions) == len(boundary)

    # No keys: no order; nothing is beyond
    if not columns:
        return sa.false()

    disjuncts = []
    for i, (column, direction, value) in enumerate(zip(columns, directions, boundary)):
        # All preceding keys are equal to the boundary
        equal_prefix = [columns[j] == boundary[j] for j in range(i)]

        # This key is strictly beyond
        op = operator.gt if (direction == SortingDirection.ASC) == (towards == FORWARD) else operator.lt

        disjuncts.append(sa.and_(*equal_prefix, op(column, value)))

    return sa.or_(*disjuncts)


def beyond_boundary(rows: sa.sql.FromClause, boundary: sa.sql.FromClause, sort_keys: abc.Sequence[NormalizedSortKey], *, towards: int) -> sa.sql.ColumnElement:
    """ Condition: rows are strictly beyond the boundary row. No filtering if there's no boundary row.

    When the cursor is not given, or does not point to an existing row, the condition is always true.

    Args:
        rows: The rows to filter
        boundary: A CTE with zero or one row: the boundary
        sort_keys: The sort keys. Both `rows` and `boundary` have them as labeled columns
        towards: FORWARD or BACKWARD
    """
    predicate = keyset_predicate(
        [rows.c[key.label] for key in sort_keys],
        [key.direction for key in sort_keys],
        [sa.select(boundary.c[key.label]).scalar_subquery() for key in sort_keys],
        towards=towards,
    )

    # Unknown cursor: no filtering
    return sa.or_(~boundary_exists(boundary), predicate)


def boundary_exists(boundary: sa.sql.FromClause) -> sa.sql.ColumnElement:
    """ Condition: the boundary row exists """
    return sa.select(boundary.c[CURSOR_LABEL]).exists()
