from collections import abc

import sqlalchemy as sa

from relaycc.spec import NormalizedSortKey, SortingDirection


def get_sort_columns_with_direction(columns: sa.sql.ColumnCollection, sort_keys: abc.Iterable[NormalizedSortKey], *, reverse: bool = False) -> abc.Iterator[sa.sql.ColumnElement]:
    """ Get the list of expressions to sort by

    Args:
        columns: the columns to pick labeled sort keys from: `cte.c`, or `select.selected_columns`
        sort_keys: the sort keys
        reverse: sort in the opposite direction
    """
    for key in sort_keys:
        direction = key.direction.reversed if reverse else key.direction
        column = columns[key.label]

        # Make a sorting expression, depending on the direction
        if direction == SortingDirection.DESC:
            yield column.desc()
        else:
            yield column.asc()
