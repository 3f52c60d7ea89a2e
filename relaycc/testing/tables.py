""" Temporary tables with test data """

from __future__ import annotations

from collections import abc
from contextlib import contextmanager
from typing import Optional, Union

import sqlalchemy as sa


@contextmanager
def created_tables(bind: EngineOrConnection, metadata: Union[sa.MetaData, type], data: Optional[abc.Mapping[TableOrModel, abc.Sequence[dict]]] = None):
    """ Create tables, fill them with rows, drop them when the context is quit

    Example:
        Base = sa.orm.declarative_base()

        with created_tables(connection, Base, {Town: [dict(id=1, name='Berlin')]}):
            ...

    Args:
        bind: Engine or Connection
        metadata: MetaData, or a declarative base
        data: Rows to insert, per model (or table). Empty lists are skipped.
    """
    metadata = get_metadata(metadata)
    metadata.create_all(bind=bind)

    try:
        for table, rows in (data or {}).items():
            if rows:
                insert(bind, table, *rows)
        yield
    finally:
        metadata.drop_all(bind=bind, tables=list(metadata.tables.values()))


def insert(bind: EngineOrConnection, table: TableOrModel, *values: dict):
    """ INSERT many rows with a single statement

    Example:
        insert(connection, Town,
            dict(id=1, name='Berlin'),
            dict(id=2, name='Paris'),
        )
    """
    assert values, 'Nothing to insert'
    bind.execute(sa.insert(table).values(list(values)))


def get_metadata(obj: Union[sa.MetaData, type]) -> sa.MetaData:
    """ Get MetaData from a MetaData object or a declarative base """
    if isinstance(obj, sa.MetaData):
        return obj

    metadata = getattr(obj, 'metadata', None)
    if isinstance(metadata, sa.MetaData):
        return metadata

    raise TypeError(f'Expected MetaData or a declarative base, got {obj!r}')


EngineOrConnection = Union[sa.engine.Engine, sa.engine.Connection]
TableOrModel = Union[sa.Table, type]
