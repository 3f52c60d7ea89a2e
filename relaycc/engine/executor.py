""" Execute a CompiledQuery on an SqlAlchemy connection

This is a thin layer: it hands a statement and its parameters to the connection, and decodes the results.
Errors from the database are not handled here: they propagate as they are.
"""

from __future__ import annotations

import logging

import sqlalchemy as sa

from relaycc.args import WindowArgs

from .compiler import CompiledQuery
from .page import Edge, PageInfo, Page


logger = logging.getLogger(__name__)


def fetch_edges(connection: sa.engine.Connection, query: CompiledQuery, args: WindowArgs) -> list[Edge]:
    """ Execute the edges query: get rows on the page, in natural order """
    res = _execute(connection, query.edges, query.params(args), 'edges')
    return [Edge.from_row(row) for row in res]


def fetch_page_info(connection: sa.engine.Connection, query: CompiledQuery, args: WindowArgs) -> PageInfo:
    """ Execute the page info query """
    res = _execute(connection, query.page_info, query.params(args), 'page info')
    return PageInfo.from_row(res.one())


def fetch_total_count(connection: sa.engine.Connection, query: CompiledQuery, args: WindowArgs = None) -> int:
    """ Execute the total count query

    Window arguments are ignored: only extra parameters are used
    """
    params = dict(args.extra) if args is not None else {}
    res = _execute(connection, query.total_count, params, 'total count')
    return res.scalar_one()


def fetch_page(connection: sa.engine.Connection, query: CompiledQuery, args: WindowArgs, *, total_count: bool = False) -> Page:
    """ Execute the queries: get edges, page info, and optionally, the total count """
    return Page(
        edges=fetch_edges(connection, query, args),
        page_info=fetch_page_info(connection, query, args),
        total_count=fetch_total_count(connection, query, args) if total_count else None,
    )


def _execute(connection: sa.engine.Connection, stmt: sa.sql.Select, params: dict, name: str) -> sa.engine.Result:
    logger.debug('Executing the %s query with %r', name, params)
    return connection.execute(stmt, params)
