""" Relay pagination """

from __future__ import annotations

from typing import Optional, TypedDict, Union

import sqlalchemy as sa

from relaycc.args import WindowArgs, window_args
from relaycc.engine import CompiledQuery, Page, fetch_page
from .cursor import encode_cursor, decode_cursor


def relay_window_args(first: int = None, after: str = None, last: int = None, before: str = None, **extra) -> WindowArgs:
    """ Make WindowArgs from the arguments of a Relay connection field

    Cursors are opaque strings: they're decoded here.

    Example:
        def resolve_towns(root, info, **kwargs):
            args = relay_window_args(**kwargs)

    Raises:
        exc.ArgumentError: invalid values, damaged cursors
    """
    return window_args(
        first=first,
        after=decode_cursor(after) if after is not None else None,
        last=last,
        before=decode_cursor(before) if before is not None else None,
        **extra
    )


def relay_connection(connection: sa.engine.Connection, query: CompiledQuery, args: WindowArgs, *, total_count: bool = False) -> ConnectionDict:
    """ Execute the query and get results in Relay paginated format

    Example:
        def resolve_towns(root, info, **kwargs):
            return relay_connection(connection, towns_query, relay_window_args(**kwargs))
    """
    page = fetch_page(connection, query, args, total_count=total_count)
    return relay_connection_from_page(page)


def relay_connection_from_page(page: Page) -> ConnectionDict:
    """ Convert a Page into a Relay Connection """
    page_info = page.page_info
    connection: ConnectionDict = {
        'edges': [
            {'node': edge.node, 'cursor': encode_cursor(edge.cursor)}
            for edge in page.edges
        ],
        'pageInfo': {
            'hasNextPage': page_info.has_next_page,
            'hasPreviousPage': page_info.has_previous_page,
            'startCursor': _encode_optional_cursor(page_info.start_cursor),
            'endCursor': _encode_optional_cursor(page_info.end_cursor),
        },
    }

    if page.total_count is not None:
        connection['totalCount'] = page.total_count

    return connection


def _encode_optional_cursor(value) -> Optional[str]:
    return encode_cursor(value) if value is not None else None


class ConnectionDict(TypedDict, total=False):
    """ Relay Connection type: paginated list """
    edges: list[EdgeDict]
    pageInfo: PageInfoDict
    totalCount: int


class EdgeDict(TypedDict):
    """ Relay Edge type: paginated item """
    node: Union[object, dict]
    cursor: str


class PageInfoDict(TypedDict):
    """ Relay Page Info """
    hasPreviousPage: bool
    hasNextPage: bool
    startCursor: Optional[str]
    endCursor: Optional[str]
