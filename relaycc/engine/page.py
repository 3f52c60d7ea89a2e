""" Page: results of a paginated query """

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, NamedTuple

from relaycc.spec.normalize import CURSOR_LABEL
from relaycc.typing import CursorValue, SARowDict


class Edge(NamedTuple):
    """ A row on the page, with its cursor """
    cursor: CursorValue
    node: SARowDict

    @classmethod
    def from_row(cls, row) -> Edge:
        """ Split a row of the edges query into (cursor, node) """
        mapping = row._mapping
        return cls(
            cursor=mapping[CURSOR_LABEL],
            node={k: v for k, v in mapping.items() if k != CURSOR_LABEL},
        )


@dataclass(frozen=True)
class PageInfo:
    """ Page info: is there more? where are the boundaries? """
    # Do we have any next page?
    has_next_page: bool

    # Do we have any prev page?
    has_previous_page: bool

    # Cursor of the first edge
    start_cursor: Optional[CursorValue] = None

    # Cursor of the last edge
    end_cursor: Optional[CursorValue] = None

    @classmethod
    def from_row(cls, row) -> PageInfo:
        """ Read the single row of the page info query """
        return cls(
            has_next_page=bool(row.has_next_page),
            has_previous_page=bool(row.has_previous_page),
            start_cursor=row.start_cursor,
            end_cursor=row.end_cursor,
        )


@dataclass(frozen=True)
class Page:
    """ A page: edges, page info, and optionally, the total count """
    edges: list[Edge]
    page_info: PageInfo
    total_count: Optional[int] = None

    @property
    def nodes(self) -> list[SARowDict]:
        return [edge.node for edge in self.edges]
