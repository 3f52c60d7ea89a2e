""" Compile a PaginationSpec into three statements: edges, page info, total count """

from __future__ import annotations

import dataclasses
import functools
import logging
from functools import cached_property
from typing import NamedTuple, Optional

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from relaycc.args import WindowArgs, PARAMETER_SLOTS
from relaycc.spec import PaginationSpec, normalize_spec
from relaycc.operations import QueryParams, RowsOperation, EdgesOperation, PageInfoOperation

from .settings import PagerSettings


logger = logging.getLogger(__name__)


# The dialect to render SQL text with, when none is given
DEFAULT_DIALECT: sa.engine.interfaces.Dialect = postgresql.dialect()  # type: ignore[misc]


class QueryText(NamedTuple):
    """ SQL text of the three statements """
    edges: str
    page_info: str
    total_count: str


@dataclasses.dataclass(frozen=True)
class CompiledQuery:
    """ Compiled pagination query: three statements sharing the same four parameters

    The object is immutable: compile it once, and use it for every request.

    Parameters, by name, in slot order: `first`, `after`, `last`, `before`.
    Use params() to get them from WindowArgs.

    Example:
        query = compile_query(spec)
        rows = connection.execute(query.edges, query.params(window_args(first=10)))
    """
    # The PaginationSpec it was compiled from
    spec: PaginationSpec

    # Settings: default and max limits
    settings: PagerSettings

    # Edges: cursor + projection of every row on the page
    edges: sa.sql.Select

    # Page info: a single row (has_next_page, has_previous_page, start_cursor, end_cursor)
    page_info: sa.sql.Select

    # Total count: a single row (total_count), independent of the window arguments
    total_count: sa.sql.Select

    # Parameter names, in slot order
    parameter_slots: tuple[str, ...] = PARAMETER_SLOTS

    @cached_property
    def sql(self) -> QueryText:
        """ SQL text, default dialect """
        return self.text()

    def text(self, dialect: Optional[sa.engine.interfaces.Dialect] = None) -> QueryText:
        """ Render the three statements as SQL text

        Bind parameters are rendered as named placeholders: the way the dialect does it.
        """
        dialect = dialect or DEFAULT_DIALECT
        return QueryText(
            edges=str(self.edges.compile(dialect=dialect)),
            page_info=str(self.page_info.compile(dialect=dialect)),
            total_count=str(self.total_count.compile(dialect=dialect)),
        )

    def params(self, args: WindowArgs) -> dict:
        """ Get bind parameters for a request. Applies settings. """
        return self.settings.get_final_args(args).params()


def compile_query(spec: PaginationSpec, settings: Optional[PagerSettings] = None) -> CompiledQuery:
    """ Compile a PaginationSpec into a CompiledQuery

    This is a pure function: the same spec gives the same statements.

    Raises:
        exc.SpecError: the PaginationSpec is malformed
    """
    normalized = normalize_spec(spec)
    params = QueryParams.for_spec(normalized)

    # Operations
    rows_op = RowsOperation(normalized, params)
    edges_op = EdgesOperation(normalized, params, rows_op)
    page_info_op = PageInfoOperation(normalized, params, rows_op, edges_op)

    # Done
    query = CompiledQuery(
        spec=spec,
        settings=settings or DEFAULT_SETTINGS,
        edges=edges_op.statement(),
        page_info=page_info_op.statement(),
        total_count=rows_op.total_count_statement(),
    )
    logger.debug('Compiled pagination query: %r', spec.export())
    return query


@functools.lru_cache(maxsize=None)
def compile_query_cached(spec: PaginationSpec, settings: Optional[PagerSettings] = None) -> CompiledQuery:
    """ Compile a PaginationSpec, once """
    return compile_query(spec, settings)


DEFAULT_SETTINGS = PagerSettings()
