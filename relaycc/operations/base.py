from __future__ import annotations

from typing import NamedTuple

import sqlalchemy as sa

from relaycc.args import PARAMETER_SLOTS
from relaycc.spec import NormalizedSpec


# Numbers for LIMIT clauses. Rendered as is, they do not become bind parameters
ONE = sa.literal_column('1')
ZERO = sa.literal_column('0')

# LIMIT for "no limit": the largest BIGINT. LIMIT NULL is an error in some databases
NO_LIMIT = sa.literal_column(str(2 ** 63 - 1))


class QueryParams(NamedTuple):
    """ Bind parameters: the four slots shared by every statement """
    first: sa.sql.BindParameter
    after: sa.sql.BindParameter
    last: sa.sql.BindParameter
    before: sa.sql.BindParameter

    @classmethod
    def for_spec(cls, spec: NormalizedSpec) -> QueryParams:
        first, after, last, before = PARAMETER_SLOTS
        return cls(
            first=sa.bindparam(first, type_=sa.Integer),
            after=sa.bindparam(after, type_=spec.cursor_type),
            last=sa.bindparam(last, type_=sa.Integer),
            before=sa.bindparam(before, type_=spec.cursor_type),
        )


class Operation:
    """ Base for all operations: a part of the query that builds some statements """
    spec: NormalizedSpec
    params: QueryParams

    def __init__(self, spec: NormalizedSpec, params: QueryParams):
        self.spec = spec
        self.params = params

    __slots__ = 'spec', 'params'
