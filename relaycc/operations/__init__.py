""" Operations: parts of the pagination query

Every operation takes the normalized spec and builds some CTEs and statements out of it.
"""

from .base import Operation, QueryParams
from .predicate import keyset_predicate, beyond_boundary, FORWARD, BACKWARD
from .rows import RowsOperation
from .edges import EdgesOperation
from .page_info import PageInfoOperation
