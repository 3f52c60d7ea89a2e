""" Tools for describing what to paginate

PaginationSpec and SortKey only describe the pagination, as given by the developer.
normalize_spec() validates them and converts every part into SqlAlchemy expressions.
"""

from .sort import SortKey, SortingDirection
from .pagination_spec import PaginationSpec
from .normalize import normalize_spec, NormalizedSpec, NormalizedSortKey
