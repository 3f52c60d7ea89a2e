__version__ = __import__('importlib.metadata').metadata.version('relaycc')

from .spec import PaginationSpec, SortKey, SortingDirection
from .args import WindowArgs, window_args, PARAMETER_SLOTS
from .engine import compile_query, compile_query_cached, CompiledQuery, QueryText
from .engine import PagerSettings
from .engine import Page, PageInfo, Edge
from .engine import fetch_edges, fetch_page_info, fetch_total_count, fetch_page

from . import exc
