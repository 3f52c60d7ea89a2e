""" Compile and execute pagination queries

Overview:

* compile_query() turns a PaginationSpec into a CompiledQuery: three SqlAlchemy statements
* fetch_*() functions execute them on a connection and decode the results
"""

from .compiler import compile_query, compile_query_cached, CompiledQuery, QueryText
from .settings import PagerSettings
from .page import Page, PageInfo, Edge
from .executor import fetch_edges, fetch_page_info, fetch_total_count, fetch_page
