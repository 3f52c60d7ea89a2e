""" Tools for testing """

from .tables import created_tables, insert
from .stmt_text import stmt2sql
from .query_logger import QueryLogger
