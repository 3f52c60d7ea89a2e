""" Integration with GraphQL: Relay connections for graphql-core resolvers """

from .relay import relay_window_args, relay_connection, relay_connection_from_page
from .relay import ConnectionDict, EdgeDict, PageInfoDict
from .cursor import encode_cursor, decode_cursor
from .schema import graphql_relay_schema
