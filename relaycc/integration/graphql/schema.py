""" SDL for the Relay types: `PageInfo`. Concatenate it with your own schema """

import os.path

with open(os.path.join(os.path.dirname(__file__), 'relay.graphql'), 'rt') as f:
    graphql_relay_schema = f.read()
