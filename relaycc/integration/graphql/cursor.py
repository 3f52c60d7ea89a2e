from __future__ import annotations

import base64
import binascii
import json

from relaycc import exc
from relaycc.typing import CursorValue


# Prefix for opaque cursors: so that the user sees what's up
CURSOR_PREFIX = 'cur'


def encode_cursor(value: CursorValue) -> str:
    """ Encode a cursor value as an opaque string

    The value must be JSON-serializable
    """
    return CURSOR_PREFIX + ':' + base64.b85encode(json.dumps(value).encode()).decode()


def decode_cursor(cursor: str) -> CursorValue:
    """ Decode an opaque cursor string into a cursor value

    Raises:
        exc.ArgumentError: the cursor is damaged
    """
    prefix, _, data = cursor.partition(':')
    if prefix != CURSOR_PREFIX or not data:
        raise exc.ArgumentError(f'Invalid cursor: {cursor!r}')

    try:
        return json.loads(base64.b85decode(data))
    except (ValueError, binascii.Error):  # json.JSONDecodeError is a ValueError
        raise exc.ArgumentError(f'Invalid cursor: {cursor!r}')
