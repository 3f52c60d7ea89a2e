import re
from typing import Optional


def split_top_level(input: str, separator: str = ',') -> list[str]:
    """ Split a SQL fragment by `separator`, but only at the top level: not within parentheses or quotes

    Example:
        split_top_level('id, coalesce(a, b) AS c') #-> ['id', 'coalesce(a, b) AS c']
    """
    parts = []
    depth = 0
    quote: Optional[str] = None
    start = 0

    for i, c in enumerate(input):
        if quote:
            if c == quote:
                quote = None
        elif c in ('"', "'"):
            quote = c
        elif c == '(':
            depth += 1
        elif c == ')':
            depth -= 1
        elif c == separator and depth == 0:
            parts.append(input[start:i].strip())
            start = i + 1

    parts.append(input[start:].strip())
    return parts


def parse_output_name(input: str) -> tuple[str, Optional[str]]:
    """ Parse a projection item into (expression, output name)

    Example:
        parse_output_name('id') #-> 'id', 'id'
        parse_output_name('t.created') #-> 't.created', 'created'
        parse_output_name('count(*) AS n') #-> 'count(*)', 'n'
        parse_output_name('count(*)') #-> 'count(*)', None
    """
    # "expr AS name"
    m = ALIASED_EXPRESSION_REX.match(input)
    if m:
        return m.group('expr'), m.group('name')

    # "name", "table.name"
    if DOTTED_IDENTIFIER_REX.match(input):
        return input, input.rpartition('.')[2]

    # Something we can't give a name to
    return input, None


# "<expression> AS <name>"
ALIASED_EXPRESSION_REX = re.compile(r'^(?P<expr>.*\S)\s+AS\s+(?P<q>"?)(?P<name>\w+)(?P=q)$', re.IGNORECASE | re.DOTALL)

# "name", "table.name", "schema.table.name"
DOTTED_IDENTIFIER_REX = re.compile(r'^[A-Za-z_][\w$]*(?:\.[A-Za-z_][\w$]*)*$')
