from collections import abc
from typing import Any, Union

import sqlalchemy as sa


# Annotation for SqlAlchemy models
SAModel = type

# A SQL expression: either SQL text, or an SqlAlchemy column expression
SQLExpression = Union[str, sa.sql.ColumnElement]

# Something to select from: table name / SQL text, a Table (or any FromClause), or a model
SQLSource = Union[str, sa.sql.FromClause, SAModel]

# Annotation for dict rows (result rows returned as dicts)
SARowDict = dict

# A cursor value: whatever the cursor expression evaluates to
CursorValue = Any

# The projection: a comma-separated string, or a list of expressions
Projection = Union[str, abc.Sequence[SQLExpression]]
