"""
SET clause compiler for partial updates.
"""
from typing import Any, Mapping, Optional

from jobboard.core.exceptions import EmptyInputException
from jobboard.sql.clause import CompiledClause, placeholder, quote_ident


def compile_update(
    fields: Mapping[str, Any],
    name_map: Optional[Mapping[str, str]] = None,
) -> CompiledClause:
    """
    Build the SET clause of a single-row partial update.

    Each key becomes ``"<column>"=$<n>``, numbered from 1 in the mapping's
    iteration order. The column is ``name_map[key]`` when the key is
    translated, otherwise the key itself.

    Args:
        fields: Logical field name -> new value. ``None`` sets NULL.
        name_map: Logical field name -> physical column name

    Returns:
        CompiledClause whose text is the fragments joined by ``", "``

    Raises:
        EmptyInputException: If ``fields`` is empty

    Example:
        >>> compile_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        CompiledClause(text='"first_name"=$1, "age"=$2', values=('Aliya', 32))
    """
    if not fields:
        raise EmptyInputException()

    name_map = name_map or {}
    fragments = [
        f"{quote_ident(name_map.get(key, key))}={placeholder(cursor)}"
        for cursor, key in enumerate(fields)
    ]
    return CompiledClause(", ".join(fragments), tuple(fields.values()))
