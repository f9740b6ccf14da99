"""
Shared building blocks for the SET / WHERE clause compilers.

Placeholders follow asyncpg's positional syntax: ``$1``, ``$2``, ...
A cursor is the count of placeholders already used, so the next one
is ``$<cursor + 1>``.
"""
from typing import Any, NamedTuple, Tuple


class CompiledClause(NamedTuple):
    """
    Clause text plus its bind values.

    ``values[i]`` is the value for placeholder ``$i+1`` in ``text``.
    An empty ``text`` means the compiler produced no fragment.
    """

    text: str
    values: Tuple[Any, ...]

    @property
    def is_empty(self) -> bool:
        return not self.text

    @property
    def next_placeholder(self) -> str:
        """Placeholder for the first value appended after this clause."""
        return placeholder(len(self.values))


EMPTY_CLAUSE = CompiledClause("", ())


def placeholder(cursor: int) -> str:
    """Return the placeholder that follows ``cursor`` used ones."""
    if cursor < 0:
        raise ValueError(f"Placeholder cursor cannot be negative: {cursor}")
    return f"${cursor + 1}"


def quote_ident(name: str) -> str:
    """Quote a column name as a PostgreSQL identifier."""
    return '"' + name.replace('"', '""') + '"'
