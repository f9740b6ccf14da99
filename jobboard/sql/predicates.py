"""
WHERE clause compiler for search filters.

A search is described by a filters mapping (filter key -> value). Each filter
dimension is handled by one rule object; the compiler visits its rules in a
fixed order, hands each present rule the current placeholder cursor, and
concatenates the (fragment, value) pairs they return:

    compiler = PredicateCompiler([
        TextMatch("nameLike", "name"),
        NumericRange("num_employees", "minEmployees", "maxEmployees"),
    ])
    compiler.compile({"minEmployees": 3, "nameLike": "net"})
    # CompiledClause(text='name ILIKE $1 AND num_employees >= $2', values=('%net%', 3))

Values are never spliced into the SQL text; ``%term%`` wildcards live in the
bound value.
"""
from dataclasses import dataclass
from numbers import Number
from typing import Any, List, Mapping, Optional, Sequence, Tuple

from jobboard.core.exceptions import (
    InvalidFilterException,
    InvertedRangeException,
    MissingFilterException,
)
from jobboard.sql.clause import EMPTY_CLAUSE, CompiledClause, placeholder

Pair = Tuple[str, Any]


@dataclass(frozen=True)
class TextMatch:
    """Case-insensitive substring match on ``column``."""

    key: str
    column: str

    @property
    def keys(self) -> Tuple[str, ...]:
        return (self.key,)

    def build(self, filters: Mapping[str, Any], cursor: int) -> List[Pair]:
        term = filters.get(self.key)
        if term is not None and not isinstance(term, str):
            raise InvalidFilterException(
                self.key,
                f"Filter '{self.key}' must be a string",
            )
        if not term:
            raise MissingFilterException(
                self.key,
                f"Filter '{self.key}' requires a non-empty search term",
            )
        return [(f"{self.column} ILIKE {placeholder(cursor)}", f"%{term}%")]


@dataclass(frozen=True)
class NumericRange:
    """
    Inclusive numeric bounds on ``column``.

    Either bound key may be omitted for dimensions that only filter one way
    (e.g. a minimum salary with no maximum).
    """

    column: str
    min_key: Optional[str] = None
    max_key: Optional[str] = None

    def __post_init__(self):
        if self.min_key is None and self.max_key is None:
            raise ValueError(f"NumericRange on '{self.column}' needs a min or max key")

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(key for key in (self.min_key, self.max_key) if key is not None)

    def build(self, filters: Mapping[str, Any], cursor: int) -> List[Pair]:
        minimum = filters.get(self.min_key) if self.min_key else None
        maximum = filters.get(self.max_key) if self.max_key else None

        if minimum is None and maximum is None:
            raise MissingFilterException(self.column)
        for bound in (minimum, maximum):
            if bound is not None and (isinstance(bound, bool) or not isinstance(bound, Number)):
                raise InvalidFilterException(
                    self.column,
                    f"Range bounds on '{self.column}' must be numbers",
                )
        if minimum is not None and maximum is not None and minimum > maximum:
            raise InvertedRangeException(self.column, minimum, maximum)

        pairs: List[Pair] = []
        if minimum is not None:
            pairs.append((f"{self.column} >= {placeholder(cursor)}", minimum))
        if maximum is not None:
            pairs.append((f"{self.column} <= {placeholder(cursor + len(pairs))}", maximum))
        return pairs


@dataclass(frozen=True)
class BooleanSentinel:
    """
    Tri-state flag compared against a sentinel value.

    True matches rows above the sentinel, False matches rows equal to it,
    absent adds nothing. The compiler only calls ``build`` when the key is
    present, so False is always a filter the caller asked for.
    """

    key: str
    column: str
    sentinel: Any = 0

    @property
    def keys(self) -> Tuple[str, ...]:
        return (self.key,)

    def build(self, filters: Mapping[str, Any], cursor: int) -> List[Pair]:
        flag = filters.get(self.key)
        if flag is None:
            return []
        if flag is True:
            return [(f"{self.column} > {placeholder(cursor)}", self.sentinel)]
        if flag is False:
            return [(f"{self.column} = {placeholder(cursor)}", self.sentinel)]
        raise InvalidFilterException(
            self.key,
            f"Filter '{self.key}' must be true or false",
        )


class PredicateCompiler:
    """Compiles a filters mapping into a conjunctive WHERE clause."""

    def __init__(self, rules: Sequence[Any]):
        self.rules = tuple(rules)

    @property
    def keys(self) -> Tuple[str, ...]:
        """Every filter key some rule recognizes, in visiting order."""
        return tuple(key for rule in self.rules for key in rule.keys)

    def compile(self, filters: Optional[Mapping[str, Any]]) -> CompiledClause:
        """
        Build the WHERE clause text (without the keyword) and its values.

        Rules run in the order given at construction, regardless of the
        order of keys in ``filters``. A rule is skipped unless at least one
        of its keys maps to a non-None value.

        Returns:
            CompiledClause, empty when no rule contributed

        Raises:
            MissingFilterException: A present rule got no usable value
            InvalidFilterException: A filter value has the wrong type
            InvertedRangeException: A range minimum exceeds its maximum
        """
        if not filters:
            return EMPTY_CLAUSE

        cursor = 0
        fragments: List[str] = []
        values: List[Any] = []

        for rule in self.rules:
            if all(filters.get(key) is None for key in rule.keys):
                continue
            pairs = rule.build(filters, cursor)
            for fragment, value in pairs:
                fragments.append(fragment)
                values.append(value)
            cursor += len(pairs)

        if not fragments:
            return EMPTY_CLAUSE
        return CompiledClause(" AND ".join(fragments), tuple(values))


def compile_predicates(
    filters: Optional[Mapping[str, Any]],
    rules: Sequence[Any],
) -> CompiledClause:
    """Function form of ``PredicateCompiler(rules).compile(filters)``."""
    return PredicateCompiler(rules).compile(filters)


# Search filters per resource
COMPANY_FILTERS = PredicateCompiler([
    TextMatch("nameLike", "name"),
    NumericRange("num_employees", min_key="minEmployees", max_key="maxEmployees"),
])

JOB_FILTERS = PredicateCompiler([
    TextMatch("title", "title"),
    NumericRange("salary", min_key="minSalary"),
    BooleanSentinel("hasEquity", "equity"),
])
