"""
SQL clause compilers.

Turn caller-supplied field and filter mappings into ``$n``-parameterized
SQL fragments plus aligned bind values.
"""
from jobboard.sql.clause import CompiledClause, EMPTY_CLAUSE, placeholder, quote_ident
from jobboard.sql.update import compile_update
from jobboard.sql.predicates import (
    BooleanSentinel,
    NumericRange,
    PredicateCompiler,
    TextMatch,
    compile_predicates,
    COMPANY_FILTERS,
    JOB_FILTERS,
)

__all__ = [
    "CompiledClause",
    "EMPTY_CLAUSE",
    "placeholder",
    "quote_ident",
    "compile_update",
    "BooleanSentinel",
    "NumericRange",
    "PredicateCompiler",
    "TextMatch",
    "compile_predicates",
    "COMPANY_FILTERS",
    "JOB_FILTERS",
]
