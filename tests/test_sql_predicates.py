"""
Tests for the search WHERE clause compiler and its rules.
"""
import pytest

from jobboard.core.exceptions import (
    BadRequestException,
    InvalidFilterException,
    InvertedRangeException,
    MissingFilterException,
)
from jobboard.sql import (
    COMPANY_FILTERS,
    JOB_FILTERS,
    BooleanSentinel,
    CompiledClause,
    NumericRange,
    PredicateCompiler,
    TextMatch,
    compile_predicates,
    placeholder,
)


class TestPlaceholder:
    def test_cursor_zero_is_first_placeholder(self):
        assert placeholder(0) == "$1"
        assert placeholder(4) == "$5"

    def test_negative_cursor_rejected(self):
        with pytest.raises(ValueError):
            placeholder(-1)


class TestTextMatch:
    rule = TextMatch("nameLike", "name")

    def test_builds_ilike_with_wildcards_in_value(self):
        assert self.rule.build({"nameLike": "net"}, 0) == [("name ILIKE $1", "%net%")]

    def test_uses_cursor(self):
        assert self.rule.build({"nameLike": "net"}, 3) == [("name ILIKE $4", "%net%")]

    def test_term_is_never_in_text(self):
        [(fragment, value)] = self.rule.build({"nameLike": "' OR 1=1 --"}, 0)

        assert fragment == "name ILIKE $1"
        assert value == "%' OR 1=1 --%"

    @pytest.mark.parametrize("filters", [{}, {"nameLike": None}, {"nameLike": ""}])
    def test_requires_non_empty_string(self, filters):
        with pytest.raises(MissingFilterException) as exc_info:
            self.rule.build(filters, 0)

        assert exc_info.value.dimension == "nameLike"
        assert exc_info.value.details == {"dimension": "nameLike", "constraint": "required"}

    @pytest.mark.parametrize("term", [5, ["net"], True])
    def test_non_string_term_is_a_type_error(self, term):
        with pytest.raises(InvalidFilterException) as exc_info:
            self.rule.build({"nameLike": term}, 0)

        assert exc_info.value.code == "INVALID_FILTER"
        assert exc_info.value.details == {"dimension": "nameLike", "constraint": "type"}


class TestNumericRange:
    rule = NumericRange("num_employees", min_key="minEmployees", max_key="maxEmployees")

    def test_min_only(self):
        assert self.rule.build({"minEmployees": 5}, 0) == [("num_employees >= $1", 5)]

    def test_max_only(self):
        assert self.rule.build({"maxEmployees": 10}, 0) == [("num_employees <= $1", 10)]

    def test_min_and_max_in_fixed_order(self):
        assert self.rule.build({"maxEmployees": 10, "minEmployees": 2}, 0) == [
            ("num_employees >= $1", 2),
            ("num_employees <= $2", 10),
        ]

    def test_placeholders_continue_from_cursor(self):
        assert self.rule.build({"minEmployees": 2, "maxEmployees": 10}, 1) == [
            ("num_employees >= $2", 2),
            ("num_employees <= $3", 10),
        ]

    def test_equal_bounds_allowed(self):
        assert len(self.rule.build({"minEmployees": 4, "maxEmployees": 4}, 0)) == 2

    def test_zero_is_a_value(self):
        assert self.rule.build({"minEmployees": 0}, 0) == [("num_employees >= $1", 0)]

    def test_inverted_range_rejected(self):
        with pytest.raises(InvertedRangeException) as exc_info:
            self.rule.build({"minEmployees": 10, "maxEmployees": 1}, 0)

        assert exc_info.value.status_code == 400
        assert exc_info.value.dimension == "num_employees"
        assert exc_info.value.constraint == "min_le_max"

    def test_both_bounds_missing_rejected(self):
        with pytest.raises(MissingFilterException):
            self.rule.build({}, 0)

    def test_min_only_dimension(self):
        rule = NumericRange("salary", min_key="minSalary")

        assert rule.keys == ("minSalary",)
        assert rule.build({"minSalary": 99999}, 0) == [("salary >= $1", 99999)]

    def test_needs_a_bound_key(self):
        with pytest.raises(ValueError):
            NumericRange("salary")

    @pytest.mark.parametrize("filters", [
        {"minEmployees": "ten"},
        {"maxEmployees": True},
        {"minEmployees": 1, "maxEmployees": "9"},
    ])
    def test_non_numeric_bound_is_a_type_error(self, filters):
        with pytest.raises(InvalidFilterException) as exc_info:
            self.rule.build(filters, 0)

        assert exc_info.value.details == {"dimension": "num_employees", "constraint": "type"}


class TestBooleanSentinel:
    rule = BooleanSentinel("hasEquity", "equity")

    def test_true_is_strictly_positive(self):
        assert self.rule.build({"hasEquity": True}, 0) == [("equity > $1", 0)]

    def test_false_is_exactly_zero(self):
        assert self.rule.build({"hasEquity": False}, 0) == [("equity = $1", 0)]

    def test_absent_adds_nothing(self):
        assert self.rule.build({}, 0) == []

    @pytest.mark.parametrize("flag", ["false", 0, 1])
    def test_non_boolean_is_a_type_error(self, flag):
        with pytest.raises(InvalidFilterException) as exc_info:
            self.rule.build({"hasEquity": flag}, 0)

        assert exc_info.value.status_code == 400
        assert exc_info.value.details == {"dimension": "hasEquity", "constraint": "type"}


class TestCompanyFilters:
    """Compiler wired with the company search dimensions."""

    def test_no_filters(self):
        assert COMPANY_FILTERS.compile({}) == CompiledClause("", ())
        assert COMPANY_FILTERS.compile(None).is_empty

    def test_single_dimension(self):
        clause = COMPANY_FILTERS.compile({"minEmployees": 2})

        assert clause.text == "num_employees >= $1"
        assert clause.values == (2,)

    def test_all_dimensions(self):
        clause = COMPANY_FILTERS.compile({"nameLike": "net", "minEmployees": 3, "maxEmployees": 15})

        assert clause.text == "name ILIKE $1 AND num_employees >= $2 AND num_employees <= $3"
        assert clause.values == ("%net%", 3, 15)

    def test_key_order_does_not_matter(self):
        forward = COMPANY_FILTERS.compile({"nameLike": "net", "minEmployees": 3, "maxEmployees": 15})
        backward = COMPANY_FILTERS.compile({"maxEmployees": 15, "minEmployees": 3, "nameLike": "net"})

        assert forward == backward

    def test_none_values_are_absent(self):
        clause = COMPANY_FILTERS.compile({"nameLike": None, "minEmployees": None, "maxEmployees": 7})

        assert clause.text == "num_employees <= $1"
        assert clause.values == (7,)

    def test_unrecognized_keys_ignored(self):
        assert COMPANY_FILTERS.compile({"color": "blue"}).is_empty

    def test_inverted_range_rejected_with_other_dimensions(self):
        with pytest.raises(InvertedRangeException):
            COMPANY_FILTERS.compile({"nameLike": "net", "minEmployees": 10, "maxEmployees": 1})

    def test_empty_name_rejected(self):
        with pytest.raises(MissingFilterException) as exc_info:
            COMPANY_FILTERS.compile({"nameLike": "", "minEmployees": 1})

        assert isinstance(exc_info.value, BadRequestException)

    def test_placeholders_match_value_positions(self):
        clause = COMPANY_FILTERS.compile({"nameLike": "a", "minEmployees": 1, "maxEmployees": 2})

        fragments = clause.text.split(" AND ")
        assert len(fragments) == len(clause.values)
        for index, fragment in enumerate(fragments):
            assert fragment.endswith(f"${index + 1}")

    def test_same_input_same_output(self):
        filters = {"nameLike": "net", "maxEmployees": 15}

        assert COMPANY_FILTERS.compile(filters) == COMPANY_FILTERS.compile(filters)

    def test_recognized_keys(self):
        assert COMPANY_FILTERS.keys == ("nameLike", "minEmployees", "maxEmployees")


class TestJobFilters:
    """Compiler wired with the job search dimensions."""

    def test_has_equity_true(self):
        assert JOB_FILTERS.compile({"hasEquity": True}) == CompiledClause("equity > $1", (0,))

    def test_has_equity_false(self):
        assert JOB_FILTERS.compile({"hasEquity": False}) == CompiledClause("equity = $1", (0,))

    def test_all_dimensions(self):
        clause = JOB_FILTERS.compile({"hasEquity": True, "minSalary": 150000, "title": "engineer"})

        assert clause.text == "title ILIKE $1 AND salary >= $2 AND equity > $3"
        assert clause.values == ("%engineer%", 150000, 0)

    def test_skipped_dimension_leaves_no_gap(self):
        clause = JOB_FILTERS.compile({"title": "engineer", "hasEquity": False})

        assert clause.text == "title ILIKE $1 AND equity = $2"
        assert clause.values == ("%engineer%", 0)


class TestCompilePredicates:
    def test_function_form(self):
        rules = [TextMatch("q", "body"), BooleanSentinel("flagged", "flags", sentinel=1)]

        clause = compile_predicates({"flagged": True, "q": "hi"}, rules)

        assert clause == CompiledClause("body ILIKE $1 AND flags > $2", ("%hi%", 1))

    def test_rule_order_is_visiting_order(self):
        rules = [NumericRange("b", min_key="bMin"), NumericRange("a", min_key="aMin")]

        clause = PredicateCompiler(rules).compile({"aMin": 1, "bMin": 2})

        assert clause.text == "b >= $1 AND a >= $2"
        assert clause.values == (2, 1)
