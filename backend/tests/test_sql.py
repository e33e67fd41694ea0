"""
Tests for helpers/sql.py - partial update fragments.
"""

import pytest

from jobly.core import AppError, ErrorCode
from jobly.helpers.sql import (
    SqlFragment,
    placeholder,
    positional_params,
    sql_for_partial_update,
    where_sql,
)
from jobly.validations.update_validators import restrict_update_fields


class TestSqlForPartialUpdate:
    """Test the SET fragment builder."""

    def test_maps_aliases_and_numbers_placeholders(self):
        """Aliased keys use the storage column; placeholders follow key order."""
        data = {"firstName": "Aliya", "lastName": "Winston", "age": 32}
        fragment = sql_for_partial_update(data, {"age": "official_age"})

        assert fragment.clauses == ('"firstName"=:p1', '"lastName"=:p2', '"official_age"=:p3')
        assert fragment.values == ("Aliya", "Winston", 32)
        assert fragment.set_clause == '"firstName"=:p1, "lastName"=:p2, "official_age"=:p3'

    def test_without_aliases_uses_keys(self):
        """No alias table means the key is the column."""
        fragment = sql_for_partial_update({"title": "new", "salary": 10})

        assert fragment.set_clause == '"title"=:p1, "salary"=:p2'
        assert fragment.values == ("new", 10)

    def test_clause_and_value_counts_match_payload(self):
        """One clause and one value per payload key."""
        data = {"a": 1, "b": None, "c": "x", "d": 0.5}
        fragment = sql_for_partial_update(data)

        assert len(fragment.clauses) == len(fragment.values) == len(data)
        for i, (key, value) in enumerate(data.items(), start=1):
            assert fragment.clauses[i - 1] == f'"{key}"=:p{i}'
            assert fragment.values[i - 1] == value

    def test_values_are_never_in_sql_text(self):
        """Hostile values stay in the bind list."""
        fragment = sql_for_partial_update({"name": "x'; DROP TABLE companies; --"})

        assert "DROP" not in fragment.set_clause
        assert fragment.values == ("x'; DROP TABLE companies; --",)

    @pytest.mark.parametrize("data", [{}, None])
    def test_empty_payload_rejected(self, data):
        """Nothing to update is an input error."""
        with pytest.raises(AppError) as exc_info:
            sql_for_partial_update(data)

        assert exc_info.value.code == ErrorCode.VALIDATION_ERROR
        assert exc_info.value.status_code == 400

    def test_unsafe_column_rejected(self):
        """Column names that are not plain identifiers are refused."""
        with pytest.raises(AppError) as exc_info:
            sql_for_partial_update({"name": "x"}, {"name": 'name"=1; --'})

        assert exc_info.value.status_code == 400


class TestSqlFragment:
    """Test SqlFragment helpers."""

    def test_next_placeholder_follows_values(self):
        fragment = sql_for_partial_update({"a": 1, "b": 2})
        assert fragment.next_placeholder() == ":p3"

    def test_params_bind_by_position(self):
        fragment = SqlFragment(clauses=("a = :p1", "b = :p2"), values=("x", 7))
        assert fragment.params() == {"p1": "x", "p2": 7}
        assert positional_params(["x", 7]) == fragment.params()

    def test_mismatched_lengths_rejected(self):
        with pytest.raises(ValueError):
            SqlFragment(clauses=("a = :p1",), values=())

    def test_where_sql(self):
        assert where_sql(SqlFragment()) == ""
        fragment = SqlFragment(clauses=("a = :p1", "b >= :p2"), values=(1, 2))
        assert where_sql(fragment) == " WHERE a = :p1 AND b >= :p2"

    def test_placeholder(self):
        assert placeholder(1) == ":p1"


class TestRestrictUpdateFields:
    """Test the update payload whitelist."""

    def test_reorders_to_allowed_order(self):
        fields = restrict_update_fields({"equity": 0.1, "title": "t"}, ("title", "salary", "equity"))
        assert list(fields) == ["title", "equity"]

    def test_unknown_field_rejected(self):
        with pytest.raises(AppError) as exc_info:
            restrict_update_fields({"companyHandle": "c2"}, ("title", "salary", "equity"))

        assert exc_info.value.details["fields"] == ["companyHandle"]

    def test_empty_passes_through(self):
        assert restrict_update_fields(None, ("title",)) == {}
