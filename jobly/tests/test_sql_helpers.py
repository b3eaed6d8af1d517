from __future__ import annotations

import pytest

from jobly.errors import BadRequestError
from jobly.helpers.sql import (
    COMPANY_FIELD_COLUMNS,
    JOB_FIELD_COLUMNS,
    sql_for_company_filters,
    sql_for_job_filters,
    sql_for_partial_update,
)


class TestPartialUpdate:

    def test_single_field(self):
        set_cols, values = sql_for_partial_update({"salary": 1000})
        assert set_cols == '"salary"=?1'
        assert values == [1000]

    def test_keeps_key_order_and_numbers_placeholders(self):
        set_cols, values = sql_for_partial_update({"equity": 0.5, "salary": 1, "title": "x"})
        assert set_cols == '"equity"=?1, "salary"=?2, "title"=?3'
        assert values == [0.5, 1, "x"]

    def test_fragment_count_matches_field_count(self):
        data = {"a": 1, "b": 2, "c": 3, "d": None}
        set_cols, values = sql_for_partial_update(data)
        assert len(set_cols.split(", ")) == len(data)
        assert len(values) == len(data)

    def test_translates_external_names(self):
        set_cols, values = sql_for_partial_update(
            {"companyHandle": "x"}, {"companyHandle": "company_handle"}
        )
        assert set_cols == '"company_handle"=?1'
        assert "companyHandle" not in set_cols
        assert values == ["x"]

    def test_company_columns_mixed(self):
        set_cols, values = sql_for_partial_update(
            {"name": "N", "numEmployees": 5, "logoUrl": "u"}, COMPANY_FIELD_COLUMNS
        )
        assert set_cols == '"name"=?1, "num_employees"=?2, "logo_url"=?3'
        assert values == ["N", 5, "u"]

    def test_untranslated_key_passes_through(self):
        set_cols, _ = sql_for_partial_update({"salary": 3}, JOB_FIELD_COLUMNS)
        assert set_cols == '"salary"=?1'

    def test_empty_raises_bad_request(self):
        with pytest.raises(BadRequestError) as exc:
            sql_for_partial_update({}, JOB_FIELD_COLUMNS)
        assert exc.value.status == 400
        assert exc.value.message == "No data"


class TestJobFilters:

    def test_no_filters(self):
        assert sql_for_job_filters() == ("1=1", [])

    def test_title_is_lowercased_pattern(self):
        where, values = sql_for_job_filters(title="EnGineer")
        assert where == "1=1 AND LOWER(title) LIKE ?1"
        assert values == ["%engineer%"]

    def test_min_salary_zero_is_applied(self):
        where, values = sql_for_job_filters(min_salary=0)
        assert where == "1=1 AND salary >= ?1"
        assert values == [0]

    def test_has_equity_is_literal(self):
        where, values = sql_for_job_filters(has_equity=True)
        assert where == "1=1 AND equity > 0"
        assert values == []

    def test_has_equity_false_is_skipped(self):
        assert sql_for_job_filters(has_equity=False) == ("1=1", [])

    def test_all_filters_number_in_order(self):
        where, values = sql_for_job_filters("dev", 50000, True)
        assert where == "1=1 AND LOWER(title) LIKE ?1 AND salary >= ?2 AND equity > 0"
        assert values == ["%dev%", 50000]

    def test_empty_title_is_skipped(self):
        assert sql_for_job_filters(title="") == ("1=1", [])


class TestCompanyFilters:

    def test_all_filters(self):
        where, values = sql_for_company_filters("Net", 10, 100)
        assert where == (
            "1=1 AND LOWER(name) LIKE ?1 AND num_employees >= ?2 AND num_employees <= ?3"
        )
        assert values == ["%net%", 10, 100]

    def test_max_only_gets_first_placeholder(self):
        where, values = sql_for_company_filters(max_employees=5)
        assert where == "1=1 AND num_employees <= ?1"
        assert values == [5]

    def test_min_greater_than_max(self):
        with pytest.raises(BadRequestError):
            sql_for_company_filters(min_employees=10, max_employees=1)
