"""Unit tests for status classification."""

from __future__ import annotations

import pytest

from docdb_client.status import SUCCESS_CODES, OperationCategory, is_error

ACCEPTED = {
    OperationCategory.GET_INFO: {200},
    OperationCategory.QUERY: {200},
    OperationCategory.LIST: {200, 304},
    OperationCategory.GET: {200, 304, 404},
    OperationCategory.CREATE: {201, 409},
    OperationCategory.REPLACE: {200, 404, 409, 412},
    OperationCategory.DELETE: {204, 404, 412},
    OperationCategory.EXECUTE: {200},
}

PROBE_CODES = [100, 199, 200, 201, 204, 299, 301, 304, 400, 401, 403, 404, 408, 409, 410, 412, 429, 500, 503]


class TestIsError:
    """Tests for the per-category accepted status sets."""

    @pytest.mark.parametrize("category", list(ACCEPTED))
    def test_table_matches_for_every_probe(self, category):
        for code in PROBE_CODES:
            assert is_error(category, code) == (code not in ACCEPTED[category]), (category, code)

    def test_table_covers_every_named_category(self):
        assert set(SUCCESS_CODES) == set(ACCEPTED)

    @pytest.mark.parametrize("code, expected", [
        (199, True),
        (200, False),
        (304, False),
        (404, False),
        (409, False),
        (410, True),
        (500, True),
    ])
    def test_other_uses_inclusive_range(self, code, expected):
        assert is_error(OperationCategory.OTHER, code) is expected

    def test_create_conflict_is_not_an_error(self):
        assert is_error(OperationCategory.CREATE, 409) is False

    def test_delete_precondition_failed_is_not_an_error(self):
        assert is_error(OperationCategory.DELETE, 412) is False

    def test_list_server_error_is_an_error(self):
        assert is_error(OperationCategory.LIST, 500) is True

    def test_accepts_category_value_string(self):
        assert is_error("create", 201) is False
        assert is_error("create", 200) is True

    def test_unknown_category_string_rejected(self):
        with pytest.raises(ValueError):
            is_error("upsert", 200)
