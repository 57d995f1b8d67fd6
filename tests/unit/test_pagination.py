"""Unit tests for page/offset arithmetic."""

import pytest

from user_api.pagination import build_pagination, page_offset, total_pages


pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "page, per_page, expected", [(1, 10, 0), (2, 10, 10), (3, 10, 20), (5, 7, 28)]
)
def test_page_offset(page, per_page, expected):
    assert page_offset(page, per_page) == expected


@pytest.mark.parametrize(
    "total, per_page, expected",
    [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3), (100, 100, 1)],
)
def test_total_pages_is_ceiling_division(total, per_page, expected):
    assert total_pages(total, per_page) == expected


def test_build_pagination():
    meta = build_pagination(page=3, per_page=10, total=25)

    assert meta.model_dump() == {
        "current_page": 3,
        "per_page": 10,
        "total": 25,
        "total_pages": 3,
    }
