"""Tests for paged result metadata."""

import pytest

from neo_catalog.features.pagination.entities import PageRequest, PagedResult, SortOrder


class TestPagedResult:
    @pytest.mark.parametrize("total,size,pages", [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 10, 3)])
    def test_total_pages_is_ceiling(self, total, size, pages):
        assert PagedResult(items=[], total_count=total, page=1, page_size=size).total_pages == pages

    def test_navigation_flags(self):
        middle = PagedResult(items=[1], total_count=25, page=2, page_size=10)
        assert middle.has_previous_page is True
        assert middle.has_next_page is True

        last = PagedResult(items=[1], total_count=25, page=3, page_size=10)
        assert last.has_next_page is False

    def test_derived_fields_are_not_settable(self):
        page = PagedResult(items=[], total_count=5, page=1, page_size=2)
        with pytest.raises(AttributeError):
            page.total_pages = 10

    def test_dict_round_trip_recomputes_derived_fields(self):
        page = PagedResult(items=[{"id": 1}], total_count=11, page=2, page_size=5)
        data = page.to_dict()
        assert data["total_pages"] == 3
        assert data["has_next_page"] is True

        data["total_pages"] = 99
        restored = PagedResult.from_dict(data)
        assert restored == page
        assert restored.total_pages == 3

    def test_map_keeps_metadata(self):
        page = PagedResult(items=[1, 2], total_count=4, page=1, page_size=2).map(str)
        assert page.items == ["1", "2"]
        assert page.total_pages == 2


class TestPageRequest:
    def test_offset_and_limit(self):
        window = PageRequest(page=3, page_size=10)
        assert window.offset == 20
        assert window.limit == 10

    def test_clamped(self):
        assert PageRequest.clamped(1, 500, 100).page_size == 100
        assert PageRequest.clamped(1, 0, 100).page_size == 1

    def test_rejects_page_zero(self):
        with pytest.raises(ValueError):
            PageRequest(page=0)

    def test_sort_order_from_flag(self):
        assert SortOrder.from_descending(True) == SortOrder.DESC
        assert SortOrder.from_descending(False) == SortOrder.ASC
