from __future__ import annotations

import pytest

from cnc_datatable import (
    ErrorCatalog,
    TableConfigError,
    clamp_page,
    next_page_number,
    page_window,
    paginate,
    previous_page_number,
    total_pages_for,
)


def _ids(rows) -> list:
    return [row["id"] for row in rows]


def test_two_pages_of_five(operators) -> None:
    first = paginate(operators, 1, 5)
    second = paginate(operators, 2, 5)

    assert _ids(first.rows) == [1, 2, 3, 4, 5]
    assert _ids(second.rows) == [6, 7, 8]
    assert first.total_pages == second.total_pages == 2
    assert first.total_count == 8
    assert (first.range_start, first.range_end) == (1, 5)
    assert (second.range_start, second.range_end) == (6, 8)


def test_pages_reconstruct_rows_exactly(operators) -> None:
    for page_size in (1, 2, 3, 5, 8, 20):
        total_pages = paginate(operators, 1, page_size).total_pages
        rebuilt = []
        for page in range(1, total_pages + 1):
            rows = paginate(operators, page, page_size).rows
            assert len(rows) <= page_size
            if page < total_pages:
                assert len(rows) == page_size
            rebuilt.extend(rows)
        assert rebuilt == operators


def test_out_of_range_pages_are_empty_not_errors(operators) -> None:
    for page in (99, 3, 0, -1):
        result = paginate(operators, page, 5)
        assert result.rows == []
        assert result.total_pages == 2
        assert (result.range_start, result.range_end) == (0, 0)


def test_empty_collection_has_one_empty_page() -> None:
    result = paginate([], 1, 10)

    assert result.rows == []
    assert result.total_pages == 1
    assert result.total_count == 0


@pytest.mark.parametrize("page_size", [0, -5, True, 2.5, "10"])
def test_invalid_page_size_is_rejected(operators, page_size) -> None:
    with pytest.raises(TableConfigError) as exc_info:
        paginate(operators, 1, page_size)

    assert exc_info.value.error is ErrorCatalog.INVALID_PAGE_SIZE


def test_total_pages_minimum_is_one() -> None:
    assert total_pages_for(0, 10) == 1
    assert total_pages_for(10, 10) == 1
    assert total_pages_for(11, 10) == 2


def test_clamp_page_is_opt_in_correction() -> None:
    assert clamp_page(99, 2) == 2
    assert clamp_page(0, 2) == 1
    assert clamp_page(2, 2) == 2
    assert clamp_page(4, 0) == 1


def test_next_and_previous_page_numbers_stop_at_the_ends() -> None:
    assert next_page_number(1, 2) == 2
    assert next_page_number(2, 2) == 2
    assert previous_page_number(2, 2) == 1
    assert previous_page_number(1, 2) == 1
    assert previous_page_number(99, 2) == 2


def test_page_window_marks_gaps_with_none() -> None:
    assert page_window(1, 1) == [1]
    assert page_window(2, 3) == [1, 2, 3]
    assert page_window(1, 10) == [1, 2, None, 10]
    assert page_window(5, 10) == [1, None, 4, 5, 6, None, 10]
    assert page_window(10, 10) == [1, None, 9, 10]
    assert page_window(3, 5, siblings=0) == [1, None, 3, None, 5]
