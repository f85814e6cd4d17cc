from __future__ import annotations

from cnc_datatable import DataTableEngine, SortDirection


def test_page_view_render_payload(operators, operator_columns) -> None:
    engine = DataTableEngine(operator_columns, operators, page_size=5, selectable=True)
    engine.request_sort("experience")
    engine.toggle_row_selection(0)

    payload = engine.get_view().render()

    assert payload["count"] == 5
    assert payload["total"] == 8
    assert payload["page"] == 1
    assert payload["total_pages"] == 2
    assert payload["range"] == {"start": 1, "end": 5}
    assert payload["has_previous"] is False
    assert payload["has_next"] is True
    assert payload["page_numbers"] == [1, 2]
    assert payload["sort"] == {"column": "experience", "direction": "asc"}
    assert [row["name"] for row in payload["selected_rows"]] == ["David Wilson"]
    assert payload["selected_positions"] == [0]
    assert payload["empty"] is False
    assert payload["empty_message"] is None


def test_empty_view_carries_message(operators, operator_columns) -> None:
    engine = DataTableEngine(operator_columns, operators, empty_message="No operators found")

    payload = engine.set_search_term("zzz").render()

    assert payload["rows"] == []
    assert payload["empty"] is True
    assert payload["empty_message"] == "No operators found"
    assert payload["range"] == {"start": 0, "end": 0}


def test_sort_direction_flip() -> None:
    assert SortDirection.ASC.flipped() is SortDirection.DESC
    assert SortDirection.DESC.flipped() is SortDirection.ASC
    assert SortDirection("desc") is SortDirection.DESC
