import pytest

from spreadsheet.utils.store import (
    GridStore,
    InvalidInputException,
    OutOfRangeException,
    SubmissionLogEntry,
    parse_coordinate,
)


def _state_of(store):
    return store.grid, store.history_length, store.future_length


def test_new_store_is_empty():
    store = GridStore()

    assert store.rows == 1000
    assert store.columns == 1000
    assert store.get_cell(999, 999) == ""
    assert not store.can_undo
    assert not store.can_redo
    assert store.search_term == ""
    assert store.filtered_submissions() == []


def test_edit_undo_redo_scenario(store):
    store.edit_cell(0, 0, "A")
    assert store.get_cell(0, 0) == "A"
    assert store.history_length == 1

    store.edit_cell(0, 0, "B")
    assert store.get_cell(0, 0) == "B"
    assert store.history_length == 2

    store.undo()
    assert store.get_cell(0, 0) == "A"
    assert store.history_length == 1
    assert store.future_length == 1

    store.undo()
    assert store.get_cell(0, 0) == ""
    assert store.history_length == 0
    assert store.future_length == 2

    store.redo()
    assert store.get_cell(0, 0) == "A"
    assert store.history_length == 1
    assert store.future_length == 1


def test_edit_after_undo_discards_future(store):
    store.edit_cell(1, 1, "X")
    store.undo()
    assert store.future_length == 1

    store.edit_cell(2, 2, "Y")

    assert store.future_length == 0
    assert not store.can_redo
    assert store.get_cell(1, 1) == ""
    assert store.get_cell(2, 2) == "Y"

    # NOTE: stays empty until the next undo
    store.edit_cell(0, 1, "Z")
    assert store.future_length == 0
    store.undo()
    assert store.future_length == 1


def test_undo_then_redo_restores_grid(store):
    for i, value in enumerate(("a", "b", "c", "d")):
        store.edit_cell(i % 3, (i + 1) % 3, value)

    while store.can_undo:
        before = store.grid
        store.undo()
        store.redo()
        assert store.grid == before
        store.undo()


def test_redo_then_undo_restores_grid(store):
    store.edit_cell(0, 0, "a")
    store.edit_cell(0, 1, "b")
    store.undo()
    store.undo()

    before = store.grid
    store.redo()
    store.undo()

    assert store.grid == before


def test_redo_only_removes_popped_entry(store):
    store.edit_cell(0, 0, "a")
    store.edit_cell(0, 0, "b")
    store.edit_cell(0, 0, "c")
    store.undo()
    store.undo()
    store.undo()

    store.redo()

    assert store.get_cell(0, 0) == "a"
    assert store.future_length == 2
    assert store.history_length == 1


def test_undo_on_empty_history_is_noop(store):
    store.submit(0, 0, "kept")
    before = _state_of(store)

    assert store.undo() is False
    assert _state_of(store) == before


def test_redo_on_empty_future_is_noop(store):
    store.edit_cell(0, 0, "a")
    before = _state_of(store)

    assert store.redo() is False
    assert _state_of(store) == before


def test_edit_with_same_value_still_records_history(store):
    store.edit_cell(0, 0, "")

    assert store.history_length == 1


def test_submit_bypasses_history(store):
    store.edit_cell(0, 0, "a")
    store.undo()

    store.submit(2, 1, "v")

    assert store.get_cell(2, 1) == "v"
    assert store.history_length == 0
    assert store.future_length == 1
    assert store.submissions == (SubmissionLogEntry(row=2, column=1, value="v"),)


def test_submissions_are_not_rewound(store):
    store.edit_cell(0, 0, "a")
    store.submit(1, 1, "s")
    store.undo()

    # NOTE: the snapshot from before the edit did not contain the submitted value
    assert store.get_cell(1, 1) == ""
    assert len(store.submissions) == 1


def test_filter_scenario(store):
    store.submit(0, 0, "foo")
    store.submit(1, 1, "bar")
    store.set_search_term("FO")

    assert store.filtered_submissions() == [SubmissionLogEntry(0, 0, "foo")]


def test_filter_keeps_log_order_and_is_case_insensitive(store):
    for i, value in enumerate(("Apple", "banana", "PINEAPPLE", "cherry", "apple pie")):
        store.submit(i % 3, i % 3, value)

    store.set_search_term("aPPle")

    assert [s.value for s in store.filtered_submissions()] == ["Apple", "PINEAPPLE", "apple pie"]


def test_empty_search_term_returns_full_log(store):
    store.submit(0, 0, "x")
    store.submit(0, 1, "y")
    store.set_search_term("x")
    store.set_search_term("")

    assert store.filtered_submissions() == list(store.submissions)


def test_filtered_submissions_is_a_fresh_list(store):
    store.submit(0, 0, "x")

    result = store.filtered_submissions()
    result.clear()

    assert len(store.filtered_submissions()) == 1


def test_search_term_does_not_touch_data(store):
    store.edit_cell(0, 0, "a")
    before = _state_of(store)

    store.set_search_term("zzz")

    assert _state_of(store) == before


@pytest.mark.parametrize("row, col", [(3, 0), (0, 3), (-1, 0), (0, -1)])
def test_out_of_range_is_rejected_without_mutation(store, row, col):
    store.edit_cell(0, 0, "a")
    before = _state_of(store)

    with pytest.raises(OutOfRangeException):
        store.get_cell(row, col)
    with pytest.raises(OutOfRangeException):
        store.edit_cell(row, col, "x")
    with pytest.raises(OutOfRangeException):
        store.submit(row, col, "x")

    assert _state_of(store) == before
    assert store.submissions == ()


@pytest.mark.parametrize("row, col", [("1", 0), (0, 1.0), (True, 0), (None, None)])
def test_non_integer_coordinates_are_invalid(store, row, col):
    with pytest.raises(InvalidInputException):
        store.edit_cell(row, col, "x")

    assert store.history_length == 0


def test_non_text_value_is_invalid(store):
    with pytest.raises(InvalidInputException):
        store.edit_cell(0, 0, 5)
    with pytest.raises(InvalidInputException):
        store.submit(0, 0, None)

    assert store.history_length == 0
    assert store.submissions == ()


def test_non_text_search_term_is_invalid(store):
    store.set_search_term("a")

    with pytest.raises(InvalidInputException):
        store.set_search_term(None)

    assert store.search_term == "a"


@pytest.mark.parametrize("text, expected", [("0", 0), (" 12 ", 12), ("+3", 3), ("-1", -1)])
def test_parse_coordinate(text, expected):
    assert parse_coordinate(text) == expected


@pytest.mark.parametrize("text", ["", "  ", "3abc", "1.5", "1_000", "one", None])
def test_parse_coordinate_rejects(text):
    with pytest.raises(InvalidInputException):
        parse_coordinate(text)


def test_submit_text(store):
    entry = store.submit_text(" 2", "1 ", "value")

    assert entry == SubmissionLogEntry(2, 1, "value")
    assert store.get_cell(2, 1) == "value"


def test_submit_text_rejects_without_mutation(store):
    with pytest.raises(InvalidInputException):
        store.submit_text("1", "x", "value")
    with pytest.raises(OutOfRangeException):
        store.submit_text("1", "7", "value")
    with pytest.raises(OutOfRangeException):
        store.submit_text("-1", "0", "value")

    assert store.submissions == ()
    assert store.get_range(0, 0, 2, 2) == [[""] * 3] * 3


def test_get_range(store):
    store.edit_cell(1, 1, "m")
    store.edit_cell(2, 2, "e")

    assert store.get_range(1, 1, 2, 2) == [["m", ""], ["", "e"]]

    with pytest.raises(OutOfRangeException):
        store.get_range(0, 0, 3, 3)
    with pytest.raises(InvalidInputException):
        store.get_range(2, 2, 1, 1)


def test_history_cap_drops_oldest():
    store = GridStore(rows=2, columns=2, max_history=2)

    for value in ("a", "b", "c", "d"):
        store.edit_cell(0, 0, value)

    assert store.history_length == 2

    store.undo()
    store.undo()

    assert store.get_cell(0, 0) == "b"
    assert not store.can_undo


def test_history_cap_applies_to_redo():
    store = GridStore(rows=2, columns=2, max_history=1)

    store.edit_cell(0, 0, "a")
    store.undo()
    store.redo()

    assert store.history_length == 1
    assert store.get_cell(0, 0) == "a"


@pytest.mark.parametrize("kwargs", [
    dict(rows=0),
    dict(columns=-2),
    dict(rows="10"),
    dict(max_history=-1),
    dict(max_history=True),
])
def test_invalid_construction(kwargs):
    with pytest.raises(InvalidInputException):
        GridStore(**kwargs)


def test_submission_label():
    assert SubmissionLogEntry(1, 2, "x").get_label() == "Row 1, Col 2: x"
