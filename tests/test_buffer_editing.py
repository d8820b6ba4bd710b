import pytest

from markbuffer import Buffer, BufferValidationError, PasteRegister


def make_buffer(text: str, *, cursor: int = 0, marker: int | None = None) -> Buffer:
    buffer = Buffer(text)
    if marker is not None:
        buffer.go_to(marker)
        buffer.mark()
    buffer.go_to(cursor)
    return buffer


def test_new_buffer_starts_at_zero() -> None:
    buffer = Buffer("BUFFER")

    assert buffer.text == "BUFFER"
    assert buffer.cursor == 0
    assert buffer.marker == 0
    assert buffer.paste == ""
    assert len(buffer) == 6


def test_from_text_matches_constructor() -> None:
    assert Buffer.from_text("abc").snapshot() == Buffer("abc").snapshot()


def test_move_left_and_right_stop_at_bounds() -> None:
    buffer = Buffer("ab")

    buffer.move_left()
    assert buffer.cursor == 0

    buffer.move_right()
    buffer.move_right()
    buffer.move_right()
    assert buffer.cursor == 2


@pytest.mark.parametrize("start", [1, 2, 3, 4, 5])
def test_left_then_right_restores_interior_cursor(start: int) -> None:
    buffer = make_buffer("BUFFER", cursor=start)

    buffer.move_left()
    buffer.move_right()
    assert buffer.cursor == start

    buffer.move_right()
    buffer.move_left()
    assert buffer.cursor == start


@pytest.mark.parametrize(
    ("target", "expected"),
    [(-100, 0), (-1, 0), (0, 0), (3, 3), (6, 6), (7, 6), (10_000, 6)],
)
def test_go_to_clamps(target: int, expected: int) -> None:
    buffer = Buffer("BUFFER")

    buffer.go_to(target)

    assert buffer.cursor == expected
    assert 0 <= buffer.cursor <= len(buffer)


def test_go_to_rejects_non_integer() -> None:
    buffer = Buffer("BUFFER")

    with pytest.raises(BufferValidationError) as excinfo:
        buffer.go_to("3")  # type: ignore[arg-type]

    assert excinfo.value.argument == "offset"
    assert buffer.cursor == 0


def test_to_start_and_to_end_leave_marker_alone() -> None:
    buffer = make_buffer("BUFFER", cursor=3, marker=2)

    buffer.to_end()
    assert buffer.cursor == 6
    buffer.to_start()
    assert buffer.cursor == 0
    assert buffer.marker == 2


def test_mark_all_spans_buffer() -> None:
    buffer = make_buffer("BUFFER", cursor=2)

    buffer.mark_all()

    assert (buffer.marker, buffer.cursor) == (0, 6)
    assert buffer.paste == ""


def test_insert_advances_cursor() -> None:
    buffer = make_buffer("BUFFER", cursor=3)

    buffer.insert("XYZ")

    assert buffer.text == "BUFXYZFER"
    assert buffer.cursor == 6
    assert buffer.marker == 0


def test_insert_empty_string_is_noop() -> None:
    buffer = make_buffer("BUFFER", cursor=3)
    before = buffer.snapshot()

    buffer.insert("")

    assert buffer.snapshot() == before


def test_copy_appends_normalized_region() -> None:
    buffer = make_buffer("BUFFER", marker=4, cursor=1)

    buffer.copy()
    assert buffer.paste == "UFF"

    buffer.copy()
    assert buffer.paste == "UFFUFF"
    assert buffer.text == "BUFFER"
    assert (buffer.cursor, buffer.marker) == (1, 4)


def test_copy_empty_region_is_noop() -> None:
    buffer = make_buffer("BUFFER", marker=2, cursor=2)

    buffer.copy()
    buffer.cut()

    assert buffer.paste == ""
    assert buffer.text == "BUFFER"


@pytest.mark.parametrize(("marker", "cursor"), [(1, 4), (4, 1)])
def test_cut_removes_region_and_collapses(marker: int, cursor: int) -> None:
    buffer = make_buffer("BUFFER", marker=marker, cursor=cursor)

    buffer.cut()

    assert buffer.text == "BER"
    assert buffer.paste == "UFF"
    assert (buffer.cursor, buffer.marker) == (1, 1)


def test_insert_then_cut_restores_text() -> None:
    buffer = make_buffer("hello world", cursor=5)
    buffer.mark()

    buffer.insert(" big")
    assert buffer.text == "hello big world"

    buffer.cut()
    assert buffer.text == "hello world"
    assert buffer.paste == " big"


def test_paste_insert_uses_register() -> None:
    buffer = make_buffer("BUFFER", marker=1, cursor=4)
    buffer.cut()
    buffer.to_end()

    buffer.paste_insert()

    assert buffer.text == "BERUFF"
    assert buffer.cursor == 6
    assert buffer.marker == 1


def test_paste_insert_with_empty_register_is_noop() -> None:
    buffer = make_buffer("BUFFER", cursor=2)
    before = buffer.snapshot()

    buffer.paste_insert()

    assert buffer.snapshot() == before


def test_paste_register_can_be_shared() -> None:
    register = PasteRegister()
    source = Buffer("abc", paste=register)
    target = Buffer("xyz", paste=register)

    source.mark_all()
    source.copy()
    target.to_end()
    target.paste_insert()

    assert target.text == "xyzabc"
    assert register.text == "abc"


def test_delete_forward_keeps_cursor_and_clamps_marker() -> None:
    buffer = make_buffer("abcd", marker=4, cursor=1)

    buffer.delete_forward()

    assert buffer.text == "acd"
    assert buffer.cursor == 1
    assert buffer.marker == 3


def test_delete_forward_at_end_is_noop() -> None:
    buffer = make_buffer("abc", marker=1, cursor=3)
    before = buffer.snapshot()

    buffer.delete_forward()

    assert buffer.snapshot() == before


def test_delete_backward_moves_cursor_and_clamps_marker() -> None:
    buffer = make_buffer("abc", marker=3, cursor=3)

    buffer.delete_backward()

    assert buffer.text == "ab"
    assert buffer.cursor == 2
    assert buffer.marker == 2


def test_delete_backward_leaves_marker_inside_buffer() -> None:
    buffer = make_buffer("abcd", marker=1, cursor=3)

    buffer.delete_backward()

    assert buffer.text == "abd"
    assert (buffer.cursor, buffer.marker) == (2, 1)


def test_delete_backward_at_start_is_noop() -> None:
    buffer = Buffer("abc")
    before = buffer.snapshot()

    buffer.delete_backward()

    assert buffer.snapshot() == before


def test_repeat_runs_commands_in_order() -> None:
    buffer = Buffer("abcdef")

    results = buffer.repeat(2, buffer.move_right, buffer.move_right, buffer.mark)

    assert buffer.cursor == 4
    assert buffer.marker == 4
    assert results == [None, None, None]


def test_repeat_zero_or_negative_runs_nothing() -> None:
    buffer = Buffer("abc")

    assert buffer.repeat(0, buffer.move_right) == []
    assert buffer.repeat(-3, buffer.move_right) == []
    assert buffer.cursor == 0


def test_repeat_returns_final_round_results() -> None:
    buffer = Buffer("a-b-c")

    results = buffer.repeat(3, lambda: buffer.find_forward("-"), buffer.move_right)

    assert results == [False, None]
    assert buffer.cursor == 5


def test_paste_register_clear_is_explicit() -> None:
    register = PasteRegister("seed")
    buffer = Buffer("abc", paste=register)
    buffer.mark_all()
    buffer.copy()
    assert buffer.paste == "seedabc"

    register.clear()

    assert buffer.paste == ""
    assert buffer.text == "abc"


def test_string_forms() -> None:
    buffer = make_buffer("BUFFER", marker=1, cursor=4)
    buffer.copy()

    assert str(buffer) == "BUFFER"
    assert repr(buffer) == "Buffer('BUFFER', cursor=4, marker=1, paste='UFF')"
