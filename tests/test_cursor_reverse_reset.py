from controlled_loop.core.cursor import create_cursor

def test_reverse_twice_restores_direction():
    cur = create_cursor(list(range(5)), increment=2)
    before = (cur.status().reversed, cur._signed_increment)
    cur.reverse().reverse()
    assert (cur.status().reversed, cur._signed_increment) == before
    assert cur.status().increment == 2

def test_reverse_option_at_construction_starts_from_end():
    cur = create_cursor({"a": 1, "b": 2, "c": 3}, reverse=True)
    keys = [cur.next().key for _ in range(3)]
    assert keys == ["c", "b", "a"]
    assert cur.next().key is None

def test_reverse_does_not_move_without_reset():
    cur = create_cursor(list(range(10)))
    cur.next(); cur.next()
    cur.reverse()
    assert cur.status().position == 1
    # next now steps toward the start
    assert cur.next().key == 0

def test_reverse_with_reset_and_clear():
    cur = create_cursor(list(range(4)))
    cur.run()
    cur.reverse(reset=True, clear=True)
    assert cur.get_values() == []
    assert cur.next().key == 3

def test_reverse_clear_only_keeps_position():
    cur = create_cursor(list(range(4)))
    cur.next(); cur.next()
    cur.reverse({"clear": True})
    assert cur.get_values() == []
    assert cur.status().position == 1

def test_reverse_explicit_reset_false_ignores_position():
    cur = create_cursor(list(range(10)))
    cur.next()
    cur.reverse(reset=False, position=5)
    assert cur.status().position == 0

def test_reset_places_one_step_before_start():
    cur = create_cursor(list(range(10)), increment=3, start_at=2)
    cur.run()
    cur.reset()
    st = cur.status()
    assert st.position == -1
    assert st.donep is True and st.done is False

def test_reset_with_position_and_reverse():
    cur = create_cursor(list(range(10)), increment=2)
    cur.reverse()
    cur.reset(position=1)
    assert cur.status().position == 10
    assert cur.next().key == 8

def test_reset_ignores_out_of_range_position():
    cur = create_cursor(list(range(5)), start_at=1)
    cur.reset(position=99)
    assert cur.next().key == 1

def test_reset_then_is_complete_previous_matches_previous():
    cur = create_cursor(list(range(5)), start_at=3)
    cur.reset()
    assert cur.is_complete(True) is (cur.previous().key is None)

    cur = create_cursor(list(range(5)), increment=1, start_at=3)
    cur.reverse(reset=True)
    blocked = cur.is_complete(True)
    assert blocked is (cur.previous().key is None)

def test_reset_clear_empties_values():
    cur = create_cursor([1, 2])
    cur.run()
    cur.reset(True)
    assert cur.get_values() == []

def test_reverse_out_of_range_position_does_not_reset():
    cur = create_cursor(list(range(10)))
    cur.next(); cur.next(); cur.next()
    cur.reverse(position=99)
    assert cur.status().position == 2
    assert cur.next().key == 1
