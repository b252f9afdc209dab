from controlled_loop.core.cursor import Cursor, create_cursor
from controlled_loop.models.common import StepResult

TEN = list(range(1, 11))

def _tuple(r: StepResult):
    return (r.value, r.key, r.done, r.donep)

def test_next_with_increment_five():
    cur = create_cursor(TEN, options={"increment": 5})
    assert _tuple(cur.next()) == (1, 0, False, True)
    assert _tuple(cur.next()) == (6, 5, True, False)
    assert _tuple(cur.next()) == (None, None, True, False)
    # exhausted moves leave the position alone
    assert cur.status().position == 5

def test_start_at_then_reverse_with_position():
    cur = create_cursor(TEN, {"increment": 3, "startAt": 2})
    assert _tuple(cur.next()) == (3, 2, False, True)
    assert _tuple(cur.reverse({"position": 2}).next()) == (8, 7, False, True)

def test_next_visits_every_key_in_order():
    seen = []
    def ctl(value, key, cursor):
        seen.append((key, value))
        return value * 2
    src = {"a": 1, "b": 2, "c": 3}
    cur = create_cursor(src, ctl)
    results = [cur.next() for _ in range(len(src))]
    assert seen == [("a", 1), ("b", 2), ("c", 3)]
    assert [r.key for r in results] == ["a", "b", "c"]
    assert cur.get_values() == [2, 4, 6]

def test_previous_before_first_move_is_exhausted():
    cur = create_cursor([1, 2, 3])
    r = cur.previous()
    assert _tuple(r) == (None, None, False, True)
    assert cur.status().position == -1

def test_previous_walks_back():
    cur = create_cursor(["x", "y", "z"])
    cur.next(); cur.next(); cur.next()
    r = cur.previous()
    assert (r.value, r.key) == ("y", 1)
    assert r.done is False and r.donep is False
    r = cur.previous()
    assert (r.value, r.key, r.donep) == ("x", 0, True)

def test_controller_receives_params_and_cursor():
    calls = []
    def ctl(value, key, cursor, *params):
        calls.append((value, key, cursor, params))
        return key
    cur = create_cursor(["a"], ctl)
    cur.next("p1", 2)
    assert calls == [("a", 0, cur, ("p1", 2))]

def test_repeat_reinvokes_without_moving():
    count = []
    cur = create_cursor([10, 20], lambda v, k, c: count.append(k) or v + 1)
    cur.next()
    r = cur.repeat()
    assert (r.value, r.key) == (11, 0)
    assert count == [0, 0]
    assert cur.status().position == 0

def test_repeat_before_first_move_uses_cached_flags():
    cur = create_cursor([1, 2, 3])
    r = cur.repeat()
    assert _tuple(r) == (None, None, False, True)

def test_empty_collection_is_exhausted_everywhere():
    for src in (None, [], {}):
        cur = Cursor(src)
        assert cur.status().end == -1
        assert cur.next().key is None
        assert cur.previous().key is None
        assert cur.repeat().value is None
        assert cur.is_complete() and cur.is_complete(True)

def test_missing_key_value_is_none():
    cur = create_cursor({"a": 1}, options={"keys": ["a", "zz"]})
    cur.next()
    r = cur.next()
    assert r.key == "zz" and r.value is None

def test_non_collection_source_has_no_keys():
    cur = create_cursor(42)
    assert cur.status().keys == []
    assert cur.next().done is True

def test_digit_string_keys_read_sequence_items():
    cur = create_cursor([10, 20, 30], options={"keys": ["0", "2", "x"]})
    assert _tuple(cur.next())[:2] == (10, "0")
    assert _tuple(cur.next())[:2] == (30, "2")
    assert cur.next().value is None
