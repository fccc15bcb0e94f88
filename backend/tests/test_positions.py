import pytest

from vibe30.core.errors import NotFoundError, ValidationError
from vibe30.services.buckets import Activity, select_random
from vibe30.services.buckets.positions import move, next_position, order_for_replace, renumber


def _acts(*texts):
    return [Activity(t, position=i, id=i + 1) for i, t in enumerate(texts)]


def test_select_random_uses_floor_of_scaled_draw():
    a, b, c = _acts("A", "B", "C")
    assert select_random([a, b, c], rand=lambda: 0.5) is b
    assert select_random([a, b, c], rand=lambda: 0.0) is a
    assert select_random([a, b, c], rand=lambda: 0.9999) is c


def test_select_random_default_source_stays_in_range():
    acts = _acts("A", "B", "C")
    for _ in range(50):
        assert select_random(acts) in acts


def test_select_random_empty():
    with pytest.raises(ValidationError):
        select_random([])


def test_next_position():
    assert next_position([]) == 0
    assert next_position([0, 1, 2]) == 3
    assert next_position([4, 0, 7]) == 8


def test_renumber_does_not_mutate_input():
    acts = [Activity("x", position=5), Activity("y", position=9)]
    packed = renumber(acts)
    assert [a.position for a in packed] == [0, 1]
    assert [a.position for a in acts] == [5, 9]


def test_order_for_replace_is_stable_on_ties():
    acts = [Activity("b", position=1), Activity("a", position=0), Activity("c", position=1)]
    assert [a.text for a in order_for_replace(acts)] == ["a", "b", "c"]


def test_move_down_and_up():
    acts = _acts("A", "B", "C", "D")
    assert [a.text for a in move(acts, dragged_id=1, target_id=3)] == ["B", "C", "A", "D"]
    moved = move(acts, dragged_id=4, target_id=2)
    assert [a.text for a in moved] == ["A", "D", "B", "C"]
    assert [a.position for a in moved] == [0, 1, 2, 3]


def test_move_unknown_id():
    with pytest.raises(NotFoundError):
        move(_acts("A", "B"), dragged_id=1, target_id=42)
