import pytest

from mancala.layout import Rect, pit_at, pit_rect, store_rect

PITS = [p for p in range(14) if p not in (6, 13)]


def test_rect_contains_edges():
    rect = Rect(0, 0, 10, 10)
    assert rect.contains(0, 0) is True
    assert rect.contains(9.5, 9.5) is True
    assert rect.contains(10, 10) is False
    assert rect.contains(-1, 5) is False


@pytest.mark.parametrize("pit", PITS)
def test_pit_at_center_round_trip(pit):
    x, y = pit_rect(pit).center
    assert pit_at(x, y) == pit


def test_pit_rects_do_not_overlap():
    rects = [pit_rect(p) for p in PITS]
    for i, a in enumerate(rects):
        for b in rects[i + 1:]:
            assert not a.contains(*b.center)
            assert not b.contains(*a.center)


def test_player2_pit_position():
    assert pit_rect(7) == Rect(98, 148, 84, 84)


def test_player1_row_runs_right_to_left_below_player2():
    assert pit_rect(0).left > pit_rect(5).left
    assert pit_rect(0).top > pit_rect(7).top
    assert pit_rect(5).left == pit_rect(7).left
    assert pit_rect(0).left == pit_rect(12).left


@pytest.mark.parametrize("store", [6, 13])
def test_store_is_not_a_pit(store):
    x, y = store_rect(store).center
    assert pit_at(x, y) is None


def test_store_sides():
    assert store_rect(6).left > pit_rect(0).left
    assert store_rect(13).left < pit_rect(5).left


def test_pit_at_empty_space():
    assert pit_at(0, 0) is None


@pytest.mark.parametrize("pit", [-1, 6, 13, 14])
def test_pit_rect_rejects_non_pits(pit):
    with pytest.raises(ValueError):
        pit_rect(pit)


@pytest.mark.parametrize("store", [0, 7, 12, 14])
def test_store_rect_rejects_non_stores(store):
    with pytest.raises(ValueError):
        store_rect(store)