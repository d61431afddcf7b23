"""Tests for single and batch allocation in the shelf packer."""

from __future__ import annotations

import itertools
import random

import pytest

from shelf_atlas import NotEnoughSpace, Packer, PackingError, Rect
from shelf_atlas.globs import DEFAULT_ADMISSIBLE_WASTE


def test_new_packer_has_one_region_over_canvas() -> None:
    packer = Packer(64, 32)
    assert packer.areas == [Rect((0, 0), (64, 32))]
    assert packer.admissible_waste == DEFAULT_ADMISSIBLE_WASTE
    assert packer.bounds == Rect((0, 0), (64, 32))


def test_with_admissible_waste_is_chainable() -> None:
    packer = Packer(64, 64).with_admissible_waste(3)
    assert isinstance(packer, Packer)
    assert packer.admissible_waste == 3


def test_fill_four_squares(packer: Packer) -> None:
    assert packer.try_allocate((30, 30)) == Rect.from_tuples((1, 1), (31, 31))
    assert packer.try_allocate((30, 30)) == Rect.from_tuples((33, 1), (63, 31))
    assert packer.try_allocate((30, 30)) == Rect.from_tuples((1, 33), (31, 63))
    assert packer.try_allocate((30, 30)) == Rect.from_tuples((33, 33), (63, 63))
    with pytest.raises(NotEnoughSpace):
        packer.try_allocate((30, 30))


def test_nonfill_four_squares(packer: Packer) -> None:
    assert packer.try_allocate((28, 28)) == Rect.from_tuples((1, 1), (29, 29))
    assert packer.try_allocate((28, 28)) == Rect.from_tuples((31, 1), (59, 29))
    assert packer.try_allocate((28, 28)) == Rect.from_tuples((1, 31), (29, 59))
    assert packer.try_allocate((28, 28)) == Rect.from_tuples((31, 31), (59, 59))
    with pytest.raises(NotEnoughSpace):
        packer.try_allocate((30, 30))


def test_uneven_squares(packer: Packer) -> None:
    assert packer.try_allocate((14, 14)) == Rect.from_tuples((1, 1), (15, 15))
    assert packer.try_allocate((14, 30)) == Rect.from_tuples((1, 17), (15, 47))
    assert packer.try_allocate((30, 30)) == Rect.from_tuples((17, 17), (47, 47))
    assert packer.try_allocate((14, 14)) == Rect.from_tuples((17, 1), (31, 15))


def test_thin_leftover_is_discarded() -> None:
    packer = Packer(64, 64)
    packer.try_allocate((60, 58))
    assert packer.areas == [Rect((62, 0), (64, 64))]


def test_leftover_above_threshold_is_kept() -> None:
    packer = Packer(64, 64).with_admissible_waste(3)
    packer.try_allocate((60, 58))
    assert packer.areas == [Rect((62, 0), (64, 60)), Rect((0, 60), (64, 64))]


def test_exact_width_fit_replaces_region_with_space_underneath() -> None:
    packer = Packer(32, 64)
    packer.try_allocate((30, 10))
    assert packer.areas == [Rect((0, 12), (32, 64))]


def test_zero_size_does_not_reserve_space(packer: Packer) -> None:
    assert packer.try_allocate((0, 10)) == Rect((0, 0), (0, 10))
    assert packer.try_allocate((10, 0)) == Rect((0, 0), (10, 0))
    assert packer.areas == [Rect((0, 0), (64, 64))]
    assert packer.try_allocate((30, 30)) == Rect((1, 1), (31, 31))


def test_failure_leaves_regions_untouched(packer: Packer) -> None:
    packer.try_allocate((40, 40))
    before = list(packer.areas)

    with pytest.raises(NotEnoughSpace) as exc_info:
        packer.try_allocate((40, 40))
    assert exc_info.value.size == (40, 40)
    assert isinstance(exc_info.value, PackingError)
    assert packer.areas == before

    with pytest.raises(NotEnoughSpace):
        packer.try_allocate((40, 40))
    assert packer.areas == before


def test_oversized_request_fails(packer: Packer) -> None:
    with pytest.raises(NotEnoughSpace):
        packer.try_allocate((63, 1))
    with pytest.raises(NotEnoughSpace):
        packer.try_allocate((10 ** 9, 10 ** 9))


def test_negative_sizes_are_rejected(packer: Packer) -> None:
    with pytest.raises(ValueError):
        packer.try_allocate((-1, 5))
    with pytest.raises(ValueError):
        Packer(-1, 10)


def test_best_fit_prefers_later_region_smaller_in_both_axes() -> None:
    packer = Packer(100, 100)
    packer.areas = [Rect((0, 0), (50, 50)), Rect((50, 0), (70, 20)), Rect((0, 50), (100, 60))]
    assert packer.try_allocate((8, 8)) == Rect((51, 1), (59, 9))


def test_best_fit_keeps_earlier_region_when_not_dominated() -> None:
    packer = Packer(100, 100)
    packer.areas = [Rect((0, 0), (30, 30)), Rect((30, 0), (50, 40))]
    assert packer.try_allocate((8, 8)) == Rect((1, 1), (9, 9))


def test_random_allocations_fit_and_never_overlap() -> None:
    rng = random.Random(7)
    packer = Packer(128, 128)
    placed = []
    for _ in range(300):
        size = rng.randrange(1, 20), rng.randrange(1, 20)
        try:
            rect = packer.try_allocate(size)
        except NotEnoughSpace:
            continue
        assert rect.size == size
        assert packer.bounds.contains(rect)
        placed.append(rect)

    assert placed
    for a, b in itertools.combinations(placed, 2):
        assert not a.intersects(b)
    for area in packer.areas:
        assert packer.bounds.contains(area)


def test_pack_empty_is_a_no_op(packer: Packer) -> None:
    packer.with_admissible_waste(3)
    assert packer.pack([]) == []
    assert packer.admissible_waste == 3
    assert packer.areas == [Rect((0, 0), (64, 64))]


def test_pack_recomputes_waste_from_shortest_item(packer: Packer) -> None:
    packer.pack([(4, 10), (4, 3)])
    assert packer.admissible_waste == 4


def test_pack_returns_results_tallest_first(packer: Packer) -> None:
    results = packer.pack([(10, 5), (10, 20), (10, 12)])
    assert results == [
        Rect((1, 1), (11, 21)),
        Rect((13, 1), (23, 13)),
        Rect((25, 1), (35, 6)),
    ]


def test_pack_reports_each_failure_and_continues(packer: Packer) -> None:
    results = packer.pack([(100, 100), (10, 10)])
    assert results[0] == NotEnoughSpace((100, 100))
    assert results[1] == Rect((1, 1), (11, 11))


def test_reset_restores_full_canvas(packer: Packer) -> None:
    packer.try_allocate((20, 20))
    packer.reset()
    assert packer.areas == [Rect((0, 0), (64, 64))]
