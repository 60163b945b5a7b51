from __future__ import annotations

import numpy as np
import pytest

from paintmatch.src.mix_engine.conversions import rgb_to_hex
from paintmatch.src.mix_engine.mixing import DegenerateMixture, mix_colors, mix_lattice
from paintmatch.src.mix_engine.models import MixtureComponent
from paintmatch.src.mix_engine.palette import PAINT_COLORS, palette_rgb


def test_single_paint_reproduces_itself():
    assert mix_colors([MixtureComponent("Cyan", 100, "#00b7eb")]) == "#00b7eb"


def test_half_white_half_black_is_mid_grey():
    assert mix_colors([("#ffffff", 50), ("#000000", 50)]) == "#808080"


def test_percentages_are_renormalized_when_not_summing_to_100():
    assert mix_colors([("#ffffff", 25), ("#000000", 25)]) == "#808080"
    assert mix_colors([("#ff00ff", 10)]) == "#ff00ff"


def test_weighted_average_of_primaries():
    mixed = mix_colors([("#00b7eb", 50), ("#fff200", 50)])
    # (0+255)/2, (183+242)/2, (235+0)/2 rounded half-up
    assert mixed == "#80d576"


def test_input_components_are_not_mutated():
    components = [MixtureComponent("Magenta", 40, "#ff00ff")]
    mix_colors(components)
    assert components == [MixtureComponent("Magenta", 40, "#ff00ff")]


@pytest.mark.parametrize("components", [[], [("#ffffff", 0), ("#000000", 0)]])
def test_zero_total_is_degenerate(components):
    with pytest.raises(DegenerateMixture):
        mix_colors(components)


def test_mix_lattice_matches_mix_colors_row_by_row():
    lattice = np.array(
        [
            [100, 0, 0, 0, 0],
            [20, 30, 10, 40, 0],
            [35, 35, 30, 0, 0],
            [0, 45, 0, 40, 15],
            [0, 0, 0, 0, 100],
        ]
    )
    mixed = mix_lattice(lattice, palette_rgb())
    assert mixed.shape == (5, 3)
    for row, rgb in zip(lattice, mixed):
        components = [
            (paint.hex, int(amount))
            for paint, amount in zip(PAINT_COLORS, row)
            if amount > 0
        ]
        assert rgb_to_hex(*rgb) == mix_colors(components)


def test_mix_lattice_rejects_wrong_shape_and_zero_rows():
    with pytest.raises(ValueError):
        mix_lattice(np.array([[50, 50]]), palette_rgb())
    with pytest.raises(DegenerateMixture):
        mix_lattice(np.zeros((1, 5)), palette_rgb())
