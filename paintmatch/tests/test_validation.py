from __future__ import annotations

from paintmatch.src.mix_engine.models import MixtureComponent
from paintmatch.src.mix_engine.palette import PAINT_COLORS, get_paint
from paintmatch.src.mix_engine.validation import mix_violations, validate_mix


def _mix(**percentages: float) -> list[MixtureComponent]:
    return [
        MixtureComponent(name=name, percentage=value, hex=get_paint(name).hex)
        for name, value in percentages.items()
    ]


def test_single_primary_is_practical():
    assert validate_mix(_mix(Cyan=100))


def test_two_primaries_with_a_neutral_is_practical():
    assert validate_mix(_mix(Cyan=40, Yellow=40, White=20))
    assert validate_mix(_mix(Magenta=50, Yellow=31, Black=19))


def test_three_primaries_are_practical():
    assert validate_mix(_mix(Cyan=34, Magenta=33, Yellow=33))


def test_sub_one_percent_component_is_rejected():
    assert mix_violations(_mix(Cyan=99.5, Magenta=0.5)) == ["impractical_percentage"]


def test_more_than_three_components_is_rejected():
    assert "too_many_colors" in mix_violations(
        _mix(Cyan=30, Magenta=30, Yellow=30, White=10)
    )


def test_white_with_black_is_always_rejected():
    for extra in ({}, {"Cyan": 98}, {"Cyan": 50, "Magenta": 48}):
        components = _mix(**extra, White=1, Black=1)
        assert not validate_mix(components)
        assert "white_and_black" in mix_violations(components)


def test_mixture_without_primary_is_rejected():
    assert mix_violations(_mix(White=40)) == ["no_primary"]
    assert "no_primary" in mix_violations(_mix(Black=100))
    assert "no_primary" in mix_violations([])


def test_white_limit_is_exclusive():
    assert validate_mix(_mix(Cyan=51, White=49))
    assert mix_violations(_mix(Cyan=50, White=50)) == ["too_much_white"]


def test_black_limit_is_exclusive():
    assert validate_mix(_mix(Yellow=81, Black=19))
    assert mix_violations(_mix(Yellow=80, Black=20)) == ["too_much_black"]


def test_neutral_total_limit():
    violations = mix_violations(_mix(Cyan=40, White=45, Black=15))
    assert "too_much_neutral" in violations
    assert "white_and_black" in violations


def test_adjacent_primary_rule_never_rejects_real_pairs():
    primaries = [paint.name for paint in PAINT_COLORS if paint.role == "primary"]
    for i, first in enumerate(primaries):
        for second in primaries[i + 1 :]:
            violations = mix_violations(_mix(**{first: 50, second: 50}))
            assert "non_adjacent_primaries" not in violations


def test_validation_does_not_mutate_input():
    components = _mix(Cyan=60, Magenta=30, White=10)
    snapshot = list(components)
    validate_mix(components)
    assert components == snapshot
