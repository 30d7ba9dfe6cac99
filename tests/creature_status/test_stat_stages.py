import pytest

from creature_status.effect_factory import create_status_effect, create_stage_effect
from creature_status.enums import StatusEffectKind, BattleStat
from creature_status.schema.combatant import Combatant
from creature_status.stat_stages import get_net_stage, get_stat_multiplier, stage_to_multiplier, apply_stat_multiplier
from creature_status.status_registry import apply_status_effect, remove_status_effect
from creature_status.utils.combatant_factory import create_combatant


def make_mon() -> Combatant:
    return create_combatant("Pika", max_health=100, attack=100)


def boost(mon: Combatant, kind: StatusEffectKind, severity: int) -> None:
    assert apply_status_effect(mon, create_status_effect(kind, severity=severity))


@pytest.mark.parametrize(
    "stage, expected",
    [
        (0, 1.0),
        (1, 1.5),
        (2, 2.0),
        (6, 4.0),
        (-1, 2 / 3),
        (-2, 0.5),
        (-6, 0.25),
        (9, 4.0),
        (-12, 0.25),
    ],
)
def test_stage_to_multiplier(stage, expected):
    assert stage_to_multiplier(stage) == pytest.approx(expected)


def test_unmodified_stat_is_neutral():
    mon = make_mon()
    assert get_net_stage(mon, BattleStat.ATTACK) == 0
    assert get_stat_multiplier(mon, BattleStat.ATTACK) == 1.0


def test_up_and_down_net_out():
    """attack_up x2 with attack_down x1 -> stage 1 -> 1.5"""
    mon = make_mon()
    boost(mon, StatusEffectKind.ATTACK_UP, 2)
    boost(mon, StatusEffectKind.ATTACK_DOWN, 1)
    assert get_net_stage(mon, BattleStat.ATTACK) == 1
    assert get_stat_multiplier(mon, BattleStat.ATTACK) == 1.5


def test_stage_is_clamped_to_six():
    mon = make_mon()
    boost(mon, StatusEffectKind.SPEED_UP, 6)
    assert get_net_stage(mon, BattleStat.SPEED) == 6
    assert get_stat_multiplier(mon, BattleStat.SPEED) == 4.0

    apply_status_effect(mon, create_status_effect(StatusEffectKind.SPEED_UP, severity=10))
    assert get_net_stage(mon, BattleStat.SPEED) == 6


def test_negative_stage_is_clamped_to_minus_six():
    mon = make_mon()
    apply_status_effect(mon, create_status_effect(StatusEffectKind.EVASION_DOWN, severity=8))
    assert get_net_stage(mon, BattleStat.EVASION) == -6
    assert get_stat_multiplier(mon, BattleStat.EVASION) == 0.25


def test_stats_are_independent():
    mon = make_mon()
    boost(mon, StatusEffectKind.DEFENSE_DOWN, 2)
    boost(mon, StatusEffectKind.ACCURACY_UP, 1)
    assert get_stat_multiplier(mon, BattleStat.DEFENSE) == 0.5
    assert get_stat_multiplier(mon, BattleStat.ACCURACY) == 1.5
    assert get_stat_multiplier(mon, BattleStat.INTELLIGENCE) == 1.0


def test_multiplier_follows_live_effects():
    mon = make_mon()
    boost(mon, StatusEffectKind.INTELLIGENCE_UP, 2)
    assert get_stat_multiplier(mon, BattleStat.INTELLIGENCE) == 2.0
    remove_status_effect(mon, StatusEffectKind.INTELLIGENCE_UP)
    assert get_stat_multiplier(mon, BattleStat.INTELLIGENCE) == 1.0


def test_stat_names_accepted_as_strings():
    mon = make_mon()
    apply_status_effect(mon, create_stage_effect(BattleStat.DEFENSE, -1))
    assert get_stat_multiplier(mon, "defense") == pytest.approx(2 / 3)


def test_unknown_stat_name_is_neutral(caplog):
    mon = make_mon()
    boost(mon, StatusEffectKind.ATTACK_UP, 2)
    assert get_stat_multiplier(mon, "luck") == 1.0
    assert "luck" in caplog.text


def test_non_stage_effects_do_not_count():
    mon = make_mon()
    apply_status_effect(mon, create_status_effect(StatusEffectKind.BURN, 5, severity=4))
    assert get_net_stage(mon, BattleStat.ATTACK) == 0


def test_apply_stat_multiplier_uses_integer_math():
    mon = make_mon()
    apply_status_effect(mon, create_stage_effect(BattleStat.ATTACK, -1))
    assert apply_stat_multiplier(100, mon, BattleStat.ATTACK) == 66
    apply_status_effect(mon, create_stage_effect(BattleStat.SPEED, 3))
    assert apply_stat_multiplier(45, mon, BattleStat.SPEED) == 112
