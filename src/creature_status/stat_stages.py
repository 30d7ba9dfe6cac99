"""
Stat stage calculation

Stages are recomputed on every query from the combatant's active up/down
effects, so there is no running counter to keep in sync:

    net stage = sum(severity of <stat>_up) - sum(severity of <stat>_down), clamped to [-6, 6]
    stage >= 0 -> (2 + stage) / 2
    stage <  0 -> 2 / (2 + |stage|)
"""

import logging
from typing import Union

from creature_status.constants import MIN_STAT_STAGE, MAX_STAT_STAGE
from creature_status.effect_catalog import parse_kind
from creature_status.enums import BattleStat
from creature_status.schema.combatant import Combatant

logger = logging.getLogger(__name__)


def _clamp_stage(stage: int) -> int:
    return max(MIN_STAT_STAGE, min(MAX_STAT_STAGE, stage))


def stage_ratio(stage: int) -> tuple[int, int]:
    """(numerator, denominator) of the multiplier for a stage"""
    stage = _clamp_stage(stage)
    if stage >= 0:
        return 2 + stage, 2
    return 2, 2 + abs(stage)


def stage_to_multiplier(stage: int) -> float:
    """Convert a stage to its multiplier; out-of-range stages are clamped first"""
    numerator, denominator = stage_ratio(stage)
    return numerator / denominator


def get_net_stage(combatant: Combatant, stat: Union[BattleStat, str]) -> int:
    """Net clamped stage for a stat from all active stage-modifier effects.

    Unknown stat names have no modifiers and yield 0.
    """
    try:
        stat = BattleStat(stat)
    except ValueError:
        logger.warning("Ignoring stage lookup for unrecognized stat %r", stat)
        return 0

    total = 0
    for effect in combatant.status_effects:
        kind = parse_kind(effect.kind)
        if kind is None:
            continue
        modifier = kind.stage_modifier()
        if modifier is not None and modifier.stat is stat:
            total += modifier.direction * effect.severity
    return _clamp_stage(total)


def get_stat_multiplier(combatant: Combatant, stat: Union[BattleStat, str]) -> float:
    """Multiplier the damage/accuracy formulas apply to a stat (1.0 when unmodified)"""
    return stage_to_multiplier(get_net_stage(combatant, stat))


def apply_stat_multiplier(base_stat: int, combatant: Combatant, stat: Union[BattleStat, str]) -> int:
    """Base stat scaled by the current stage, rounded down with integer math"""
    numerator, denominator = stage_ratio(get_net_stage(combatant, stat))
    return (base_stat * numerator) // denominator
