"""
Effect Catalog

Stateless tables keyed by StatusEffectKind:
- display messages for applying and ticking an effect
- per-kind tick behavior (passive damage, action blocking, self-cure)
- optional on-apply / on-remove hooks

Tick behaviors return a non-negative damage amount, or CANNOT_ACT when the
combatant loses its action this turn.
"""

import logging
import math
from typing import Callable, Optional, Union

from creature_status.config import StatusEffectSettings
from creature_status.constants import CANNOT_ACT, MIN_PASSIVE_DAMAGE, PERMANENT_DURATION
from creature_status.enums import StatusEffectKind
from creature_status.schema.combatant import Combatant
from creature_status.schema.status_effect import StatusEffect
from creature_status.utils.rng import RandomSource

logger = logging.getLogger(__name__)

TickBehavior = Callable[[StatusEffect, Combatant, RandomSource, StatusEffectSettings], int]
EffectHook = Callable[[StatusEffect, Combatant], None]

DEFAULT_STATUS_MESSAGE = "is affected by a status condition!"


def parse_kind(value: Union[StatusEffectKind, str]) -> Optional[StatusEffectKind]:
    """Convert external input to a StatusEffectKind.

    Unknown values are logged and yield None so callers can treat them as a no-op.
    """
    if isinstance(value, StatusEffectKind):
        return value
    try:
        return StatusEffectKind(value)
    except ValueError:
        logger.warning("Ignoring unrecognized status effect kind %r", value)
        return None


def format_message(combatant: Combatant, message: str) -> str:
    """Prefix a catalog message with the combatant's name for display."""
    if not message:
        return ""
    return f"{combatant.name} {message}"


# =============================================================================
# MESSAGES
# =============================================================================


def get_status_message(kind: StatusEffectKind, severity: int) -> str:
    """Message shown when an effect takes hold"""
    stage = kind.stage_modifier()
    if stage is not None:
        verb = "rose" if stage.direction > 0 else "fell"
        sharply = "sharply " if severity > 1 else ""
        return f"{stage.stat.value} {sharply}{verb}!"

    match kind:
        case StatusEffectKind.BURN:
            return "is burned!"
        case StatusEffectKind.FREEZE:
            return "is frozen solid!"
        case StatusEffectKind.PARALYSIS:
            return "is paralyzed!"
        case StatusEffectKind.POISON:
            return "is poisoned!"
        case StatusEffectKind.SLEEP:
            return "fell asleep!"
        case StatusEffectKind.CONFUSION:
            return "is confused!"
        case StatusEffectKind.FLINCH:
            return "flinched!"
        case StatusEffectKind.INFATUATION:
            return "fell in love!"
        case StatusEffectKind.TAUNT:
            return "fell for the taunt!"
        case _:
            return DEFAULT_STATUS_MESSAGE


def get_tick_message(kind: StatusEffectKind, damage: int, can_act: bool) -> str:
    """Message reported for one end-of-turn tick; empty when there is nothing to say"""
    match kind:
        case StatusEffectKind.BURN:
            return f"is hurt by its burn! ({damage} damage)"
        case StatusEffectKind.POISON:
            return f"is hurt by poison! ({damage} damage)"
        case StatusEffectKind.FREEZE:
            return "thawed out!" if can_act else "is frozen and cannot move!"
        case StatusEffectKind.PARALYSIS:
            return "" if can_act else "is paralyzed and cannot move!"
        case StatusEffectKind.SLEEP:
            return "woke up!" if can_act else "is fast asleep!"
        case StatusEffectKind.CONFUSION:
            return f"hurt itself in confusion! ({damage} damage)" if damage > 0 else "is confused!"
        case _:
            return ""


# =============================================================================
# TICK BEHAVIORS
# =============================================================================


def _passive_damage(combatant: Combatant, divisor: int) -> int:
    damage = max(MIN_PASSIVE_DAMAGE, combatant.max_health // divisor)
    combatant.take_damage(damage)
    return damage


def _tick_burn(effect: StatusEffect, combatant: Combatant, rng: RandomSource, settings: StatusEffectSettings) -> int:
    return _passive_damage(combatant, settings.burn_damage_divisor)


def _tick_poison(effect: StatusEffect, combatant: Combatant, rng: RandomSource, settings: StatusEffectSettings) -> int:
    return _passive_damage(combatant, settings.poison_damage_divisor)


def _tick_freeze(effect: StatusEffect, combatant: Combatant, rng: RandomSource, settings: StatusEffectSettings) -> int:
    from creature_status.status_registry import remove_status_effect

    if rng.roll_percent(settings.freeze_thaw_chance):
        remove_status_effect(combatant, effect.kind)
        return 0
    return CANNOT_ACT


def _tick_paralysis(effect: StatusEffect, combatant: Combatant, rng: RandomSource, settings: StatusEffectSettings) -> int:
    return CANNOT_ACT if rng.roll_percent(settings.paralysis_immobile_chance) else 0


def _tick_sleep(effect: StatusEffect, combatant: Combatant, rng: RandomSource, settings: StatusEffectSettings) -> int:
    from creature_status.status_registry import remove_status_effect

    # Wake on the last counted turn; a permanent sleep never counts down
    if effect.duration != PERMANENT_DURATION and effect.duration <= 1:
        remove_status_effect(combatant, effect.kind)
        return 0
    return CANNOT_ACT


def _tick_confusion(effect: StatusEffect, combatant: Combatant, rng: RandomSource, settings: StatusEffectSettings) -> int:
    # Self-hit only; confusion does not cancel the action
    if rng.roll_percent(settings.confusion_self_hit_chance):
        damage = math.floor(combatant.attack * settings.confusion_attack_ratio)
        combatant.take_damage(damage)
        return damage
    return 0


TICK_BEHAVIORS: dict[StatusEffectKind, TickBehavior] = {
    StatusEffectKind.BURN: _tick_burn,
    StatusEffectKind.POISON: _tick_poison,
    StatusEffectKind.FREEZE: _tick_freeze,
    StatusEffectKind.PARALYSIS: _tick_paralysis,
    StatusEffectKind.SLEEP: _tick_sleep,
    StatusEffectKind.CONFUSION: _tick_confusion,
}

# No kind needs an apply/remove side effect yet; the tables are consulted on every apply/remove
ON_APPLY_HOOKS: dict[StatusEffectKind, EffectHook] = {}
ON_REMOVE_HOOKS: dict[StatusEffectKind, EffectHook] = {}


def tick_effect(effect: StatusEffect, combatant: Combatant, rng: RandomSource, settings: StatusEffectSettings) -> int:
    """Run the tick behavior for an effect's kind; kinds without one do nothing"""
    kind = parse_kind(effect.kind)
    if kind is None:
        return 0
    behavior = TICK_BEHAVIORS.get(kind)
    if behavior is None:
        return 0
    return behavior(effect, combatant, rng, settings)


def run_on_apply(effect: StatusEffect, combatant: Combatant) -> None:
    hook = ON_APPLY_HOOKS.get(effect.kind)
    if hook is not None:
        hook(effect, combatant)


def run_on_remove(effect: StatusEffect, combatant: Combatant) -> None:
    hook = ON_REMOVE_HOOKS.get(effect.kind)
    if hook is not None:
        hook(effect, combatant)
