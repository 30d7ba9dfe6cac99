"""
Combatant Effect Registry

Apply/remove/query operations over a combatant's ordered status_effects list.
After every mutation:
- at most one primary condition is active
- at most one effect of any kind is active (re-applying replaces, never stacks)
"""

import logging
from typing import Optional, Union

from creature_status.effect_catalog import parse_kind, run_on_apply, run_on_remove
from creature_status.enums import StatusEffectKind, PRIMARY_STATUS_KINDS
from creature_status.schema.combatant import Combatant
from creature_status.schema.status_effect import StatusEffect

logger = logging.getLogger(__name__)


def apply_status_effect(combatant: Combatant, effect: StatusEffect) -> bool:
    """Attach an effect to a combatant.

    Returns False (no change) when the effect is primary and a primary condition
    is already active. Otherwise replaces any effect of the same kind, appends
    the new one and runs its on-apply hook.
    """
    kind = parse_kind(effect.kind)
    if kind is None:
        return False
    effect.kind = kind

    if kind.is_primary():
        existing = get_primary_status_effect(combatant)
        if existing is not None:
            logger.debug("%s already has %s; %s failed to take hold", combatant.name, existing.kind.value, kind.value)
            return False

    remove_status_effect(combatant, kind)
    combatant.status_effects.append(effect)
    run_on_apply(effect, combatant)
    logger.debug("%s gained %s (duration=%d, severity=%d, source=%s)", combatant.name, kind.value, effect.duration, effect.severity, effect.source)
    return True


def remove_status_effect(combatant: Combatant, kind: Union[StatusEffectKind, str]) -> bool:
    """Remove the effect of the given kind, running its on-remove hook first.

    Returns True if an effect was present and removed.
    """
    kind = parse_kind(kind)
    if kind is None:
        return False

    for index, effect in enumerate(combatant.status_effects):
        if effect.kind == kind:
            run_on_remove(effect, combatant)
            del combatant.status_effects[index]
            logger.debug("%s lost %s", combatant.name, kind.value)
            return True
    return False


def get_status_effects(combatant: Combatant, kind: Optional[Union[StatusEffectKind, str]] = None) -> list[StatusEffect]:
    """Return active effects, optionally filtered to one kind. The returned list is a copy."""
    if kind is None:
        return list(combatant.status_effects)
    kind = parse_kind(kind)
    if kind is None:
        return []
    return [effect for effect in combatant.status_effects if effect.kind == kind]


def has_status_effect(combatant: Combatant, kind: Union[StatusEffectKind, str]) -> bool:
    return len(get_status_effects(combatant, kind)) > 0


def get_primary_status_effect(combatant: Combatant) -> Optional[StatusEffect]:
    """Return the active primary condition (burn, freeze, ...) or None"""
    for effect in combatant.status_effects:
        if effect.kind in PRIMARY_STATUS_KINDS:
            return effect
    return None


def clear_all_status_effects(combatant: Combatant) -> None:
    """Remove every effect, running each on-remove hook in current order"""
    for effect in combatant.status_effects:
        run_on_remove(effect, combatant)
    combatant.status_effects = []
    logger.debug("%s had all status effects cleared", combatant.name)


def cure_primary_status(combatant: Combatant) -> Optional[StatusEffect]:
    """Remove the primary condition, if any, and return it"""
    primary = get_primary_status_effect(combatant)
    if primary is None:
        return None
    remove_status_effect(combatant, primary.kind)
    return primary


def remove_switch_out_effects(combatant: Combatant) -> list[StatusEffectKind]:
    """Drop every effect that lasts until the combatant leaves battle.

    Returns the removed kinds in insertion order.
    """
    removed = [effect.kind for effect in combatant.status_effects if effect.is_permanent()]
    for kind in removed:
        remove_status_effect(combatant, kind)
    return removed
