"""
End-Turn Status Effects

Runs once per combatant at the turn boundary: ticks every active status
effect, counts durations down, and removes effects that expire.
"""

import logging
from typing import Optional

from creature_status.config import DEFAULT_SETTINGS, StatusEffectSettings
from creature_status.constants import CANNOT_ACT
from creature_status.effect_catalog import get_tick_message, parse_kind, run_on_remove, tick_effect
from creature_status.schema.combatant import Combatant
from creature_status.schema.status_effect import StatusEffect, TickOutcome
from creature_status.utils.rng import BattleRng, RandomSource

logger = logging.getLogger(__name__)


class StatusTickProcessor:
    """
    Processes end-of-turn status effects for a combatant

    Randomness (freeze thaw, paralysis, confusion) comes from the injected
    generator so a seeded battle replays identically.
    """

    def __init__(self, rng: Optional[RandomSource] = None, settings: StatusEffectSettings = DEFAULT_SETTINGS):
        self.rng = rng if rng is not None else BattleRng()
        self.settings = settings

    def process_turn(self, combatant: Combatant) -> list[TickOutcome]:
        """
        Tick every effect active at the start of the call

        Effects are visited newest first and outcomes are reported in that same
        order. An effect removed earlier in the pass by another effect's tick is
        skipped.
        """
        outcomes: list[TickOutcome] = []

        for effect in reversed(list(combatant.status_effects)):
            if not self._is_active(combatant, effect):
                continue
            kind = parse_kind(effect.kind)
            if kind is None:
                continue
            effect.kind = kind
            outcomes.append(self._process_effect(combatant, effect))

        return outcomes

    def _process_effect(self, combatant: Combatant, effect: StatusEffect) -> TickOutcome:
        damage = 0
        can_act = True

        tick_result = tick_effect(effect, combatant, self.rng, self.settings)
        if tick_result == CANNOT_ACT:
            can_act = False
        elif tick_result > 0:
            damage = tick_result

        # Countdown, unless the tick already cured the effect (thaw, wake up)
        still_active = self._is_active(combatant, effect)
        if still_active and effect.duration > 0:
            effect.duration -= 1

        outcome = TickOutcome(
            kind=effect.kind,
            damage=damage,
            can_act=can_act,
            message=get_tick_message(effect.kind, damage, can_act),
        )
        logger.debug("%s: %s tick (damage=%d, can_act=%s, duration=%d)", combatant.name, effect.kind.value, damage, can_act, effect.duration)

        if still_active and effect.duration == 0:
            self._expire(combatant, effect)

        return outcome

    def _expire(self, combatant: Combatant, effect: StatusEffect) -> None:
        run_on_remove(effect, combatant)
        for index, active in enumerate(combatant.status_effects):
            if active is effect:
                del combatant.status_effects[index]
                break
        logger.debug("%s: %s wore off", combatant.name, effect.kind.value)

    @staticmethod
    def _is_active(combatant: Combatant, effect: StatusEffect) -> bool:
        return any(e is effect for e in combatant.status_effects)
