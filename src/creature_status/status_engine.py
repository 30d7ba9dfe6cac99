from typing import Optional, Union

from creature_status.config import DEFAULT_SETTINGS, StatusEffectSettings
from creature_status.effect_factory import create_status_effect
from creature_status.end_turn_effects import StatusTickProcessor
from creature_status.enums import StatusEffectKind, BattleStat
from creature_status.schema.combatant import Combatant
from creature_status.schema.status_effect import StatusEffect, TickOutcome
from creature_status import stat_stages, status_registry
from creature_status.utils.rng import BattleRng, RandomSource


class StatusEffectEngine:
    """
    Entry point for the battle loop

    Bundles one battle's random generator and balance settings with the
    status operations the loop needs:
    - apply() when a move or ability inflicts a condition
    - process_turn() once per combatant at each turn boundary
    - get_multiplier() wherever a stat is read
    - remove()/has()/get_primary()/clear_all() for cures, switch-outs and cleanup

    Not thread-safe; the battle loop serializes calls for one battle.
    """

    def __init__(self, rng: Optional[RandomSource] = None, settings: StatusEffectSettings = DEFAULT_SETTINGS, seed: Optional[int] = None):
        self.rng = rng if rng is not None else BattleRng(seed)
        self.settings = settings
        self.tick_processor = StatusTickProcessor(self.rng, settings)

    def create(self, kind: StatusEffectKind, duration: Optional[int] = None, severity: int = 1, source: str = "unknown") -> StatusEffect:
        return create_status_effect(kind, duration, severity, source, settings=self.settings)

    def apply(self, combatant: Combatant, effect: StatusEffect) -> bool:
        return status_registry.apply_status_effect(combatant, effect)

    def inflict(self, combatant: Combatant, kind: StatusEffectKind, duration: Optional[int] = None, severity: int = 1, source: str = "unknown") -> bool:
        """Create and apply in one step; False if the condition failed to take hold"""
        return self.apply(combatant, self.create(kind, duration, severity, source))

    def process_turn(self, combatant: Combatant) -> list[TickOutcome]:
        return self.tick_processor.process_turn(combatant)

    def can_act(self, outcomes: list[TickOutcome]) -> bool:
        """True unless some effect blocked the combatant's action this turn"""
        return all(outcome.can_act for outcome in outcomes)

    def get_multiplier(self, combatant: Combatant, stat: Union[BattleStat, str]) -> float:
        return stat_stages.get_stat_multiplier(combatant, stat)

    def remove(self, combatant: Combatant, kind: Union[StatusEffectKind, str]) -> bool:
        return status_registry.remove_status_effect(combatant, kind)

    def has(self, combatant: Combatant, kind: Union[StatusEffectKind, str]) -> bool:
        return status_registry.has_status_effect(combatant, kind)

    def get_all(self, combatant: Combatant, kind: Optional[Union[StatusEffectKind, str]] = None) -> list[StatusEffect]:
        return status_registry.get_status_effects(combatant, kind)

    def get_primary(self, combatant: Combatant) -> Optional[StatusEffect]:
        return status_registry.get_primary_status_effect(combatant)

    def clear_all(self, combatant: Combatant) -> None:
        status_registry.clear_all_status_effects(combatant)

    def switch_out(self, combatant: Combatant) -> list[StatusEffectKind]:
        """Drop effects that last only while the combatant stays in battle"""
        return status_registry.remove_switch_out_effects(combatant)
