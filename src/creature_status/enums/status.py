from enum import Enum, IntEnum
from typing import NamedTuple, Optional


class StatusCategory(Enum):
    """Exclusivity class of a status condition"""

    PRIMARY = "primary"  # At most one per combatant
    SECONDARY = "secondary"  # Coexists with anything of a different kind


class BattleStat(str, Enum):
    """Stats that stage-modifier effects can raise or lower"""

    ATTACK = "attack"
    DEFENSE = "defense"
    SPEED = "speed"
    INTELLIGENCE = "intelligence"
    ACCURACY = "accuracy"
    EVASION = "evasion"


class StageDirection(IntEnum):
    """Sign applied to a stage-modifier's severity"""

    UP = 1
    DOWN = -1


class StageModifier(NamedTuple):
    """Tagged (stat, direction) pair carried by a stage-modifier kind"""

    stat: BattleStat
    direction: StageDirection


class StatusEffectKind(str, Enum):
    """Closed set of status conditions a combatant can hold"""

    # Primary status conditions (mutually exclusive)
    BURN = "burn"
    FREEZE = "freeze"
    PARALYSIS = "paralysis"
    POISON = "poison"
    SLEEP = "sleep"

    # Secondary status conditions
    CONFUSION = "confusion"
    FLINCH = "flinch"
    INFATUATION = "infatuation"
    TAUNT = "taunt"

    # Stat stage modifiers
    ATTACK_UP = "attack_up"
    ATTACK_DOWN = "attack_down"
    DEFENSE_UP = "defense_up"
    DEFENSE_DOWN = "defense_down"
    SPEED_UP = "speed_up"
    SPEED_DOWN = "speed_down"
    INTELLIGENCE_UP = "intelligence_up"
    INTELLIGENCE_DOWN = "intelligence_down"
    ACCURACY_UP = "accuracy_up"
    ACCURACY_DOWN = "accuracy_down"
    EVASION_UP = "evasion_up"
    EVASION_DOWN = "evasion_down"

    # =========================================================================
    # CATEGORY CHECKS
    # =========================================================================

    @property
    def category(self) -> StatusCategory:
        return StatusCategory.PRIMARY if self in PRIMARY_STATUS_KINDS else StatusCategory.SECONDARY

    def is_primary(self) -> bool:
        """Check if this kind is one of the mutually exclusive primary conditions"""
        return self.category is StatusCategory.PRIMARY

    def is_secondary(self) -> bool:
        return self.category is StatusCategory.SECONDARY

    # =========================================================================
    # STAGE MODIFIER MAPPING
    # =========================================================================

    def stage_modifier(self) -> Optional[StageModifier]:
        """Return the (stat, direction) pair for stage kinds, None otherwise"""
        return _STAGE_MODIFIERS.get(self)

    def is_stage_modifier(self) -> bool:
        return self in _STAGE_MODIFIERS

    @classmethod
    def for_stage(cls, stat: BattleStat, direction: StageDirection) -> "StatusEffectKind":
        """Look up the stage kind for a stat and direction, e.g. (SPEED, DOWN) -> SPEED_DOWN"""
        return _STAGE_KINDS[StageModifier(BattleStat(stat), StageDirection(direction))]


PRIMARY_STATUS_KINDS = frozenset(
    {
        StatusEffectKind.BURN,
        StatusEffectKind.FREEZE,
        StatusEffectKind.PARALYSIS,
        StatusEffectKind.POISON,
        StatusEffectKind.SLEEP,
    }
)

_STAGE_MODIFIERS: dict[StatusEffectKind, StageModifier] = {
    StatusEffectKind.ATTACK_UP: StageModifier(BattleStat.ATTACK, StageDirection.UP),
    StatusEffectKind.ATTACK_DOWN: StageModifier(BattleStat.ATTACK, StageDirection.DOWN),
    StatusEffectKind.DEFENSE_UP: StageModifier(BattleStat.DEFENSE, StageDirection.UP),
    StatusEffectKind.DEFENSE_DOWN: StageModifier(BattleStat.DEFENSE, StageDirection.DOWN),
    StatusEffectKind.SPEED_UP: StageModifier(BattleStat.SPEED, StageDirection.UP),
    StatusEffectKind.SPEED_DOWN: StageModifier(BattleStat.SPEED, StageDirection.DOWN),
    StatusEffectKind.INTELLIGENCE_UP: StageModifier(BattleStat.INTELLIGENCE, StageDirection.UP),
    StatusEffectKind.INTELLIGENCE_DOWN: StageModifier(BattleStat.INTELLIGENCE, StageDirection.DOWN),
    StatusEffectKind.ACCURACY_UP: StageModifier(BattleStat.ACCURACY, StageDirection.UP),
    StatusEffectKind.ACCURACY_DOWN: StageModifier(BattleStat.ACCURACY, StageDirection.DOWN),
    StatusEffectKind.EVASION_UP: StageModifier(BattleStat.EVASION, StageDirection.UP),
    StatusEffectKind.EVASION_DOWN: StageModifier(BattleStat.EVASION, StageDirection.DOWN),
}

_STAGE_KINDS: dict[StageModifier, StatusEffectKind] = {pair: kind for kind, pair in _STAGE_MODIFIERS.items()}
