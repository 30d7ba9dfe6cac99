from pydantic import BaseModel, Field

from creature_status.constants import (
    BURN_DAMAGE_DIVISOR,
    POISON_DAMAGE_DIVISOR,
    FREEZE_THAW_CHANCE,
    PARALYSIS_IMMOBILE_CHANCE,
    CONFUSION_SELF_HIT_CHANCE,
    CONFUSION_ATTACK_RATIO,
    DEFAULT_STATUS_DURATIONS,
    PERMANENT_DURATION,
)
from creature_status.enums import StatusEffectKind


class StatusEffectSettings(BaseModel):
    """Balance knobs for status conditions.

    Defaults mirror the shipped battle balance; tests and alternate rule sets
    construct their own instance and pass it to the processor/engine.
    """

    # Passive damage divisors (damage = max(1, max_health // divisor))
    burn_damage_divisor: int = Field(default=BURN_DAMAGE_DIVISOR, ge=1)
    poison_damage_divisor: int = Field(default=POISON_DAMAGE_DIVISOR, ge=1)

    # Per-tick chances in percent
    freeze_thaw_chance: int = Field(default=FREEZE_THAW_CHANCE, ge=0, le=100)
    paralysis_immobile_chance: int = Field(default=PARALYSIS_IMMOBILE_CHANCE, ge=0, le=100)
    confusion_self_hit_chance: int = Field(default=CONFUSION_SELF_HIT_CHANCE, ge=0, le=100)
    confusion_attack_ratio: float = Field(default=CONFUSION_ATTACK_RATIO, ge=0.0)

    # Durations used when an effect is created without an explicit duration
    default_durations: dict[StatusEffectKind, int] = Field(
        default_factory=lambda: {StatusEffectKind(kind): turns for kind, turns in DEFAULT_STATUS_DURATIONS.items()}
    )

    def default_duration(self, kind: StatusEffectKind) -> int:
        return self.default_durations.get(kind, PERMANENT_DURATION)


DEFAULT_SETTINGS = StatusEffectSettings()
