from pydantic import BaseModel, Field

from creature_status.constants import PERMANENT_DURATION
from creature_status.enums import StatusEffectKind


class StatusEffect(BaseModel):
    """A status condition attached to one combatant.

    Records carry data only; per-kind behavior is dispatched from the effect catalog.
    """

    kind: StatusEffectKind
    duration: int = Field(ge=PERMANENT_DURATION)  # Turns remaining, -1 = until switched out
    severity: int = Field(default=1, ge=0)  # Stage delta (1-6) for stage kinds, magnitude otherwise
    source: str = "unknown"  # ID of the combatant/move that caused this effect
    message: str = ""  # Display text produced when the effect is applied

    def is_permanent(self) -> bool:
        return self.duration == PERMANENT_DURATION


class TickOutcome(BaseModel):
    """Result of one effect's end-of-turn tick"""

    kind: StatusEffectKind
    damage: int = Field(default=0, ge=0)
    can_act: bool = True
    message: str = ""
