from pydantic import BaseModel, Field, model_validator

from creature_status.schema.status_effect import StatusEffect


class Combatant(BaseModel):
    """Battling creature as seen by the status engine.

    Only the fields the status rules read are modelled here; the battle loop owns the rest.
    """

    name: str = Field(max_length=32)

    # Health
    health: int = Field(ge=0)
    max_health: int = Field(ge=1)

    # Base stats
    attack: int = Field(ge=0)
    defense: int = Field(ge=0)
    speed: int = Field(ge=0)
    intelligence: int = Field(ge=0)
    stamina: int = Field(ge=0)

    # Active conditions, insertion ordered
    status_effects: list[StatusEffect] = Field(default_factory=list)

    @model_validator(mode="after")
    def _health_within_max(self) -> "Combatant":
        if self.health > self.max_health:
            raise ValueError("health cannot exceed max_health")
        return self

    def take_damage(self, damage: int) -> int:
        """Subtract damage, keeping health within [0, max_health]. Returns the new health."""
        self.health = max(0, min(self.max_health, self.health - damage))
        return self.health
