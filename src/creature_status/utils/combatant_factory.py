from typing import Optional

from creature_status.schema.combatant import Combatant


def create_combatant(
    name: str,
    max_health: int = 100,
    attack: int = 50,
    defense: int = 50,
    speed: int = 50,
    intelligence: int = 50,
    stamina: int = 50,
    health: Optional[int] = None,
) -> Combatant:
    """Build a combatant at full health (or at the given health) with no active effects"""
    return Combatant(
        name=name,
        health=max_health if health is None else health,
        max_health=max_health,
        attack=attack,
        defense=defense,
        speed=speed,
        intelligence=intelligence,
        stamina=stamina,
    )
