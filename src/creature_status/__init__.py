from creature_status.enums import StatusEffectKind, StatusCategory, BattleStat, StageDirection
from creature_status.schema.combatant import Combatant
from creature_status.schema.status_effect import StatusEffect, TickOutcome
from creature_status.effect_factory import create_status_effect, create_stage_effect
from creature_status.status_registry import (
    apply_status_effect,
    remove_status_effect,
    has_status_effect,
    get_status_effects,
    get_primary_status_effect,
    clear_all_status_effects,
)
from creature_status.end_turn_effects import StatusTickProcessor
from creature_status.stat_stages import get_stat_multiplier
from creature_status.status_engine import StatusEffectEngine
