from typing import Optional

from creature_status.config import DEFAULT_SETTINGS, StatusEffectSettings
from creature_status.constants import MIN_STAGE_SEVERITY, MAX_STAGE_SEVERITY, PERMANENT_DURATION
from creature_status.effect_catalog import get_status_message
from creature_status.enums import StatusEffectKind, BattleStat, StageDirection
from creature_status.schema.status_effect import StatusEffect


def create_status_effect(
    kind: StatusEffectKind,
    duration: Optional[int] = None,
    severity: int = 1,
    source: str = "unknown",
    settings: StatusEffectSettings = DEFAULT_SETTINGS,
) -> StatusEffect:
    """Build a status effect record with its display message.

    When duration is omitted the configured default for the kind is used
    (permanent for kinds without one).
    """
    kind = StatusEffectKind(kind)
    if duration is None:
        duration = settings.default_duration(kind)
    return StatusEffect(
        kind=kind,
        duration=duration,
        severity=severity,
        source=source,
        message=get_status_message(kind, severity),
    )


def create_stage_effect(stat: BattleStat, stages: int, source: str = "unknown") -> Optional[StatusEffect]:
    """Build an up/down stage effect from a signed stage delta, e.g. (SPEED, -2) -> speed_down x2.

    Returns None for a zero delta. Stage effects last until the combatant leaves battle.
    """
    if stages == 0:
        return None
    direction = StageDirection.UP if stages > 0 else StageDirection.DOWN
    severity = max(MIN_STAGE_SEVERITY, min(MAX_STAGE_SEVERITY, abs(stages)))
    kind = StatusEffectKind.for_stage(stat, direction)
    return create_status_effect(kind, duration=PERMANENT_DURATION, severity=severity, source=source)
