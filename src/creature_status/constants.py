# =============================================================================
# STAT STAGE CONSTANTS
# =============================================================================
MIN_STAT_STAGE = -6
MAX_STAT_STAGE = 6

# Severity bounds for stage-modifier effects (stage delta carried by one effect)
MIN_STAGE_SEVERITY = 1
MAX_STAGE_SEVERITY = 6

# =============================================================================
# DURATION SENTINELS
# =============================================================================
PERMANENT_DURATION = -1  # Lasts until the combatant leaves battle

# =============================================================================
# TICK RESULT SENTINELS
# =============================================================================
CANNOT_ACT = -1  # Tick result meaning "combatant may not act this turn"

# =============================================================================
# PASSIVE DAMAGE - fraction of max health lost per tick
# =============================================================================
BURN_DAMAGE_DIVISOR = 16  # 1/16 max health
POISON_DAMAGE_DIVISOR = 8  # 1/8 max health
MIN_PASSIVE_DAMAGE = 1

# =============================================================================
# PER-TICK CHANCES (percent, 0-100)
# =============================================================================
FREEZE_THAW_CHANCE = 20
PARALYSIS_IMMOBILE_CHANCE = 25
CONFUSION_SELF_HIT_CHANCE = 33
CONFUSION_ATTACK_RATIO = 0.4  # Self-hit damage = floor(attack * ratio)

# =============================================================================
# DEFAULT DURATIONS (turns) - kinds not listed default to PERMANENT_DURATION
# =============================================================================
DEFAULT_STATUS_DURATIONS = {
    "sleep": 3,
    "paralysis": 4,
    "poison": 5,
    "burn": 5,
    "freeze": 2,
    "confusion": 3,
}
