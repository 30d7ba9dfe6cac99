from creature_status.enums.status import StatusEffectKind, StatusCategory, BattleStat, StageDirection, StageModifier, PRIMARY_STATUS_KINDS
