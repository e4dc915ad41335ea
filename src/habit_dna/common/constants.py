"""Centralized constants for HabitDNA."""


# ===== FINGERPRINT =====
class FingerprintConstants:
    ALGORITHM_VERSION = "1.0"
    SEQUENCE_LENGTH = 13
    SUFFIX_LENGTH = 8
    VISUAL_PATTERN_STEPS = 20

    # Palette used when the activity log is empty
    NEUTRAL_PRIMARY = "#6B7280"
    NEUTRAL_SECONDARY = "#9CA3AF"
    NEUTRAL_ACCENT = "#D1D5DB"


# ===== STORAGE =====
class StoreConstants:
    DEFAULT_MAX_REGENERATE_RETRIES = 3
    DEFAULT_PUBLIC_LIST_LIMIT = 50
    RECORD_SUFFIX = ".json"
