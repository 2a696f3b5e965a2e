"""Configuration constants for the quiz session engine."""

# Per-question scoring
BASE_POINTS = 100
TIME_BONUS_MAX = 50
TIME_BONUS_THRESHOLD_MS = 5000   # Answers faster than this earn a time bonus
HINT_PENALTY = 25
HINT_FLOOR = 10                  # Minimum score when the penalty is applied before multipliers

# Round bonuses
STREAK_BONUS_PER_STEP = 15
SPEED_BONUS_TIERS = ((5000, 150), (8000, 75))  # (average ms below, bonus)
PERFECT_ROUND_BONUS = 500
NO_HINTS_BONUS = 200

# Stars awarded by accuracy
STAR_THRESHOLDS = (95, 80, 60)   # three, two, one
COMPLETION_ACCURACY = 70         # Rounds at or above count as completed

# Combo ladder: (minimum streak, multiplier), highest first
MULTIPLIER_LADDER = ((12, 3.0), (8, 2.5), (5, 2.0), (3, 1.5))
ON_FIRE_STREAK = 8

# Difficulty tiers: tier -> (option count, score multiplier)
TIER_OPTIONS = {1: 3, 2: 4, 3: 4, 4: 5}
TIER_MULTIPLIERS = {1: 1.0, 2: 1.5, 3: 2.0, 4: 3.0}

# Pacing (seconds)
COUNTDOWN_SECONDS = 3
ANSWER_ADVANCE_DELAY = 0.5       # After an answer, before the next challenge
ANSWER_FINISH_DELAY = 0.8        # After the last answer, before results
SKIP_FINISH_DELAY = 0.5          # After skipping the last challenge
TICK_SECONDS = 1.0

# Persistence
PROGRESS_VERSION = 1
DEFAULT_NAMESPACE = 'default'
