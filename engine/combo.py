"""Streak and multiplier tracking."""

from .config import MULTIPLIER_LADDER, ON_FIRE_STREAK
from .models import ComboState


def multiplier_for(streak: int, ladder=MULTIPLIER_LADDER) -> float:
    """Multiplier of the highest ladder step the streak has reached."""
    for min_streak, multiplier in sorted(ladder, reverse=True):
        if streak >= min_streak:
            return multiplier
    return 1.0


class ComboTracker:
    """Counts consecutive correct answers within a round."""

    def __init__(self, ladder=MULTIPLIER_LADDER, on_fire_at: int = ON_FIRE_STREAK):
        self.ladder = tuple(ladder)
        self.on_fire_at = on_fire_at
        self.reset()

    def reset(self) -> None:
        self.streak = 0
        self.multiplier = 1.0
        self.max_reached = 0
        self.on_fire = False

    def hit(self) -> ComboState:
        self.streak += 1
        self.multiplier = multiplier_for(self.streak, self.ladder)
        self.max_reached = max(self.max_reached, self.streak)
        self.on_fire = self.streak >= self.on_fire_at
        return self.state()

    def miss(self) -> ComboState:
        """Wrong answer or skip. The round's peak streak is kept."""
        self.streak = 0
        self.multiplier = 1.0
        self.on_fire = False
        return self.state()

    def state(self) -> ComboState:
        return ComboState(
            streak=self.streak,
            multiplier=self.multiplier,
            max_reached=self.max_reached,
            on_fire=self.on_fire,
        )
