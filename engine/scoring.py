"""Per-challenge and per-round scoring."""

import math
from dataclasses import dataclass
from enum import Enum

from .config import (
    BASE_POINTS, TIME_BONUS_MAX, TIME_BONUS_THRESHOLD_MS,
    HINT_PENALTY, HINT_FLOOR, STREAK_BONUS_PER_STEP, SPEED_BONUS_TIERS,
    PERFECT_ROUND_BONUS, NO_HINTS_BONUS, STAR_THRESHOLDS, COMPLETION_ACCURACY,
    MULTIPLIER_LADDER, ON_FIRE_STREAK, COUNTDOWN_SECONDS,
    ANSWER_ADVANCE_DELAY, ANSWER_FINISH_DELAY, SKIP_FINISH_DELAY
)
from .models import BonusPoints, ChallengeResult, Level, RoundResult, Tier


class HintPolicy(Enum):
    """Where the hint penalty sits relative to the multipliers."""
    AFTER_MULTIPLIERS = 'after-multipliers'    # floor at 0
    BEFORE_MULTIPLIERS = 'before-multipliers'  # floor at HINT_FLOOR


class PerfectPolicy(Enum):
    """What a round needs to count as perfect."""
    ALL_CORRECT = 'all-correct'
    NO_WRONG = 'no-wrong'                      # skips allowed
    ALL_CORRECT_NO_HINTS = 'all-correct-no-hints'


@dataclass(frozen=True)
class GameRules:
    """Scoring and pacing constants of one content pack."""

    base_points: int = BASE_POINTS
    time_bonus_max: int = TIME_BONUS_MAX
    time_bonus_threshold_ms: int = TIME_BONUS_THRESHOLD_MS
    hint_penalty: int = HINT_PENALTY
    hint_floor: int = HINT_FLOOR
    hint_policy: HintPolicy = HintPolicy.AFTER_MULTIPLIERS
    streak_bonus_per_step: int = STREAK_BONUS_PER_STEP
    speed_bonus_tiers: tuple = SPEED_BONUS_TIERS
    perfect_bonus: int = PERFECT_ROUND_BONUS
    no_hints_bonus: int = NO_HINTS_BONUS
    star_thresholds: tuple = STAR_THRESHOLDS
    completion_accuracy: float = COMPLETION_ACCURACY
    perfect_policy: PerfectPolicy = PerfectPolicy.ALL_CORRECT
    multiplier_ladder: tuple = MULTIPLIER_LADDER
    on_fire_streak: int = ON_FIRE_STREAK
    countdown_seconds: float = COUNTDOWN_SECONDS
    answer_advance_delay: float = ANSWER_ADVANCE_DELAY
    answer_finish_delay: float = ANSWER_FINISH_DELAY
    skip_finish_delay: float = SKIP_FINISH_DELAY


DEFAULT_RULES = GameRules()


def time_bonus(rules: GameRules, time_spent_ms: int) -> int:
    if time_spent_ms >= rules.time_bonus_threshold_ms:
        return 0
    ratio = max(0.0, 1 - time_spent_ms / rules.time_bonus_threshold_ms)
    return math.floor(rules.time_bonus_max * ratio)


def question_score(rules: GameRules, is_correct: bool, time_spent_ms: int,
                   multiplier: float, tier: Tier, hint_used: bool) -> int:
    """Points for one answer. multiplier is the combo multiplier after the answer."""
    if not is_correct:
        return 0

    score = rules.base_points + time_bonus(rules, time_spent_ms)

    match rules.hint_policy:
        case HintPolicy.AFTER_MULTIPLIERS:
            score = math.floor(score * multiplier)
            score = math.floor(score * Tier(tier).multiplier)
            if hint_used:
                score = max(0, score - rules.hint_penalty)
        case HintPolicy.BEFORE_MULTIPLIERS:
            if hint_used:
                score = max(rules.hint_floor, score - rules.hint_penalty)
            score = math.floor(score * multiplier)
            score = math.floor(score * Tier(tier).multiplier)

    return score


def stars(rules: GameRules, accuracy: float) -> int:
    """Stars earned for an accuracy percentage."""
    three, two, one = rules.star_thresholds
    if accuracy >= three:
        return 3
    if accuracy >= two:
        return 2
    if accuracy >= one:
        return 1
    return 0


def speed_bonus(rules: GameRules, average_time_ms: float) -> int:
    for below_ms, bonus in rules.speed_bonus_tiers:
        if average_time_ms < below_ms:
            return bonus
    return 0


def is_perfect(rules: GameRules, accuracy: float, wrong: int, hints_used: int) -> bool:
    match rules.perfect_policy:
        case PerfectPolicy.ALL_CORRECT:
            return accuracy == 100 and wrong == 0
        case PerfectPolicy.NO_WRONG:
            return wrong == 0
        case PerfectPolicy.ALL_CORRECT_NO_HINTS:
            return accuracy == 100 and hints_used == 0


def round_result(rules: GameRules, level: Level, results: list[ChallengeResult],
                 total_time_ms: int, highest_streak: int, hints_used: int) -> RoundResult:
    """Aggregate a finished round. An empty round scores nothing."""
    total = len(results)
    correct = sum(1 for r in results if r.is_correct)
    skipped = sum(1 for r in results if r.skipped)
    wrong = total - correct - skipped
    accuracy = correct * 100 / total if total else 0.0
    average_time = sum(r.time_spent_ms for r in results) / total if total else 0.0

    if total:
        bonus = BonusPoints(
            streak=math.floor(highest_streak * rules.streak_bonus_per_step),
            speed=speed_bonus(rules, average_time),
            perfect=rules.perfect_bonus if accuracy == 100 else 0,
            no_hints=rules.no_hints_bonus if hints_used == 0 else 0,
        )
    else:
        bonus = BonusPoints()

    score = sum(r.points_earned for r in results) + bonus.total

    learned = []
    for r in results:
        if r.is_correct and r.challenge.correct_answer_id not in learned:
            learned.append(r.challenge.correct_answer_id)

    return RoundResult(
        level_id=level.id,
        domain=level.domain,
        group=level.group,
        tier=level.tier,
        total_questions=total,
        correct_answers=correct,
        wrong_answers=wrong,
        skipped_answers=skipped,
        accuracy=accuracy,
        total_time_ms=int(total_time_ms),
        average_time_ms=average_time,
        score=max(0, score),
        highest_streak=highest_streak,
        hints_used=hints_used,
        perfect_round=total > 0 and is_perfect(rules, accuracy, wrong, hints_used),
        bonus_points=bonus,
        stars=stars(rules, accuracy),
        learned_item_ids=tuple(learned),
        challenge_results=tuple(results),
    )
