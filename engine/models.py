"""Domain models for the quiz session engine."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from .config import TIER_MULTIPLIERS, TIER_OPTIONS


class Domain(Enum):
    """Content domain a game draws its challenges from."""
    GEOGRAPHY = 'geography'
    HISTORY = 'history'
    SCIENCE = 'science'
    VOCABULARY = 'vocabulary'


class Tier(IntEnum):
    """Difficulty tier, easiest first."""
    EASY = 1
    MEDIUM = 2
    HARD = 3
    EXPERT = 4

    @property
    def option_count(self) -> int:
        return TIER_OPTIONS[self.value]

    @property
    def multiplier(self) -> float:
        return TIER_MULTIPLIERS[self.value]


class Phase(Enum):
    """Lifecycle phase of a game session."""
    MENU = 'menu'
    MODE_SELECT = 'mode-select'
    SUB_SELECT = 'sub-select'
    LEVEL_SELECT = 'level-select'
    COUNTDOWN = 'countdown'
    PLAYING = 'playing'
    PAUSED = 'paused'
    RESULTS = 'results'


@dataclass(frozen=True)
class UnlockRequirement:
    """Minimum score on an earlier level needed to open a level."""

    level_id: int
    min_score: int


@dataclass(frozen=True)
class Level:
    """One playable level of a content pack."""

    id: int
    name: str
    domain: Domain
    track: str
    group: str
    tier: Tier
    question_count: int
    time_limit: int  # seconds per question, 0 = untimed
    unlock_requirement: UnlockRequirement | None = None
    mode: str | None = None
    description: str = ''
    hints_allowed: int | None = None  # per round, None = one per challenge

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'name': self.name,
            'domain': self.domain.value,
            'track': self.track,
            'group': self.group,
            'mode': self.mode,
            'tier': int(self.tier),
            'question_count': self.question_count,
            'time_limit': self.time_limit,
            'description': self.description,
            'hints_allowed': self.hints_allowed,
            'unlock_requirement': {
                'level_id': self.unlock_requirement.level_id,
                'min_score': self.unlock_requirement.min_score,
            } if self.unlock_requirement else None,
        }


@dataclass(frozen=True)
class ContentItem:
    """A fact from a content pack that can become one challenge."""

    id: str
    domain: Domain
    answer: str
    prompt: str
    tier: Tier = Tier.EASY
    group: str | None = None
    mode: str | None = None
    answer_id: str | None = None
    hint: str | None = None
    explanation: str | None = None
    display_hint: str | None = None
    distractors: tuple[str, ...] = ()

    @property
    def correct_id(self) -> str:
        """Option id of the correct answer (shared by items with the same answer)."""
        return self.answer_id or self.id


@dataclass(frozen=True)
class Option:
    """One selectable answer of a challenge."""

    id: str
    text: str
    is_correct: bool

    def to_dict(self, reveal: bool = True) -> dict:
        data = {'id': self.id, 'text': self.text}
        if reveal:
            data['is_correct'] = self.is_correct
        return data


@dataclass(frozen=True)
class Challenge:
    """A scored prompt with a fixed, uniquely-correct option set."""

    id: str
    item_id: str
    prompt: str
    correct_answer_id: str
    options: tuple[Option, ...]
    hint: str | None = None
    explanation: str | None = None
    display_hint: str | None = None

    def option(self, option_id: str | None) -> Option | None:
        for opt in self.options:
            if opt.id == option_id:
                return opt
        return None

    @property
    def correct_answer(self) -> str:
        return self.option(self.correct_answer_id).text

    def to_dict(self, reveal: bool = True) -> dict:
        data = {
            'id': self.id,
            'prompt': self.prompt,
            'options': [o.to_dict(reveal) for o in self.options],
            'display_hint': self.display_hint,
        }
        if reveal:
            data['correct_answer_id'] = self.correct_answer_id
            data['correct_answer'] = self.correct_answer
            data['hint'] = self.hint
            data['explanation'] = self.explanation
        return data


@dataclass(frozen=True)
class ChallengeResult:
    """Outcome of one challenge. selected_answer None means skipped."""

    challenge: Challenge
    selected_answer: str | None
    is_correct: bool
    time_spent_ms: int
    points_earned: int
    hint_used: bool

    @property
    def skipped(self) -> bool:
        return self.selected_answer is None

    def to_dict(self) -> dict:
        return {
            'challenge_id': self.challenge.id,
            'selected_answer': self.selected_answer,
            'correct_answer_id': self.challenge.correct_answer_id,
            'is_correct': self.is_correct,
            'time_spent_ms': self.time_spent_ms,
            'points_earned': self.points_earned,
            'hint_used': self.hint_used,
        }


@dataclass(frozen=True)
class ComboState:
    """Snapshot of the streak counter."""

    streak: int = 0
    multiplier: float = 1.0
    max_reached: int = 0
    on_fire: bool = False

    def to_dict(self) -> dict:
        return {
            'streak': self.streak,
            'multiplier': self.multiplier,
            'max_reached': self.max_reached,
            'on_fire': self.on_fire,
        }


@dataclass(frozen=True)
class BonusPoints:
    """End-of-round bonus breakdown."""

    streak: int = 0
    speed: int = 0
    perfect: int = 0
    no_hints: int = 0

    @property
    def total(self) -> int:
        return self.streak + self.speed + self.perfect + self.no_hints

    def to_dict(self) -> dict:
        return {
            'streak': self.streak,
            'speed': self.speed,
            'perfect': self.perfect,
            'no_hints': self.no_hints,
        }


@dataclass(frozen=True)
class RoundResult:
    """Aggregate of every ChallengeResult in a finished round."""

    level_id: int
    domain: Domain
    group: str
    tier: Tier
    total_questions: int
    correct_answers: int
    wrong_answers: int
    skipped_answers: int
    accuracy: float
    total_time_ms: int
    average_time_ms: float
    score: int
    highest_streak: int
    hints_used: int
    perfect_round: bool
    bonus_points: BonusPoints
    stars: int
    learned_item_ids: tuple[str, ...] = ()
    challenge_results: tuple[ChallengeResult, ...] = field(default=(), repr=False)

    @property
    def item_points(self) -> int:
        return sum(r.points_earned for r in self.challenge_results)

    def to_dict(self) -> dict:
        return {
            'level_id': self.level_id,
            'domain': self.domain.value,
            'group': self.group,
            'tier': int(self.tier),
            'total_questions': self.total_questions,
            'correct_answers': self.correct_answers,
            'wrong_answers': self.wrong_answers,
            'skipped_answers': self.skipped_answers,
            'accuracy': self.accuracy,
            'total_time_ms': self.total_time_ms,
            'average_time_ms': self.average_time_ms,
            'score': self.score,
            'highest_streak': self.highest_streak,
            'hints_used': self.hints_used,
            'perfect_round': self.perfect_round,
            'bonus_points': self.bonus_points.to_dict(),
            'stars': self.stars,
            'learned_item_ids': list(self.learned_item_ids),
            'challenge_results': [r.to_dict() for r in self.challenge_results],
        }


@dataclass(frozen=True)
class Rank:
    """Mastery tier reached once min_count distinct items are learned."""

    key: str
    label: str
    min_count: int


class LevelProgress:
    """Persisted best results for one level."""

    def __init__(self, level_id: int, unlocked: bool = False):
        self.level_id = level_id
        self.high_score = 0
        self.best_accuracy = 0.0
        self.best_streak = 0
        self.times_played = 0
        self.times_completed = 0
        self.times_perfect = 0
        self.unlocked = unlocked
        self.stars = 0

    def to_dict(self) -> dict:
        return {
            'level_id': self.level_id,
            'high_score': self.high_score,
            'best_accuracy': self.best_accuracy,
            'best_streak': self.best_streak,
            'times_played': self.times_played,
            'times_completed': self.times_completed,
            'times_perfect': self.times_perfect,
            'unlocked': self.unlocked,
            'stars': self.stars,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'LevelProgress':
        progress = cls(int(data['level_id']), bool(data.get('unlocked', False)))
        progress.high_score = int(data.get('high_score', 0))
        progress.best_accuracy = float(data.get('best_accuracy', 0.0))
        progress.best_streak = int(data.get('best_streak', 0))
        progress.times_played = int(data.get('times_played', 0))
        progress.times_completed = int(data.get('times_completed', 0))
        progress.times_perfect = int(data.get('times_perfect', 0))
        progress.stars = max(0, min(3, int(data.get('stars', 0))))
        return progress


class MasteryStats:
    """Cumulative per-game statistics across all sessions."""

    def __init__(self):
        self.learned_items = []  # Distinct correct-answer ids, in learning order
        self.total_answered = 0
        self.total_correct = 0
        self.total_play_time_ms = 0
        self.longest_streak = 0
        self.perfect_rounds = 0
        self.groups_explored = []

    def learn(self, item_ids) -> list[str]:
        """Add item ids not yet learned. Returns the newly learned ones."""
        known = set(self.learned_items)
        new_items = []
        for item_id in item_ids:
            if item_id not in known:
                known.add(item_id)
                new_items.append(item_id)
        self.learned_items.extend(new_items)
        return new_items

    def to_dict(self) -> dict:
        return {
            'learned_items': list(self.learned_items),
            'total_answered': self.total_answered,
            'total_correct': self.total_correct,
            'total_play_time_ms': self.total_play_time_ms,
            'longest_streak': self.longest_streak,
            'perfect_rounds': self.perfect_rounds,
            'groups_explored': list(self.groups_explored),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'MasteryStats':
        stats = cls()
        learned = data.get('learned_items', [])
        if not isinstance(learned, list):
            raise TypeError('learned_items must be a list')
        stats.learn(str(item) for item in learned)
        stats.total_answered = int(data.get('total_answered', 0))
        stats.total_correct = int(data.get('total_correct', 0))
        stats.total_play_time_ms = int(data.get('total_play_time_ms', 0))
        stats.longest_streak = int(data.get('longest_streak', 0))
        stats.perfect_rounds = int(data.get('perfect_rounds', 0))
        stats.groups_explored = [str(g) for g in data.get('groups_explored', [])]
        return stats
