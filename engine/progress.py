"""Persisted per-level progress, unlocks and mastery statistics."""

import logging

from .config import DEFAULT_NAMESPACE, PROGRESS_VERSION
from .content import ContentPack
from .errors import CorruptPersistedState
from .interfaces import Storage
from .models import LevelProgress, MasteryStats, Rank, RoundResult

logger = logging.getLogger(__name__)


class ProgressStore:
    """Progress record for one pack in one namespace (usually a user id).

    Unlocks only ever move from locked to unlocked.
    """

    def __init__(self, storage: Storage, pack: ContentPack, namespace: str = DEFAULT_NAMESPACE):
        self.storage = storage
        self.pack = pack
        self.namespace = namespace
        self.levels: dict[int, LevelProgress] = {}
        self.stats = MasteryStats()
        self._load()

    @property
    def key(self) -> str:
        return f"{self.namespace}:{self.pack.key}-progress"

    def _load(self) -> None:
        data = self.storage.get(self.key)
        if data is not None:
            try:
                self.levels, self.stats = self._parse(data)
            except CorruptPersistedState as e:
                logger.warning(f"Ignoring progress for {self.key}: {e}")
                self.levels, self.stats = {}, MasteryStats()

        for level_id in self.pack.first_levels:
            self._ensure(level_id).unlocked = True

    def _parse(self, data) -> tuple[dict, MasteryStats]:
        if not isinstance(data, dict):
            raise CorruptPersistedState(f"expected an object, got {type(data).__name__}")
        if data.get('version') != PROGRESS_VERSION:
            raise CorruptPersistedState(f"unsupported version {data.get('version')!r}")
        try:
            levels = {}
            for raw in data.get('levels', {}).values():
                progress = LevelProgress.from_dict(raw)
                if self.pack.catalog.get(progress.level_id) is None:
                    logger.warning(f"Dropping progress for unknown level {progress.level_id}")
                    continue
                levels[progress.level_id] = progress
            stats = MasteryStats.from_dict(data.get('stats', {}))
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise CorruptPersistedState(str(e)) from e
        return levels, stats

    def save(self) -> None:
        self.storage.set(self.key, self.to_dict())

    def to_dict(self) -> dict:
        return {
            'version': PROGRESS_VERSION,
            'levels': {str(level_id): p.to_dict() for level_id, p in sorted(self.levels.items())},
            'stats': self.stats.to_dict(),
        }

    def _ensure(self, level_id: int) -> LevelProgress:
        if level_id not in self.levels:
            self.levels[level_id] = LevelProgress(level_id)
        return self.levels[level_id]

    def get(self, level_id: int) -> LevelProgress | None:
        return self.levels.get(level_id)

    def is_unlocked(self, level_id: int) -> bool:
        level = self.pack.catalog.get(level_id)
        if level is None:
            return False
        if level_id in self.pack.first_levels:
            return True
        progress = self.levels.get(level_id)
        if progress and progress.unlocked:
            return True
        req = level.unlock_requirement
        if req is None:
            return False
        previous = self.levels.get(req.level_id)
        return previous is not None and previous.high_score >= req.min_score

    def record_round(self, result: RoundResult) -> list[int]:
        """Merge a finished round and persist. Returns newly unlocked level ids."""
        if self.pack.catalog.get(result.level_id) is None:
            logger.warning(f"Ignoring result for unknown level {result.level_id}")
            return []

        rules = self.pack.rules
        progress = self._ensure(result.level_id)
        progress.unlocked = True
        progress.high_score = max(progress.high_score, result.score)
        progress.best_accuracy = max(progress.best_accuracy, result.accuracy)
        progress.best_streak = max(progress.best_streak, result.highest_streak)
        progress.stars = max(progress.stars, result.stars)
        progress.times_played += 1
        if result.accuracy >= rules.completion_accuracy:
            progress.times_completed += 1
        if result.perfect_round:
            progress.times_perfect += 1

        unlocked = []
        for dependent in self.pack.catalog.dependents(result.level_id):
            if progress.high_score < dependent.unlock_requirement.min_score:
                continue
            target = self._ensure(dependent.id)
            if not target.unlocked:
                target.unlocked = True
                unlocked.append(dependent.id)

        stats = self.stats
        stats.total_answered += result.total_questions
        stats.total_correct += result.correct_answers
        stats.total_play_time_ms += result.total_time_ms
        stats.longest_streak = max(stats.longest_streak, result.highest_streak)
        if result.perfect_round:
            stats.perfect_rounds += 1
        if result.group not in stats.groups_explored:
            stats.groups_explored.append(result.group)
        learned = stats.learn(result.learned_item_ids)

        self.save()
        if unlocked:
            logger.info(f"{self.key}: level {result.level_id} unlocked {unlocked}")
        if learned:
            logger.debug(f"{self.key}: learned {len(learned)} new items")
        return unlocked

    def total_stars(self) -> int:
        return sum(p.stars for p in self.levels.values())

    def track_stars(self, track: str) -> int:
        return sum(
            self.levels[level.id].stars
            for level in self.pack.catalog.levels_for(track)
            if level.id in self.levels
        )

    def learned_count(self) -> int:
        return len(self.stats.learned_items)

    def rank(self) -> Rank:
        return self.pack.rank_for(self.learned_count())

    def summary(self) -> dict:
        rank = self.rank()
        stats = self.stats
        accuracy = stats.total_correct * 100 / stats.total_answered if stats.total_answered else 0.0
        return {
            'game': self.pack.key,
            'namespace': self.namespace,
            'total_stars': self.total_stars(),
            'max_stars': len(self.pack.catalog) * 3,
            'track_stars': {track: self.track_stars(track) for track in self.pack.catalog.tracks()},
            'levels_unlocked': sum(1 for level in self.pack.catalog if self.is_unlocked(level.id)),
            'levels_completed': sum(1 for p in self.levels.values() if p.times_completed),
            'learned_count': self.learned_count(),
            'rank': {'key': rank.key, 'label': rank.label},
            'accuracy': accuracy,
            'stats': stats.to_dict(),
        }
