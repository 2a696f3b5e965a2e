"""Unit tests for persisted progress and unlocks."""

import copy
import unittest

from engine.config import PROGRESS_VERSION
from engine.interfaces import Storage
from engine.models import BonusPoints, RoundResult, Tier
from engine.packs import get_pack
from engine.progress import ProgressStore


# ============================================================================
# Mock Implementations
# ============================================================================

class MockStorage(Storage):
    """Mock storage for testing."""

    def __init__(self):
        self.data = {}
        self.set_calls = []

    def get(self, key: str) -> dict | None:
        return copy.deepcopy(self.data.get(key))

    def set(self, key: str, value: dict) -> None:
        self.set_calls.append(key)
        self.data[key] = copy.deepcopy(value)


def make_result(level_id=1, score=600, accuracy=100.0, stars=3, perfect=True,
                streak=8, learned=('fr', 'de'), group='world', total=8):
    correct = round(total * accuracy / 100)
    return RoundResult(
        level_id=level_id,
        domain=get_pack('geography-explorer').domain,
        group=group,
        tier=Tier.EASY,
        total_questions=total,
        correct_answers=correct,
        wrong_answers=total - correct,
        skipped_answers=0,
        accuracy=accuracy,
        total_time_ms=20000,
        average_time_ms=2500.0,
        score=score,
        highest_streak=streak,
        hints_used=0,
        perfect_round=perfect,
        bonus_points=BonusPoints(),
        stars=stars,
        learned_item_ids=tuple(learned),
    )


# ============================================================================
# Loading
# ============================================================================

class TestProgressLoading(unittest.TestCase):
    """Tests for defaults and recovery from bad records."""

    def setUp(self):
        self.storage = MockStorage()
        self.pack = get_pack('geography-explorer')

    def test_defaults_unlock_first_levels(self):
        progress = ProgressStore(self.storage, self.pack)
        for level_id in (1, 7, 13, 19):
            self.assertTrue(progress.is_unlocked(level_id))
        for level_id in (2, 8, 14, 20):
            self.assertFalse(progress.is_unlocked(level_id))
        self.assertFalse(progress.is_unlocked(99))
        self.assertEqual(progress.key, 'default:geography-explorer-progress')

    def test_namespaces_are_separate(self):
        alice = ProgressStore(self.storage, self.pack, namespace='alice')
        alice.record_round(make_result())
        bob = ProgressStore(self.storage, self.pack, namespace='bob')
        self.assertFalse(bob.is_unlocked(2))
        self.assertTrue(ProgressStore(self.storage, self.pack, namespace='alice').is_unlocked(2))

    def test_corrupt_records_fall_back_to_defaults(self):
        key = 'default:geography-explorer-progress'
        bad_records = [
            'garbage',
            ['not', 'an', 'object'],
            {'version': 99, 'levels': {}},
            {'version': PROGRESS_VERSION, 'levels': {'1': {'high_score': 10}}},
            {'version': PROGRESS_VERSION, 'levels': {'1': {'level_id': 'one'}}},
            {'version': PROGRESS_VERSION, 'levels': [], 'stats': {}},
            {'version': PROGRESS_VERSION, 'levels': {}, 'stats': {'learned_items': 'fr'}},
        ]
        for record in bad_records:
            with self.subTest(record=record):
                self.storage.data[key] = record
                with self.assertLogs('engine.progress', level='WARNING'):
                    progress = ProgressStore(self.storage, self.pack)
                self.assertTrue(progress.is_unlocked(1))
                self.assertFalse(progress.is_unlocked(2))
                self.assertEqual(progress.learned_count(), 0)

    def test_unknown_level_dropped(self):
        self.storage.data['default:geography-explorer-progress'] = {
            'version': PROGRESS_VERSION,
            'levels': {
                '1': {'level_id': 1, 'high_score': 700, 'unlocked': True, 'stars': 2},
                '250': {'level_id': 250, 'high_score': 10, 'unlocked': True},
            },
        }
        with self.assertLogs('engine.progress', level='WARNING'):
            progress = ProgressStore(self.storage, self.pack)
        self.assertIsNone(progress.get(250))
        self.assertEqual(progress.get(1).high_score, 700)
        self.assertEqual(progress.get(1).stars, 2)

    def test_previous_high_score_unlocks_without_flag(self):
        self.storage.data['default:geography-explorer-progress'] = {
            'version': PROGRESS_VERSION,
            'levels': {'1': {'level_id': 1, 'high_score': 600, 'unlocked': True}},
        }
        progress = ProgressStore(self.storage, self.pack)
        self.assertTrue(progress.is_unlocked(2))
        self.assertFalse(progress.is_unlocked(3))


# ============================================================================
# Recording rounds
# ============================================================================

class TestRecordRound(unittest.TestCase):
    """Tests for merging round results."""

    def setUp(self):
        self.storage = MockStorage()
        self.pack = get_pack('geography-explorer')
        self.progress = ProgressStore(self.storage, self.pack)

    def test_unlocks_next_level(self):
        unlocked = self.progress.record_round(make_result(score=600))
        self.assertEqual(unlocked, [2])
        self.assertTrue(self.progress.is_unlocked(2))
        self.assertEqual(self.storage.set_calls, [self.progress.key])

    def test_score_below_requirement_keeps_lock(self):
        self.assertEqual(self.progress.record_round(make_result(score=499)), [])
        self.assertFalse(self.progress.is_unlocked(2))

    def test_unlocks_never_relock(self):
        self.progress.record_round(make_result(score=600))
        self.assertEqual(self.progress.record_round(make_result(score=0, accuracy=0.0, stars=0,
                                                                perfect=False, streak=0)), [])
        self.assertTrue(self.progress.is_unlocked(2))

        reloaded = ProgressStore(self.storage, self.pack)
        self.assertTrue(reloaded.is_unlocked(2))

    def test_high_water_marks(self):
        self.progress.record_round(make_result(score=900, accuracy=100.0, stars=3, streak=8))
        self.progress.record_round(make_result(score=300, accuracy=62.5, stars=1, streak=2,
                                               perfect=False))
        level = self.progress.get(1)
        self.assertEqual(level.high_score, 900)
        self.assertEqual(level.best_accuracy, 100.0)
        self.assertEqual(level.best_streak, 8)
        self.assertEqual(level.stars, 3)
        self.assertEqual(level.times_played, 2)
        self.assertEqual(level.times_completed, 1)
        self.assertEqual(level.times_perfect, 1)

    def test_repeated_result_is_idempotent_for_bests(self):
        result = make_result(score=750, accuracy=87.5, stars=2, perfect=False, streak=5)
        self.progress.record_round(result)
        first = self.progress.get(1).to_dict()
        self.progress.record_round(result)
        second = self.progress.get(1).to_dict()
        for field in ('high_score', 'best_accuracy', 'best_streak', 'stars', 'unlocked'):
            self.assertEqual(first[field], second[field])
        self.assertEqual(second['times_played'], 2)

    def test_unknown_level_ignored(self):
        with self.assertLogs('engine.progress', level='WARNING'):
            self.assertEqual(self.progress.record_round(make_result(level_id=250)), [])
        self.assertEqual(self.storage.set_calls, [])

    def test_stats_and_learning(self):
        self.progress.record_round(make_result(learned=('fr', 'de'), group='europe'))
        self.progress.record_round(make_result(learned=('de', 'it'), group='europe', streak=3))
        stats = self.progress.stats
        self.assertEqual(stats.learned_items, ['fr', 'de', 'it'])
        self.assertEqual(stats.total_answered, 16)
        self.assertEqual(stats.total_correct, 16)
        self.assertEqual(stats.total_play_time_ms, 40000)
        self.assertEqual(stats.longest_streak, 8)
        self.assertEqual(stats.perfect_rounds, 2)
        self.assertEqual(stats.groups_explored, ['europe'])

    def test_rank_follows_learned_count(self):
        self.assertEqual(self.progress.rank().key, 'novice')
        codes = [f'c{n}' for n in range(11)]
        self.progress.record_round(make_result(learned=codes))
        self.assertEqual(self.progress.learned_count(), 11)
        self.assertEqual(self.progress.rank().key, 'explorer')

    def test_persisted_record_round_trips(self):
        self.progress.record_round(make_result(score=650, stars=2))
        reloaded = ProgressStore(self.storage, self.pack)
        self.assertEqual(reloaded.to_dict(), self.progress.to_dict())

    def test_summary(self):
        self.progress.record_round(make_result(score=650, stars=2))
        summary = self.progress.summary()
        self.assertEqual(summary['game'], 'geography-explorer')
        self.assertEqual(summary['total_stars'], 2)
        self.assertEqual(summary['max_stars'], 72)
        self.assertEqual(summary['track_stars']['flag-quiz'], 2)
        self.assertEqual(summary['track_stars']['capital-match'], 0)
        self.assertEqual(summary['levels_unlocked'], 5)
        self.assertEqual(summary['levels_completed'], 1)
        self.assertEqual(summary['rank'], {'key': 'novice', 'label': 'Novice'})
        self.assertEqual(summary['accuracy'], 100)


if __name__ == '__main__':
    unittest.main()
