"""Unit tests for the game session state machine."""

import copy
import random
import threading
import unittest

from engine.content import ContentPack, LevelCatalog, StaticContentPool
from engine.interfaces import Storage
from engine.models import ContentItem, Domain, Level, Phase, Rank, Tier, UnlockRequirement
from engine.packs import get_pack
from engine.progress import ProgressStore
from engine.scheduler import ManualScheduler
from engine.session import GameSession


# ============================================================================
# Mock Implementations
# ============================================================================

class MockStorage(Storage):
    """Mock storage for testing."""

    def __init__(self):
        self.data = {}
        self.set_calls = []

    def get(self, key: str) -> dict | None:
        value = self.data.get(key)
        return copy.deepcopy(value)

    def set(self, key: str, value: dict) -> None:
        self.set_calls.append(key)
        self.data[key] = copy.deepcopy(value)


def build_pack() -> ContentPack:
    items = [
        ContentItem(
            id=f'ancient:{n}',
            domain=Domain.HISTORY,
            answer=f'Answer {n}',
            prompt=f'Question {n}?',
            tier=Tier.EASY,
            group='ancient',
            hint=f'Hint {n}',
            explanation=f'Because {n}.',
            distractors=(f'Wrong {n}a', f'Wrong {n}b', f'Wrong {n}c'),
        )
        for n in range(10)
    ]
    levels = [
        Level(1, 'Warm Up', Domain.HISTORY, 'ancient', 'ancient', Tier.EASY, 8, 10),
        Level(2, 'Next Step', Domain.HISTORY, 'ancient', 'ancient', Tier.EASY, 8, 10,
              unlock_requirement=UnlockRequirement(1, 500)),
        Level(3, 'Nothing Here', Domain.HISTORY, 'empty', 'empty', Tier.EASY, 5, 10),
        Level(4, 'Hint Drill', Domain.HISTORY, 'hints', 'ancient', Tier.EASY, 3, 0, hints_allowed=1),
    ]
    return ContentPack(
        key='test-history',
        title='Test History',
        domain=Domain.HISTORY,
        catalog=LevelCatalog(levels),
        pool=StaticContentPool(items),
        first_levels=(1, 3, 4),
        ranks=(Rank('new', 'New', 0), Rank('old', 'Old', 5)),
        groups={'ancient': 'Ancient', 'empty': 'Empty'},
    )


class SessionTestCase(unittest.TestCase):
    """Session over the small test pack with a virtual clock."""

    def setUp(self):
        self.storage = MockStorage()
        self.pack = build_pack()
        self.progress = ProgressStore(self.storage, self.pack)
        self.scheduler = ManualScheduler()
        self.session = GameSession(self.pack, self.progress, self.scheduler, random.Random(1))

    def start(self, level_id=1):
        self.session.open()
        self.session.select_group('ancient')
        self.assertTrue(self.session.select_level(level_id))
        self.scheduler.advance(3)
        self.assertEqual(self.session.phase, Phase.PLAYING)

    def answer_correct(self):
        challenge = self.session.current_challenge
        return self.session.submit_answer(challenge.correct_answer_id)

    def answer_wrong(self):
        challenge = self.session.current_challenge
        wrong = next(o for o in challenge.options if not o.is_correct)
        return self.session.submit_answer(wrong.id)

    def play_perfect(self):
        for i in range(len(self.session.challenges)):
            self.assertTrue(self.answer_correct())
            last = i == len(self.session.challenges) - 1
            self.scheduler.advance(0.8 if last else 0.5)

    def skip_all(self):
        for _ in range(len(self.session.challenges)):
            self.assertTrue(self.session.skip())
        self.scheduler.advance(0.5)


# ============================================================================
# Navigation
# ============================================================================

class TestNavigation(SessionTestCase):
    """Tests for menu, selection and back."""

    def test_open_goes_to_group_select(self):
        self.assertTrue(self.session.open())
        self.assertEqual(self.session.phase, Phase.SUB_SELECT)
        self.assertFalse(self.session.open())

    def test_unknown_group_rejected(self):
        self.session.open()
        self.assertFalse(self.session.select_group('future'))
        self.assertEqual(self.session.phase, Phase.SUB_SELECT)

    def test_back_walks_up(self):
        self.session.open()
        self.session.select_group('ancient')
        self.assertTrue(self.session.back())
        self.assertEqual(self.session.phase, Phase.SUB_SELECT)
        self.assertIsNone(self.session.group)
        self.assertTrue(self.session.back())
        self.assertEqual(self.session.phase, Phase.MENU)
        self.assertFalse(self.session.back())

    def test_geography_mode_select(self):
        pack = get_pack('geography-explorer')
        progress = ProgressStore(MockStorage(), pack)
        session = GameSession(pack, progress, self.scheduler, random.Random(1))

        session.open()
        self.assertEqual(session.phase, Phase.MODE_SELECT)
        self.assertFalse(session.select_mode('trivia'))
        self.assertTrue(session.select_mode('flag-quiz'))
        self.assertTrue(session.select_group('europe'))

        state = session.snapshot()
        self.assertEqual([level['id'] for level in state['levels']], [1, 2, 5, 6])
        self.assertEqual([level['unlocked'] for level in state['levels']], [True, False, False, False])

        session.back()
        session.back()
        self.assertEqual(session.phase, Phase.MODE_SELECT)
        self.assertIsNone(session.mode)

    def test_locked_level_rejected(self):
        self.session.open()
        self.session.select_group('ancient')
        self.assertFalse(self.session.select_level(2))
        self.assertEqual(self.session.phase, Phase.LEVEL_SELECT)

    def test_unknown_level_rejected(self):
        self.session.open()
        self.session.select_group('ancient')
        with self.assertLogs('engine.session', level='WARNING'):
            self.assertFalse(self.session.select_level(99))
        self.assertEqual(self.session.phase, Phase.LEVEL_SELECT)

    def test_level_without_content_rejected(self):
        self.session.open()
        self.session.select_group('empty')
        with self.assertLogs('engine.session', level='WARNING'):
            self.assertFalse(self.session.select_level(3))
        self.assertEqual(self.session.phase, Phase.LEVEL_SELECT)
        self.assertEqual(self.scheduler.pending, 0)

    def test_countdown_then_playing(self):
        self.session.open()
        self.session.select_group('ancient')
        self.session.select_level(1)
        self.assertEqual(self.session.phase, Phase.COUNTDOWN)
        self.assertEqual(len(self.session.challenges), 8)
        self.assertFalse(self.session.submit_answer('anything'))

        self.scheduler.advance(2)
        self.assertEqual(self.session.phase, Phase.COUNTDOWN)
        self.scheduler.advance(1)
        self.assertEqual(self.session.phase, Phase.PLAYING)
        self.assertEqual(self.session.timer.remaining, 10)

    def test_start_round_skips_countdown(self):
        self.session.open()
        self.session.select_group('ancient')
        self.session.select_level(1)
        self.assertTrue(self.session.start_round())
        self.assertEqual(self.session.phase, Phase.PLAYING)
        self.scheduler.advance(3)
        self.assertEqual(self.session.index, 0)


# ============================================================================
# Answering
# ============================================================================

class TestAnswering(SessionTestCase):
    """Tests for answers, skips, hints and the timer."""

    def test_correct_answer_then_advance(self):
        self.start()
        self.assertTrue(self.answer_correct())
        self.assertTrue(self.session.awaiting_advance)
        self.assertEqual(self.session.last_answer['points_earned'], 150)
        self.assertTrue(self.session.last_answer['is_correct'])
        self.assertFalse(self.answer_correct())

        self.scheduler.advance(0.5)
        self.assertEqual(self.session.index, 1)
        self.assertFalse(self.session.awaiting_advance)
        self.assertIsNone(self.session.last_answer)

    def test_wrong_answer_resets_combo(self):
        self.start()
        for _ in range(3):
            self.answer_correct()
            self.scheduler.advance(0.5)
        self.assertEqual(self.session.combo.multiplier, 1.5)

        self.answer_wrong()
        self.assertEqual(self.session.combo.streak, 0)
        self.assertEqual(self.session.combo.multiplier, 1.0)
        self.assertEqual(self.session.combo.max_reached, 3)
        self.assertEqual(self.session.results[-1].points_earned, 0)

    def test_unknown_answer_counts_as_wrong(self):
        self.start()
        self.assertTrue(self.session.submit_answer('not-an-option'))
        result = self.session.results[0]
        self.assertFalse(result.is_correct)
        self.assertFalse(result.skipped)

    def test_skip_advances_immediately(self):
        self.start()
        self.assertTrue(self.session.skip())
        self.assertEqual(self.session.index, 1)
        self.assertTrue(self.session.results[0].skipped)

    def test_timeout_equals_skip(self):
        self.start()
        self.answer_correct()
        self.scheduler.advance(0.5)
        self.session.skip()
        skipped = self.session.results[-1]

        self.answer_correct()
        self.scheduler.advance(0.5)
        self.scheduler.advance(10)
        timed_out = self.session.results[-1]

        self.assertEqual(self.session.index, 4)
        self.assertEqual(self.session.combo.streak, 0)
        for result in (skipped, timed_out):
            self.assertIsNone(result.selected_answer)
            self.assertFalse(result.is_correct)
            self.assertEqual(result.points_earned, 0)
        self.assertEqual(timed_out.time_spent_ms, 10000)

    def test_timeout_on_last_challenge_finishes(self):
        self.start()
        for _ in range(7):
            self.session.skip()
        self.scheduler.advance(10)
        self.assertEqual(self.session.phase, Phase.PLAYING)
        self.scheduler.advance(0.5)
        self.assertEqual(self.session.phase, Phase.RESULTS)
        self.assertEqual(self.session.last_result.skipped_answers, 8)

    def test_late_answer_for_timed_out_challenge_is_refused(self):
        self.start()
        first = self.session.current_challenge
        self.scheduler.advance(10)
        self.scheduler.advance(0.5)
        self.assertEqual(self.session.index, 1)

        self.assertFalse(self.session.submit_answer(first.correct_answer_id, challenge_id=first.id))
        self.assertFalse(self.session.skip(challenge_id=first.id))
        self.assertEqual(len(self.session.results), 1)
        self.assertEqual(self.session.index, 1)

        current = self.session.current_challenge
        self.assertTrue(self.session.submit_answer(current.correct_answer_id, challenge_id=current.id))
        self.assertTrue(self.session.results[1].is_correct)
        self.assertEqual(self.session.results[1].challenge.id, current.id)

    def test_hint_once_per_challenge(self):
        self.start()
        self.assertIsNone(self.session.snapshot()['challenge']['hint'])
        self.assertTrue(self.session.use_hint())
        self.assertFalse(self.session.use_hint())
        self.assertIsNotNone(self.session.snapshot()['challenge']['hint'])

        self.answer_correct()
        self.assertEqual(self.session.last_answer['points_earned'], 125)
        self.scheduler.advance(0.5)
        self.assertTrue(self.session.use_hint())
        self.assertEqual(self.session.hints_used, 2)

    def test_hint_cap_per_round(self):
        self.start(level_id=4)
        self.assertTrue(self.session.use_hint())
        self.answer_correct()
        self.scheduler.advance(0.5)
        self.assertFalse(self.session.use_hint())
        self.assertEqual(self.session.hints_used, 1)

    def test_untimed_level_never_expires(self):
        self.start(level_id=4)
        self.assertIsNone(self.session.timer.remaining)
        self.scheduler.advance(600)
        self.assertEqual(self.session.index, 0)
        self.assertEqual(self.session.results, [])

    def test_snapshot_hides_answer_until_answered(self):
        self.start()
        challenge = self.session.snapshot()['challenge']
        self.assertNotIn('correct_answer_id', challenge)
        self.assertTrue(all('is_correct' not in option for option in challenge['options']))

        self.answer_wrong()
        challenge = self.session.snapshot()['challenge']
        self.assertEqual(challenge['correct_answer_id'], self.session.current_challenge.correct_answer_id)

    def test_concurrent_answers_accept_one(self):
        self.start()
        correct = self.session.current_challenge.correct_answer_id
        accepted = []

        def submit():
            accepted.append(self.session.submit_answer(correct))

        threads = [threading.Thread(target=submit) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        self.assertEqual(accepted.count(True), 1)
        self.assertEqual(len(self.session.results), 1)


# ============================================================================
# Pause and resume
# ============================================================================

class TestPauseResume(SessionTestCase):
    """Tests for pausing a round."""

    def test_pause_preserves_state(self):
        self.start()
        for _ in range(2):
            self.answer_correct()
            self.scheduler.advance(0.5)
        self.scheduler.advance(3)
        self.assertEqual(self.session.timer.remaining, 7)

        self.assertTrue(self.session.pause())
        self.assertEqual(self.session.phase, Phase.PAUSED)
        self.assertFalse(self.session.submit_answer('anything'))
        self.assertFalse(self.session.use_hint())
        self.scheduler.advance(100)

        self.assertEqual(self.session.index, 2)
        self.assertEqual(len(self.session.results), 2)
        self.assertEqual(self.session.combo.streak, 2)
        self.assertEqual(self.session.score, 300)
        self.assertEqual(self.session.timer.remaining, 7)

        self.assertTrue(self.session.resume())
        self.scheduler.advance(6)
        self.assertEqual(self.session.timer.remaining, 1)
        self.assertEqual(self.session.index, 2)
        self.scheduler.advance(1)
        self.assertEqual(self.session.index, 3)
        self.assertEqual(self.session.results[2].time_spent_ms, 10000)

    def test_pause_holds_pending_advance(self):
        self.start()
        self.answer_correct()
        self.session.pause()
        self.scheduler.advance(5)
        self.assertEqual(self.session.index, 0)
        self.assertTrue(self.session.awaiting_advance)

        self.session.resume()
        self.scheduler.advance(0.25)
        self.assertEqual(self.session.index, 0)
        self.scheduler.advance(0.25)
        self.assertEqual(self.session.index, 1)

    def test_resume_only_when_paused(self):
        self.start()
        self.assertFalse(self.session.resume())
        self.session.pause()
        self.assertFalse(self.session.pause())

    def test_pause_mid_second_keeps_played_time(self):
        self.start()
        self.scheduler.advance(0.5)
        self.session.pause()
        self.scheduler.advance(30)
        self.session.resume()
        self.scheduler.advance(0.5)
        self.assertEqual(self.session.timer.remaining, 9)

    def test_rapid_pause_resume_cannot_stop_the_clock(self):
        self.start()
        for _ in range(20):
            self.scheduler.advance(0.9)
            self.session.pause()
            self.session.resume()

        self.assertEqual(self.session.index, 1)
        self.assertEqual(len(self.session.results), 1)
        self.assertTrue(self.session.results[0].skipped)
        self.assertAlmostEqual(self.session.results[0].time_spent_ms, 10000, delta=5)


# ============================================================================
# Results
# ============================================================================

class TestResults(SessionTestCase):
    """Tests for finishing rounds and what follows."""

    def test_perfect_round(self):
        self.start()
        self.play_perfect()

        self.assertEqual(self.session.phase, Phase.RESULTS)
        result = self.session.last_result
        self.assertEqual(result.correct_answers, 8)
        self.assertEqual(result.accuracy, 100)
        self.assertEqual(result.stars, 3)
        self.assertTrue(result.perfect_round)
        self.assertEqual(result.highest_streak, 8)
        self.assertEqual(self.session.score, 2025)
        self.assertEqual(result.score, 2025 + 120 + 150 + 500 + 200)
        self.assertEqual(result.score, sum(r.points_earned for r in result.challenge_results)
                         + result.bonus_points.total)
        self.assertEqual(self.session.unlocked_levels, [2])
        self.assertEqual(self.storage.set_calls, [self.progress.key])

    def test_next_level_after_earning_it(self):
        self.start()
        self.play_perfect()
        self.assertTrue(self.session.next_level())
        self.assertEqual(self.session.phase, Phase.COUNTDOWN)
        self.assertEqual(self.session.level.id, 2)
        self.assertEqual(self.session.score, 0)

    def test_next_level_not_earned_goes_to_level_select(self):
        self.start()
        self.skip_all()
        self.assertEqual(self.session.phase, Phase.RESULTS)
        self.assertLess(self.session.last_result.score, 500)

        self.assertTrue(self.session.next_level())
        self.assertEqual(self.session.phase, Phase.LEVEL_SELECT)
        self.assertIsNone(self.session.level)
        self.assertFalse(self.progress.is_unlocked(2))

    def test_retry_same_level(self):
        self.start()
        self.skip_all()
        self.assertTrue(self.session.retry())
        self.assertEqual(self.session.phase, Phase.COUNTDOWN)
        self.assertEqual(self.session.level.id, 1)
        self.assertEqual(self.session.results, [])
        self.assertIsNotNone(self.session.last_result)

    def test_back_from_results(self):
        self.start()
        self.skip_all()
        self.assertTrue(self.session.back())
        self.assertEqual(self.session.phase, Phase.LEVEL_SELECT)
        self.assertEqual(self.session.group, 'ancient')

    def test_quit_mid_round(self):
        self.start()
        self.answer_correct()
        self.assertTrue(self.session.quit())
        self.assertEqual(self.session.phase, Phase.MENU)
        self.assertEqual(self.scheduler.pending, 0)
        self.scheduler.advance(30)
        self.assertEqual(self.session.phase, Phase.MENU)
        self.assertEqual(self.storage.set_calls, [])

    def test_reset_clears_last_result(self):
        self.start()
        self.skip_all()
        self.assertTrue(self.session.reset())
        self.assertEqual(self.session.phase, Phase.MENU)
        self.assertIsNone(self.session.last_result)

    def test_results_snapshot(self):
        self.start()
        self.play_perfect()
        state = self.session.snapshot()
        self.assertEqual(state['phase'], 'results')
        self.assertEqual(state['last_result']['score'], 2995)
        self.assertEqual(state['unlocked_levels'], [2])
        self.assertIsNone(state['challenge'])


if __name__ == '__main__':
    unittest.main()
