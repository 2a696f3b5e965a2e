"""Game session state machine shared by all content packs."""

import functools
import logging
import random
import threading
from typing import Callable

from .combo import ComboTracker
from .content import ContentPack
from .errors import ExhaustedContentPool, InvalidTransition
from .generator import ChallengeGenerator
from .interfaces import ScheduledCall, Scheduler
from .models import Challenge, ChallengeResult, Level, Phase, RoundResult
from .progress import ProgressStore
from .scoring import question_score, round_result
from .timer import QuestionTimer

logger = logging.getLogger(__name__)


def command(*phases: Phase):
    """Run a session command under the lock.

    The command is ignored (returns False) outside the given phases or when
    it raises InvalidTransition. Otherwise its own bool result is returned.
    """
    def decorator(method):
        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            with self._lock:
                try:
                    if phases and self.phase not in phases:
                        raise InvalidTransition(method.__name__, self.phase)
                    return method(self, *args, **kwargs) is not False
                except InvalidTransition as e:
                    logger.debug(f"Ignored command: {e}")
                    return False
        return wrapper
    return decorator


class _LockedScheduler(Scheduler):
    """Runs every callback of the wrapped scheduler under a lock."""

    def __init__(self, inner: Scheduler, lock):
        self.inner = inner
        self.lock = lock

    def now(self) -> float:
        return self.inner.now()

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        def locked():
            with self.lock:
                callback()
        return self.inner.call_later(delay, locked)


class _Stopwatch:
    """Elapsed time that stops while paused."""

    def __init__(self, scheduler: Scheduler):
        self.scheduler = scheduler
        self.reset()

    def reset(self) -> None:
        self._elapsed = 0.0
        self._since = None

    def start(self) -> None:
        self.reset()
        self._since = self.scheduler.now()

    def stop(self) -> None:
        if self._since is not None:
            self._elapsed += self.scheduler.now() - self._since
            self._since = None

    def resume(self) -> None:
        if self._since is None:
            self._since = self.scheduler.now()

    @property
    def elapsed_ms(self) -> int:
        elapsed = self._elapsed
        if self._since is not None:
            elapsed += self.scheduler.now() - self._since
        return int(round(elapsed * 1000))


class GameSession:
    """One player's walk through menus, rounds and results of a content pack.

    Every command returns True when accepted and False when it had no effect.
    Scheduled transitions (countdown, auto-advance, timer) run under the same
    lock as commands.
    """

    def __init__(self, pack: ContentPack, progress: ProgressStore, scheduler: Scheduler,
                 rng: random.Random | None = None):
        self.pack = pack
        self.rules = pack.rules
        self.progress = progress
        self._lock = threading.RLock()
        self.scheduler = _LockedScheduler(scheduler, self._lock)
        self.generator = ChallengeGenerator(pack.pool, rng)
        self.combo = ComboTracker(self.rules.multiplier_ladder, self.rules.on_fire_streak)
        self.timer = QuestionTimer(self.scheduler, on_expire=self._on_timeout)
        self._question_clock = _Stopwatch(self.scheduler)
        self._round_clock = _Stopwatch(self.scheduler)
        self._pending = None
        self._pending_action = None
        self._pending_due = None
        self._suspended_delay = None

        self.phase = Phase.MENU
        self.mode = None
        self.group = None
        self.last_result: RoundResult | None = None
        self.unlocked_levels: list[int] = []
        self._clear_round()

    def _clear_round(self) -> None:
        self.level: Level | None = None
        self.challenges: list[Challenge] = []
        self.index = 0
        self.results: list[ChallengeResult] = []
        self.score = 0
        self.hints_used = 0
        self.hint_used = False
        self.awaiting_advance = False
        self.last_answer = None
        self.combo.reset()
        self._question_clock.reset()
        self._round_clock.reset()

    # Navigation

    @command(Phase.MENU)
    def open(self):
        if self.pack.has_modes:
            self.phase = Phase.MODE_SELECT
        elif self.pack.has_groups:
            self.phase = Phase.SUB_SELECT
        else:
            self.phase = Phase.LEVEL_SELECT

    @command(Phase.MODE_SELECT)
    def select_mode(self, mode: str):
        if mode not in self.pack.modes:
            return False
        self.mode = mode
        self.phase = Phase.SUB_SELECT if self.pack.has_groups else Phase.LEVEL_SELECT

    @command(Phase.SUB_SELECT)
    def select_group(self, group: str):
        if group not in self.pack.groups:
            return False
        self.group = group
        self.phase = Phase.LEVEL_SELECT

    @command(Phase.MODE_SELECT, Phase.SUB_SELECT, Phase.LEVEL_SELECT, Phase.RESULTS)
    def back(self):
        """Step back one selection screen."""
        match self.phase:
            case Phase.RESULTS:
                self._clear_round()
                self.phase = Phase.LEVEL_SELECT
            case Phase.LEVEL_SELECT if self.pack.has_groups:
                self.group = None
                self.phase = Phase.SUB_SELECT
            case Phase.LEVEL_SELECT | Phase.SUB_SELECT if self.pack.has_modes:
                self.group = None
                self.mode = None
                self.phase = Phase.MODE_SELECT
            case _:
                self.mode = None
                self.group = None
                self.phase = Phase.MENU

    def available_levels(self) -> list[Level]:
        """Levels listed for the current mode and group selection."""
        return self.pack.catalog.levels_for(self.mode, self.group)

    @command(Phase.LEVEL_SELECT, Phase.RESULTS)
    def select_level(self, level_id: int):
        level = self.pack.catalog.get(level_id)
        if level is None:
            logger.warning(f"{self.pack.key}: unknown level {level_id}")
            return False
        if not self.progress.is_unlocked(level_id):
            logger.debug(f"{self.pack.key}: level {level_id} is locked")
            return False
        return self._start_level(level)

    def _start_level(self, level: Level) -> bool:
        try:
            challenges = self.generator.generate(level)
        except ExhaustedContentPool as e:
            logger.warning(f"{self.pack.key}: {e}")
            return False

        self._cancel_scheduled()
        self._clear_round()
        self.level = level
        self.challenges = challenges
        self.unlocked_levels = []
        self.phase = Phase.COUNTDOWN
        self._schedule(self.rules.countdown_seconds, self._countdown_done)
        logger.info(f"{self.pack.key}: level {level.id} '{level.name}' selected, "
                    f"{len(challenges)} challenges")
        return True

    def _countdown_done(self) -> None:
        if self.phase is Phase.COUNTDOWN:
            self.start_round()

    # Round

    @command(Phase.COUNTDOWN)
    def start_round(self):
        self._cancel_scheduled()
        self.phase = Phase.PLAYING
        self.index = 0
        self._round_clock.start()
        self._present()
        logger.info(f"{self.pack.key}: round started on level {self.level.id}")

    @property
    def current_challenge(self) -> Challenge | None:
        if self.phase in (Phase.PLAYING, Phase.PAUSED) and self.index < len(self.challenges):
            return self.challenges[self.index]
        return None

    def _present(self) -> None:
        self.awaiting_advance = False
        self.hint_used = False
        self.last_answer = None
        self._question_clock.start()
        self.timer.start(self.level.time_limit)

    def _require_open_challenge(self, name: str, challenge_id: str | None = None) -> None:
        if self.awaiting_advance:
            raise InvalidTransition(name, self.phase)
        if challenge_id is not None and challenge_id != self.challenges[self.index].id:
            raise InvalidTransition(name, self.phase)

    @command(Phase.PLAYING)
    def submit_answer(self, answer_id: str | None, challenge_id: str | None = None):
        """Answer the current challenge. None skips it; unknown ids count as wrong.

        When challenge_id is given it must name the challenge on screen, so an
        answer meant for a challenge that already timed out is refused.
        """
        self._require_open_challenge('submit_answer', challenge_id)
        self._record(answer_id)

    @command(Phase.PLAYING)
    def skip(self, challenge_id: str | None = None):
        self._require_open_challenge('skip', challenge_id)
        self._record(None)

    @command(Phase.PLAYING)
    def use_hint(self):
        self._require_open_challenge('use_hint')
        if self.hint_used:
            return False
        allowed = self.level.hints_allowed
        if allowed is not None and self.hints_used >= allowed:
            return False
        self.hint_used = True
        self.hints_used += 1

    def _on_timeout(self) -> None:
        if self.phase is Phase.PLAYING and not self.awaiting_advance:
            logger.debug(f"{self.pack.key}: challenge {self.index + 1} timed out")
            self._record(None)

    def _record(self, selected: str | None) -> None:
        self.timer.cancel()
        self._question_clock.stop()
        time_spent = self._question_clock.elapsed_ms
        challenge = self.challenges[self.index]

        option = challenge.option(selected) if selected is not None else None
        is_correct = option is not None and option.is_correct
        if is_correct:
            combo = self.combo.hit()
        else:
            combo = self.combo.miss()

        points = question_score(self.rules, is_correct, time_spent, combo.multiplier,
                                self.level.tier, self.hint_used)
        self.results.append(ChallengeResult(
            challenge=challenge,
            selected_answer=selected,
            is_correct=is_correct,
            time_spent_ms=time_spent,
            points_earned=points,
            hint_used=self.hint_used,
        ))
        self.score += points
        self.awaiting_advance = True
        self.last_answer = {
            'selected_answer': selected,
            'is_correct': is_correct,
            'skipped': selected is None,
            'points_earned': points,
            'correct_answer_id': challenge.correct_answer_id,
            'correct_answer': challenge.correct_answer,
            'explanation': challenge.explanation,
        }

        last = self.index + 1 >= len(self.challenges)
        if selected is None:
            if last:
                self._schedule(self.rules.skip_finish_delay, self._finish)
            else:
                self._advance()
        elif last:
            self._schedule(self.rules.answer_finish_delay, self._finish)
        else:
            self._schedule(self.rules.answer_advance_delay, self._advance)

    def _advance(self) -> None:
        self.index += 1
        self._present()

    def _finish(self) -> None:
        self.timer.cancel()
        self._round_clock.stop()
        result = round_result(
            self.rules, self.level, self.results,
            total_time_ms=self._round_clock.elapsed_ms,
            highest_streak=self.combo.max_reached,
            hints_used=self.hints_used,
        )
        self.last_result = result
        self.awaiting_advance = False
        self.phase = Phase.RESULTS
        self.unlocked_levels = self.progress.record_round(result)
        logger.info(f"{self.pack.key}: level {result.level_id} finished, score {result.score}, "
                    f"accuracy {result.accuracy:.0f}%, {result.stars} stars")

    # Pause

    @command(Phase.PLAYING)
    def pause(self):
        self.timer.pause()
        self._question_clock.stop()
        self._round_clock.stop()
        self._suspend_scheduled()
        self.phase = Phase.PAUSED

    @command(Phase.PAUSED)
    def resume(self):
        self.phase = Phase.PLAYING
        self._round_clock.resume()
        if not self.awaiting_advance:
            self._question_clock.resume()
            self.timer.resume()
        self._resume_scheduled()

    # Results

    @command(Phase.RESULTS)
    def retry(self):
        if self.level is None:
            return False
        return self._start_level(self.level)

    @command(Phase.RESULTS)
    def next_level(self):
        """Play the next level of the track if this round earned it, else go to level select."""
        if self.level is None:
            return False
        upcoming = self.pack.catalog.next_in_track(self.level.id)
        if upcoming is not None:
            req = upcoming.unlock_requirement
            earned = req is None or (self.last_result is not None
                                     and self.last_result.score >= req.min_score)
            if earned and self._start_level(upcoming):
                return True
        self._clear_round()
        self.phase = Phase.LEVEL_SELECT

    @command()
    def quit(self):
        """Back to the menu from anywhere, dropping the round."""
        self._reset_state()

    @command()
    def reset(self):
        self._reset_state()
        self.last_result = None

    def _reset_state(self) -> None:
        self._cancel_scheduled()
        self.timer.cancel()
        self._clear_round()
        self.mode = None
        self.group = None
        self.unlocked_levels = []
        self.phase = Phase.MENU

    # Scheduled transitions

    def _schedule(self, delay: float, action: Callable[[], None]) -> None:
        self._cancel_scheduled()
        self._pending_action = action
        self._pending_due = self.scheduler.now() + delay
        self._pending = self.scheduler.call_later(delay, functools.partial(self._fire, action))

    def _fire(self, action: Callable[[], None]) -> None:
        if self._pending_action is not action:
            return
        self._pending = None
        self._pending_action = None
        self._pending_due = None
        action()

    def _cancel_scheduled(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
        self._pending = None
        self._pending_action = None
        self._pending_due = None
        self._suspended_delay = None

    def _suspend_scheduled(self) -> None:
        if self._pending is None:
            return
        self._pending.cancel()
        self._pending = None
        self._suspended_delay = max(0.0, self._pending_due - self.scheduler.now())

    def _resume_scheduled(self) -> None:
        if self._pending_action is None or self._suspended_delay is None:
            return
        action, delay = self._pending_action, self._suspended_delay
        self._suspended_delay = None
        self._schedule(delay, action)

    # Views

    def snapshot(self) -> dict:
        with self._lock:
            challenge = self.current_challenge
            challenge_view = None
            if challenge is not None:
                challenge_view = challenge.to_dict(reveal=self.awaiting_advance)
                challenge_view['hint'] = challenge.hint if self.hint_used or self.awaiting_advance else None

            state = {
                'phase': self.phase.value,
                'game': self.pack.key,
                'mode': self.mode,
                'group': self.group,
                'level': self.level.to_dict() if self.level else None,
                'challenge_index': self.index,
                'challenge_count': len(self.challenges),
                'challenge': challenge_view,
                'time_remaining': self.timer.remaining,
                'combo': self.combo.state().to_dict(),
                'score': self.score,
                'hints_used': self.hints_used,
                'hint_used': self.hint_used,
                'last_answer': self.last_answer,
                'last_result': self.last_result.to_dict() if self.last_result else None,
                'unlocked_levels': list(self.unlocked_levels),
            }
            match self.phase:
                case Phase.MODE_SELECT:
                    state['modes'] = dict(self.pack.modes)
                case Phase.SUB_SELECT:
                    state['groups'] = dict(self.pack.groups)
                case Phase.LEVEL_SELECT:
                    state['levels'] = [self._level_view(level) for level in self.available_levels()]
            return state

    def _level_view(self, level: Level) -> dict:
        progress = self.progress.get(level.id)
        view = level.to_dict()
        view['unlocked'] = self.progress.is_unlocked(level.id)
        view['stars'] = progress.stars if progress else 0
        view['high_score'] = progress.high_score if progress else 0
        return view
