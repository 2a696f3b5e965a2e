"""Builds a round of challenges for a level."""

import logging
import random

from .errors import ExhaustedContentPool
from .interfaces import ContentPool
from .models import Challenge, ContentItem, Level, Option

logger = logging.getLogger(__name__)


class ChallengeGenerator:
    """Turns content items into multiple-choice challenges.

    All randomness comes from rng, so a seeded Random reproduces a round.
    """

    def __init__(self, pool: ContentPool, rng: random.Random | None = None):
        self.pool = pool
        self.rng = rng or random.Random()

    def generate(self, level: Level) -> list[Challenge]:
        items = self.pool.query(level.domain, int(level.tier), group=level.group, mode=level.mode)
        if not items:
            raise ExhaustedContentPool(f"No content for level {level.id} ({level.name})")
        if len(items) < level.question_count:
            logger.warning(
                f"Level {level.id} wants {level.question_count} challenges "
                f"but only {len(items)} items match; repeating items"
            )

        items = list(items)
        self.rng.shuffle(items)

        challenges = []
        for i in range(level.question_count):
            item = items[i % len(items)]
            challenges.append(self._build(level, i, item, items))

        self.rng.shuffle(challenges)
        return challenges

    def _build(self, level: Level, index: int, item: ContentItem, pool: list[ContentItem]) -> Challenge:
        correct = Option(item.correct_id, item.answer, True)
        wrong = self._wrong_options(item, pool, level.tier.option_count - 1)

        options = [correct] + wrong
        self.rng.shuffle(options)

        return Challenge(
            id=f'{level.id}-{index}-{item.id}',
            item_id=item.id,
            prompt=item.prompt,
            correct_answer_id=correct.id,
            options=tuple(options),
            hint=item.hint,
            explanation=item.explanation,
            display_hint=item.display_hint,
        )

    def _wrong_options(self, item: ContentItem, pool: list[ContentItem], count: int) -> list[Option]:
        """Own distractors first, then answers of other items in the pool."""
        own = [Option(f'{item.id}:{i}', text, False) for i, text in enumerate(item.distractors)]
        self.rng.shuffle(own)
        others = [Option(other.correct_id, other.answer, False) for other in pool
                  if other.correct_id != item.correct_id]
        self.rng.shuffle(others)

        seen_ids = {item.correct_id}
        seen_texts = {item.answer.casefold()}
        chosen = []
        for candidate in own + others:
            if len(chosen) >= count:
                break
            if candidate.id in seen_ids or candidate.text.casefold() in seen_texts:
                continue
            seen_ids.add(candidate.id)
            seen_texts.add(candidate.text.casefold())
            chosen.append(candidate)
        return chosen
