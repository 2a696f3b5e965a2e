"""Helpers shared by the content pack modules."""

from ..models import ContentItem, Domain, Level, Tier, UnlockRequirement


def level_chain(domain: Domain, start_id: int, track: str, group: str, rows,
                mode: str | None = None) -> list[Level]:
    """Build a track of levels, each unlocked by a score on the one before.

    rows: (name, tier, question_count, time_limit, min_score, description[, hints])
    The first row's min_score is ignored; it is always open.
    """
    levels = []
    for offset, row in enumerate(rows):
        name, tier, count, time_limit, min_score, description = row[:6]
        hints = row[6] if len(row) > 6 else None
        level_id = start_id + offset
        requirement = None
        if offset > 0:
            requirement = UnlockRequirement(level_id - 1, min_score)
        levels.append(Level(
            id=level_id,
            name=name,
            domain=domain,
            track=track,
            group=group,
            tier=Tier(tier),
            question_count=count,
            time_limit=time_limit,
            unlock_requirement=requirement,
            mode=mode,
            description=description,
            hints_allowed=hints,
        ))
    return levels


def quiz_items(domain: Domain, group: str, hints: dict, rows) -> list[ContentItem]:
    """Build question items from (topic, tier, prompt, answer, distractors, explanation) rows.

    Ids are "{group}:{n}"; the hint comes from the topic.
    """
    items = []
    for n, (topic, tier, prompt, answer, distractors, explanation) in enumerate(rows, 1):
        items.append(ContentItem(
            id=f'{group}:{n}',
            domain=domain,
            answer=answer,
            prompt=prompt,
            tier=Tier(tier),
            group=group,
            hint=hints.get(topic, "Think carefully about what you've learned!"),
            explanation=explanation,
            distractors=tuple(distractors),
        ))
    return items
