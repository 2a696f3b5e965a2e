"""Static content pools, level catalogs and content packs."""

import logging
from dataclasses import dataclass, field

from .errors import UnknownLevelReference
from .interfaces import ContentPool
from .models import ContentItem, Domain, Level, Rank
from .scoring import DEFAULT_RULES, GameRules

logger = logging.getLogger(__name__)

# Level groups that draw from every group of their domain
ALL_GROUPS = ('world', 'mixed')


class StaticContentPool(ContentPool):
    """In-memory pool over a fixed list of items.

    mixed_modes lists level modes that draw from every item mode.
    """

    def __init__(self, items, mixed_modes=()):
        self.items = tuple(items)
        self.mixed_modes = tuple(mixed_modes)

    def query(self, domain: Domain, max_tier: int, group: str | None = None,
              mode: str | None = None) -> list[ContentItem]:
        if group in ALL_GROUPS:
            group = None
        if mode in self.mixed_modes:
            mode = None
        return [
            item for item in self.items
            if item.domain == domain
            and item.tier <= max_tier
            and (group is None or item.group == group)
            and (mode is None or item.mode == mode)
        ]

    def __len__(self) -> int:
        return len(self.items)


class LevelCatalog:
    """Ordered, immutable list of levels and their unlock edges."""

    def __init__(self, levels, shared_group: str | None = None):
        self.levels = tuple(levels)
        # Levels in this group are listed under every group selection
        self.shared_group = shared_group
        self._by_id = {level.id: level for level in self.levels}
        for level in self.levels:
            req = level.unlock_requirement
            if req and req.level_id not in self._by_id:
                logger.warning(f"Level {level.id} unlocks from unknown level {req.level_id}")

    def __iter__(self):
        return iter(self.levels)

    def __len__(self) -> int:
        return len(self.levels)

    def get(self, level_id: int) -> Level | None:
        return self._by_id.get(level_id)

    def require(self, level_id: int) -> Level:
        level = self._by_id.get(level_id)
        if level is None:
            raise UnknownLevelReference(level_id)
        return level

    def levels_for(self, track: str | None = None, group: str | None = None) -> list[Level]:
        """Levels of a track, as listed for a group selection."""
        result = []
        for level in self.levels:
            if track is not None and level.track != track:
                continue
            if group is not None and level.group not in (group, self.shared_group):
                continue
            result.append(level)
        return result

    def tracks(self) -> list[str]:
        seen = []
        for level in self.levels:
            if level.track not in seen:
                seen.append(level.track)
        return seen

    def groups(self, track: str | None = None) -> list[str]:
        seen = []
        for level in self.levels_for(track):
            if level.group not in seen:
                seen.append(level.group)
        return seen

    def dependents(self, level_id: int) -> list[Level]:
        """Levels whose unlock requirement points at level_id."""
        return [
            level for level in self.levels
            if level.unlock_requirement and level.unlock_requirement.level_id == level_id
        ]

    def next_in_track(self, level_id: int) -> Level | None:
        current = self.get(level_id)
        if current is None:
            return None
        found = False
        for level in self.levels:
            if found and level.track == current.track:
                return level
            if level.id == level_id:
                found = True
        return None


@dataclass(frozen=True)
class ContentPack:
    """Everything one game contributes to the shared engine."""

    key: str
    title: str
    domain: Domain
    catalog: LevelCatalog
    pool: ContentPool
    first_levels: tuple[int, ...]
    ranks: tuple[Rank, ...]
    groups: dict = field(default_factory=dict)      # id -> display name
    modes: dict = field(default_factory=dict)       # id -> display name, empty when no mode select
    tier_labels: dict = field(default_factory=dict)
    group_label: str = 'category'
    rules: GameRules = DEFAULT_RULES

    @property
    def has_modes(self) -> bool:
        return bool(self.modes)

    @property
    def has_groups(self) -> bool:
        return bool(self.groups)

    def rank_for(self, count: int) -> Rank:
        """Largest rank whose threshold does not exceed count."""
        best = self.ranks[0]
        for rank in self.ranks:
            if rank.min_count <= count and rank.min_count >= best.min_count:
                best = rank
        return best

    def describe(self) -> dict:
        return {
            'key': self.key,
            'title': self.title,
            'domain': self.domain.value,
            'modes': dict(self.modes),
            'groups': dict(self.groups),
            'group_label': self.group_label,
            'tiers': {int(t): label for t, label in self.tier_labels.items()},
            'level_count': len(self.catalog),
        }
