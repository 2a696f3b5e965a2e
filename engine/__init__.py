from .models import (
    Domain, Tier, Phase, Level, UnlockRequirement, ContentItem, Option, Challenge,
    ChallengeResult, ComboState, BonusPoints, RoundResult, Rank, LevelProgress, MasteryStats
)
from .interfaces import Storage, ContentPool, Scheduler, ScheduledCall
from .errors import (
    EngineError, InvalidTransition, ExhaustedContentPool,
    CorruptPersistedState, UnknownLevelReference
)
from .scoring import GameRules, HintPolicy, PerfectPolicy, question_score, round_result
from .combo import ComboTracker
from .content import ContentPack, LevelCatalog, StaticContentPool
from .generator import ChallengeGenerator
from .scheduler import AsyncioScheduler, ManualScheduler
from .timer import QuestionTimer
from .progress import ProgressStore
from .session import GameSession
from .packs import get_pack, list_packs

__all__ = [
    'Domain', 'Tier', 'Phase', 'Level', 'UnlockRequirement', 'ContentItem', 'Option',
    'Challenge', 'ChallengeResult', 'ComboState', 'BonusPoints', 'RoundResult', 'Rank',
    'LevelProgress', 'MasteryStats',
    'Storage', 'ContentPool', 'Scheduler', 'ScheduledCall',
    'EngineError', 'InvalidTransition', 'ExhaustedContentPool',
    'CorruptPersistedState', 'UnknownLevelReference',
    'GameRules', 'HintPolicy', 'PerfectPolicy', 'question_score', 'round_result',
    'ComboTracker',
    'ContentPack', 'LevelCatalog', 'StaticContentPool',
    'ChallengeGenerator',
    'AsyncioScheduler', 'ManualScheduler',
    'QuestionTimer',
    'ProgressStore',
    'GameSession',
    'get_pack', 'list_packs',
]
