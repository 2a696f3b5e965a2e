"""Word Builder: pick the word that matches a clue."""

from ..content import ContentPack, LevelCatalog, StaticContentPool
from ..models import ContentItem, Domain, Rank, Tier
from ..scoring import GameRules, HintPolicy, PerfectPolicy
from .common import level_chain

CATEGORIES = {
    'animals': 'Animals',
    'colors': 'Colors',
    'food': 'Food',
    'nature': 'Nature',
    'actions': 'Actions',
    'objects': 'Objects',
    'mixed': 'Mixed',
}

# category -> (word, tier, clue)
WORDS = {
    'animals': [
        ('cat', 1, 'A small pet that purrs'),
        ('dog', 1, "A loyal pet that barks"),
        ('cow', 1, 'A farm animal that gives milk'),
        ('horse', 2, 'An animal you can ride that gallops'),
        ('tiger', 2, 'A big striped cat'),
        ('rabbit', 3, 'A hopping animal with long ears'),
        ('giraffe', 3, 'The tallest animal, with a very long neck'),
        ('elephant', 4, 'A huge animal with a trunk'),
        ('kangaroo', 4, 'An animal that carries its baby in a pouch'),
    ],
    'colors': [
        ('red', 1, 'The color of a ripe strawberry'),
        ('blue', 1, 'The color of a clear sky'),
        ('pink', 1, 'The color of cotton candy'),
        ('green', 2, 'The color of grass'),
        ('brown', 2, 'The color of chocolate'),
        ('purple', 3, 'The color you get mixing red and blue'),
        ('orange', 3, 'A color and a fruit'),
        ('turquoise', 4, 'A blue-green color named after a gemstone'),
        ('crimson', 4, 'A deep, rich red'),
    ],
    'food': [
        ('egg', 1, 'Laid by a hen, often eaten for breakfast'),
        ('pie', 1, 'A baked dish with a crust and filling'),
        ('rice', 1, 'Small white grains cooked in water'),
        ('bread', 2, 'Baked from flour, sliced for sandwiches'),
        ('apple', 2, 'A crunchy red or green fruit'),
        ('banana', 3, 'A long yellow fruit you peel'),
        ('carrot', 3, 'An orange root vegetable rabbits love'),
        ('spaghetti', 4, 'Long thin pasta'),
        ('pineapple', 4, 'A spiky tropical fruit'),
    ],
    'nature': [
        ('sun', 1, 'The star that lights our day'),
        ('sea', 1, 'A large body of salt water'),
        ('tree', 1, 'A tall plant with a trunk and branches'),
        ('river', 2, 'Fresh water flowing to the sea'),
        ('cloud', 2, 'A white shape floating in the sky'),
        ('forest', 3, 'A large area covered with trees'),
        ('desert', 3, 'A dry, sandy place with little rain'),
        ('waterfall', 4, 'Water dropping over a cliff'),
        ('mountain', 4, 'A very high hill'),
    ],
    'actions': [
        ('run', 1, 'Move quickly on your feet'),
        ('hop', 1, 'Jump on one foot'),
        ('sing', 1, 'Make music with your voice'),
        ('dance', 2, 'Move your body to music'),
        ('climb', 2, 'Go up a ladder or tree'),
        ('whisper', 3, 'Speak very quietly'),
        ('wander', 3, 'Walk around with no special plan'),
        ('celebrate', 4, 'Have a party for a special day'),
        ('investigate', 4, 'Look into something carefully to find the truth'),
    ],
    'objects': [
        ('cup', 1, 'You drink from it'),
        ('bed', 1, 'You sleep in it'),
        ('key', 1, 'It opens a lock'),
        ('chair', 2, 'You sit on it'),
        ('clock', 2, 'It tells the time'),
        ('pencil', 3, 'You write or draw with it'),
        ('blanket', 3, 'It keeps you warm in bed'),
        ('umbrella', 4, 'It keeps you dry in the rain'),
        ('telescope', 4, 'It makes faraway stars look closer'),
    ],
}


def _word_items() -> list[ContentItem]:
    items = []
    for category, words in WORDS.items():
        for word, tier, clue in words:
            items.append(ContentItem(
                id=f'{category}:{word}',
                domain=Domain.VOCABULARY,
                answer=word,
                prompt=clue,
                tier=Tier(tier),
                group=category,
                hint=f"It starts with '{word[0]}' and has {len(word)} letters.",
                explanation=f'{word.capitalize()}: {clue.lower()}.',
                display_hint=' '.join('_' * len(word)),
            ))
    return items


def _category_levels(start_id, category, names, descriptions):
    # tier, question_count, time_limit, min_score, hints
    shape = [
        (1, 8, 0, 0, 3),
        (2, 10, 30, 500, 2),
        (3, 10, 25, 600, 2),
        (3, 12, 20, 700, 1),
        (4, 12, 20, 800, 1),
    ]
    rows = [
        (name, tier, count, time_limit, min_score, description, hints)
        for name, description, (tier, count, time_limit, min_score, hints)
        in zip(names, descriptions, shape)
    ]
    return level_chain(Domain.VOCABULARY, start_id, category, category, rows)


DESCRIPTIONS = ('Simple 3-4 letter words', 'Medium words', 'Longer words',
                'Challenging words', 'Expert vocabulary')

LEVELS = (
    _category_levels(1, 'animals', ('Animal Friends', 'Zoo Crew', 'Wild Safari',
                                    'Animal Kingdom', 'Beast Master'), DESCRIPTIONS)
    + _category_levels(6, 'colors', ('Rainbow Start', 'Paint Palette', 'Color Wheel',
                                     'Artist Studio', 'Chromatic Expert'), DESCRIPTIONS)
    + _category_levels(11, 'food', ('Snack Time', 'Kitchen Helper', 'Recipe Book',
                                    'Gourmet Chef', 'Master Chef'), DESCRIPTIONS)
    + _category_levels(16, 'nature', ('Nature Walk', 'Forest Trail', 'Mountain Peak',
                                      'Earth Explorer', 'Nature Master'), DESCRIPTIONS)
    + _category_levels(21, 'actions', ('Action Start', 'Get Moving', 'Action Hero',
                                       'Verb Power', 'Action Master'), DESCRIPTIONS)
    + _category_levels(26, 'objects', ('Thing Finder', 'Home Things', 'Object Quest',
                                       'Treasure Hunt', 'Object Master'), DESCRIPTIONS)
    + level_chain(Domain.VOCABULARY, 31, 'mixed', 'mixed', [
        ('Mix It Up', 1, 10, 0, 0, 'Words from all categories', 3),
        ('Word Scramble', 2, 12, 25, 600, 'Mixed vocabulary', 2),
        ('Brain Buster', 3, 12, 20, 700, 'Challenging mix', 2),
        ('Word Wizard', 3, 15, 18, 800, 'Advanced word mix', 1),
        ('Word Champion', 4, 15, 15, 1000, 'Ultimate word challenge', 0),
    ])
)

RANKS = (
    Rank('beginner', 'Beginner', 0),
    Rank('reader', 'Reader', 11),
    Rank('wordsmith', 'Wordsmith', 26),
    Rank('linguist', 'Linguist', 51),
    Rank('lexicon', 'Walking Lexicon', 81),
    Rank('word-master', 'Word Master', 121),
)

RULES = GameRules(
    time_bonus_threshold_ms=10000,
    hint_policy=HintPolicy.BEFORE_MULTIPLIERS,
    speed_bonus_tiers=((5000, 100), (8000, 50)),
    perfect_policy=PerfectPolicy.ALL_CORRECT_NO_HINTS,
    on_fire_streak=6,
    answer_advance_delay=0.6,
    answer_finish_delay=0.6,
    skip_finish_delay=0.4,
)

PACK = ContentPack(
    key='word-builder',
    title='Word Builder',
    domain=Domain.VOCABULARY,
    catalog=LevelCatalog(LEVELS),
    pool=StaticContentPool(_word_items()),
    first_levels=(1, 6, 11, 16, 21, 26, 31),
    ranks=RANKS,
    groups=CATEGORIES,
    tier_labels={Tier.EASY: 'Easy', Tier.MEDIUM: 'Medium', Tier.HARD: 'Hard', Tier.EXPERT: 'Expert'},
    group_label='category',
    rules=RULES,
)
