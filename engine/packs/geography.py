"""Geography Explorer: flags, capitals and landmarks of the world."""

from ..content import ContentPack, LevelCatalog, StaticContentPool
from ..models import ContentItem, Domain, Level, Rank, Tier, UnlockRequirement

FLAG_QUIZ = 'flag-quiz'
CAPITAL_MATCH = 'capital-match'
LANDMARK_HUNTER = 'landmark-hunter'
CONTINENT_CHALLENGE = 'continent-challenge'

MODES = {
    FLAG_QUIZ: 'Flag Quiz',
    CAPITAL_MATCH: 'Capital Match',
    LANDMARK_HUNTER: 'Landmark Hunter',
    CONTINENT_CHALLENGE: 'Continent Challenge',
}

CONTINENTS = {
    'world': 'World',
    'europe': 'Europe',
    'asia': 'Asia',
    'africa': 'Africa',
    'north-america': 'North America',
    'south-america': 'South America',
    'oceania': 'Oceania',
}

# code, name, capital, continent, tier
COUNTRIES = [
    ('fr', 'France', 'Paris', 'europe', 1),
    ('de', 'Germany', 'Berlin', 'europe', 1),
    ('it', 'Italy', 'Rome', 'europe', 1),
    ('es', 'Spain', 'Madrid', 'europe', 1),
    ('gb', 'United Kingdom', 'London', 'europe', 1),
    ('pt', 'Portugal', 'Lisbon', 'europe', 2),
    ('nl', 'Netherlands', 'Amsterdam', 'europe', 2),
    ('gr', 'Greece', 'Athens', 'europe', 2),
    ('se', 'Sweden', 'Stockholm', 'europe', 2),
    ('no', 'Norway', 'Oslo', 'europe', 2),
    ('pl', 'Poland', 'Warsaw', 'europe', 3),
    ('ch', 'Switzerland', 'Bern', 'europe', 3),
    ('at', 'Austria', 'Vienna', 'europe', 3),
    ('ie', 'Ireland', 'Dublin', 'europe', 3),
    ('hr', 'Croatia', 'Zagreb', 'europe', 4),
    ('ee', 'Estonia', 'Tallinn', 'europe', 4),
    ('jp', 'Japan', 'Tokyo', 'asia', 1),
    ('cn', 'China', 'Beijing', 'asia', 1),
    ('in', 'India', 'New Delhi', 'asia', 1),
    ('kr', 'South Korea', 'Seoul', 'asia', 2),
    ('th', 'Thailand', 'Bangkok', 'asia', 2),
    ('vn', 'Vietnam', 'Hanoi', 'asia', 2),
    ('id', 'Indonesia', 'Jakarta', 'asia', 3),
    ('ph', 'Philippines', 'Manila', 'asia', 3),
    ('np', 'Nepal', 'Kathmandu', 'asia', 3),
    ('mn', 'Mongolia', 'Ulaanbaatar', 'asia', 4),
    ('kz', 'Kazakhstan', 'Astana', 'asia', 4),
    ('eg', 'Egypt', 'Cairo', 'africa', 1),
    ('za', 'South Africa', 'Pretoria', 'africa', 1),
    ('ke', 'Kenya', 'Nairobi', 'africa', 2),
    ('ng', 'Nigeria', 'Abuja', 'africa', 2),
    ('ma', 'Morocco', 'Rabat', 'africa', 2),
    ('et', 'Ethiopia', 'Addis Ababa', 'africa', 3),
    ('gh', 'Ghana', 'Accra', 'africa', 3),
    ('sn', 'Senegal', 'Dakar', 'africa', 4),
    ('tz', 'Tanzania', 'Dodoma', 'africa', 4),
    ('us', 'United States', 'Washington, D.C.', 'north-america', 1),
    ('ca', 'Canada', 'Ottawa', 'north-america', 1),
    ('mx', 'Mexico', 'Mexico City', 'north-america', 1),
    ('cu', 'Cuba', 'Havana', 'north-america', 2),
    ('jm', 'Jamaica', 'Kingston', 'north-america', 2),
    ('pa', 'Panama', 'Panama City', 'north-america', 3),
    ('cr', 'Costa Rica', 'San José', 'north-america', 3),
    ('gt', 'Guatemala', 'Guatemala City', 'north-america', 4),
    ('br', 'Brazil', 'Brasília', 'south-america', 1),
    ('ar', 'Argentina', 'Buenos Aires', 'south-america', 2),
    ('pe', 'Peru', 'Lima', 'south-america', 2),
    ('cl', 'Chile', 'Santiago', 'south-america', 3),
    ('co', 'Colombia', 'Bogotá', 'south-america', 3),
    ('au', 'Australia', 'Canberra', 'oceania', 1),
    ('nz', 'New Zealand', 'Wellington', 'oceania', 2),
    ('fj', 'Fiji', 'Suva', 'oceania', 4),
]

# id, name, country code, tier, description
LANDMARKS = [
    ('eiffel-tower', 'Eiffel Tower', 'fr', 1, 'An iron lattice tower built for the 1889 World Fair'),
    ('colosseum', 'Colosseum', 'it', 1, 'An ancient amphitheatre that once held 50,000 spectators'),
    ('big-ben', 'Big Ben', 'gb', 1, 'A clock tower at the north end of the Palace of Westminster'),
    ('sagrada-familia', 'Sagrada Família', 'es', 2, 'A basilica designed by Antoni Gaudí, still unfinished'),
    ('parthenon', 'Parthenon', 'gr', 2, 'A temple to Athena on the Acropolis'),
    ('neuschwanstein', 'Neuschwanstein Castle', 'de', 3, 'A fairy-tale castle built for King Ludwig II'),
    ('matterhorn', 'Matterhorn', 'ch', 3, 'A pyramid-shaped peak in the Alps'),
    ('great-wall', 'Great Wall', 'cn', 1, 'A chain of fortifications thousands of kilometres long'),
    ('taj-mahal', 'Taj Mahal', 'in', 1, 'A white marble mausoleum built by Shah Jahan'),
    ('mount-fuji', 'Mount Fuji', 'jp', 2, 'An active volcano and the highest peak of its island nation'),
    ('angkor-wat', 'Angkor Wat', 'kh', 3, 'The largest religious monument in the world'),
    ('mount-everest', 'Mount Everest', 'np', 3, 'The highest mountain above sea level'),
    ('pyramids-giza', 'Pyramids of Giza', 'eg', 1, 'The only surviving wonder of the ancient world'),
    ('table-mountain', 'Table Mountain', 'za', 2, 'A flat-topped mountain overlooking a harbour city'),
    ('kilimanjaro', 'Mount Kilimanjaro', 'tz', 3, 'The highest free-standing mountain in the world'),
    ('statue-of-liberty', 'Statue of Liberty', 'us', 1, 'A copper statue gifted by France in 1886'),
    ('grand-canyon', 'Grand Canyon', 'us', 2, 'A canyon carved by the Colorado River'),
    ('chichen-itza', 'Chichén Itzá', 'mx', 2, 'A Maya city with a great stepped pyramid'),
    ('niagara-falls', 'Niagara Falls', 'ca', 2, 'Three waterfalls on a border river'),
    ('christ-redeemer', 'Christ the Redeemer', 'br', 1, 'An Art Deco statue above Rio de Janeiro'),
    ('machu-picchu', 'Machu Picchu', 'pe', 2, 'An Inca citadel high in the Andes'),
    ('sydney-opera', 'Sydney Opera House', 'au', 1, 'A performing arts centre with sail-shaped shells'),
    ('uluru', 'Uluru', 'au', 3, 'A sandstone monolith sacred to the Aṉangu people'),
]

# Landmark countries that have no flag or capital entry
EXTRA_COUNTRIES = {'kh': ('Cambodia', 'asia')}


def flag_emoji(code: str) -> str:
    return ''.join(chr(0x1F1E6 + ord(c) - ord('A')) for c in code.upper())


def _country_items() -> list[ContentItem]:
    items = []
    for code, name, capital, continent, tier in COUNTRIES:
        items.append(ContentItem(
            id=f'flag:{code}',
            domain=Domain.GEOGRAPHY,
            answer=name,
            prompt='Which country does this flag belong to?',
            tier=Tier(tier),
            group=continent,
            mode=FLAG_QUIZ,
            answer_id=code,
            hint=f'This country is in {CONTINENTS[continent]}.',
            explanation=f'This is the flag of {name}. Its capital is {capital}.',
            display_hint=flag_emoji(code),
        ))
        items.append(ContentItem(
            id=f'capital:{code}',
            domain=Domain.GEOGRAPHY,
            answer=name,
            prompt=f'{capital} is the capital of which country?',
            tier=Tier(tier),
            group=continent,
            mode=CAPITAL_MATCH,
            answer_id=code,
            hint=f'The flag of this country is {flag_emoji(code)}',
            explanation=f'{capital} is the capital of {name}.',
        ))
    return items


def _landmark_items() -> list[ContentItem]:
    countries = {code: (name, continent) for code, name, _, continent, _ in COUNTRIES}
    countries.update(EXTRA_COUNTRIES)
    items = []
    for landmark_id, name, code, tier, description in LANDMARKS:
        country, continent = countries[code]
        items.append(ContentItem(
            id=f'landmark:{landmark_id}',
            domain=Domain.GEOGRAPHY,
            answer=country,
            prompt=f'Where is the {name} located?',
            tier=Tier(tier),
            group=continent,
            mode=LANDMARK_HUNTER,
            answer_id=code,
            hint=description,
            explanation=f'The {name} is in {country}.',
        ))
    return items


# id, name, mode, continent, tier, question_count, time_limit, min_score, description
# Each level after the first of its mode is unlocked by a score on the level before it.
LEVELS = [
    (1, 'Flag Basics', FLAG_QUIZ, 'world', 1, 8, 30, None, 'Learn to recognize flags from around the world'),
    (2, 'European Flags', FLAG_QUIZ, 'europe', 1, 10, 25, 500, 'Identify flags from European countries'),
    (3, 'Asian Flags', FLAG_QUIZ, 'asia', 2, 10, 20, 600, 'Discover flags from Asia'),
    (4, 'Americas Flags', FLAG_QUIZ, 'north-america', 2, 12, 20, 700, 'Flags from North and South America'),
    (5, 'Flag Master', FLAG_QUIZ, 'world', 3, 15, 15, 800, 'Advanced flag recognition challenge'),
    (6, 'Flag Legend', FLAG_QUIZ, 'world', 4, 20, 10, 1200, 'The ultimate flag challenge!'),
    (7, 'Capital Cities 101', CAPITAL_MATCH, 'world', 1, 8, 30, None, 'Match famous capitals to their countries'),
    (8, 'European Capitals', CAPITAL_MATCH, 'europe', 1, 10, 25, 500, 'Learn the capitals of Europe'),
    (9, 'Asian Capitals', CAPITAL_MATCH, 'asia', 2, 10, 20, 600, 'Explore capitals across Asia'),
    (10, 'African Capitals', CAPITAL_MATCH, 'africa', 2, 10, 20, 650, 'Discover African capital cities'),
    (11, 'Capital Expert', CAPITAL_MATCH, 'world', 3, 15, 15, 750, 'Advanced capital city challenge'),
    (12, 'Capital Master', CAPITAL_MATCH, 'world', 4, 20, 10, 1000, 'The ultimate capital city test!'),
    (13, 'Famous Landmarks', LANDMARK_HUNTER, 'world', 1, 8, 30, None, "Identify the world's most famous landmarks"),
    (14, 'European Wonders', LANDMARK_HUNTER, 'europe', 1, 8, 25, 500, 'Explore iconic European landmarks'),
    (15, 'Ancient Wonders', LANDMARK_HUNTER, 'world', 2, 10, 20, 600, 'Historical landmarks from across the globe'),
    (16, 'Natural Wonders', LANDMARK_HUNTER, 'world', 2, 10, 20, 650, 'Discover natural landmarks and formations'),
    (17, 'Landmark Expert', LANDMARK_HUNTER, 'world', 3, 12, 15, 750, 'Advanced landmark identification'),
    (18, 'Wonder Seeker', LANDMARK_HUNTER, 'world', 4, 15, 12, 900, 'The ultimate landmark challenge!'),
    (19, 'World Explorer', CONTINENT_CHALLENGE, 'world', 1, 10, 25, None, 'Mixed geography questions from everywhere'),
    (20, 'Europe Tour', CONTINENT_CHALLENGE, 'europe', 2, 12, 20, 600, 'Complete European geography challenge'),
    (21, 'Asia Adventure', CONTINENT_CHALLENGE, 'asia', 2, 12, 20, 700, 'Journey through Asian geography'),
    (22, 'Americas Quest', CONTINENT_CHALLENGE, 'north-america', 3, 15, 18, 800, 'Explore the Americas'),
    (23, 'Global Challenge', CONTINENT_CHALLENGE, 'world', 3, 18, 15, 1000, 'Test your worldwide geography knowledge'),
    (24, 'Geography Master', CONTINENT_CHALLENGE, 'world', 4, 25, 12, 1500, 'The ultimate geography challenge!'),
]


def _levels() -> list[Level]:
    levels = []
    for level_id, name, mode, continent, tier, count, time_limit, min_score, description in LEVELS:
        levels.append(Level(
            id=level_id,
            name=name,
            domain=Domain.GEOGRAPHY,
            track=mode,
            group=continent,
            tier=Tier(tier),
            question_count=count,
            time_limit=time_limit,
            unlock_requirement=UnlockRequirement(level_id - 1, min_score) if min_score else None,
            mode=mode,
            description=description,
        ))
    return levels


RANKS = (
    Rank('novice', 'Novice', 0),
    Rank('explorer', 'Explorer', 11),
    Rank('navigator', 'Navigator', 31),
    Rank('cartographer', 'Cartographer', 61),
    Rank('globe-trotter', 'Globe Trotter', 101),
    Rank('world-master', 'World Master', 151),
)

PACK = ContentPack(
    key='geography-explorer',
    title='Geography Explorer',
    domain=Domain.GEOGRAPHY,
    catalog=LevelCatalog(_levels(), shared_group='world'),
    pool=StaticContentPool(_country_items() + _landmark_items(),
                           mixed_modes=(CONTINENT_CHALLENGE,)),
    first_levels=(1, 7, 13, 19),
    ranks=RANKS,
    groups={key: CONTINENTS[key] for key in ('world', 'europe', 'asia', 'africa', 'north-america')},
    modes=MODES,
    tier_labels={Tier.EASY: 'Easy', Tier.MEDIUM: 'Medium', Tier.HARD: 'Hard', Tier.EXPERT: 'Expert'},
    group_label='continent',
)
