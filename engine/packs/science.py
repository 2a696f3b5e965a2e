"""Science Explorer: biology, chemistry, physics and earth science."""

from ..content import ContentPack, LevelCatalog, StaticContentPool
from ..models import Domain, Rank, Tier
from .common import level_chain, quiz_items

CATEGORIES = {
    'biology': 'Biology',
    'chemistry': 'Chemistry',
    'physics': 'Physics',
    'earth-science': 'Earth Science',
}

TOPIC_HINTS = {
    'cells': 'Think about the tiny building blocks of life!',
    'animals': 'Consider different types of creatures and their features.',
    'plants': 'Remember how plants grow and make their food.',
    'human-body': 'Think about how your own body works!',
    'ecosystems': 'Consider how living things interact with each other.',
    'genetics': 'Think about DNA and inherited traits.',
    'atoms': 'Consider the smallest particles that make up matter.',
    'elements': 'Think about the periodic table!',
    'molecules': 'Remember how atoms combine together.',
    'reactions': 'Think about what happens when substances mix.',
    'states-of-matter': 'Consider solid, liquid, and gas forms.',
    'acids-bases': 'Think about the pH scale!',
    'forces': 'Consider pushes, pulls, and movement.',
    'energy': 'Think about different ways energy can exist.',
    'electricity': 'Consider how electric current flows.',
    'magnetism': 'Think about north and south poles!',
    'light': 'Consider how light travels and behaves.',
    'sound': 'Think about vibrations and waves.',
    'rocks': 'Consider how different rocks form.',
    'weather': 'Think about clouds, rain, and temperature.',
    'oceans': 'Consider the vast bodies of water on Earth.',
    'volcanoes': 'Think about what happens inside Earth.',
    'solar-system': 'Consider our sun and the planets around it.',
    'climate': 'Think about long-term weather patterns.',
}

BIOLOGY = [
    ('plants', 1, 'What do plants take in from the air to make food?', 'Carbon dioxide',
     ('Oxygen', 'Nitrogen', 'Helium', 'Hydrogen'),
     'Plants turn carbon dioxide and water into sugar using sunlight.'),
    ('animals', 1, 'Which animal is a mammal?', 'Dolphin',
     ('Shark', 'Salmon', 'Octopus', 'Penguin'),
     'Dolphins breathe air and feed their young milk.'),
    ('human-body', 1, 'Which organ pumps blood around the body?', 'The heart',
     ('The lungs', 'The liver', 'The brain', 'The stomach'),
     'The heart beats about 100,000 times a day.'),
    ('cells', 2, 'Which part of a cell holds its genetic material?', 'The nucleus',
     ('The membrane', 'The cytoplasm', 'The cell wall', 'The vacuole'),
     'DNA is stored in the nucleus of most cells.'),
    ('ecosystems', 2, 'What is an animal that eats only plants called?', 'A herbivore',
     ('A carnivore', 'An omnivore', 'A decomposer', 'A predator'),
     'Herbivores such as deer and rabbits are primary consumers.'),
    ('human-body', 2, 'What is the largest organ of the human body?', 'The skin',
     ('The liver', 'The brain', 'The lungs', 'The heart'),
     'Skin covers about two square metres in adults.'),
    ('cells', 3, 'Which organelle is called the powerhouse of the cell?', 'The mitochondrion',
     ('The ribosome', 'The nucleus', 'The chloroplast', 'The Golgi body'),
     'Mitochondria release energy from food.'),
    ('plants', 3, 'What green pigment lets plants absorb light?', 'Chlorophyll',
     ('Carotene', 'Melanin', 'Haemoglobin', 'Keratin'),
     'Chlorophyll absorbs red and blue light and reflects green.'),
    ('genetics', 4, 'What shape is a DNA molecule?', 'A double helix',
     ('A single ring', 'A straight chain', 'A triple helix', 'A sphere'),
     'Watson and Crick described the double helix in 1953.'),
    ('genetics', 4, 'Who is known as the father of genetics?', 'Gregor Mendel',
     ('Charles Darwin', 'Louis Pasteur', 'Carl Linnaeus', 'Robert Hooke'),
     'Mendel studied inheritance in pea plants.'),
]

CHEMISTRY = [
    ('states-of-matter', 1, 'What is water called when it freezes?', 'Ice',
     ('Steam', 'Vapour', 'Mist', 'Dew'),
     'Water freezes at 0 °C.'),
    ('states-of-matter', 1, 'What happens to water when it boils?', 'It turns into gas',
     ('It turns into ice', 'It disappears', 'It becomes heavier', 'It turns into salt'),
     'Boiling water becomes water vapour.'),
    ('elements', 1, 'What is the chemical symbol for oxygen?', 'O',
     ('Ox', 'Og', 'Om', 'Or'),
     'Oxygen is element number 8.'),
    ('atoms', 2, 'Which particle in an atom has a negative charge?', 'The electron',
     ('The proton', 'The neutron', 'The nucleus', 'The photon'),
     'Electrons orbit the nucleus.'),
    ('molecules', 2, 'What is the chemical formula for water?', 'H2O',
     ('CO2', 'O2', 'NaCl', 'H2O2'),
     'Each water molecule has two hydrogen atoms and one oxygen atom.'),
    ('acids-bases', 2, 'What is the pH of pure water?', '7',
     ('1', '4', '10', '14'),
     'A pH of 7 is neutral.'),
    ('elements', 3, 'What is the chemical symbol for gold?', 'Au',
     ('Go', 'Gd', 'Ag', 'Gl'),
     'Au comes from the Latin word aurum.'),
    ('reactions', 3, 'What gas is released when vinegar reacts with baking soda?', 'Carbon dioxide',
     ('Oxygen', 'Hydrogen', 'Nitrogen', 'Chlorine'),
     'The bubbles are carbon dioxide.'),
    ('atoms', 4, 'What is the number of protons in an atom called?', 'The atomic number',
     ('The mass number', 'The valence', 'The isotope', 'The period'),
     'The atomic number identifies the element.'),
    ('elements', 4, 'Which element is the most abundant in the universe?', 'Hydrogen',
     ('Helium', 'Oxygen', 'Carbon', 'Iron'),
     'About three quarters of normal matter is hydrogen.'),
]

PHYSICS = [
    ('forces', 1, 'What force pulls objects toward the Earth?', 'Gravity',
     ('Friction', 'Magnetism', 'Tension', 'Lift'),
     'Gravity gives objects their weight.'),
    ('magnetism', 1, 'Which metal is attracted to a magnet?', 'Iron',
     ('Copper', 'Aluminium', 'Gold', 'Silver'),
     'Iron, nickel and cobalt are magnetic.'),
    ('light', 1, 'What do we call light splitting into colours in the sky?', 'A rainbow',
     ('An eclipse', 'An aurora', 'A mirage', 'A halo'),
     'Raindrops bend sunlight into its colours.'),
    ('sound', 2, 'What does sound need to travel through?', 'A medium such as air',
     ('A vacuum', 'Light', 'Magnetism', 'Nothing at all'),
     'Sound cannot travel through empty space.'),
    ('energy', 2, 'What kind of energy does a moving car have?', 'Kinetic energy',
     ('Potential energy', 'Nuclear energy', 'Chemical energy', 'Thermal energy'),
     'Kinetic energy is the energy of motion.'),
    ('electricity', 2, 'What unit measures electric current?', 'The ampere',
     ('The volt', 'The watt', 'The ohm', 'The joule'),
     'Current is measured in amperes.'),
    ('forces', 3, 'Which force slows a sliding box on the floor?', 'Friction',
     ('Gravity', 'Buoyancy', 'Magnetism', 'Thrust'),
     'Friction acts against motion between surfaces.'),
    ('light', 3, 'How fast does light travel in a vacuum?', 'About 300,000 km per second',
     ('About 300 km per second', 'About 3,000 km per second',
      'About 30 km per second', 'About 3 million km per second'),
     'Light from the Sun reaches Earth in about eight minutes.'),
    ('energy', 4, 'Who wrote the equation E = mc²?', 'Albert Einstein',
     ('Isaac Newton', 'Niels Bohr', 'Marie Curie', 'Max Planck'),
     'Einstein published it in 1905.'),
    ('forces', 4, "What does Newton's third law state?", 'Every action has an equal and opposite reaction',
     ('Objects at rest stay at rest', 'Force equals mass times acceleration',
      'Energy cannot be destroyed', 'Gravity weakens with distance'),
     'A rocket pushes gas down and is pushed up.'),
]

EARTH_SCIENCE = [
    ('solar-system', 1, 'Which planet is known as the Red Planet?', 'Mars',
     ('Venus', 'Jupiter', 'Mercury', 'Saturn'),
     'Iron oxide dust makes Mars look red.'),
    ('weather', 1, 'What are clouds made of?', 'Tiny water droplets',
     ('Smoke', 'Cotton', 'Dust only', 'Steam from volcanoes'),
     'Water vapour condenses into droplets or ice crystals.'),
    ('oceans', 1, 'Which is the largest ocean on Earth?', 'The Pacific Ocean',
     ('The Atlantic Ocean', 'The Indian Ocean', 'The Arctic Ocean', 'The Southern Ocean'),
     'The Pacific covers about a third of the planet.'),
    ('volcanoes', 2, 'What is molten rock called once it reaches the surface?', 'Lava',
     ('Magma', 'Ash', 'Basalt', 'Pumice'),
     'Below the surface the same rock is called magma.'),
    ('rocks', 2, 'Which type of rock forms from cooled magma?', 'Igneous rock',
     ('Sedimentary rock', 'Metamorphic rock', 'Limestone', 'Chalk'),
     'Granite and basalt are igneous rocks.'),
    ('solar-system', 2, 'Which is the largest planet in our solar system?', 'Jupiter',
     ('Saturn', 'Neptune', 'Earth', 'Uranus'),
     'Jupiter is more than twice as massive as all other planets combined.'),
    ('climate', 3, 'Which gas is most responsible for the greenhouse effect caused by people?', 'Carbon dioxide',
     ('Oxygen', 'Nitrogen', 'Argon', 'Helium'),
     'Burning fossil fuels releases carbon dioxide.'),
    ('oceans', 3, 'What mainly causes ocean tides?', "The Moon's gravity",
     ('Wind', 'Earthquakes', 'Ocean currents', "The Earth's magnetism"),
     'The Sun also plays a smaller part.'),
    ('rocks', 4, 'What is the name of the supercontinent that broke apart 200 million years ago?', 'Pangaea',
     ('Gondwana', 'Laurasia', 'Rodinia', 'Atlantis'),
     'Plate tectonics slowly moved the pieces apart.'),
    ('volcanoes', 4, 'Which layer of the Earth lies directly below the crust?', 'The mantle',
     ('The outer core', 'The inner core', 'The lithosphere', 'The atmosphere'),
     'The mantle is about 2,900 km thick.'),
]

LEVELS = (
    level_chain(Domain.SCIENCE, 1, 'biology', 'biology', [
        ('Biology Basics', 1, 8, 30, 0, 'Start your journey into the world of living things!'),
        ('Amazing Animals', 1, 10, 25, 500, 'Discover incredible facts about animals'),
        ('Body Explorer', 2, 10, 25, 600, 'Learn how your amazing body works'),
        ('Cell Scientists', 2, 12, 20, 700, 'Explore the tiny world of cells'),
        ('Life Scientist', 3, 15, 20, 800, 'Advanced biology challenges await'),
        ('Biology Genius', 4, 18, 15, 1200, 'The ultimate biology challenge!'),
    ])
    + level_chain(Domain.SCIENCE, 7, 'chemistry', 'chemistry', [
        ('Chemistry Intro', 1, 8, 30, 0, 'Begin your chemical adventure!'),
        ('Matter Matters', 1, 10, 25, 500, 'Explore solids, liquids, and gases'),
        ('Atom Explorer', 2, 10, 25, 600, 'Dive into the world of atoms'),
        ('Element Master', 2, 12, 20, 650, 'Learn about elements and the periodic table'),
        ('Lab Scientist', 3, 15, 20, 750, 'Advanced chemical knowledge test'),
        ('Chemistry Genius', 4, 18, 15, 1000, 'The ultimate chemistry challenge!'),
    ])
    + level_chain(Domain.SCIENCE, 13, 'physics', 'physics', [
        ('Physics Fundamentals', 1, 8, 30, 0, 'Discover the forces that shape our world!'),
        ('Force & Motion', 1, 10, 25, 500, 'Learn about pushes, pulls, and movement'),
        ('Energy Explorer', 2, 10, 25, 600, 'Explore different forms of energy'),
        ('Light & Sound', 2, 12, 20, 650, 'Discover waves, light, and sound'),
        ('Physics Master', 3, 15, 18, 750, 'Advanced physics challenges'),
        ('Physics Genius', 4, 18, 15, 900, 'The ultimate physics challenge!'),
    ])
    + level_chain(Domain.SCIENCE, 19, 'earth-science', 'earth-science', [
        ('Earth Explorer', 1, 8, 30, 0, 'Begin exploring our amazing planet!'),
        ('Weather Watcher', 1, 10, 25, 500, 'Learn about weather and climate'),
        ('Ocean Explorer', 2, 10, 25, 600, "Dive into the world's oceans"),
        ('Space Voyager', 2, 12, 20, 700, 'Journey through our solar system'),
        ('Earth Scientist', 3, 15, 18, 800, 'Advanced Earth science knowledge'),
        ('Earth Master', 4, 20, 15, 1200, 'The ultimate Earth science challenge!'),
    ])
)

RANKS = (
    Rank('curious', 'Curious Mind', 0),
    Rank('learner', 'Learner', 11),
    Rank('researcher', 'Researcher', 26),
    Rank('scientist', 'Scientist', 51),
    Rank('professor', 'Professor', 81),
    Rank('genius', 'Genius', 121),
)

PACK = ContentPack(
    key='science-explorer',
    title='Science Explorer',
    domain=Domain.SCIENCE,
    catalog=LevelCatalog(LEVELS),
    pool=StaticContentPool(
        quiz_items(Domain.SCIENCE, 'biology', TOPIC_HINTS, BIOLOGY)
        + quiz_items(Domain.SCIENCE, 'chemistry', TOPIC_HINTS, CHEMISTRY)
        + quiz_items(Domain.SCIENCE, 'physics', TOPIC_HINTS, PHYSICS)
        + quiz_items(Domain.SCIENCE, 'earth-science', TOPIC_HINTS, EARTH_SCIENCE)
    ),
    first_levels=(1, 7, 13, 19),
    ranks=RANKS,
    groups=CATEGORIES,
    tier_labels={Tier.EASY: 'Beginner', Tier.MEDIUM: 'Explorer', Tier.HARD: 'Scientist', Tier.EXPERT: 'Genius'},
    group_label='category',
)
