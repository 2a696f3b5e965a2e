"""History Heroes: four eras from the ancient world to the space age."""

from ..content import ContentPack, LevelCatalog, StaticContentPool
from ..models import Domain, Rank, Tier
from .common import level_chain, quiz_items

ERAS = {
    'ancient': 'Ancient World',
    'medieval': 'Medieval Times',
    'renaissance': 'Renaissance',
    'modern': 'Modern Era',
}

TOPIC_HINTS = {
    'egypt': 'Think about the Nile and the pharaohs.',
    'greece': 'Think about city-states like Athens and Sparta.',
    'rome': 'All roads lead here!',
    'mesopotamia': 'The land between two rivers.',
    'china': 'Think about dynasties and the Silk Road.',
    'india': 'Think about the Indus valley and great empires.',
    'knights': 'Consider armour, horses and codes of honour.',
    'castles': 'Think about walls, moats and towers.',
    'vikings': 'Think about longships from the far north.',
    'crusades': 'Consider journeys to the Holy Land.',
    'feudalism': 'Think about lords, vassals and land.',
    'byzantium': 'The eastern half of the Roman world.',
    'art': 'Think about painters and sculptors of Italy.',
    'science': 'Consider how people began to test ideas.',
    'exploration': 'Think about ships crossing unknown oceans.',
    'inventions': 'Consider machines that changed daily life.',
    'reformation': 'Think about challenges to the Church.',
    'trade': 'Consider merchants, banks and spices.',
    'revolution': 'Think about people demanding new governments.',
    'industry': 'Consider steam, factories and railways.',
    'world-wars': 'Think about the great conflicts of the 20th century.',
    'civil-rights': 'Consider the struggle for equal rights.',
    'space-age': 'Think about rockets and the race to the Moon.',
    'technology': 'Consider computers and the internet.',
}

ANCIENT = [
    ('egypt', 1, 'Which river was the lifeline of ancient Egypt?', 'The Nile',
     ('The Amazon', 'The Tigris', 'The Danube', 'The Ganges'),
     'The yearly Nile flood made farming possible in the desert.'),
    ('egypt', 1, 'What were Egyptian kings called?', 'Pharaohs',
     ('Emperors', 'Caesars', 'Shoguns', 'Sultans'),
     'Pharaohs were seen as living gods.'),
    ('greece', 1, 'Which Greek city-state is known as the birthplace of democracy?', 'Athens',
     ('Sparta', 'Corinth', 'Thebes', 'Delphi'),
     'Athenian citizens voted directly on laws in the Assembly.'),
    ('rome', 1, 'Who was the first emperor of Rome?', 'Augustus',
     ('Julius Caesar', 'Nero', 'Romulus', 'Caligula'),
     'Octavian took the title Augustus in 27 BC.'),
    ('mesopotamia', 2, 'Which early writing system was pressed into clay tablets?', 'Cuneiform',
     ('Hieroglyphs', 'Latin', 'Sanskrit', 'Runes'),
     'Sumerian scribes used a reed stylus to make wedge-shaped marks.'),
    ('greece', 2, 'Where were the ancient Olympic Games held?', 'Olympia',
     ('Athens', 'Sparta', 'Rome', 'Troy'),
     'The games honoured Zeus and began in 776 BC.'),
    ('china', 2, 'Which dynasty began building the Great Wall as one project?', 'Qin',
     ('Han', 'Ming', 'Tang', 'Song'),
     'Qin Shi Huang joined older walls together.'),
    ('rome', 3, 'What was the Roman assembly of elders called?', 'The Senate',
     ('The Forum', 'The Assembly', 'The Parliament', 'The Council'),
     'Senators advised magistrates and controlled finances.'),
    ('india', 3, 'Which emperor spread Buddhism across the Maurya Empire?', 'Ashoka',
     ('Chandragupta', 'Akbar', 'Babur', 'Harsha'),
     'Ashoka carved his edicts on pillars across India.'),
    ('mesopotamia', 4, 'Which Babylonian king wrote one of the earliest law codes?', 'Hammurabi',
     ('Nebuchadnezzar', 'Sargon', 'Cyrus', 'Darius'),
     'The Code of Hammurabi listed 282 laws.'),
]

MEDIEVAL = [
    ('knights', 1, 'What was a young boy training to be a knight first called?', 'A page',
     ('A squire', 'A jester', 'A monk', 'A herald'),
     'Pages served in a lord\'s household before becoming squires.'),
    ('castles', 1, 'What was the water-filled ditch around a castle called?', 'A moat',
     ('A keep', 'A drawbridge', 'A rampart', 'A turret'),
     'Moats made it hard to reach or tunnel under the walls.'),
    ('vikings', 1, 'Where did the Vikings come from?', 'Scandinavia',
     ('Italy', 'Spain', 'Egypt', 'Persia'),
     'Vikings sailed from what is now Norway, Sweden and Denmark.'),
    ('feudalism', 2, 'Under feudalism, who worked the land in return for protection?', 'Peasants',
     ('Knights', 'Bishops', 'Kings', 'Merchants'),
     'Peasants and serfs owed labour to their lord.'),
    ('crusades', 2, 'In which century did the First Crusade begin?', 'The 11th century',
     ('The 9th century', 'The 13th century', 'The 15th century', 'The 7th century'),
     'Pope Urban II called the First Crusade in 1095.'),
    ('byzantium', 2, 'What was the capital of the Byzantine Empire?', 'Constantinople',
     ('Rome', 'Athens', 'Alexandria', 'Antioch'),
     'Constantinople stood where Istanbul is today.'),
    ('vikings', 3, 'Which Viking explorer reached North America around the year 1000?', 'Leif Erikson',
     ('Erik the Red', 'Ragnar Lothbrok', 'Harald Hardrada', 'Cnut the Great'),
     'Leif Erikson landed at a place the sagas call Vinland.'),
    ('castles', 3, 'What was the strongest central tower of a castle called?', 'The keep',
     ('The bailey', 'The gatehouse', 'The barbican', 'The curtain wall'),
     'The keep was the last line of defence.'),
    ('feudalism', 4, 'Which document limited the power of King John of England in 1215?', 'Magna Carta',
     ('Domesday Book', 'Bill of Rights', 'Treaty of Verdun', 'Golden Bull'),
     'Magna Carta established that the king was subject to law.'),
    ('byzantium', 4, 'Which emperor ordered the building of the Hagia Sophia?', 'Justinian I',
     ('Constantine', 'Theodosius', 'Basil II', 'Heraclius'),
     'The great church was finished in 537.'),
]

RENAISSANCE = [
    ('art', 1, 'Who painted the Mona Lisa?', 'Leonardo da Vinci',
     ('Michelangelo', 'Raphael', 'Donatello', 'Botticelli'),
     'Leonardo worked on the portrait for many years.'),
    ('art', 1, 'Who painted the ceiling of the Sistine Chapel?', 'Michelangelo',
     ('Leonardo da Vinci', 'Titian', 'Caravaggio', 'Giotto'),
     'Michelangelo painted it between 1508 and 1512.'),
    ('exploration', 1, 'Who sailed across the Atlantic in 1492?', 'Christopher Columbus',
     ('Vasco da Gama', 'Ferdinand Magellan', 'James Cook', 'Marco Polo'),
     'Columbus reached the Caribbean while seeking Asia.'),
    ('inventions', 2, 'Who built the first European printing press with movable type?', 'Johannes Gutenberg',
     ('William Caxton', 'Galileo Galilei', 'Isaac Newton', 'Martin Luther'),
     'Gutenberg printed his Bible around 1455.'),
    ('reformation', 2, 'Who posted the Ninety-five Theses in 1517?', 'Martin Luther',
     ('John Calvin', 'Henry VIII', 'Erasmus', 'Thomas More'),
     'Luther\'s theses started the Protestant Reformation.'),
    ('trade', 2, 'Which Italian family of bankers ruled Florence?', 'The Medici',
     ('The Borgia', 'The Sforza', 'The Habsburg', 'The Tudor'),
     'The Medici paid for many famous works of art.'),
    ('science', 3, 'Who proposed that the Earth orbits the Sun?', 'Nicolaus Copernicus',
     ('Ptolemy', 'Aristotle', 'Tycho Brahe', 'Johannes Kepler'),
     'Copernicus published his model in 1543.'),
    ('exploration', 3, 'Whose expedition first sailed around the world?', 'Ferdinand Magellan',
     ('Francis Drake', 'Amerigo Vespucci', 'Hernán Cortés', 'John Cabot'),
     'Magellan died on the way; his crew completed the voyage in 1522.'),
    ('science', 4, 'Who improved the telescope and discovered moons of Jupiter?', 'Galileo Galilei',
     ('Johannes Kepler', 'Isaac Newton', 'Francis Bacon', 'Copernicus'),
     'Galileo saw four moons of Jupiter in 1610.'),
    ('trade', 4, 'Which sea route did Vasco da Gama open in 1498?', 'Europe to India around Africa',
     ('Europe to China over land', 'Spain to Mexico', 'England to Canada', 'Portugal to Brazil'),
     'The route let Portugal trade directly for spices.'),
]

MODERN = [
    ('revolution', 1, 'In which year did the American colonies declare independence?', '1776',
     ('1789', '1812', '1066', '1492'),
     'The Declaration of Independence was adopted on 4 July 1776.'),
    ('revolution', 1, 'Which prison was stormed at the start of the French Revolution?', 'The Bastille',
     ('The Tower of London', 'Alcatraz', 'The Louvre', 'Versailles'),
     'The Bastille fell on 14 July 1789.'),
    ('industry', 1, 'Which machine powered the Industrial Revolution?', 'The steam engine',
     ('The jet engine', 'The computer', 'The windmill', 'The electric motor'),
     'James Watt\'s improved engine drove factories and trains.'),
    ('space-age', 2, 'Who was the first person to walk on the Moon?', 'Neil Armstrong',
     ('Buzz Aldrin', 'Yuri Gagarin', 'John Glenn', 'Michael Collins'),
     'Armstrong stepped onto the Moon in July 1969.'),
    ('world-wars', 2, 'In which year did World War II end?', '1945',
     ('1918', '1939', '1950', '1941'),
     'The war ended with the surrender of Germany and Japan in 1945.'),
    ('civil-rights', 2, 'Who gave the "I Have a Dream" speech?', 'Martin Luther King Jr.',
     ('Malcolm X', 'Rosa Parks', 'Nelson Mandela', 'Frederick Douglass'),
     'King spoke at the March on Washington in 1963.'),
    ('space-age', 3, 'Which country launched Sputnik, the first artificial satellite?', 'The Soviet Union',
     ('The United States', 'China', 'France', 'Japan'),
     'Sputnik 1 was launched in October 1957.'),
    ('world-wars', 3, 'Which event triggered World War I?', 'The assassination of Archduke Franz Ferdinand',
     ('The sinking of the Lusitania', 'The invasion of Poland', 'The attack on Pearl Harbor',
      'The fall of the Berlin Wall'),
     'The archduke was shot in Sarajevo in June 1914.'),
    ('technology', 3, 'Who invented the World Wide Web?', 'Tim Berners-Lee',
     ('Bill Gates', 'Steve Jobs', 'Alan Turing', 'Vint Cerf'),
     'Berners-Lee proposed the web at CERN in 1989.'),
    ('civil-rights', 4, 'In which year did Nelson Mandela become president of South Africa?', '1994',
     ('1990', '1989', '1999', '1985'),
     'Mandela won the first fully democratic election.'),
]

LEVELS = (
    level_chain(Domain.HISTORY, 1, 'ancient', 'ancient', [
        ('Ancient Beginnings', 1, 8, 30, 0, 'Start your journey through ancient history!'),
        ('Pyramids & Pharaohs', 1, 10, 25, 500, 'Explore the wonders of ancient Egypt'),
        ('Greek Glory', 2, 10, 25, 600, 'Discover the birthplace of democracy'),
        ('Roman Empire', 2, 12, 20, 700, 'March through the streets of Rome'),
        ('Ancient Historian', 3, 15, 20, 800, 'Advanced ancient world challenges'),
        ('Ancient Master', 4, 18, 15, 1200, 'The ultimate ancient civilizations challenge!'),
    ])
    + level_chain(Domain.HISTORY, 7, 'medieval', 'medieval', [
        ('Medieval Intro', 1, 8, 30, 0, 'Enter the age of knights and castles!'),
        ('Knights & Castles', 1, 10, 25, 500, 'Learn about chivalry and fortresses'),
        ('Viking Voyages', 2, 10, 25, 600, 'Sail with the fierce Norse warriors'),
        ('Crusader Chronicles', 2, 12, 20, 650, 'Journey to the Holy Land'),
        ('Medieval Historian', 3, 15, 20, 750, 'Advanced medieval knowledge test'),
        ('Medieval Master', 4, 18, 15, 1000, 'The ultimate medieval challenge!'),
    ])
    + level_chain(Domain.HISTORY, 13, 'renaissance', 'renaissance', [
        ('Renaissance Dawn', 1, 8, 30, 0, 'Witness the rebirth of art and science!'),
        ('Masters of Art', 1, 10, 25, 500, 'Meet Leonardo, Michelangelo, and more'),
        ('Age of Exploration', 2, 10, 25, 600, 'Sail the seas with brave explorers'),
        ('Scientific Revolution', 2, 12, 20, 650, 'Discover how we learned to question everything'),
        ('Renaissance Historian', 3, 15, 18, 750, 'Advanced Renaissance challenges'),
        ('Renaissance Master', 4, 18, 15, 900, 'The ultimate Renaissance challenge!'),
    ])
    + level_chain(Domain.HISTORY, 19, 'modern', 'modern', [
        ('Modern Beginnings', 1, 8, 30, 0, 'Explore the world that shaped today!'),
        ('Age of Revolution', 1, 10, 25, 500, 'Learn about the American & French Revolutions'),
        ('Industrial Age', 2, 10, 25, 600, 'Witness the power of steam and steel'),
        ('World at War', 2, 12, 20, 700, 'Learn about the conflicts that changed everything'),
        ('Modern Historian', 3, 15, 18, 800, 'Advanced modern history knowledge'),
        ('Modern Master', 4, 20, 15, 1200, 'The ultimate modern history challenge!'),
    ])
)

RANKS = (
    Rank('novice', 'Novice', 0),
    Rank('student', 'Student', 11),
    Rank('scholar', 'Scholar', 26),
    Rank('historian', 'Historian', 51),
    Rank('professor', 'Professor', 81),
    Rank('legend', 'Legend', 121),
)

PACK = ContentPack(
    key='history-heroes',
    title='History Heroes',
    domain=Domain.HISTORY,
    catalog=LevelCatalog(LEVELS),
    pool=StaticContentPool(
        quiz_items(Domain.HISTORY, 'ancient', TOPIC_HINTS, ANCIENT)
        + quiz_items(Domain.HISTORY, 'medieval', TOPIC_HINTS, MEDIEVAL)
        + quiz_items(Domain.HISTORY, 'renaissance', TOPIC_HINTS, RENAISSANCE)
        + quiz_items(Domain.HISTORY, 'modern', TOPIC_HINTS, MODERN)
    ),
    first_levels=(1, 7, 13, 19),
    ranks=RANKS,
    groups=ERAS,
    tier_labels={Tier.EASY: 'Apprentice', Tier.MEDIUM: 'Scholar', Tier.HARD: 'Historian', Tier.EXPERT: 'Master'},
    group_label='era',
)
