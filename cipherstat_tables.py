"""
---
version: 0.3.0
created: 2026-02-26
updated: 2026-03-04
---

cipherstat_tables.py — Reference frequency data for cipherstat.

Per-language expected n-gram percentages (orders 1-4), IC baselines and an
English common-word list. Tables are sparse: only the most frequent n-grams
are listed for orders 2-4 and they are never renormalized by their partial
sum. Values are percentages (0-100).

Sources: standard published letter frequency tables (English, Spanish,
French, German, Italian, Portuguese); Russian and Chinese are given in
transliterated (Latin) and pinyin form respectively.
"""

from __future__ import annotations

# ============================================================================
# IC BASELINES (normalized x26)
# ============================================================================

IC_BASELINES: dict[str, float] = {
    "english": 1.73,
    "spanish": 1.94,
    "french": 1.90,
    "german": 1.76,
    "italian": 1.94,
    "portuguese": 1.94,
}

RANDOM_IC = 1.0

# ============================================================================
# ENGLISH
# ============================================================================

ENGLISH = {
    1: {
        "E": 12.70, "T": 9.06, "A": 8.17, "O": 7.51, "I": 6.97, "N": 6.75,
        "S": 6.33, "H": 6.09, "R": 5.99, "D": 4.25, "L": 4.03, "C": 2.78,
        "U": 2.76, "M": 2.41, "W": 2.36, "F": 2.23, "G": 2.02, "Y": 1.97,
        "P": 1.93, "B": 1.29, "V": 0.98, "K": 0.77, "J": 0.15, "X": 0.15,
        "Q": 0.10, "Z": 0.07,
    },
    2: {
        "TH": 3.56, "HE": 3.07, "IN": 2.43, "ER": 2.05, "AN": 1.99, "RE": 1.85,
        "ON": 1.76, "AT": 1.49, "EN": 1.45, "ND": 1.35, "TI": 1.34, "ES": 1.34,
        "OR": 1.28, "TE": 1.20, "OF": 1.17, "ED": 1.17, "IS": 1.13, "IT": 1.12,
        "AL": 1.09, "AR": 1.07, "ST": 1.05, "TO": 1.04, "NT": 1.04, "NG": 0.95,
        "SE": 0.93, "HA": 0.93, "AS": 0.87, "OU": 0.87, "IO": 0.83, "LE": 0.83,
        "VE": 0.83, "CO": 0.79, "ME": 0.79, "DE": 0.76, "HI": 0.76, "RI": 0.73,
        "RO": 0.73, "IC": 0.70, "NE": 0.69, "EA": 0.69, "RA": 0.69, "CE": 0.65,
        "LI": 0.62, "CH": 0.60, "LL": 0.58, "BE": 0.58, "MA": 0.57, "SI": 0.55,
        "OM": 0.55, "UR": 0.54,
    },
    3: {
        "THE": 1.81, "AND": 0.73, "ING": 0.72, "ENT": 0.42, "ION": 0.42,
        "HER": 0.36, "FOR": 0.34, "THA": 0.33, "NTH": 0.33, "INT": 0.32,
        "ERE": 0.31, "TIO": 0.31, "TER": 0.30, "EST": 0.28, "ERS": 0.28,
        "ATI": 0.26, "HAT": 0.26, "ATE": 0.25, "ALL": 0.25, "ETH": 0.24,
        "HES": 0.24, "VER": 0.24, "HIS": 0.24, "OFT": 0.22, "ITH": 0.21,
        "FTH": 0.21, "STH": 0.21, "OTH": 0.21, "RES": 0.21, "ONT": 0.20,
    },
    4: {
        "TION": 0.31, "NTHE": 0.27, "THER": 0.24, "THAT": 0.21, "OFTH": 0.19,
        "FTHE": 0.19, "THES": 0.18, "WITH": 0.18, "INTH": 0.17, "ATIO": 0.17,
        "OTHE": 0.16, "TTHE": 0.16, "DTHE": 0.16, "INGT": 0.15, "ETHE": 0.15,
        "SAND": 0.14, "STHE": 0.14, "HERE": 0.13, "THEC": 0.13, "MENT": 0.12,
        "THEM": 0.12, "RTHE": 0.12, "THEP": 0.11, "FROM": 0.11, "THIS": 0.11,
    },
}

# ============================================================================
# SPANISH
# ============================================================================

SPANISH = {
    1: {
        "E": 13.68, "A": 12.53, "O": 8.68, "S": 7.98, "R": 6.87, "N": 6.71,
        "I": 6.25, "D": 5.86, "L": 4.97, "C": 4.68, "T": 4.63, "U": 3.93,
        "M": 3.15, "P": 2.51, "B": 1.42, "G": 1.01, "V": 0.90, "Y": 0.90,
        "Q": 0.88, "H": 0.70, "F": 0.69, "Z": 0.52, "J": 0.44, "X": 0.22,
        "W": 0.02, "K": 0.01,
    },
    2: {
        "DE": 2.57, "ES": 2.38, "EN": 2.26, "EL": 1.95, "LA": 1.93, "OS": 1.85,
        "UE": 1.62, "AR": 1.60, "RA": 1.50, "RE": 1.46, "ER": 1.44, "AS": 1.40,
        "ON": 1.39, "ST": 1.32, "AD": 1.21, "AL": 1.15, "OR": 1.10, "TA": 1.08,
        "CO": 1.06, "SE": 1.05, "AN": 1.03, "NT": 1.00, "QU": 0.96, "DO": 0.95,
        "TE": 0.92,
    },
    3: {
        "QUE": 1.08, "ENT": 0.68, "ADE": 0.52, "EDE": 0.48, "DEL": 0.47,
        "ELA": 0.45, "CON": 0.43, "ION": 0.42, "LOS": 0.41, "OSE": 0.40,
        "LAS": 0.39, "DES": 0.38, "STA": 0.37, "EST": 0.36, "ARA": 0.35,
    },
    4: {
        "ENTE": 0.32, "ACIO": 0.27, "CION": 0.27, "ESTA": 0.25, "PARA": 0.21,
        "MENT": 0.20, "DELA": 0.19, "QUEL": 0.17, "OSDE": 0.16, "ENLA": 0.16,
        "ADEL": 0.15, "ANTE": 0.14, "ASDE": 0.14, "RQUE": 0.13, "ONDE": 0.12,
    },
}

# ============================================================================
# FRENCH
# ============================================================================

FRENCH = {
    1: {
        "E": 14.71, "A": 7.63, "I": 7.52, "S": 7.94, "N": 7.09, "R": 6.69,
        "T": 7.24, "O": 5.79, "L": 5.86, "U": 6.31, "D": 3.66, "C": 3.26,
        "M": 2.96, "P": 2.52, "V": 1.83, "G": 1.04, "F": 1.06, "B": 0.90,
        "H": 0.73, "Q": 1.36, "X": 0.38, "J": 0.61, "Y": 0.12, "Z": 0.32,
        "K": 0.11, "W": 0.04,
    },
    2: {
        "ES": 3.15, "DE": 2.65, "LE": 2.45, "EN": 2.42, "RE": 2.25, "NT": 2.15,
        "ON": 1.95, "ER": 1.85, "TE": 1.75, "EL": 1.65, "AN": 1.55, "SE": 1.45,
        "LA": 1.35, "AI": 1.25, "IT": 1.15,
    },
    3: {
        "ENT": 1.25, "LES": 0.95, "ION": 0.85, "DEL": 0.82, "QUE": 0.75,
        "EST": 0.72, "LLE": 0.71, "DES": 0.65, "AIT": 0.62, "QUI": 0.61,
    },
    4: {
        "TION": 0.55, "MENT": 0.45, "QUEL": 0.42, "DANS": 0.41, "POUR": 0.35,
        "ELLE": 0.33, "ESTA": 0.31, "PALA": 0.29, "ETTE": 0.28,
    },
}

# ============================================================================
# GERMAN
# ============================================================================

GERMAN = {
    1: {
        "E": 16.93, "N": 10.53, "I": 6.29, "R": 6.89, "S": 6.42, "A": 5.58,
        "T": 5.79, "D": 4.96, "H": 3.88, "U": 3.83, "L": 3.60, "C": 3.44,
        "G": 3.02, "M": 2.55, "O": 2.24, "B": 1.96, "W": 1.78, "F": 1.49,
        "K": 1.32, "V": 0.79, "P": 0.67, "Z": 1.19, "J": 0.24, "Y": 0.05,
        "X": 0.05, "Q": 0.02,
    },
    2: {
        "EN": 3.88, "ER": 3.54, "CH": 2.75, "TE": 2.28, "DE": 2.05, "ND": 1.99,
        "EI": 1.86, "IE": 1.79, "IN": 1.67, "ES": 1.58, "GE": 1.45, "UN": 1.35,
        "NE": 1.25, "ST": 1.15, "RE": 1.10,
    },
    3: {
        "EIN": 1.25, "ICH": 1.15, "NDE": 0.95, "DIE": 0.92, "UND": 0.85,
        "DER": 0.82, "CHE": 0.75, "END": 0.72, "GEN": 0.65, "SCH": 0.61,
    },
    4: {
        "ISCH": 0.55, "EINE": 0.45, "LICH": 0.42, "SCHE": 0.41, "NGEN": 0.35,
        "ENDE": 0.33, "ICHE": 0.31, "UNGE": 0.29, "AUCH": 0.28, "SIND": 0.25,
    },
}

# ============================================================================
# ITALIAN
# ============================================================================

ITALIAN = {
    1: {
        "E": 11.79, "A": 11.74, "I": 11.28, "O": 9.83, "N": 6.88, "R": 6.37,
        "T": 5.62, "L": 6.51, "S": 4.98, "C": 4.50, "D": 3.73, "P": 3.05,
        "U": 3.01, "M": 2.51, "V": 2.10, "G": 1.64, "H": 1.54, "F": 0.95,
        "B": 0.92, "Q": 0.51, "Z": 0.49, "K": 0.0, "J": 0.0, "X": 0.0,
        "Y": 0.0, "W": 0.0,
    },
    2: {
        "ER": 3.01, "ES": 2.85, "ON": 2.62, "RE": 2.54, "EL": 2.45, "EN": 2.32,
        "DE": 2.25, "DI": 2.15, "ST": 2.05, "TI": 2.01, "AN": 1.95, "LA": 1.92,
        "AL": 1.85, "NT": 1.81, "RA": 1.75,
    },
    3: {
        "CHE": 1.25, "ERE": 0.95, "ZIO": 0.85, "DEL": 0.82, "ELA": 0.75,
        "ONE": 0.72, "EST": 0.71, "QUE": 0.65, "ALL": 0.62, "ENT": 0.61,
    },
    4: {
        "MENT": 0.45, "ALLA": 0.42, "DELL": 0.41, "HANN": 0.35, "ANNO": 0.33,
        "ESTA": 0.31, "OLLA": 0.29, "IONE": 0.28, "ONTE": 0.25,
    },
}

# ============================================================================
# PORTUGUESE
# ============================================================================

PORTUGUESE = {
    1: {
        "A": 14.63, "E": 12.57, "O": 10.73, "S": 7.81, "R": 6.53, "I": 6.18,
        "N": 5.05, "D": 4.99, "M": 4.74, "U": 4.63, "T": 4.34, "C": 3.88,
        "L": 2.78, "P": 2.52, "V": 1.67, "G": 1.30, "H": 1.28, "Q": 1.20,
        "B": 1.04, "F": 1.02, "Z": 0.47, "J": 0.40, "X": 0.21, "K": 0.02,
        "Y": 0.01, "W": 0.01,
    },
    2: {
        "DE": 3.15, "ES": 2.65, "OS": 2.45, "AS": 2.42, "EN": 2.25, "AD": 2.15,
        "ON": 1.95, "RA": 1.85, "TE": 1.75, "OM": 1.65, "CO": 1.55, "ER": 1.45,
        "OR": 1.35, "SE": 1.15,
    },
    3: {
        "QUE": 1.25, "ENT": 0.95, "NDE": 0.85, "EST": 0.82, "COM": 0.75,
        "PAR": 0.72, "MEN": 0.71, "UMA": 0.65, "ADO": 0.62, "POR": 0.61,
    },
    4: {
        "PARA": 0.55, "ESTA": 0.42, "COMO": 0.41, "MENT": 0.35, "ENTE": 0.33,
        "ACAO": 0.31, "PELA": 0.29, "ONDE": 0.28, "MAIS": 0.25,
    },
}

# ============================================================================
# RUSSIAN (transliterated)
# ============================================================================

RUSSIAN = {
    1: {
        "O": 10.97, "E": 8.45, "A": 8.01, "I": 7.35, "N": 6.70, "T": 6.26,
        "S": 5.47, "R": 4.73, "V": 4.54, "L": 4.40, "K": 3.49, "M": 3.21,
        "D": 2.98, "P": 2.81, "U": 2.62, "Y": 1.90, "Z": 1.65, "G": 1.70,
        "B": 1.59, "C": 0.47, "H": 0.95, "J": 1.21,
    },
    2: {
        "ST": 1.5, "NO": 1.4, "EN": 1.3, "OV": 1.2, "NA": 1.1, "RA": 1.0,
        "KO": 0.9, "OS": 0.8, "TO": 0.8, "RO": 0.8, "AL": 0.7, "PO": 0.7,
        "NI": 0.7, "GO": 0.7, "VE": 0.6,
    },
    3: {
        "STO": 0.5, "OST": 0.4, "NOV": 0.4, "OVA": 0.4, "IYE": 0.3,
        "NIE": 0.3, "PRO": 0.3, "TEL": 0.3, "NNY": 0.3, "ENT": 0.3,
    },
    4: {
        "STVO": 0.3, "NOST": 0.2, "IYEM": 0.2, "LENI": 0.2, "SKIY": 0.2,
        "OVAL": 0.2, "PRED": 0.2, "STVA": 0.2, "NOGO": 0.2, "TORY": 0.2,
    },
}

# ============================================================================
# CHINESE (pinyin)
# ============================================================================

CHINESE = {
    1: {
        "I": 10.0, "A": 9.0, "N": 8.5, "G": 7.5, "E": 7.0, "U": 6.5,
        "O": 6.0, "H": 5.0, "S": 4.5, "Z": 4.0, "Y": 3.5, "J": 3.0,
        "L": 2.5, "D": 2.5, "T": 2.5, "B": 2.0, "M": 2.0, "C": 1.5,
        "K": 1.5, "X": 1.5, "W": 1.5, "R": 1.5, "F": 1.0, "P": 1.0,
        "Q": 1.0, "V": 0.0,
    },
    2: {
        "NG": 5.5, "IN": 4.5, "AN": 4.0, "IA": 3.5, "AO": 3.0, "OU": 3.0,
        "AI": 3.0, "EN": 3.0, "ZH": 2.5, "SH": 2.5, "ON": 2.0, "UA": 2.0,
        "CH": 1.5, "EI": 1.5, "UI": 1.5,
    },
    3: {
        "ING": 2.5, "ANG": 2.0, "IAN": 1.8, "ONG": 1.5, "ENG": 1.5,
        "IOU": 1.0, "UAN": 1.0, "ZHO": 0.8, "SHE": 0.8, "HEN": 0.8,
    },
    4: {
        "IONG": 0.5, "UANG": 0.5, "IANG": 0.5, "SHEN": 0.4, "CHEN": 0.4,
        "ZHON": 0.4, "HENG": 0.4, "JING": 0.4, "WANG": 0.4, "YANG": 0.4,
    },
}

FREQUENCY_DATA: dict[str, dict[int, dict[str, float]]] = {
    "english": ENGLISH,
    "spanish": SPANISH,
    "french": FRENCH,
    "german": GERMAN,
    "italian": ITALIAN,
    "portuguese": PORTUGUESE,
    "russian": RUSSIAN,
    "chinese": CHINESE,
}

# ============================================================================
# ENGLISH WORD LIST
# ============================================================================

# Common English words, uppercase. Used as the default dictionary.
ENGLISH_WORDS: tuple[str, ...] = (
    "A", "ABLE", "ABOUT", "ABOVE", "ACT", "ADD", "ADVANCE", "ADVANCING",
    "AFTER", "AGAIN", "AGAINST", "AGO", "AIR", "ALL", "ALSO", "ALWAYS", "AM",
    "AMONG", "AN", "AND", "ANIMAL", "ANIMALS", "ANSWER", "ANY", "APPEAR",
    "ARE", "AREA", "ARMY", "AS", "ASK", "AT", "ATTACK", "AWAY", "BACK",
    "BASE", "BE", "BEAUTY", "BEEN", "BEFORE", "BEGAN", "BEGIN", "BEHIND",
    "BEST", "BETTER", "BETWEEN", "BIG", "BIRD", "BLACK", "BLUE", "BOAT",
    "BODY", "BOOK", "BOTH", "BOX", "BOY", "BRIDGE", "BRING", "BROUGHT",
    "BROWN", "BUILD", "BUSY", "BUT", "BY", "CALL", "CAME", "CAN", "CAR",
    "CARE", "CARRY", "CAUSE", "CENTER", "CERTAIN", "CHANGE", "CHECK",
    "CHILDREN", "CIPHER", "CITY", "CLASS", "CLEAR", "CLOSE", "CODE", "COLD",
    "COLOR", "COME", "COMES", "COMMON", "COMPLETE", "CONTAIN", "CORRECT",
    "COULD", "COUNTRY", "COURSE", "COVER", "CREATURES", "CROSS", "CRY", "CUT",
    "DARK", "DAWN", "DAY", "DECIDE", "DEEP", "DEVELOP", "DID", "DIFFER",
    "DIRECT", "DISTANT", "DO", "DOES", "DOG", "DON", "DONE", "DOOR", "DOWN",
    "DRAW", "DRIVE", "DRY", "DURING", "EACH", "EARLY", "EARTH", "EASE",
    "EAST", "EAT", "END", "ENEMY", "ENOUGH", "EQUATE", "EVEN", "EVER",
    "EVERY", "EVERYONE", "EXAMPLE", "EYE", "FACE", "FACT", "FALL", "FAMILY",
    "FAR", "FARM", "FAST", "FATHER", "FEEL", "FEET", "FEW", "FIELD", "FIGURE",
    "FILL", "FINAL", "FIND", "FINE", "FIRE", "FIRST", "FISH", "FIVE", "FLY",
    "FOLLOW", "FOOD", "FOOT", "FOR", "FORCE", "FOREST", "FORM", "FOUND",
    "FOUR", "FOX", "FREE", "FRIEND", "FROM", "FRONT", "FULL", "GAME", "GAVE",
    "GENERAL", "GET", "GIRL", "GIVE", "GO", "GOLD", "GOOD", "GOT", "GOVERN",
    "GREAT", "GREEN", "GROUND", "GROUP", "GROW", "HAD", "HALF", "HAND",
    "HAPPEN", "HARD", "HARMONY", "HAS", "HAVE", "HE", "HEAD", "HEAR", "HEARD",
    "HEAT", "HELP", "HER", "HERE", "HIGH", "HIM", "HIS", "HOLD", "HOME",
    "HORSE", "HOT", "HOUR", "HOUSE", "HOW", "HUNDRED", "I", "IDEA", "IF",
    "IMMEDIATELY", "IN", "INCH", "INTEREST", "INTO", "IS", "ISLAND", "IT",
    "ITS", "JUMP", "JUMPS", "JUST", "KEEP", "KEY", "KIND", "KING", "KNEW",
    "KNOW", "LAND", "LANGUAGE", "LARGE", "LAST", "LATE", "LAUGH", "LAY",
    "LAZY", "LEAD", "LEARN", "LEAVE", "LEFT", "LESS", "LET", "LETTER",
    "LETTERS", "LIFE", "LIGHT", "LIKE", "LINE", "LIST", "LISTEN", "LITTLE",
    "LIVE", "LONG", "LOOK", "LOVE", "LOW", "MACHINE", "MADE", "MAIN", "MAKE",
    "MAN", "MANY", "MAP", "MARK", "MAY", "ME", "MEAN", "MEASURE", "MEET",
    "MEN", "MESSAGE", "MIDNIGHT", "MIGHT", "MILE", "MIND", "MINUTE", "MISS",
    "MONEY", "MOON", "MORE", "MORNING", "MOST", "MOTHER", "MOUNTAIN", "MOVE",
    "MUCH", "MULTIPLY", "MUSIC", "MUST", "MY", "NAME", "NATURE", "NEAR",
    "NEED", "NEVER", "NEW", "NEXT", "NIGHT", "NO", "NORTH", "NOT", "NOTE",
    "NOTHING", "NOTICE", "NOUN", "NOW", "NUMBER", "NUMERAL", "OBJECT",
    "OCEAN", "OF", "OFF", "OFTEN", "OH", "OLD", "ON", "ONCE", "ONE", "ONLY",
    "OPEN", "OR", "ORDER", "ORDERS", "OTHER", "OUR", "OUT", "OVER", "OWN",
    "PAGE", "PAINT", "PAPER", "PART", "PASS", "PATTERN", "PEACE", "PEOPLE",
    "PERSON", "PICTURE", "PIECE", "PLACE", "PLAIN", "PLAN", "PLANE", "PLANT",
    "PLAY", "POINT", "PORT", "POSE", "POSITION", "POSSIBLE", "POUND", "POWER",
    "PRESS", "PROBLEM", "PRODUCE", "PRODUCT", "PULL", "PUT", "QUESTION",
    "QUICK", "RAIN", "RAN", "REACH", "READ", "READY", "REAL", "RECORD", "RED",
    "REINFORCEMENTS", "REMEMBER", "REST", "RETREAT", "RIGHT", "RIVER", "ROAD",
    "ROCK", "ROOM", "ROUND", "RULE", "RUN", "RUNS", "SAID", "SAME", "SAW",
    "SAY", "SCHOOL", "SCIENCE", "SEA", "SECOND", "SECRET", "SEE", "SEEM",
    "SELF", "SEND", "SENTENCE", "SERVE", "SET", "SEVERAL", "SHAPE", "SHE",
    "SHIP", "SHORT", "SHOULD", "SHOW", "SIDE", "SIMPLE", "SINCE", "SING",
    "SIX", "SLOW", "SMALL", "SNOW", "SO", "SONG", "SOON", "SOUND", "SOUTH",
    "SPACE", "SPECIAL", "SPELL", "STAND", "STAR", "START", "STATE", "STAY",
    "STEAD", "STEP", "STILL", "STOOD", "STOP", "STORY", "STREET", "STRONG",
    "STUDY", "SUCH", "SUN", "SUPPLY", "SURE", "SURFACE", "SYSTEM", "TABLE",
    "TAIL", "TAKE", "TALK", "TEACH", "TELL", "TEN", "TEST", "THAN", "THAT",
    "THE", "THEIR", "THEM", "THEN", "THERE", "THESE", "THEY", "THING",
    "THINK", "THIS", "THOSE", "THOUGH", "THOUGHT", "THOUSAND", "THREE",
    "THROUGH", "TIME", "TIRE", "TO", "TOGETHER", "TOLD", "TOO", "TOOK", "TOP",
    "TOWARD", "TOWN", "TRAVEL", "TREE", "TROOPS", "TRUE", "TRY", "TURN",
    "TWO", "UNDER", "UNIT", "UNTIL", "UP", "US", "USE", "USUAL", "VERB",
    "VERY", "VILLAGE", "VOICE", "VOWEL", "WAIT", "WAITING", "WALK", "WANT",
    "WAR", "WARM", "WAS", "WATCH", "WATER", "WAY", "WE", "WEEK", "WELL",
    "WENT", "WERE", "WEST", "WHAT", "WHEEL", "WHEN", "WHERE", "WHICH",
    "WHILE", "WHITE", "WHO", "WHOLE", "WHY", "WILD", "WILL", "WIND", "WITH",
    "WONDER", "WOOD", "WORD", "WORDS", "WORK", "WORLD", "WOULD", "WRITE",
    "YEAR", "YES", "YOU", "YOUNG", "YOUR",
)
