"""
Sample phrases for use in tests.
"""

# (english, pig latin) pairs
KNOWN_TRANSLATIONS = [
    ("apple", "appleyay"),
    ("Eat", "Eatyay"),
    ("explain", "explainyay"),
    ("Smile", "Ilesmay"),
    ("Glove", "Oveglay"),
    ("pig", "igpay"),
    ("latin", "atinlay"),
    ("string", "ingstray"),
    ("Three", "Eethray"),
    ("Hello, world!", "Ellohay, orldway!"),
    ("Is it raining?", "Isyay ityay ainingray?"),
    ("well-known fact.", "ellway-ownknay actfay."),
]

VOWEL_WORDS = ["apple", "Eat", "explain", "ice", "Orange", "umbrella", "AEIOU"]

CONSONANT_WORDS = ["pig", "Smile", "Glove", "string", "Rhythm", "chair", "Quick"]

SAMPLE_PHRASES = [
    "apple",
    "Smile, Glove!",
    "The quick brown fox jumps over the lazy dog.",
    "Is it raining? No - it is snowing!",
    "  leading and trailing spaces  ",
    "Numbers 42 and 7up stay put.",
    "x",
]

BLANK_PHRASES = ["", " ", "   ", "\t", "\n", " \t\r\n "]

SAMPLE_LETTER = """Dear friend,

Thank you for the apples.
See you soon!
"""

SAMPLE_LETTER_TRANSLATED = """Earday iendfray,

Ankthay ouyay orfay ethay applesyay.
Eesay ouyay oonsay!
"""

SAMPLE_NOTES = """Plant trees.
Eat greens.
"""
