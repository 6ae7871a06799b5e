from types import MappingProxyType

# ===============================
# 📚 CANONICAL BOOK IDS
# ===============================
# Canonical (USFM) id -> English book name without numeral prefix
_BOOKS = [
    ("GEN", "Genesis"), ("EXO", "Exodus"), ("LEV", "Leviticus"), ("NUM", "Numbers"),
    ("DEU", "Deuteronomy"), ("JOS", "Joshua"), ("JDG", "Judges"), ("RUT", "Ruth"),
    ("1SA", "Samuel"), ("2SA", "Samuel"), ("1KI", "Kings"), ("2KI", "Kings"),
    ("1CH", "Chronicles"), ("2CH", "Chronicles"), ("EZR", "Ezra"), ("NEH", "Nehemiah"),
    ("EST", "Esther"), ("JOB", "Job"), ("PSA", "Psalms"), ("PRO", "Proverbs"),
    ("ECC", "Ecclesiastes"), ("SNG", "Song of Solomon"), ("ISA", "Isaiah"),
    ("JER", "Jeremiah"), ("LAM", "Lamentations"), ("EZK", "Ezekiel"), ("DAN", "Daniel"),
    ("HOS", "Hosea"), ("JOL", "Joel"), ("AMO", "Amos"), ("OBA", "Obadiah"),
    ("JON", "Jonah"), ("MIC", "Micah"), ("NAM", "Nahum"), ("HAB", "Habakkuk"),
    ("ZEP", "Zephaniah"), ("HAG", "Haggai"), ("ZEC", "Zechariah"), ("MAL", "Malachi"),
    ("MAT", "Matthew"), ("MRK", "Mark"), ("LUK", "Luke"), ("JHN", "John"),
    ("ACT", "Acts"), ("ROM", "Romans"), ("1CO", "Corinthians"), ("2CO", "Corinthians"),
    ("GAL", "Galatians"), ("EPH", "Ephesians"), ("PHP", "Philippians"),
    ("COL", "Colossians"), ("1TH", "Thessalonians"), ("2TH", "Thessalonians"),
    ("1TI", "Timothy"), ("2TI", "Timothy"), ("TIT", "Titus"), ("PHM", "Philemon"),
    ("HEB", "Hebrews"), ("JAS", "James"), ("1PE", "Peter"), ("2PE", "Peter"),
    ("1JN", "John"), ("2JN", "John"), ("3JN", "John"), ("JUD", "Jude"),
    ("REV", "Revelation"),
]

# ScrollMapper writes "I Samuel", other sources "1 Samuel" or "1st Samuel"
_NUMERAL_PREFIXES = {
    "1": ("I", "1", "1st", "First"),
    "2": ("II", "2", "2nd", "Second"),
    "3": ("III", "3", "3rd", "Third"),
}

_ALIASES = {
    "Psalm": "PSA",
    "Song of Songs": "SNG",
    "Solomon's Song": "SNG",
    "Canticles": "SNG",
    "Acts of the Apostles": "ACT",
    "Revelation of John": "REV",
    "Revelations": "REV",
}


def _build_book_map() -> dict:
    mapping = {}
    for book_id, name in _BOOKS:
        numeral = book_id[0]
        if numeral in _NUMERAL_PREFIXES:
            for prefix in _NUMERAL_PREFIXES[numeral]:
                mapping[f"{prefix} {name}"] = book_id
        else:
            mapping[name] = book_id
    mapping.update(_ALIASES)
    return mapping


BOOK_MAP = MappingProxyType(_build_book_map())


def resolve_book_name(name: str | None, book_map=BOOK_MAP) -> str | None:
    """Return the canonical book id for a raw source name, or None if unknown."""
    if not name or not name.strip():
        return None
    return book_map.get(name.strip())
