# scripture_query/book_catalog.py
"""
Canonical book catalog.

BOOKS lists the 66 books of the Protestant canon in canonical order, each with
the aliases accepted for it. Lookups are case-insensitive exact matches on the
canonical name or any alias; no fuzzy matching is attempted.

Extra aliases may be supplied through config (see config_loader). They are
merged once when the catalog is first requested, and a collision with another
book's name or alias raises CatalogError.
"""

import re
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, FrozenSet, Iterable, List, Optional, Tuple

from .config_loader import get_extra_aliases, reload_config
from .errors import CatalogError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BookEntry:
    """
    A canonical book and its accepted aliases.

    Attributes:
        name: Canonical display name (e.g., "1 Samuel")
        aliases: Alternative spellings and abbreviations
    """
    name: str
    aliases: FrozenSet[str] = frozenset()

    @property
    def all_names(self) -> Tuple[str, ...]:
        return (self.name,) + tuple(sorted(self.aliases))


def _book(name: str, *aliases: str) -> BookEntry:
    return BookEntry(name, frozenset(aliases))


BOOKS: Tuple[BookEntry, ...] = (
    # Old Testament
    _book("Genesis", "Gn", "Gs", "Gen", "Gns"),
    _book("Exodus", "Exod", "Ex", "Exo"),
    _book("Leviticus", "Lv", "Lev"),
    _book("Numbers", "Nu", "Num"),
    _book("Deuteronomy", "Dt", "Deut"),
    _book("Joshua", "Josh"),
    _book("Judges", "Judg"),
    _book("Ruth"),
    _book("1 Samuel", "1 Sm", "1 Sam", "1st Sam", "1st Samuel", "First Samuel"),
    _book("2 Samuel", "2 Sm", "2 Sam", "2nd Sam", "2nd Samuel", "Second Samuel"),
    _book("1 Kings", "1 Ki", "1 Kgs", "1st Kgs", "1st Kings", "First Kings"),
    _book("2 Kings", "2 Ki", "2 Kgs", "2nd Kgs", "2nd Kings", "Second Kings"),
    _book("1 Chronicles", "1 Ch", "1 Chr", "1st Chr", "1st Chronicles", "First Chronicles"),
    _book("2 Chronicles", "2 Ch", "2 Chr", "2nd Chr", "2nd Chronicles", "Second Chronicles"),
    _book("Ezra", "Ezr"),
    _book("Nehemiah", "Ne", "Neh"),
    _book("Esther", "Esth", "Est"),
    _book("Job"),
    _book("Psalms", "Ps", "Pss", "Psalm"),
    _book("Proverbs", "Pr", "Prov", "Pro"),
    _book("Ecclesiastes", "Ec", "Eccl", "Ecc"),
    _book("Song of Solomon", "Song", "Song of Songs"),
    _book("Isaiah", "Is", "Isa"),
    _book("Jeremiah", "Jer"),
    _book("Lamentations", "Lam"),
    _book("Ezekiel", "Ezk", "Ezek"),
    _book("Daniel", "Dn", "Dan"),
    _book("Hosea", "Ho", "Hos"),
    _book("Joel", "Jl"),
    _book("Amos", "Am"),
    _book("Obadiah", "Obad", "Ob", "Oba"),
    _book("Jonah", "Jon"),
    _book("Micah", "Mc", "Mi", "Mic"),
    _book("Nahum", "Nah"),
    _book("Habakkuk", "Hab"),
    _book("Zephaniah", "Zp", "Zeph"),
    _book("Haggai", "Hg", "Hag"),
    _book("Zechariah", "Zc", "Zech"),
    _book("Malachi", "Mal"),

    # New Testament
    _book("Matthew", "Mt", "Matt"),
    _book("Mark", "Mk"),
    _book("Luke", "Lk"),
    _book("John", "Jn"),
    _book("Acts", "Ac"),
    _book("Romans", "Ro", "Rm", "Rom"),
    _book("1 Corinthians", "1 Cor", "1st Cor", "1st Corinthians", "First Corinthians"),
    _book("2 Corinthians", "2 Cor", "2nd Cor", "2nd Corinthians", "Second Corinthians"),
    _book("Galatians", "Gal"),
    _book("Ephesians", "Eph"),
    _book("Philippians", "Ph", "Phil"),
    _book("Colossians", "Col"),
    _book("1 Thessalonians", "1 Th", "1 Thess", "1st Thess", "1st Thessalonians", "First Thessalonians"),
    _book("2 Thessalonians", "2 Th", "2 Thess", "2nd Thess", "2nd Thessalonians", "Second Thessalonians"),
    _book("1 Timothy", "1 Tim", "1st Tim", "1st Timothy", "First Timothy"),
    _book("2 Timothy", "2 Tim", "2nd Tim", "2nd Timothy", "Second Timothy"),
    _book("Titus", "Tit"),
    _book("Philemon", "Phlm"),
    _book("Hebrews", "Heb"),
    _book("James", "Ja", "Jas"),
    _book("1 Peter", "1 Pt", "1 Pet", "1st Pet", "1st Peter", "First Peter"),
    _book("2 Peter", "2 Pt", "2 Pet", "2nd Pet", "2nd Peter", "Second Peter"),
    _book("1 John", "1 Jn", "1st Jn", "1st John", "First John"),
    _book("2 John", "2 Jn", "2nd Jn", "2nd John", "Second John"),
    _book("3 John", "3 Jn", "3rd Jn", "3rd John", "Third John"),
    _book("Jude"),
    _book("Revelation", "Rv", "Rev"),
)


def normalize_key(name: str) -> str:
    """Lowercase and collapse whitespace for lookup."""
    return re.sub(r'\s+', ' ', name).strip().lower()


class BookCatalog:
    """
    Read-only index over catalog entries.

    Usage:
        catalog = get_catalog()
        catalog.resolve("1 sam")   # -> "1 Samuel"
        catalog.resolve("Nope")    # -> None
    """

    def __init__(self, entries: Iterable[BookEntry]):
        self.entries: Tuple[BookEntry, ...] = tuple(entries)
        self._index = build_index(self.entries)

    def resolve(self, name: str) -> Optional[str]:
        """Return the canonical name for name, or None if unknown."""
        return self._index.get(normalize_key(name))

    @property
    def names(self) -> List[str]:
        """Canonical names in canonical order."""
        return [entry.name for entry in self.entries]

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, name: str) -> bool:
        return self.resolve(name) is not None


def build_index(entries: Iterable[BookEntry]) -> Dict[str, str]:
    """
    Map every lowercased name and alias to its canonical name.

    Raises:
        CatalogError: if a name or alias belongs to more than one book
    """
    index: Dict[str, str] = {}
    for entry in entries:
        for name in entry.all_names:
            key = normalize_key(name)
            owner = index.get(key)
            if owner is not None and owner != entry.name:
                raise CatalogError(
                    f"Alias '{name}' of {entry.name} already belongs to {owner}"
                )
            index[key] = entry.name

    logger.debug(f"Indexed {len(index)} book names")
    return index


def merge_aliases(
    entries: Iterable[BookEntry],
    extra: Dict[str, List[str]],
) -> Tuple[BookEntry, ...]:
    """
    Return entries with extra aliases added.

    Raises:
        CatalogError: if extra names a book that is not in entries
    """
    entries = tuple(entries)
    known = {entry.name for entry in entries}
    unknown = sorted(set(extra) - known)
    if unknown:
        raise CatalogError(f"Extra aliases for unknown books: {', '.join(unknown)}")

    merged = []
    for entry in entries:
        added = extra.get(entry.name)
        if added:
            logger.info(f"Adding {len(added)} aliases to {entry.name}")
            entry = BookEntry(entry.name, entry.aliases | frozenset(added))
        merged.append(entry)
    return tuple(merged)


@lru_cache(maxsize=1)
def get_catalog() -> BookCatalog:
    """Build the process-wide catalog (built-in books plus configured aliases)."""
    return BookCatalog(merge_aliases(BOOKS, get_extra_aliases()))


def reload_catalog() -> BookCatalog:
    """Reload config and rebuild the catalog."""
    reload_config()
    get_catalog.cache_clear()
    return get_catalog()


def validate_book_name(name: str, catalog: Optional[BookCatalog] = None) -> Optional[str]:
    """
    Resolve a book name or alias to its canonical name.

    Args:
        name: Book name in any case, e.g. "song of solomon", "1 Sam"
        catalog: Catalog to search (defaults to get_catalog())

    Returns:
        Canonical book name, or None if nothing matches
    """
    if catalog is None:
        catalog = get_catalog()
    return catalog.resolve(name)
