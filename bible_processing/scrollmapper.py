import requests

from .config import HTTP_TIMEOUT, SCROLLMAPPER_URL
from .console import log
from .models import Book, Chapter, CorpusDocument, VerseEntry


class ScrollMapperError(RuntimeError):
    """The source document could not be downloaded or decoded."""


# ===============================
# 🧾 JSON -> DOCUMENT TREE
# ===============================
def _parse_verse(raw: dict) -> VerseEntry:
    return VerseEntry(verse=int(raw["verse"]), text=raw.get("text"))


def _parse_chapter(raw: dict) -> Chapter:
    return Chapter(
        chapter=int(raw["chapter"]),
        verses=tuple(_parse_verse(v) for v in raw.get("verses") or []),
    )


def _parse_book(raw: dict) -> Book:
    return Book(
        name=raw.get("name"),
        chapters=tuple(_parse_chapter(c) for c in raw.get("chapters") or []),
    )


def parse_scrollmapper_bible(data: dict, version: str) -> CorpusDocument:
    """Build a CorpusDocument from a ScrollMapper bible_databases JSON payload."""
    try:
        books = tuple(_parse_book(b) for b in data.get("books") or [])
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ScrollMapperError(f"Malformed ScrollMapper JSON for {version}: {e}") from e
    name = data.get("translation") or data.get("version") or version
    return CorpusDocument(name=name, version=version, books=books)


# ===============================
# 🌐 DOWNLOAD
# ===============================
def fetch_scrollmapper_bible(
    version: str,
    url_template: str = SCROLLMAPPER_URL,
    timeout: float = HTTP_TIMEOUT,
    session=None,
) -> CorpusDocument | None:
    """
    Download one translation from the ScrollMapper GitHub repository.

    Returns None when the translation does not exist (HTTP 404). Any other
    failure raises ScrollMapperError.
    """
    url = url_template.format(version=version)
    http = session or requests
    log(f"🌐 Fetching {version} from {url}")
    try:
        resp = http.get(url, timeout=timeout)
        if resp.status_code == 404:
            log(f"⚠️ No ScrollMapper bible found for {version}")
            return None
        resp.raise_for_status()
        data = resp.json()
    except requests.RequestException as e:
        raise ScrollMapperError(f"Failed to fetch {version} from {url}: {e}") from e
    except ValueError as e:
        raise ScrollMapperError(f"Invalid JSON for {version} from {url}: {e}") from e

    if not isinstance(data, dict):
        raise ScrollMapperError(f"Unexpected JSON payload for {version}: {type(data).__name__}")
    return parse_scrollmapper_bible(data, version)
