import json
import os
import re
from pathlib import Path

from .config import CHECKPOINT_DIR
from .console import log


def checkpoint_filename(version: str) -> str:
    slug = version.strip().lower().replace(" ", "_")
    slug = re.sub(r"[^a-z0-9_.\-]", "", slug)
    return f"processed_{slug}_books.json"


def is_processed(book_id: str, books: list[str]) -> bool:
    wanted = book_id.casefold()
    return any(b.casefold() == wanted for b in books)


def mark_processed(book_id: str, books: list[str]) -> list[str]:
    if not is_processed(book_id, books):
        books.append(book_id)
    return books


class CheckpointStore:
    """
    JSON file listing the book ids already fully embedded for one version.

    Reads and writes never raise: a bad file means starting fresh and a
    failed write only costs durability for the next run.
    """

    def __init__(self, version: str, directory: str | Path = CHECKPOINT_DIR):
        self.version = version
        self.path = Path(directory) / checkpoint_filename(version)

    def load(self) -> list[str]:
        if not self.path.exists():
            return []
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            log(f"⚠️ Error loading processed books for {self.version} from {self.path}: {e}. Starting fresh.")
            return []
        if not isinstance(data, list) or not all(isinstance(b, str) for b in data):
            log(f"⚠️ Processed books file {self.path} is not a list of book ids. Starting fresh.")
            return []
        books = []
        for b in data:
            mark_processed(b, books)
        return books

    def save(self, books: list[str]) -> bool:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(books, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp_path, self.path)
            return True
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            log(f"❌ Error saving processed books for {self.version} to {self.path}: {e}.")
            return False
