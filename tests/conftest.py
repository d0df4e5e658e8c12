import os
import sys
import tempfile
from pathlib import Path
from typing import List, Optional

import pytest

os.environ.setdefault("ENABLE_FILE_LOGS", "0")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config.settings import settings
from llm_gateway import CompletionOptions, CompletionUnavailable
from storage.migrate import migrate


class FakeCompleter:
    """Completer returning canned replies and recording every call."""

    def __init__(self, *replies: str) -> None:
        self.replies = list(replies) or ["stub reply"]
        self.calls: List[tuple] = []

    def complete(self, prompt: str, options: Optional[CompletionOptions] = None) -> str:
        self.calls.append((prompt, options))
        if len(self.replies) > 1:
            return self.replies.pop(0)
        return self.replies[0]


class DownCompleter:
    """Completer whose endpoint is always unavailable."""

    def __init__(self) -> None:
        self.calls = 0

    def complete(self, prompt: str, options: Optional[CompletionOptions] = None) -> str:
        self.calls += 1
        raise CompletionUnavailable("endpoint down")


@pytest.fixture(autouse=True)
def tmp_db(monkeypatch):
    td = tempfile.TemporaryDirectory()
    db_path = os.path.join(td.name, "test.db")
    monkeypatch.setattr(settings, "DB_PATH", db_path, raising=False)
    migrate(db_path)
    try:
        yield db_path
    finally:
        td.cleanup()


@pytest.fixture
def fake_completer():
    return FakeCompleter("Score: 85\nFeedback: Solid answer with clear examples.")


@pytest.fixture
def down_completer():
    return DownCompleter()


@pytest.fixture
def make_completer():
    return FakeCompleter
