import json
from pathlib import Path
from typing import List, Optional, Sequence

import pytest

from gitmoji_helper.config import paths as paths_module
from gitmoji_helper.config.paths import AppPaths
from gitmoji_helper.errors import PromptError
from gitmoji_helper.prompts.adapter import PromptAdapter


SAMPLE_GITMOJIS = {
    "$schema": "https://gitmoji.dev/api/gitmojis/schema",
    "gitmojis": [
        {
            "emoji": "🎨",
            "entity": "&#x1f3a8;",
            "code": ":art:",
            "description": "Improve structure / format of the code.",
            "name": "art",
            "semver": None,
        },
        {
            "emoji": "🐛",
            "entity": "&#x1f41b;",
            "code": ":bug:",
            "description": "Fix a bug.",
            "name": "bug",
            "semver": "patch",
        },
        {
            "emoji": "✨",
            "entity": "&#x2728;",
            "code": ":sparkles:",
            "description": "Introduce new features.",
            "name": "sparkles",
            "semver": "minor",
        },
        {
            "emoji": "📝",
            "entity": "&#x1f4dd;",
            "code": ":memo:",
            "description": "Add or update documentation.",
            "name": "memo",
            "semver": None,
        },
    ],
}


@pytest.fixture(autouse=True)
def isolate_home(tmp_path, monkeypatch):
    """Never let a test read or write the real ~/.gitmoji directory."""
    home = tmp_path / "home" / ".gitmoji"
    monkeypatch.setattr(paths_module, "_get_base_directory", lambda: home)
    return home


@pytest.fixture
def app_paths(isolate_home) -> AppPaths:
    return AppPaths.from_base(isolate_home)


@pytest.fixture
def sample_document() -> str:
    return json.dumps(SAMPLE_GITMOJIS, ensure_ascii=False)


@pytest.fixture
def seeded_cache(app_paths, sample_document) -> Path:
    app_paths.cache_file.parent.mkdir(parents=True, exist_ok=True)
    app_paths.cache_file.write_text(sample_document, encoding="utf-8")
    return app_paths.cache_file


class ScriptedPrompts(PromptAdapter):
    """Answers questions from a fixed script and records what was asked.

    Text answers are passed through the validator, like a real terminal
    prompt would, except that a rejected answer raises instead of asking
    again.
    """

    def __init__(self, answers: Sequence[object]) -> None:
        self.answers: List[object] = list(answers)
        self.asked: List[str] = []
        self.defaults: List[object] = []

    def _next(self, message: str) -> object:
        self.asked.append(message)
        if not self.answers:
            raise PromptError(f"No scripted answer for {message!r}")
        answer = self.answers.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer

    def select(self, message: str, items: Sequence[str], default: Optional[int] = None) -> str:
        self.defaults.append(default)
        answer = self._next(message)
        assert answer in items, f"{answer!r} is not one of {list(items)!r}"
        return answer

    def text(self, message, validator):
        self.defaults.append(None)
        return validator(self._next(message))

    def confirm(self, message: str, default: bool = False) -> bool:
        self.defaults.append(default)
        return bool(self._next(message))


@pytest.fixture
def scripted_prompts():
    return ScriptedPrompts
