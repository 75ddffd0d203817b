"""Shared pytest fixtures and test helpers for zkmake tests."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from zkmake.config.settings import ZkmakeSettings
from zkmake.infrastructure.zk import NewNoteOptions, ZkError


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's ZKMAKE_* environment out of the tests."""
    monkeypatch.delenv("ZKMAKE_CONFIG", raising=False)
    monkeypatch.delenv("ZKMAKE_MAKE__ON_EXISTING", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def notebook(tmp_path: Path) -> Path:
    """Temporary zk notebook: a ``.zk/`` marker plus a couple of notes."""
    root = tmp_path / "notebook"
    (root / ".zk").mkdir(parents=True)
    (root / "index.md").write_text("# Index\n\nSee [[Ideas]].\n", encoding="utf-8")
    (root / "ideas.md").write_text(
        "# Ideas\n\nintro\n\n## Backlog\n\n- one\n\n## Done\n",
        encoding="utf-8",
    )
    return root


@pytest.fixture
def settings(notebook: Path) -> ZkmakeSettings:
    """Default settings anchored at the notebook root."""
    return ZkmakeSettings.from_cli(cwd=notebook)


@pytest.fixture
def _isolated_notebook(notebook: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp notebook so CLI tests resolve relative buffers there."""
    monkeypatch.chdir(notebook)


# ---------------------------------------------------------------------------
# Fake notebook client
# ---------------------------------------------------------------------------


class FakeNotebookClient:
    """In-memory NotebookClient recording every call."""

    def __init__(
        self,
        notes: dict[str, Path] | None = None,
        *,
        created_dir: Path | None = None,
        list_error: str | None = None,
        new_error: str | None = None,
        print_path: bool = True,
    ) -> None:
        self.notes = dict(notes or {})
        self.created_dir = created_dir
        self.list_error = list_error
        self.new_error = new_error
        self.print_path = print_path
        self.list_calls: list[tuple[Path, list[str], tuple[str, ...]]] = []
        self.new_calls: list[tuple[Path, NewNoteOptions]] = []

    def list_notes(
        self,
        notebook: Path,
        *,
        hrefs: Sequence[str],
        select: Sequence[str] = ("title", "absPath"),
    ) -> list[dict[str, Any]]:
        self.list_calls.append((notebook, list(hrefs), tuple(select)))
        if self.list_error:
            raise ZkError(self.list_error, command=["zk", "list"])
        return [
            {"title": href, "absPath": str(self.notes[href])}
            for href in hrefs
            if href in self.notes
        ]

    def new_note(self, notebook: Path, options: NewNoteOptions) -> Path | None:
        self.new_calls.append((notebook, options))
        if self.new_error:
            raise ZkError(self.new_error, command=["zk", "new"], stderr=self.new_error)
        if not self.print_path:
            return None
        slug = options.title.lower().replace(" ", "-")
        return (self.created_dir or notebook) / f"{slug}.md"


@pytest.fixture
def fake_client(notebook: Path) -> FakeNotebookClient:
    """Fake client that knows the ``Ideas`` note from the notebook fixture."""
    return FakeNotebookClient({"Ideas": notebook / "ideas.md"})
