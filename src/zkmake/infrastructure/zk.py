"""Adapter for the ``zk`` note-taking CLI.

``zk`` owns note templates, filenames, and the notebook index; zkmake only
asks it two questions: "which notes answer to this href?" and "create a
note with this title". Both are single-shot subprocess calls.

All failures surface as :class:`ZkError` so callers can turn them into a
ServiceResult without knowing about subprocess details.
"""

from __future__ import annotations

import json
import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)

DEFAULT_SELECT = ("title", "absPath")


class ZkError(Exception):
    """A zk invocation failed (missing binary, non-zero exit, bad output)."""

    def __init__(self, message: str, *, command: Sequence[str] = (), stderr: str = "") -> None:
        super().__init__(message)
        self.command = list(command)
        self.stderr = stderr

    def detail(self) -> dict[str, Any]:
        """Error detail suitable for ``ServiceError.detail``."""
        detail: dict[str, Any] = {"command": " ".join(self.command)}
        if self.stderr:
            detail["stderr"] = self.stderr
        return detail


@dataclass(frozen=True)
class NewNoteOptions:
    """Options for ``zk new``."""

    title: str
    edit: bool = True
    dir: str | None = None
    group: str | None = None
    template: str | None = None
    date: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)


class NotebookClient(Protocol):
    """The two notebook operations the make command depends on."""

    def list_notes(
        self,
        notebook: Path,
        *,
        hrefs: Sequence[str],
        select: Sequence[str] = DEFAULT_SELECT,
    ) -> list[dict[str, Any]]: ...

    def new_note(self, notebook: Path, options: NewNoteOptions) -> Path | None: ...


class ZkClient:
    """:class:`NotebookClient` backed by the ``zk`` executable."""

    def __init__(self, command: str = "zk") -> None:
        self._command = command

    def list_notes(
        self,
        notebook: Path,
        *,
        hrefs: Sequence[str],
        select: Sequence[str] = DEFAULT_SELECT,
    ) -> list[dict[str, Any]]:
        """List notes whose path/href matches one of *hrefs*.

        Each note is reduced to the *select* fields (zk's JSON keys).
        """
        proc = self._run(
            notebook,
            "list",
            "--format",
            "json",
            "--quiet",
            "--no-pager",
            "--",
            *hrefs,
        )
        stdout = proc.stdout.strip()
        if not stdout:
            return []
        try:
            notes = json.loads(stdout)
        except ValueError as exc:
            msg = f"zk list returned invalid JSON: {exc}"
            raise ZkError(msg, command=proc.args, stderr=proc.stderr) from exc
        if not isinstance(notes, list):
            msg = "zk list returned an unexpected payload"
            raise ZkError(msg, command=proc.args, stderr=proc.stderr)
        return [{key: note.get(key) for key in select} for note in notes]

    def new_note(self, notebook: Path, options: NewNoteOptions) -> Path | None:
        """Create a note and return the path zk printed for it."""
        args = ["new", "--no-input", "--print-path", "--title", options.title]
        if options.group:
            args += ["--group", options.group]
        if options.template:
            args += ["--template", options.template]
        if options.date:
            args += ["--date", options.date]
        if options.extra:
            args += ["--extra", ",".join(f"{k}={v}" for k, v in options.extra.items())]
        if options.dir:
            args.append(options.dir)

        proc = self._run(notebook, *args)
        printed = proc.stdout.strip()
        if not printed:
            return None
        path = Path(printed.splitlines()[-1])
        if not path.is_absolute():
            path = notebook / path
        return path

    # ------------------------------------------------------------------
    # Subprocess helper
    # ------------------------------------------------------------------

    def _run(self, notebook: Path, *args: str) -> subprocess.CompletedProcess[str]:
        """Run a zk subcommand against *notebook*. Raises ZkError on failure."""
        command = [self._command, "--notebook-dir", str(notebook), *args]
        logger.debug("Running %s", " ".join(command))
        try:
            return subprocess.run(
                command,
                cwd=notebook,
                capture_output=True,
                text=True,
                check=True,
            )
        except FileNotFoundError as exc:
            msg = f"zk executable not found: {self._command!r}"
            raise ZkError(msg, command=command) from exc
        except OSError as exc:
            msg = f"Could not run zk: {exc}"
            raise ZkError(msg, command=command) from exc
        except subprocess.CalledProcessError as exc:
            stderr = (exc.stderr or "").strip()
            msg = stderr.splitlines()[-1] if stderr else f"zk exited with status {exc.returncode}"
            raise ZkError(msg, command=command, stderr=stderr) from exc
