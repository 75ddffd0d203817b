"""MakeService — create or jump to the note under a [[wikilink]].

Pipeline: RESOLVE buffer → LOCATE notebook → LOCATE link → PARSE →
LIST existing notes → (EDIT | WARN | nothing) or CREATE.

The domain steps are pure; only LIST and CREATE go through the notebook
client. Their failures become ``error`` results, everything else that
stops the pipeline early is a ``warning``.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from zkmake.domain.headings import find_heading_line
from zkmake.domain.links import find_span, parse_wikilink, span_text
from zkmake.domain.paths import resolve_buffer_path
from zkmake.infrastructure.notebook import notebook_root
from zkmake.infrastructure.zk import NewNoteOptions, ZkError
from zkmake.services.base import BaseService
from zkmake.services.contracts import (
    LinkResultData,
    MakeResultData,
    ResolveResultData,
    dump_validated,
)
from zkmake.services.result import ServiceResult

log = structlog.get_logger(__name__)


class MakeService(BaseService):
    """Wikilink-driven note creation and navigation."""

    def resolve_buffer(self, buffer: str) -> ServiceResult:
        """Resolve *buffer* to a local path and its enclosing notebook."""
        op = "resolve"
        path = resolve_buffer_path(buffer, cwd=self._settings.cwd)
        if path is None:
            return self._fail(
                op,
                "UNRESOLVED_BUFFER",
                f"Cannot resolve buffer path: {buffer!r}",
                severity="warning",
            )
        root = notebook_root(path, self._settings.zk.marker)
        data = {
            "buffer": buffer,
            "path": path,
            "notebook": str(root) if root else None,
        }
        return ServiceResult(ok=True, op=op, data=dump_validated(ResolveResultData, data))

    def locate_link(self, line: str, cursor: int) -> ServiceResult:
        """Find and parse the wikilink under the 1-based *cursor*."""
        op = "link"
        span = find_span(line, cursor)
        text = span_text(line, span) if span is not None else None
        if span is None or text is None:
            return self._fail(
                op,
                "NO_WIKILINK",
                "Cursor is not inside a [[wikilink]]",
                severity="warning",
                detail={"cursor": cursor},
            )
        parsed = parse_wikilink(text)
        data = {
            "text": text,
            "title": parsed.title,
            "heading": parsed.heading,
            "start": span.open_end,
            "end": span.close_start,
        }
        return ServiceResult(ok=True, op=op, data=dump_validated(LinkResultData, data))

    def make(
        self,
        buffer: str,
        cursor: int,
        *,
        line: str | None = None,
        row: int | None = None,
    ) -> ServiceResult:
        """Create the note named by the wikilink under the cursor, or open it.

        The line text comes from *line* when the editor passes it, or is
        read from row *row* (1-based) of the buffer's file otherwise.
        """
        op = "make"
        warnings: list[str] = []

        # ── RESOLVE ──────────────────────────────────────────────
        buf_path = resolve_buffer_path(buffer, cwd=self._settings.cwd)
        if buf_path is None:
            return self._fail(
                op,
                "UNRESOLVED_BUFFER",
                "Cannot resolve buffer path",
                severity="warning",
                detail={"buffer": buffer},
            )

        notebook = notebook_root(buf_path, self._settings.zk.marker)
        if notebook is None:
            return self._fail(
                op,
                "NOT_IN_NOTEBOOK",
                "Not inside a zk notebook",
                severity="warning",
                detail={"path": buf_path},
            )

        if line is None:
            line = self._read_line(Path(buf_path), row)
            if line is None:
                return self._fail(
                    op,
                    "NO_LINE",
                    f"Cannot read line {row} of {buf_path}",
                    severity="warning",
                )

        # ── LOCATE / PARSE ───────────────────────────────────────
        span = find_span(line, cursor)
        raw = span_text(line, span) if span is not None else None
        if raw is None:
            return self._fail(
                op,
                "NO_WIKILINK",
                "Cursor is not inside a [[wikilink]]",
                severity="warning",
                detail={"cursor": cursor},
            )
        link = parse_wikilink(raw)
        log.debug("make.link", title=link.title, heading=link.heading, notebook=str(notebook))

        # ── LIST ─────────────────────────────────────────────────
        try:
            notes = self._client.list_notes(
                notebook,
                hrefs=[link.title],
                select=("title", "absPath"),
            )
        except ZkError as exc:
            log.debug("make.list_failed", error=str(exc))
            return self._fail(op, "LIST_FAILED", str(exc), detail=exc.detail())

        base = {"title": link.title, "heading": link.heading, "notebook": str(notebook)}

        if notes:
            existing = str(notes[0].get("absPath") or "")
            policy = self._settings.make.on_existing
            log.debug("make.exists", path=existing, policy=policy)
            if policy == "edit":
                data = {
                    **base,
                    "action": "edit",
                    "path": existing,
                    "line": self._heading_line(Path(existing), link.heading),
                    "edit": True,
                }
            elif policy == "warn":
                warnings.append(f"note already exists: {existing}")
                data = {**base, "action": "exists", "path": existing}
            else:
                data = {**base, "action": "none", "path": existing}
            return ServiceResult(
                ok=True,
                op=op,
                data=dump_validated(MakeResultData, data),
                warnings=warnings,
            )

        # ── CREATE ───────────────────────────────────────────────
        options = self._new_note_options(link.title)
        try:
            created = self._client.new_note(notebook, options)
        except ZkError as exc:
            log.debug("make.create_failed", error=str(exc))
            return self._fail(op, "CREATE_FAILED", str(exc), detail=exc.detail())

        if created is None:
            warnings.append("zk did not report a path for the new note")
            data = {**base, "action": "none"}
        else:
            log.info("make.created", path=str(created))
            data = {**base, "action": "create", "path": str(created), "edit": options.edit}
        return ServiceResult(
            ok=True,
            op=op,
            data=dump_validated(MakeResultData, data),
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _new_note_options(self, title: str) -> NewNoteOptions:
        """Merge ``{title, edit: True}`` with the configured ``[new]`` options."""
        configured = self._settings.new
        return NewNoteOptions(
            title=title,
            edit=configured.edit,
            dir=configured.dir,
            group=configured.group,
            template=configured.template,
            date=configured.date,
            extra=dict(configured.extra),
        )

    def _heading_line(self, path: Path, heading: str | None) -> int | None:
        if heading is None or not self._settings.make.seek_heading:
            return None
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            log.debug("make.heading_unreadable", path=str(path))
            return None
        return find_heading_line(text, heading)

    @staticmethod
    def _read_line(path: Path, row: int | None) -> str | None:
        if row is None or row < 1:
            return None
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return None
        # Rows count "\n" only, as editors do.
        lines = text.removesuffix("\n").split("\n")
        if row > len(lines):
            return None
        return lines[row - 1]
