"""Typed payload contracts for service results.

These models validate operation payload shapes before they leave the
service layer, so editor integrations can rely on stable keys.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


def dump_validated[T: BaseModel](model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class MakeResultData(BaseModel):
    """Payload contract for ``MakeService.make``.

    ``action`` tells the editor what to do next:

    * ``edit`` — open ``path`` (and jump to ``line`` when set)
    * ``create`` — a note was created at ``path``; open it if ``edit``
    * ``exists`` — the note exists and ``on_existing = "warn"``
    * ``none`` — nothing to open
    """

    model_config = ConfigDict(extra="forbid")

    action: Literal["edit", "create", "exists", "none"]
    title: str
    heading: str | None = None
    notebook: str
    path: str | None = None
    line: int | None = None
    edit: bool = False


class LinkResultData(BaseModel):
    """Payload contract for ``MakeService.locate_link``."""

    text: str
    title: str
    heading: str | None = None
    start: int
    end: int


class ResolveResultData(BaseModel):
    """Payload contract for ``MakeService.resolve_buffer``."""

    buffer: str
    path: str
    notebook: str | None = None
