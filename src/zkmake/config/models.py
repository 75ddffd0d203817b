"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, zkmake.toml only contains overrides.
An empty (or missing) zkmake.toml behaves exactly like the original plugin.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

OnExisting = Literal["edit", "warn", "nothing"]


class MakeConfig(BaseModel):
    """[make] section."""

    model_config = {"frozen": True}

    on_existing: OnExisting = "edit"
    seek_heading: bool = True


class ZkConfig(BaseModel):
    """[zk] section."""

    model_config = {"frozen": True}

    command: str = "zk"
    marker: str = ".zk"


class NewNoteConfig(BaseModel):
    """[new] section — extra options forwarded to ``zk new``.

    Values here win over the defaults the make command computes
    (``title`` excepted, which always comes from the wikilink).
    """

    model_config = {"frozen": True}

    edit: bool = True
    dir: str | None = None
    group: str | None = None
    template: str | None = None
    date: str | None = None
    extra: dict[str, Any] = Field(default_factory=dict)
