"""Simple in-memory notes tool."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from actionkit.tools.base import Tool
from actionkit.tools.parameters import ParameterBuilder


def _write_parameters(p: ParameterBuilder) -> None:
    p.property("text", type="string", description="The note to save.", required=True)
    p.property(
        "tags",
        type="array",
        description="Labels used to find the note later.",
        nested=lambda a: a.item(type="string"),
    )


def _list_parameters(p: ParameterBuilder) -> None:
    p.property("tag", type="string", description="Only list notes carrying this tag.")
    p.property("limit", type="integer", description="Max notes to return (default 20).")


class Notes(Tool):
    """Keeps short notes for the lifetime of the tool instance."""

    @classmethod
    def define_actions(cls) -> None:
        cls.define_action("write", description="Save a short note for later retrieval.", parameters=_write_parameters)
        cls.define_action("list", description="List recent saved notes, newest first.", parameters=_list_parameters)

    def __init__(self) -> None:
        self._notes: list[dict[str, Any]] = []

    def write(self, text: str, tags: list[str] | None = None) -> dict[str, Any]:
        note = {
            "note_id": len(self._notes) + 1,
            "text": text,
            "tags": list(tags or []),
            "created_at": datetime.now(timezone.utc).isoformat(),
        }
        self._notes.append(note)
        return {"note_id": note["note_id"]}

    def list(self, tag: str | None = None, limit: int | None = None) -> list[dict[str, Any]]:
        limit = 20 if limit is None else limit
        notes = [n for n in reversed(self._notes) if tag is None or tag in n["tags"]]
        return notes[:limit]
