"""Projection of one API record into what the viewer displays."""

from __future__ import annotations

from dataclasses import dataclass

PLACEHOLDER = "—"


@dataclass(frozen=True)
class RecordView:
    id: int | None
    display_name: str
    type_list: tuple[str, ...]
    image_url: str

    @property
    def id_label(self) -> str:
        return f"#{self.id}" if self.id is not None else ""

    @property
    def types_label(self) -> str:
        if not self.type_list:
            return f"Type: {PLACEHOLDER}"
        return "Type: " + ", ".join(self.type_list)

    @property
    def alt_text(self) -> str:
        return f"Image of {self.display_name}"


def _pick_image_url(sprites) -> str:
    """Official artwork first, then the default sprite, else ''."""
    if not isinstance(sprites, dict):
        return ""
    other = sprites.get("other")
    artwork = other.get("official-artwork") if isinstance(other, dict) else None
    for url in (
        artwork.get("front_default") if isinstance(artwork, dict) else None,
        sprites.get("front_default"),
    ):
        if isinstance(url, str) and url:
            return url
    return ""


def build_record_view(data: dict) -> RecordView:
    """Build a RecordView from a /pokemon/{id} payload.

    Raises KeyError or TypeError when the types list is malformed.
    """
    record_id = data.get("id")
    if isinstance(record_id, bool) or not isinstance(record_id, int) or record_id < 1:
        record_id = None
    types = tuple(str(t["type"]["name"]) for t in (data.get("types") or []))
    return RecordView(
        id=record_id,
        display_name=data.get("name") or PLACEHOLDER,
        type_list=types,
        image_url=_pick_image_url(data.get("sprites")),
    )
