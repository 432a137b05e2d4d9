from datetime import date
from crud.store import EntityStore, in_

DEFAULT_BACKGROUND = "#ffffff"


def text_color_for(background: str) -> str:
    """Black on light backgrounds, white on dark ones."""
    hex_value = background.lstrip("#")
    r, g, b = (int(hex_value[i:i + 2], 16) for i in (0, 2, 4))
    brightness = (r * 299 + g * 587 + b * 114) / 1000
    return "#000000" if brightness > 155 else "#ffffff"


def list_cells(store: EntityStore, project_ids: list[str], start: date | None = None, end: date | None = None):
    if not project_ids:
        return []
    rows = store.select("project_schedules", {"project_id": in_(project_ids)}, order=["date", "project_id"])
    if start:
        rows = [r for r in rows if r["date"] >= start]
    if end:
        rows = [r for r in rows if r["date"] <= end]
    return rows


def save_cell(store: EntityStore, project_id: str, day: date, content: str, user_id: str,
              background_color: str | None = None, text_color: str | None = None):
    """Upsert a cell on (project_id, date); blank content removes it. Returns the cell or None."""
    existing = store.select_one("project_schedules", {"project_id": project_id, "date": day})
    if not content.strip():
        if existing:
            store.delete("project_schedules", {"project_id": project_id, "date": day})
        return None

    background = background_color or (existing["background_color"] if existing else DEFAULT_BACKGROUND)
    if text_color is None:
        text_color = existing["text_color"] if existing and not background_color else text_color_for(background)
    return store.upsert(
        "project_schedules",
        {
            "project_id": project_id,
            "date": day,
            "content": content,
            "background_color": background,
            "text_color": text_color,
            "user_id": user_id,
        },
        conflict_keys=["project_id", "date"],
    )
