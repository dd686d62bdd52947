"""
Export serializers - CSV and JSON downloads of translation views

Both functions are pure: they build the whole document in memory and
return it, so a failure never leaves partial output behind.
"""
from typing import Iterable, Optional
import json

from app.core.monitoring import monitor_performance
from app.schemas.translation import TranslationView

CSV_HEADER = "ID,Key,Locale,Content,Tags,Created At,Updated At"
CSV_SPECIAL_CHARS = (",", "\n", '"')


def escape_csv(value: Optional[str]) -> str:
    """
    Quote a field only if it contains a comma, a newline or a double quote.
    
    Internal quotes are doubled. None renders as an empty field.
    """
    if value is None:
        return ""
    if any(char in value for char in CSV_SPECIAL_CHARS):
        return '"' + value.replace('"', '""') + '"'
    return value


def _csv_row(view: TranslationView) -> str:
    fields = [
        view.id,
        view.key,
        view.locale,
        view.content,
        ";".join(view.tags) if view.tags is not None else None,
        view.created_at.isoformat() if view.created_at is not None else None,
        view.updated_at.isoformat() if view.updated_at is not None else None,
    ]
    return ",".join(escape_csv(field) for field in fields)


@monitor_performance
def to_csv(views: Iterable[TranslationView]) -> str:
    """Header line plus one line per view, each terminated by \\n."""
    lines = [CSV_HEADER]
    lines.extend(_csv_row(view) for view in views)
    return "\n".join(lines) + "\n"


@monitor_performance
def to_json(views: Iterable[TranslationView]) -> str:
    """Indented JSON array of views; every field present, nulls included."""
    payload = [view.model_dump(mode="json", by_alias=True) for view in views]
    return json.dumps(payload, indent=2, ensure_ascii=False)
