from typing import Any

REQUIRED_FIELDS: dict[str, tuple[str, ...]] = {
    "task": ("title", "description", "link", "tags", "assignee"),
    "tag": ("name", "color"),
    "user": ("name", "description", "image_url"),
    "column": ("name",),
}

# python attribute -> name the caller sees
FIELD_LABELS = {"image_url": "imageURL", "due_date": "dueDate"}


class ValidationError(Exception):
    def __init__(self, field: str, message: str | None = None):
        self.field = FIELD_LABELS.get(field, field)
        self.message = message or f"{self.field} is required"
        super().__init__(self.message)


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def validate_required(kind: str, fields: dict[str, Any], partial: bool = False) -> None:
    """
    Raise ValidationError for the first required field of ``kind`` that is
    missing from ``fields`` or holds a null/blank value.

    With ``partial`` (updates) only the required fields present in
    ``fields`` are checked. Empty lists count as present.
    """
    for name in REQUIRED_FIELDS[kind]:
        if name not in fields:
            if partial:
                continue
            raise ValidationError(name)
        if _is_missing(fields[name]):
            raise ValidationError(name)
