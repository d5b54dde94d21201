"""Record Payload Validation: pure checks on bulk-replace bodies before any write.

Invariants:
    - A payload that is not a list raises ValidationError("<Label> must be an array")
    - Every item is validated against the entity schema; the first failure raises
    - Validation never touches storage, so a rejected payload leaves the collection unchanged
"""

from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from catalog.core.errors import ValidationError


def extract_collection(body: Any, key: str) -> Any:
    """Return body[key] for an object body, None for anything else."""
    if isinstance(body, dict):
        return body.get(key)
    return None


def require_list(records: Any, label: str) -> list:
    if not isinstance(records, list):
        raise ValidationError(f"{label} must be an array")
    return records


def validate_records(
    records: Any, schema: type[BaseModel], label: str,
) -> list[dict]:
    """Validate a bulk-replace payload and return the normalized field dicts.

    Unknown keys (e.g. "_id" or timestamps echoed back from a GET) are
    dropped, so replaced records always get fresh identities.
    """
    items = require_list(records, label)
    normalized = []
    for index, item in enumerate(items):
        try:
            normalized.append(schema.model_validate(item).model_dump())
        except PydanticValidationError as e:
            first = e.errors()[0]
            location = ".".join(str(loc) for loc in first["loc"])
            field_path = f"{index}.{location}" if location else str(index)
            raise ValidationError(
                f"Invalid item at index {index}"
                f"{f' ({location})' if location else ''}: {first['msg']}",
                field=field_path,
            ) from e
    return normalized
