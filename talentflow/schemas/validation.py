"""Boundary Parsing — turns pydantic failures into the store's ValidationError.

Invariants:
    - parse() either returns a plain dict or raises ValidationError, never pydantic's error
    - Only fields the caller actually supplied are returned (factories fill the rest)
"""

from pydantic import BaseModel, ValidationError as PydanticValidationError

from talentflow.core.errors import ValidationError


def parse(schema: type[BaseModel], data: dict | None, partial: bool = False) -> dict:
    """Validate data against schema and dump the supplied fields as JSON-safe values.

    partial=True also drops explicit nulls, so a patch never clears a required column.
    """
    try:
        model = schema.model_validate(data or {})
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or "__root__"
        raise ValidationError(
            f"Invalid {schema.__name__}: {field}: {first['msg']}", field,
        ) from e
    return model.model_dump(mode="json", exclude_unset=True, exclude_none=partial)
