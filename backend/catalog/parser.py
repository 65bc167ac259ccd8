"""
Blob → Eatery decoding.

A blob is the raw contents of one catalog file. Decoding is all-or-nothing:
either every required field is present with the right type, or the blob is
rejected with MalformedEateryError.
"""

from pydantic import ValidationError

from models import Eatery


class MalformedEateryError(ValueError):
    """Raised when a blob is not a valid eatery document."""


def _describe(exc: ValidationError) -> str:
    """First error as 'field: message', plus a count of the rest."""
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "<document>"
    summary = f"{location}: {first['msg']}"
    extra = exc.error_count() - 1
    if extra:
        summary += f" (+{extra} more)"
    return summary


def parse_eatery(blob: str | bytes) -> Eatery:
    try:
        return Eatery.model_validate_json(blob)
    except ValidationError as exc:
        raise MalformedEateryError(_describe(exc)) from exc
