"""
Validation of post payloads.

Payloads are checked with the PostPayload schema; pydantic reports every
failing field at once, and the errors are folded into one FieldViolation per
field with a stable, caller-facing message.

Example:
    >>> validate_post_payload({"title": "  ", "content": "x"})
    [FieldViolation(field='title', message='title is required'),
     FieldViolation(field='category', message='category is required')]
"""

from typing import Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from backend.postboard.api.schemas import FieldViolation, PostPayload

REQUIRED_FIELDS = ("title", "content", "category")

FIELD_MESSAGES = {
    "title": "title is required",
    "content": "content is required",
    "category": "category is required",
    "tags": "tags must be an array of strings",
}

BODY_FIELD = "body"
INVALID_JSON_MESSAGE = "request body must be valid JSON"


def violations_from_errors(errors: List[Dict[str, Any]]) -> List[FieldViolation]:
    """
    Fold pydantic error dicts into one violation per field.

    The first path element names the field; nested positions (e.g. a bad
    tag at tags[2]) are reported against the field itself. Field order
    follows the order pydantic reports, which is the schema order.
    """
    violations: List[FieldViolation] = []
    seen = set()
    for error in errors:
        loc = error.get("loc") or ()
        field = str(loc[0]) if loc else BODY_FIELD
        if field in seen:
            continue
        seen.add(field)
        message = FIELD_MESSAGES.get(field, error.get("msg", "invalid value"))
        violations.append(FieldViolation(field=field, message=message))
    return violations


def check_post_payload(payload: Any) -> Tuple[Optional[PostPayload], List[FieldViolation]]:
    """
    Validate a decoded request body.

    Anything that is not a JSON object is checked as an empty object, so the
    caller sees which required fields are missing.

    Args:
        payload: Decoded JSON body (any type).

    Returns:
        (PostPayload, []) when valid, (None, violations) otherwise.
    """
    if not isinstance(payload, dict):
        payload = {}
    try:
        return PostPayload.model_validate(payload), []
    except ValidationError as e:
        return None, violations_from_errors(e.errors())


def validate_post_payload(payload: Any) -> List[FieldViolation]:
    """Return the list of field violations for a payload (empty when valid)."""
    _, violations = check_post_payload(payload)
    return violations
