"""
JSON helpers shared by the API views.

Request bodies arrive in camelCase (``countyId``, ``hoursPerDay``) while
forms and models use snake_case; the conversion happens here, once.
"""

import json
import re
import logging

from django.http import JsonResponse

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r'(?<!^)(?=[A-Z])')


class PayloadError(ValueError):
    """The request body is not a JSON object."""


def to_snake_case(name: str) -> str:
    """
    Converts a camelCase key to snake_case.

    Example: 'hoursPerDay' → 'hours_per_day'
    """
    return _CAMEL_BOUNDARY.sub('_', name).lower()


def snake_case_keys(data):
    """
    Recursively converts the keys of dicts (and dicts inside lists) to snake_case.
    """
    if isinstance(data, dict):
        return {to_snake_case(key): snake_case_keys(value) for key, value in data.items()}
    if isinstance(data, list):
        return [snake_case_keys(item) for item in data]
    return data


def to_camel_case(name: str) -> str:
    """
    Converts a snake_case key back to camelCase.

    Example: 'hours_per_day' → 'hoursPerDay'
    """
    head, *tail = name.split('_')
    return head + ''.join(part.capitalize() for part in tail)


def camel_case_keys(data):
    """Inverse of snake_case_keys, used when echoing stored JSON back to clients."""
    if isinstance(data, dict):
        return {to_camel_case(key): camel_case_keys(value) for key, value in data.items()}
    if isinstance(data, list):
        return [camel_case_keys(item) for item in data]
    return data


def parse_json_body(request) -> dict:
    """
    Parses the request body as a JSON object with snake_case keys.

    Args:
        request: Django HttpRequest

    Returns:
        dict: Parsed payload

    Raises:
        PayloadError: If the body is not valid JSON or not an object
    """
    try:
        data = json.loads(request.body or b'{}')
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise PayloadError(f"Invalid JSON body: {e}") from e

    if not isinstance(data, dict):
        raise PayloadError("JSON body must be an object")

    return snake_case_keys(data)


def json_error(message: str, status: int = 400, errors=None) -> JsonResponse:
    """Builds the error payload returned by every API endpoint."""
    payload = {'message': message}
    if errors:
        payload['errors'] = errors
    return JsonResponse(payload, status=status)


def form_error_response(form) -> JsonResponse:
    """
    Returns a 400 response describing the errors of an invalid form.

    The first error becomes the human-readable message; the full
    field → messages mapping is returned under 'errors'.
    """
    errors = form.errors.get_json_data()
    first_message = 'Invalid request'
    for field_errors in errors.values():
        if field_errors:
            first_message = field_errors[0]['message']
            break

    logger.info(f"⚠️ Rejected request: {first_message}")
    return json_error(first_message, status=400, errors=errors)
