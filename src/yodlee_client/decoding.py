"""
Typed field access for decoded Yodlee JSON documents.

Yodlee omits fields freely and sends ``null`` for empty values, so a missing
or null field decodes to the type's zero value. A field present with the
wrong JSON type is a shape mismatch and raises YodleeDecodeError.
"""

from typing import Any

from .errors import YodleeDecodeError


def lookup(data: dict, key: str, fold_case: bool = False) -> Any:
    """Return data[key], or None when absent.

    With fold_case, a key differing only in letter case also matches
    (the service answers both "Error" and "error").
    """
    if key in data:
        return data[key]
    if fold_case:
        lowered = key.lower()
        for candidate, value in data.items():
            if isinstance(candidate, str) and candidate.lower() == lowered:
                return value
    return None


def as_dict(value: Any, what: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise YodleeDecodeError(f"{what}: expected object, got {_json_type(value)}")
    return value


def as_list(value: Any, what: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise YodleeDecodeError(f"{what}: expected array, got {_json_type(value)}")
    return value


def get_str(data: dict, key: str, fold_case: bool = False) -> str:
    value = lookup(data, key, fold_case)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise YodleeDecodeError(f"{key}: expected string, got {_json_type(value)}")
    return value


def get_int(data: dict, key: str) -> int:
    value = lookup(data, key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise YodleeDecodeError(f"{key}: expected integer, got {_json_type(value)}")
    return value


def get_float(data: dict, key: str) -> float:
    value = lookup(data, key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise YodleeDecodeError(f"{key}: expected number, got {_json_type(value)}")
    return float(value)


def get_bool(data: dict, key: str) -> bool:
    value = lookup(data, key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise YodleeDecodeError(f"{key}: expected boolean, got {_json_type(value)}")
    return value


def get_dict(data: dict, key: str, fold_case: bool = False) -> dict:
    return as_dict(lookup(data, key, fold_case), key)


def get_list(data: dict, key: str, fold_case: bool = False) -> list:
    return as_list(lookup(data, key, fold_case), key)


def dig_str(data: Any, *path: str) -> str:
    """Follow nested objects along path and return the final string field."""
    node = as_dict(data, path[0])
    for key in path[:-1]:
        node = get_dict(node, key)
    return get_str(node, path[-1])


def _json_type(value: Any) -> str:
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__
