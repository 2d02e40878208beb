"""Domain services: users and scores.

Routes resolve request fields and call into these functions; the services
validate their inputs, talk to the database through ``db.session`` and raise
``clicker.errors`` exceptions, keeping transport concerns out of the data
access code.
"""

from clicker.errors import ValidationError

# Upper bound of a signed 32-bit INTEGER column
MAX_INT = 2 ** 31 - 1


def is_missing(value) -> bool:
    return value is None or value == ''


def _to_int(value):
    # ints as-is; strings only when made of ASCII decimal digits
    if isinstance(value, (bool, float)):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isascii() and value.isdigit():
        return int(value)
    return None


def parse_id(value) -> int:
    """Coerce a path/body identifier to an int, rejecting anything else."""
    parsed = _to_int(value)
    if parsed is None:
        raise ValidationError('ID must be an integer')
    if not 0 <= parsed <= MAX_INT:
        raise ValidationError('ID is out of range')
    return parsed


def parse_score(value) -> int:
    """Accept integers and decimal-digit strings between 0 and MAX_INT."""
    parsed = _to_int(value)
    if parsed is None or not 0 <= parsed <= MAX_INT:
        raise ValidationError('Score must be a non-negative integer')
    return parsed
