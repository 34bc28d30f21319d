from gamedev_server.errors import ValidationError

# Largest sort key both backends store as an integer
MAX_SORT_VALUE = 2 ** 63 - 1


def is_missing(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(data: dict, names, message: str) -> dict:
    """Return the named fields of *data*, or raise ValidationError if any is missing."""
    if not isinstance(data, dict):
        data = {}
    missing = [name for name in names if is_missing(data.get(name))]
    if missing:
        raise ValidationError(message, fields=missing)
    return {name: data[name] for name in names}


def to_sort_value(value, name: str, message: str) -> int:
    """Coerce a request value (int or decimal string) to a sort key in [0, MAX_SORT_VALUE]."""
    if isinstance(value, bool):
        raise ValidationError(message, fields=[name])
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and value.strip().isdecimal():
        number = int(value.strip())
    else:
        raise ValidationError(message, fields=[name])
    if number < 0 or number > MAX_SORT_VALUE:
        raise ValidationError(message, fields=[name])
    return number
