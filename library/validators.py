from django.core.exceptions import ValidationError

RESERVED_KEYS = frozenset({"add"})


def validate_path_key(value):
    """Reject values that cannot round-trip through a single URL path segment."""
    if "/" in value:
        raise ValidationError("Value cannot contain '/'.")
    if value.strip().lower() in RESERVED_KEYS:
        raise ValidationError(f"'{value}' is reserved.")
