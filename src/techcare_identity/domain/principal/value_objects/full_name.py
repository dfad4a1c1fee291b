from techcare.domain.shared.exceptions import ValidationError

FULL_NAME_MIN_LENGTH = 2
FULL_NAME_MAX_LENGTH = 100


def normalize_full_name(value: str) -> str:
    """Trim a display name and check its length."""
    name = (value or "").strip()
    if not FULL_NAME_MIN_LENGTH <= len(name) <= FULL_NAME_MAX_LENGTH:
        msg = (
            f"Full name must be between {FULL_NAME_MIN_LENGTH} "
            f"and {FULL_NAME_MAX_LENGTH} characters"
        )
        raise ValidationError(msg)
    return name
