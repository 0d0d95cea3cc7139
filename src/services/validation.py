"""Field validation for user create and update requests."""

from email_validator import EmailNotValidError, validate_email

from src.errors import FieldViolation, ViolationKind
from src.models.user import EMAIL_MAX_LENGTH, NAME_MAX_LENGTH, NAME_MIN_LENGTH, PHONE_MAX_LENGTH
from src.schemas.user import UserFields


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def is_valid_email(value: str) -> bool:
    """Check email syntax only, no DNS lookups."""
    try:
        validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError:
        return False
    return True


def validate_user_fields(data: UserFields) -> list[FieldViolation]:
    """Return every violation in the request, in field order.

    The same rules apply to create and update. ``age`` is unconstrained.
    """
    violations: list[FieldViolation] = []

    if _is_blank(data.name):
        violations.append(FieldViolation("name", ViolationKind.REQUIRED, "Name is required"))
    elif not NAME_MIN_LENGTH <= len(data.name) <= NAME_MAX_LENGTH:
        violations.append(
            FieldViolation(
                "name",
                ViolationKind.LENGTH,
                f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters",
            )
        )

    if _is_blank(data.email):
        violations.append(FieldViolation("email", ViolationKind.REQUIRED, "Email is required"))
    else:
        if not is_valid_email(data.email):
            violations.append(
                FieldViolation("email", ViolationKind.FORMAT, "Email must be a valid address")
            )
        if len(data.email) > EMAIL_MAX_LENGTH:
            violations.append(
                FieldViolation(
                    "email",
                    ViolationKind.LENGTH,
                    f"Email must be at most {EMAIL_MAX_LENGTH} characters",
                )
            )

    if data.phone is not None and len(data.phone) > PHONE_MAX_LENGTH:
        violations.append(
            FieldViolation(
                "phone",
                ViolationKind.LENGTH,
                f"Phone must be at most {PHONE_MAX_LENGTH} characters",
            )
        )

    return violations
