"""
Validation and normalisation of submitted user records.

Everything in this module is pure: the functions never touch the
record store.  Callers load the current records, pass them in for the
email uniqueness check and persist the returned record themselves.

Rules are applied in a fixed order and the first failure is raised as
a ``UserValidationError`` subclass; errors are not accumulated.
"""

from datetime import date, datetime, timezone
from typing import Iterable, Optional
from uuid import UUID

from email_validator import EmailNotValidError, validate_email

from ..core.errors import (
    ConstraintViolationError,
    InvalidFormatError,
    MaxLengthError,
    MissingBodyError,
    RequiredFieldError,
)
from ..schemas.user import User

MAX_NAME_LENGTH = 128
MIN_AGE_YEARS = 18

NIL_UUID = UUID(int=0)


def parse_email(value: Optional[str]) -> Optional[str]:
    """Return the canonical form of ``value`` or ``None`` if it is not a plain address.

    The grammar check is delegated to ``email_validator`` without any
    DNS lookups.  On top of it the canonical address must equal the
    input, so forms that only become valid after normalisation (display
    names, quoting, unicode recomposition) are refused.  Domains are
    case-insensitive and compared lower-cased.  An address ending in a
    period is never accepted.

    Dotless domains such as ``a@b`` are grammatical and accepted.
    Special-use and reserved names (``localhost``, ``*.local``,
    ``*.test``) are still refused by ``email_validator``.
    """
    if not value or value.endswith("."):
        return None
    try:
        parsed = validate_email(
            value, check_deliverability=False, globally_deliverable=False
        )
    except EmailNotValidError:
        return None
    local, _, domain = value.rpartition("@")
    if parsed.normalized != f"{local}@{domain.lower()}":
        return None
    return parsed.normalized


def is_unset_id(user_id: Optional[UUID]) -> bool:
    return user_id is None or user_id == NIL_UUID


def minimum_birth_datetime(today: date) -> datetime:
    """Latest date of birth that is old enough on ``today``, at midnight."""
    year = today.year - MIN_AGE_YEARS
    try:
        cutoff = today.replace(year=year)
    except ValueError:
        # 29 February in a non-leap target year
        cutoff = today.replace(year=year, day=28)
    return datetime(cutoff.year, cutoff.month, cutoff.day)


def is_unset_date(value: Optional[datetime]) -> bool:
    """``None`` or the zero date, whatever offset it carries."""
    return value is None or value.replace(tzinfo=None) == datetime.min


def _born_after(value: datetime, cutoff: datetime) -> bool:
    # Aware values are compared against an aware cutoff rather than
    # converted, since converting early dates can leave datetime's range.
    if value.tzinfo is None:
        return value > cutoff
    return value > cutoff.replace(tzinfo=timezone.utc)


def _normalize_name(value: Optional[str], field: str, required: bool) -> Optional[str]:
    value = value.strip() if value is not None else None
    if required and not value:
        raise RequiredFieldError(field)
    if value is not None and len(value) > MAX_NAME_LENGTH:
        raise MaxLengthError(field, MAX_NAME_LENGTH)
    return value


def validate_user(
    user: Optional[User],
    existing: Iterable[User],
    *,
    require_id: bool = False,
    today: Optional[date] = None,
) -> User:
    """Validate ``user`` against the field rules and ``existing`` records.

    Parameters
    ----------
    user : Optional[User]
        The submitted record.  ``None`` means the request had no body.
    existing : Iterable[User]
        Snapshot of the stored records used for the email uniqueness
        check.
    require_id : bool
        Set for updates: ``id`` must be present, and the stored record
        with the same id is ignored by the uniqueness check.
    today : Optional[date]
        Current UTC date; defaults to the real one.

    Returns
    -------
    User
        A normalised copy of ``user`` with trimmed strings.
    """
    if user is None:
        raise MissingBodyError()

    if require_id and is_unset_id(user.id):
        raise RequiredFieldError("id")

    first_name = _normalize_name(user.first_name, "firstName", required=True)
    last_name = _normalize_name(user.last_name, "lastName", required=False)

    email = user.email.strip() if user.email is not None else None
    if not email:
        raise RequiredFieldError("email")
    if parse_email(email) is None:
        raise InvalidFormatError("email")

    if is_unset_date(user.date_of_birth):
        raise RequiredFieldError("dateOfBirth")
    if today is None:
        today = datetime.now(timezone.utc).date()
    if _born_after(user.date_of_birth, minimum_birth_datetime(today)):
        raise ConstraintViolationError(
            "dateOfBirth", f"user must be {MIN_AGE_YEARS} years or older"
        )

    # Plain lower-casing: "straße" and "strasse" are different addresses.
    lowered = email.lower()
    for other in existing:
        if require_id and other.id == user.id:
            continue
        if other.email is not None and other.email.lower() == lowered:
            raise ConstraintViolationError("email", "already exists")

    return user.model_copy(
        update={"first_name": first_name, "last_name": last_name, "email": email}
    )
