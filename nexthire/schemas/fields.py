# ========================================
# nexthire/schemas/fields.py - VALIDATED, UNCHANGED STRINGS
# ========================================

from datetime import datetime
from typing import Annotated

from email_validator import validate_email
from pydantic import AfterValidator, TypeAdapter

_datetime_adapter = TypeAdapter(datetime)


def check_email(value: str) -> str:
    """Reject malformed addresses but keep the caller's spelling and case."""
    validate_email(value, check_deliverability=False)
    return value


def check_deadline(value: str) -> str:
    """Accept any date/datetime pydantic can parse, store it as sent."""
    _datetime_adapter.validate_python(value)
    return value


# Emails are matched verbatim against path params and token claims
EmailAddress = Annotated[str, AfterValidator(check_email)]

# ISO 8601 strings, so lexical order is deadline order
Deadline = Annotated[str, AfterValidator(check_deadline)]
