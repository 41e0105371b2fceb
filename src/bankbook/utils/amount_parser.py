"""Amount parsing utilities."""

import re
from decimal import Decimal, InvalidOperation

from bankbook.domain.errors import ValidationError


def parse_amount(amount_str: str) -> Decimal:
    """Parse an operator-entered amount into a Decimal.

    Accepts "25", "25.00", "-25.00", "$1,234.56" and "(25.00)" (negative).
    The sign is kept as entered; no range check is made.

    Raises:
        ValidationError: If the string is empty or not a finite number
    """
    if not amount_str or not amount_str.strip():
        raise ValidationError("Empty amount")

    cleaned = amount_str.strip()

    is_negative = False
    if cleaned.startswith("(") and cleaned.endswith(")"):
        is_negative = True
        cleaned = cleaned[1:-1]

    cleaned = re.sub(r"[$€£¥,\s]", "", cleaned)

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise ValidationError(f"Could not parse amount '{amount_str.strip()}'")
    if not amount.is_finite():
        raise ValidationError(f"Amount must be a finite number, got '{amount_str.strip()}'")

    return -amount if is_negative else amount


def parse_account_number(number_str: str) -> int:
    """Parse an operator-entered account number.

    Raises:
        ValidationError: If the string is not an integer
    """
    try:
        return int(number_str.strip())
    except (ValueError, AttributeError):
        raise ValidationError(f"Invalid account number '{number_str}'")
