# receipt_processor/rules/parsing.py
"""
Lenient field parsers used by the scoring rules.

Each parser returns the parsed value, or None when the text does not parse.
A None only zeroes the rule that needed the field; it never fails the receipt.
"""
import re
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Optional

from ..utils.logging import logger

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

# month, day and minute must be zero-padded; the hour may be one digit
DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
TIME_RE = re.compile(r"^\d{1,2}:\d{2}$")

# Keeps rule arithmetic exact within the default Decimal context (28 digits).
MAX_AMOUNT_INT_DIGITS = 20
FRACTION_QUANTUM = Decimal("0.000001")

def parse_amount(value: str) -> Optional[Decimal]:
    """
    Money amount as an exact Decimal. Negative, NaN and infinite values don't
    count, nor do amounts too large or too finely divided to score exactly.
    """
    try:
        amount = Decimal(value.strip())
    except (InvalidOperation, AttributeError):
        logger.debug("unparsable amount %r", value)
        return None
    if not amount.is_finite() or amount < 0:
        logger.debug("amount out of range %r", value)
        return None
    if amount.adjusted() >= MAX_AMOUNT_INT_DIGITS or amount != amount.quantize(FRACTION_QUANTUM):
        logger.debug("amount out of range %r", value)
        return None
    return amount

def parse_date(value: str) -> Optional[date]:
    if not DATE_RE.match(value):
        logger.debug("unparsable purchase date %r", value)
        return None
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        logger.debug("unparsable purchase date %r", value)
        return None

def parse_time(value: str) -> Optional[time]:
    if not TIME_RE.match(value):
        logger.debug("unparsable purchase time %r", value)
        return None
    try:
        return datetime.strptime(value, TIME_FORMAT).time()
    except ValueError:
        logger.debug("unparsable purchase time %r", value)
        return None
