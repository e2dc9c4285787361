# receipt_processor/rules/ruleset.py
from __future__ import annotations
import math
from datetime import time
from decimal import Decimal
from typing import Callable, Dict, List, Tuple

from ..schemas import Receipt
from .parsing import parse_amount, parse_date, parse_time

# -----------------------------
# Tunables
# -----------------------------
POINTS = {
    "round_total": 50,
    "quarter_total": 25,
    "item_pair": 5,
    "odd_day": 6,
    "afternoon": 10,
}

QUARTER = Decimal("0.25")
DESCRIPTION_LENGTH_FACTOR = 3
PRICE_MULTIPLIER = Decimal("0.2")
AFTERNOON_START = time(14, 0)
AFTERNOON_END = time(16, 0)

# -----------------------------
# Rules: receipt -> points (>= 0)
# -----------------------------
def retailer_chars(receipt: Receipt) -> int:
    """One point per ASCII letter or digit in the retailer name."""
    return sum(1 for ch in receipt.retailer if ch.isascii() and ch.isalnum())

def round_total(receipt: Receipt) -> int:
    total = parse_amount(receipt.total)
    if total is not None and total % 1 == 0:
        return POINTS["round_total"]
    return 0

def quarter_total(receipt: Receipt) -> int:
    total = parse_amount(receipt.total)
    if total is not None and total % QUARTER == 0:
        return POINTS["quarter_total"]
    return 0

def item_pairs(receipt: Receipt) -> int:
    return len(receipt.items) // 2 * POINTS["item_pair"]

def item_descriptions(receipt: Receipt) -> int:
    """
    For each item whose trimmed description length is a multiple of 3
    (zero included), add ceil(price * 0.2). Unparsable prices add nothing.
    """
    points = 0
    for item in receipt.items:
        if len(item.short_description.strip()) % DESCRIPTION_LENGTH_FACTOR != 0:
            continue
        price = parse_amount(item.price)
        if price is None:
            continue
        points += math.ceil(price * PRICE_MULTIPLIER)
    return points

def odd_day(receipt: Receipt) -> int:
    purchased = parse_date(receipt.purchase_date)
    if purchased is not None and purchased.day % 2 == 1:
        return POINTS["odd_day"]
    return 0

def afternoon(receipt: Receipt) -> int:
    purchased = parse_time(receipt.purchase_time)
    # exclusive at both ends: 14:00 and 16:00 earn nothing
    if purchased is not None and AFTERNOON_START < purchased < AFTERNOON_END:
        return POINTS["afternoon"]
    return 0

Rule = Callable[[Receipt], int]

RULES: List[Tuple[str, Rule]] = [
    ("retailer_chars", retailer_chars),
    ("round_total", round_total),
    ("quarter_total", quarter_total),
    ("item_pairs", item_pairs),
    ("item_descriptions", item_descriptions),
    ("odd_day", odd_day),
    ("afternoon", afternoon),
]

# -----------------------------
# Main entry
# -----------------------------
def score_breakdown(receipt: Receipt) -> Dict[str, int]:
    """Points contributed by each rule, keyed by rule name, in rule order."""
    return {name: rule(receipt) for name, rule in RULES}

def score(receipt: Receipt) -> int:
    return sum(score_breakdown(receipt).values())
