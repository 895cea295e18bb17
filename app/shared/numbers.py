from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a calculator: 2.5 -> 3, 0.25 -> 0.3 (one digit)."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))
