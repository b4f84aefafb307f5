"""
Field parsers for the flight CSV.
Every parser degrades to 0 instead of raising.
"""
import re


def clean_non_numeric(value: str) -> str:
    """Keep only digits and decimal points."""
    return re.sub(r"[^0-9.]", "", value)


def _to_float(value: str) -> float:
    try:
        return float(value.strip())
    except ValueError:
        return 0.0


def parse_duration(duration_str: str) -> float:
    """
    Parse a duration into hours.

    "2h 15m" / "2h15m" -> 2.25, "2h" -> 2.0, "45m" -> 0.75, "2.5" -> 2.5.
    "non-stop" and "1-stop" style values (stops mistaken for duration) -> 0.
    """
    if not duration_str:
        return 0.0

    duration_str = duration_str.strip().lower()
    if not duration_str or "non-stop" in duration_str or "-stop" in duration_str:
        return 0.0

    if "h" in duration_str and "m" in duration_str:
        total_minutes = 0.0
        for amount, unit in re.findall(r"([0-9.]+)\s*([hm])", duration_str):
            value = _to_float(amount)
            total_minutes += value * 60 if unit == "h" else value
        return total_minutes / 60

    if "h" in duration_str:
        return _to_float(duration_str.replace("h", ""))

    if "m" in duration_str:
        return _to_float(duration_str.replace("m", "")) / 60

    return _to_float(duration_str)


def parse_price(price_str: str) -> float:
    """'5,953' -> 5953.0, 'Rs. 4,000' -> 4000.0 (leading dot stripped), junk -> 0."""
    if not price_str:
        return 0.0
    cleaned = clean_non_numeric(price_str.replace(",", "")).strip(".")
    return _to_float(cleaned) if cleaned else 0.0


def parse_stops(stops_str: str) -> int:
    """'non-stop' -> 0, '2 stops' -> 2, junk -> 0."""
    if not stops_str:
        return 0
    digits = re.sub(r"[^0-9]", "", stops_str)
    return int(digits) if digits else 0
