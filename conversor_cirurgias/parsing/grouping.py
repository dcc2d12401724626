"""
Groups surgery records by the month of their realization date.
"""
from datetime import date
from typing import Dict, Iterable, List

from conversor_cirurgias.common.models import SurgeryRecord
from .exceptions import DateParseError

# Two-digit years are always read as 20YY.
CENTURY = 2000


def parse_realization_date(value: str) -> date:
    """
    Parses a DD/MM/YY realization date.

    Raises:
        DateParseError: Wrong number of parts, non-numeric parts, a year that is
            not two digits, or a day/month that does not exist.
    """
    parts = value.strip().split('/')
    if len(parts) != 3:
        raise DateParseError(value, "formato esperado DD/MM/AA")

    day_s, month_s, year_s = parts
    if not all(p.isascii() and p.isdigit() for p in parts):
        raise DateParseError(value, "componentes não numéricos")
    if len(year_s) != 2:
        raise DateParseError(value, "ano deve ter dois dígitos")

    try:
        return date(CENTURY + int(year_s), int(month_s), int(day_s))
    except ValueError as e:
        raise DateParseError(value, str(e)) from e


def month_key(value: str) -> str:
    """'15/03/24' -> '2024-03'"""
    parsed = parse_realization_date(value)
    return f"{parsed.year:04d}-{parsed.month:02d}"


def group_by_month(records: Iterable[SurgeryRecord]) -> Dict[str, List[SurgeryRecord]]:
    """
    Buckets records by month key.

    Keys appear in order of their first record and records keep their
    relative order inside each bucket. A single invalid date fails the
    whole grouping.
    """
    groups: Dict[str, List[SurgeryRecord]] = {}
    for record in records:
        key = month_key(record.realization_date)
        groups.setdefault(key, []).append(record)
    return groups
