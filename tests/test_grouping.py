"""
Unit tests for month grouping.
"""
import pytest

from conversor_cirurgias.common.models import SurgeryRecord
from conversor_cirurgias.parsing.exceptions import DateParseError
from conversor_cirurgias.parsing.grouping import group_by_month, month_key, parse_realization_date


def record(date, notice_id="1"):
    return SurgeryRecord(realization_date=date, notice_id=notice_id, anesthesia_type="GERAL")


# =============================================================================
# TEST: parse_realization_date / month_key
# =============================================================================

class TestMonthKey:

    def test_basic(self):
        assert month_key("15/03/24") == "2024-03"

    def test_month_zero_padded(self):
        assert month_key("01/01/05") == "2005-01"

    def test_year_uses_fixed_century(self):
        assert month_key("31/12/99") == "2099-12"
        assert month_key("01/01/00") == "2000-01"

    def test_surrounding_whitespace_ignored(self):
        assert month_key("  15/03/24\n") == "2024-03"

    def test_leap_day(self):
        assert parse_realization_date("29/02/24").day == 29

    @pytest.mark.parametrize("value", [
        "31/13/24",   # month 13
        "30/02/24",   # no such day
        "00/01/24",
        "15/03",      # two segments
        "15/03/24/1",
        "15-03-24",
        "aa/03/24",
        "15/03/2024",  # four-digit year
        "",
    ])
    def test_invalid_dates_raise(self, value):
        with pytest.raises(DateParseError) as exc_info:
            month_key(value)
        assert exc_info.value.value == value


# =============================================================================
# TEST: group_by_month
# =============================================================================

class TestGroupByMonth:

    def test_single_record(self):
        r = record("15/03/24")
        assert group_by_month([r]) == {"2024-03": [r]}

    def test_empty_input(self):
        assert group_by_month([]) == {}

    def test_counts_preserved_and_order_stable(self):
        records = [
            record("28/02/24", "a"),
            record("01/03/24", "b"),
            record("01/03/24", "c"),
            record("29/02/24", "d"),
            record("05/01/25", "e"),
        ]
        groups = group_by_month(records)

        assert list(groups) == ["2024-02", "2024-03", "2025-01"]
        assert sum(len(v) for v in groups.values()) == len(records)
        assert [r.notice_id for r in groups["2024-02"]] == ["a", "d"]
        assert [r.notice_id for r in groups["2024-03"]] == ["b", "c"]

    def test_stability_matches_ungrouped_order(self):
        records = [record(f"{d:02d}/0{1 + d % 3}/24", str(d)) for d in range(1, 28)]
        groups = group_by_month(records)
        for bucket in groups.values():
            positions = [records.index(r) for r in bucket]
            assert positions == sorted(positions)

    def test_one_bad_date_fails_everything(self):
        with pytest.raises(DateParseError):
            group_by_month([record("15/03/24"), record("31/13/24")])
