"""Test locale-aware date parsing."""
import pytest
from date_entry.international.date_formatting import format_date
from date_entry.international.date_parsing import is_date_ambiguous, parse_date, year_token_complete
from date_entry.international.locale_resolver import resolve, supported_locales
from date_entry.models.calendar import CalendarDate, ParseFailure, ParseFailureReason
from date_entry.models.locale import Granularity


class TestParseDate:
    def test_day_first(self, pt_br):
        assert parse_date("31/12/2023", pt_br) == CalendarDate(year=2023, month=12, day=31)

    def test_month_first(self, en_us):
        assert parse_date("12/31/2023", en_us) == CalendarDate(year=2023, month=12, day=31)

    def test_order_is_authoritative(self, pt_br, en_us):
        # Same text, different meaning per locale
        assert parse_date("05/03/2024", pt_br) == CalendarDate(year=2024, month=3, day=5)
        assert parse_date("05/03/2024", en_us) == CalendarDate(year=2024, month=5, day=3)

    def test_unpadded_fields(self, pt_br):
        assert parse_date("1/2/2023", pt_br) == CalendarDate(year=2023, month=2, day=1)

    def test_alternate_separators(self, pt_br):
        assert parse_date("31-12-2023", pt_br) == CalendarDate(year=2023, month=12, day=31)
        assert parse_date("31.12.2023", pt_br) == CalendarDate(year=2023, month=12, day=31)

    def test_locale_separator(self, de_de):
        assert parse_date("24.12.2023", de_de) == CalendarDate(year=2023, month=12, day=24)

    def test_surrounding_whitespace(self, pt_br):
        assert parse_date("  31/12/2023 ", pt_br) == CalendarDate(year=2023, month=12, day=31)

    def test_leap_day(self, pt_br):
        assert parse_date("29/02/2024", pt_br) == CalendarDate(year=2024, month=2, day=29)
        assert parse_date("29/02/2000", pt_br) == CalendarDate(year=2000, month=2, day=29)


class TestParseFailures:
    @pytest.mark.parametrize("text, reason", [
        ("", ParseFailureReason.EMPTY),
        ("   ", ParseFailureReason.EMPTY),
        ("31/12", ParseFailureReason.FIELD_COUNT),
        ("31/12/2023/1", ParseFailureReason.FIELD_COUNT),
        ("31/dez/2023", ParseFailureReason.NON_NUMERIC),
        ("31//2023", ParseFailureReason.NON_NUMERIC),
        ("31/12/2023x", ParseFailureReason.NON_NUMERIC),
        ("01/01/0", ParseFailureReason.YEAR_RANGE),
        ("01/13/2023", ParseFailureReason.MONTH_RANGE),
        ("01/00/2023", ParseFailureReason.MONTH_RANGE),
        ("31/04/2023", ParseFailureReason.DAY_RANGE),
        ("00/04/2023", ParseFailureReason.DAY_RANGE),
        ("29/02/2023", ParseFailureReason.DAY_RANGE),
        ("29/02/1900", ParseFailureReason.DAY_RANGE),
        ("123/01/2023", ParseFailureReason.DAY_RANGE),
        ("01/123/2023", ParseFailureReason.MONTH_RANGE),
        ("01/01/20234", ParseFailureReason.YEAR_RANGE),
    ])
    def test_failure_reason(self, pt_br, text, reason):
        result = parse_date(text, pt_br)
        assert isinstance(result, ParseFailure)
        assert result.reason == reason

    def test_failure_is_falsy(self, pt_br):
        assert not parse_date("nope", pt_br)

    def test_no_clamping(self, en_us):
        # 2/30 must not roll over to March 2
        assert isinstance(parse_date("2/30/2023", en_us), ParseFailure)

    def test_huge_year_token_fails_without_raising(self, pt_br):
        result = parse_date("1/1/" + "9" * 5000, pt_br)
        assert isinstance(result, ParseFailure)
        assert result.reason == ParseFailureReason.YEAR_RANGE

    def test_huge_day_token_fails_without_raising(self, en_us):
        result = parse_date("1/" + "9" * 5000 + "/2023", en_us)
        assert result.reason == ParseFailureReason.DAY_RANGE


class TestGranularity:
    def test_year_only_for_year_granularity(self, pt_br):
        assert parse_date("2023", pt_br, Granularity.YEAR) == CalendarDate(year=2023, month=1, day=1)

    def test_year_only_for_month_granularity(self, pt_br):
        assert parse_date("2023", pt_br, Granularity.MONTH) == CalendarDate(year=2023, month=1, day=1)

    def test_year_only_rejected_for_day_granularity(self, pt_br):
        result = parse_date("2023", pt_br)
        assert isinstance(result, ParseFailure)
        assert result.reason == ParseFailureReason.FIELD_COUNT

    def test_full_date_still_accepted(self, pt_br):
        assert parse_date("15/03/2023", pt_br, Granularity.QUARTER) == CalendarDate(year=2023, month=3, day=15)


class TestRoundTrip:
    @pytest.mark.parametrize("locale", supported_locales() + ["und"])
    def test_format_then_parse(self, locale):
        rule = resolve(locale)
        for value in [
            CalendarDate(year=2023, month=1, day=15),
            CalendarDate(year=2024, month=2, day=29),
            CalendarDate(year=1999, month=12, day=31),
            CalendarDate(year=5, month=7, day=4),
        ]:
            assert parse_date(format_date(value, rule), rule) == value


class TestIsDateAmbiguous:
    def test_ambiguous_both_valid(self, pt_br):
        assert is_date_ambiguous("05/03/2024", pt_br) is True

    def test_unambiguous_day_gt_12(self, pt_br):
        assert is_date_ambiguous("15/03/2024", pt_br) is False

    def test_same_values_not_ambiguous(self, pt_br):
        assert is_date_ambiguous("03/03/2024", pt_br) is False

    def test_invalid_text(self, pt_br):
        assert is_date_ambiguous("not-a-date", pt_br) is False


class TestYearTokenComplete:
    @pytest.mark.parametrize("text", ["31/12/2", "31/12/20", "31/12/202", "31/12/", "31/12", ""])
    def test_short_year(self, pt_br, text):
        assert year_token_complete(text, pt_br) is False

    def test_full_year(self, pt_br):
        assert year_token_complete("31/12/2023", pt_br) is True

    def test_year_position_follows_order(self, en_us):
        assert year_token_complete("2023/12/3", en_us) is False
        assert year_token_complete("12/3/2023", en_us) is True

    def test_lone_year(self, pt_br):
        assert year_token_complete("2030", pt_br) is True
