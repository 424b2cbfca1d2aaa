import logging
from typing import Optional, Tuple

from hijri_convert.types.result_types import (
    CalendarDate,
    CalendarName,
    ConversionResultTD,
    FieldTexts,
    RoundTripTD,
)
from hijri_convert.utils.julian_day import (
    gregorian_to_jdn,
    hijri_to_jdn,
    jdn_to_gregorian,
    jdn_to_hijri,
)

logger = logging.getLogger(__name__)

'''
Functions: gregorian_to_hijri(date, fmt), hijri_to_gregorian(date, fmt)

Input format:

 date: a fixed-length date string, e.g. "2023-08-20" or "20/08/2023".
 fmt:  a pattern of the same length. Y/M/D (any case) mark which positions
       hold year/month/day digits; every other character is a separator and
       is skipped by position, never matched. Default "YYYY-MM-DD".
 Persian and Arabic-Indic digits are accepted at field positions.

Output format:

 Always "YYYY-MM-DD" whatever `fmt` was: month/day zero-padded to two
 digits, year unpadded. "" when the date is out of the direction's domain
 (Gregorian year must be > 1700, Hijri year < 1700) or does not parse.

The convert_* variants return a ConversionResultTD instead, with
kind "exact", "out_of_domain" or "invalid" plus a reason.
'''

DEFAULT_FORMAT = "YYYY-MM-DD"
STANDARD_FORMAT = "yyyy-mm-dd"

GREGORIAN_MIN_YEAR = 1700  # exclusive
HIJRI_MAX_YEAR = 1700      # exclusive

# Longer fields are rejected before they reach the float arithmetic.
MAX_FIELD_DIGITS = 6

# Language & digit normalization

PERSIAN_DIGITS = dict(zip("۰۱۲۳۴۵۶۷۸۹", "0123456789"))
ARABIC_INDIC_DIGITS = dict(zip("٠١٢٣٤٥٦٧٨٩", "0123456789"))

def _normalize_digits(s: str) -> str:
    if not s:
        return s
    out = []
    for ch in s:
        if ch in PERSIAN_DIGITS:
            out.append(PERSIAN_DIGITS[ch])
        elif ch in ARABIC_INDIC_DIGITS:
            out.append(ARABIC_INDIC_DIGITS[ch])
        else:
            out.append(ch)
    return "".join(out)

def _parse_int(text: str) -> Optional[int]:
    t = _normalize_digits(text)
    if not t or len(t) > MAX_FIELD_DIGITS or not (t.isascii() and t.isdigit()):
        return None
    return int(t)

def _fmt_yyyy_mm_dd(y: int, m: int, d: int) -> str:
    return f"{y}-{m:02d}-{d:02d}"

def _parsed_as_str(y: Optional[int], m: Optional[int], d: Optional[int]) -> str:
    yy = str(y) if isinstance(y, int) else ""
    mm = f"{m:02d}" if isinstance(m, int) else ""
    dd = f"{d:02d}" if isinstance(d, int) else ""
    return "-".join([yy, mm, dd])

# -----------------------------
# Parsing
# -----------------------------

def parse_fields(date: str, fmt: str = DEFAULT_FORMAT) -> FieldTexts:
    """
    Collect the characters of `date` sitting under Y/M/D positions of `fmt`.

    Positions past the end of the shorter string contribute nothing, so a
    length mismatch truncates silently instead of raising.
    """
    if not isinstance(date, str) or not isinstance(fmt, str):
        raise TypeError("date and fmt must both be str")

    day, month, year = [], [], []
    for token, ch in zip(fmt.upper(), date):
        if token == "D":
            day.append(ch)
        elif token == "M":
            month.append(ch)
        elif token == "Y":
            year.append(ch)
    return FieldTexts(day="".join(day), month="".join(month), year="".join(year))

def _parse_date(date: str, fmt: str, calendar: CalendarName) -> Tuple[Optional[CalendarDate], str, str]:
    """Return (CalendarDate or None, parsed-as-str, reason)."""
    fields = parse_fields(date, fmt)
    y = _parse_int(fields.year)
    m = _parse_int(fields.month)
    d = _parse_int(fields.day)
    parsed = _parsed_as_str(y, m, d)
    logger.debug("🧩 parse: %r with %r → %s", date, fmt, fields)

    missing = [name for name, v in (("year", y), ("month", m), ("day", d)) if v is None]
    if missing:
        return None, parsed, f"Could not read {', '.join(missing)} digits from {date!r} using {fmt!r}."
    return CalendarDate(year=y, month=m, day=d, calendar=calendar), parsed, ""

def _check_ranges(value: CalendarDate) -> str:
    if not 1 <= value.month <= 12:
        return f"Month {value.month} is outside 1-12."
    if not 1 <= value.day <= 31:
        return f"Day {value.day} is outside 1-31."
    return ""

def _result(kind, src, tgt, parsed, date="", reason="") -> ConversionResultTD:
    return {
        "kind": kind,
        "source_calendar": src,
        "target_calendar": tgt,
        "parsed": parsed,
        "date": date,
        "reason": reason,
        "standard_format": STANDARD_FORMAT,
    }

# Public API

def convert_gregorian_to_hijri(date: str, fmt: str = DEFAULT_FORMAT) -> ConversionResultTD:
    src, tgt = "gregorian", "hijri"
    value, parsed, reason = _parse_date(date, fmt, src)
    if value is None:
        return _result("invalid", src, tgt, parsed, reason=reason)
    if value.year <= GREGORIAN_MIN_YEAR:
        return _result("out_of_domain", src, tgt, parsed,
                       reason=f"Gregorian year must be greater than {GREGORIAN_MIN_YEAR}.")
    reason = _check_ranges(value)
    if reason:
        return _result("invalid", src, tgt, parsed, reason=reason)

    jdn = gregorian_to_jdn(value.year, value.month, value.day)
    out = _fmt_yyyy_mm_dd(*jdn_to_hijri(jdn))
    logger.debug("🔁 G→H %s → %s (jdn=%s)", parsed, out, jdn)
    return _result("exact", src, tgt, parsed, date=out)

def convert_hijri_to_gregorian(date: str, fmt: str = DEFAULT_FORMAT) -> ConversionResultTD:
    src, tgt = "hijri", "gregorian"
    value, parsed, reason = _parse_date(date, fmt, src)
    if value is None:
        return _result("invalid", src, tgt, parsed, reason=reason)
    if value.year >= HIJRI_MAX_YEAR:
        return _result("out_of_domain", src, tgt, parsed,
                       reason=f"Hijri year must be less than {HIJRI_MAX_YEAR}.")
    reason = _check_ranges(value)
    if reason:
        return _result("invalid", src, tgt, parsed, reason=reason)

    jdn = hijri_to_jdn(value.year, value.month, value.day)
    out = _fmt_yyyy_mm_dd(*jdn_to_gregorian(jdn))
    logger.debug("🔁 H→G %s → %s (jdn=%s)", parsed, out, jdn)
    return _result("exact", src, tgt, parsed, date=out)

def gregorian_to_hijri(date: str, fmt: str = DEFAULT_FORMAT) -> str:
    """Gregorian date string → Hijri "YYYY-MM-DD", or "" when not convertible."""
    return convert_gregorian_to_hijri(date, fmt)["date"]

def hijri_to_gregorian(date: str, fmt: str = DEFAULT_FORMAT) -> str:
    """Hijri date string → Gregorian "YYYY-MM-DD", or "" when not convertible."""
    return convert_hijri_to_gregorian(date, fmt)["date"]

def test_conversion(gregorian_date: str) -> RoundTripTD:
    """Round trip Gregorian → Hijri → Gregorian and log the three values."""
    hijri = gregorian_to_hijri(gregorian_date)
    back = hijri_to_gregorian(hijri)
    logger.info("Gregorian: %s -> Hijri: %s -> Back to Gregorian: %s", gregorian_date, hijri, back)
    return {"gregorian": gregorian_date, "hijri": hijri, "backToGregorian": back}

# Not a pytest test despite the name.
test_conversion.__test__ = False


if __name__ == "__main__":
    import json

    TESTS = [
        ("g", "2023-08-20", DEFAULT_FORMAT, "Default format"),
        ("g", "20/08/2023", "DD/MM/YYYY", "Day-first with slashes"),
        ("g", "2000-01-01", DEFAULT_FORMAT, "Y2K (tabular 1420-09-24)"),
        ("g", "1700-01-01", DEFAULT_FORMAT, "Out of domain"),
        ("h", "1445-02-04", DEFAULT_FORMAT, "Hijri → Gregorian"),
        ("h", "۱۴۴۵/۰۲/۰۴", "YYYY/MM/DD", "Persian digits"),
        ("h", "14x5-02-04", DEFAULT_FORMAT, "Malformed year"),
    ]

    for idx, (direction, d, f, label) in enumerate(TESTS, 1):
        fn = convert_gregorian_to_hijri if direction == "g" else convert_hijri_to_gregorian
        print("=" * 88)
        print(f"TEST #{idx} - {label}")
        print(json.dumps(fn(d, f), ensure_ascii=False, indent=2))
