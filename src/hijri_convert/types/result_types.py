from dataclasses import dataclass
from typing import Literal, TypedDict

CalendarName = Literal["gregorian", "hijri"]
ResultKind = Literal["exact", "out_of_domain", "invalid"]
Direction = Literal["gregorian_to_hijri", "hijri_to_gregorian"]

@dataclass(frozen=True)
class FieldTexts:
    """Raw characters collected for each field, before integer conversion."""
    day: str
    month: str
    year: str

@dataclass(frozen=True)
class CalendarDate:
    year: int
    month: int
    day: int
    calendar: CalendarName

class ConversionResultTD(TypedDict):
    kind: ResultKind
    source_calendar: CalendarName
    target_calendar: CalendarName
    parsed: str           # yyyy-mm-dd, blanks for unparsed parts
    date: str             # YYYY-MM-DD when kind == "exact", else ""
    reason: str
    standard_format: str

class RoundTripTD(TypedDict):
    gregorian: str
    hijri: str
    backToGregorian: str
