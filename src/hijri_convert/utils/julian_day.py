import logging
import math
from typing import Tuple

logger = logging.getLogger(__name__)

'''
Julian Day Number (JDN) arithmetic shared by both conversion directions.

The JDN is a continuous integer day count used as the pivot between the
Gregorian (or, before 1582-10-15, Julian) calendar and the tabular Hijri
calendar. The Hijri side is the Kuwaiti-algorithm arithmetic model: a fixed
30-year leap cycle, NOT an astronomically verified moon-sighting calendar,
so it can differ by a day or two from observed or Umm al-Qura dates.

Every division goes through `int_part` on a float quotient. The formulas are
only correct with its truncate-toward-zero semantics, so do not replace them
with `//`.
'''

EPSILON = 0.0000001

# Last JDN of the Julian calendar (1582-10-04); 2299161 is 1582-10-15 Gregorian.
GREGORIAN_CUTOVER_JDN = 2299160
HIJRI_EPOCH_JDN = 1948440

YMD = Tuple[int, int, int]


def int_part(x: float) -> int:
    """Integer part of `x`, tolerant of floating point noise.

    Negative values round toward zero (ceil), non-negative ones toward zero
    (floor); the epsilon bias absorbs division error such as 2.9999999997.
    """
    if x < -EPSILON:
        return math.ceil(x - EPSILON)
    return math.floor(x + EPSILON)


def _is_gregorian(year: int, month: int, day: int) -> bool:
    return (
        year > 1582
        or (year == 1582 and month > 10)
        or (year == 1582 and month == 10 and day > 14)
    )


# -----------------------------
# Gregorian / Julian side
# -----------------------------

def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    y, m, d = year, month, day
    if _is_gregorian(y, m, d):
        a = int_part((m - 14) / 12)
        jdn = (
            int_part((1461 * (y + 4800 + a)) / 4)
            + int_part((367 * (m - 2 - 12 * a)) / 12)
            - int_part((3 * int_part((y + 4900 + a) / 100)) / 4)
            + d
            - 32075
        )
    else:
        jdn = (
            367 * y
            - int_part((7 * (y + 5001 + int_part((m - 9) / 7))) / 4)
            + int_part((275 * m) / 9)
            + d
            + 1729777
        )
    logger.debug("📅 gregorian_to_jdn: %s-%s-%s → %s", y, m, d, jdn)
    return jdn


def jdn_to_gregorian(jdn: int) -> YMD:
    if jdn > GREGORIAN_CUTOVER_JDN:
        # Fliegel–Van Flandern
        l = jdn + 68569
        n = int_part((4 * l) / 146097)
        l = l - int_part((146097 * n + 3) / 4)
        i = int_part((4000 * (l + 1)) / 1461001)
        l = l - int_part((1461 * i) / 4) + 31
        j = int_part((80 * l) / 2447)
        day = l - int_part((2447 * j) / 80)
        l = int_part(j / 11)
        month = j + 2 - 12 * l
        year = 100 * (n - 49) + i + l
    else:
        # Julian calendar inverse
        j = jdn + 1402
        k = int_part((j - 1) / 1461)
        l = j - 1461 * k
        n = int_part((l - 1) / 365) - int_part(l / 1461)
        i = l - 365 * n + 30
        j = int_part((80 * i) / 2447)
        day = i - int_part((2447 * j) / 80)
        i = int_part(j / 11)
        month = j + 2 - 12 * i
        year = 4 * k + n + i - 4716
    logger.debug("📅 jdn_to_gregorian: %s → %s-%s-%s", jdn, year, month, day)
    return year, month, day


# -----------------------------
# Hijri side
# -----------------------------

def hijri_to_jdn(year: int, month: int, day: int) -> int:
    y, m, d = year, month, day
    jdn = (
        int_part((11 * y + 3) / 30)
        + 354 * y
        + 30 * m
        - int_part((m - 1) / 2)
        + d
        + HIJRI_EPOCH_JDN
        - 385
    )
    logger.debug("🌙 hijri_to_jdn: %s-%s-%s → %s", y, m, d, jdn)
    return jdn


def jdn_to_hijri(jdn: int) -> YMD:
    l = jdn - HIJRI_EPOCH_JDN + 10632
    n = int_part((l - 1) / 10631)
    l = l - 10631 * n + 354
    j = (
        int_part((10985 - l) / 5316) * int_part((50 * l) / 17719)
        + int_part(l / 5670) * int_part((43 * l) / 15238)
    )
    l = (
        l
        - int_part((30 - j) / 15) * int_part((17719 * j) / 50)
        - int_part(j / 16) * int_part((15238 * j) / 43)
        + 29
    )
    month = int_part((24 * l) / 709)
    day = l - int_part((709 * month) / 24)
    year = 30 * n + j - 30
    logger.debug("🌙 jdn_to_hijri: %s → %s-%s-%s", jdn, year, month, day)
    return year, month, day
