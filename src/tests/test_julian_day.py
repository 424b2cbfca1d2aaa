# test_julian_day.py
# pytest-style tests for the JDN primitives.

from hijri_convert.utils.julian_day import (
    GREGORIAN_CUTOVER_JDN,
    HIJRI_EPOCH_JDN,
    gregorian_to_jdn,
    hijri_to_jdn,
    int_part,
    jdn_to_gregorian,
    jdn_to_hijri,
)


# --------------------------- int_part ---------------------------

def test_int_part_truncates_toward_zero():
    assert int_part(2.75) == 2
    assert int_part(-0.5) == 0
    assert int_part(-1.0833) == -1
    assert int_part(-2.75) == -2
    assert int_part(0) == 0


def test_int_part_absorbs_float_noise():
    assert int_part(2.99999999999) == 3
    assert int_part(-2.99999999999) == -3
    assert int_part(3 * (1 / 3)) == 1


# --------------------------- Gregorian side ---------------------------

def test_gregorian_to_jdn_known_days():
    assert gregorian_to_jdn(2000, 1, 1) == 2451545
    assert gregorian_to_jdn(2023, 8, 20) == 2460177


def test_jdn_to_gregorian_known_days():
    assert jdn_to_gregorian(2451545) == (2000, 1, 1)
    assert jdn_to_gregorian(2460178) == (2023, 8, 21)


def test_cutover_is_continuous():
    # Julian 1582-10-04 is followed directly by Gregorian 1582-10-15.
    last_julian = gregorian_to_jdn(1582, 10, 4)
    first_gregorian = gregorian_to_jdn(1582, 10, 15)
    assert last_julian == GREGORIAN_CUTOVER_JDN
    assert first_gregorian == last_julian + 1


def test_cutover_inverse_picks_right_branch():
    assert jdn_to_gregorian(GREGORIAN_CUTOVER_JDN) == (1582, 10, 4)
    assert jdn_to_gregorian(GREGORIAN_CUTOVER_JDN + 1) == (1582, 10, 15)


def test_gregorian_jdn_inverse_across_a_century():
    start = gregorian_to_jdn(1900, 1, 1)
    for jdn in range(start, start + 36525, 37):
        assert gregorian_to_jdn(*jdn_to_gregorian(jdn)) == jdn


def test_julian_branch_inverse():
    start = gregorian_to_jdn(1000, 3, 1)
    for jdn in range(start, start + 3000, 11):
        y, m, d = jdn_to_gregorian(jdn)
        assert gregorian_to_jdn(y, m, d) == jdn


# --------------------------- Hijri side ---------------------------

def test_hijri_epoch():
    assert hijri_to_jdn(1, 1, 1) == HIJRI_EPOCH_JDN
    assert jdn_to_hijri(HIJRI_EPOCH_JDN) == (1, 1, 1)


def test_hijri_known_days():
    assert hijri_to_jdn(1420, 9, 24) == 2451545
    assert hijri_to_jdn(1445, 2, 1) == 2460175
    assert jdn_to_hijri(2460177) == (1445, 2, 3)


def test_hijri_month_lengths_alternate():
    # Odd months have 30 days, even months 29 (except a leap Dhu al-Hijjah).
    assert hijri_to_jdn(1445, 2, 1) - hijri_to_jdn(1445, 1, 1) == 30
    assert hijri_to_jdn(1445, 3, 1) - hijri_to_jdn(1445, 2, 1) == 29


def test_hijri_jdn_inverse_over_one_cycle():
    # One 30-year cycle covers every leap-year position.
    start = hijri_to_jdn(1440, 1, 1)
    end = hijri_to_jdn(1470, 1, 1)
    assert end - start == 10631
    for jdn in range(start, end, 7):
        assert hijri_to_jdn(*jdn_to_hijri(jdn)) == jdn
