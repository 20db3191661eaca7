from datetime import datetime, timedelta, timezone

import pytest

from modules.moon_phase import get_moon_info, get_moon_phase, phase_name_for
from modules.moon_phase.calculator import REFERENCE_NEW_MOON, SYNODIC_MONTH_DAYS

PHASE_NAMES = {
    "New Moon", "Waxing Crescent", "First Quarter", "Waxing Gibbous",
    "Full Moon", "Waning Gibbous", "Last Quarter", "Waning Crescent",
}


def test_reference_epoch_is_new_moon():
    info = get_moon_info(datetime(2000, 1, 6, 18, 14, tzinfo=timezone.utc))
    assert info.phase == pytest.approx(0.0, abs=1e-9)
    assert info.phase_name == "New Moon"
    assert info.illumination_percent == 0


def test_naive_datetime_is_treated_as_utc():
    naive = datetime(2024, 3, 10, 12, 0)
    aware = naive.replace(tzinfo=timezone.utc)
    assert get_moon_phase(naive) == get_moon_phase(aware)


def test_half_cycle_after_epoch_is_full_moon():
    when = REFERENCE_NEW_MOON + timedelta(days=SYNODIC_MONTH_DAYS / 2)
    info = get_moon_info(when)
    assert info.phase == pytest.approx(0.5)
    assert info.phase_name == "Full Moon"
    assert info.illumination_percent == 50


def test_dates_before_epoch_normalize_into_unit_interval():
    when = REFERENCE_NEW_MOON - timedelta(days=SYNODIC_MONTH_DAYS / 4)
    phase = get_moon_phase(when)
    assert 0 <= phase < 1
    assert phase == pytest.approx(0.75)
    assert phase_name_for(phase) == "Last Quarter"


@pytest.mark.parametrize("phase, expected", [
    (0.0, "New Moon"),
    (0.0299, "New Moon"),
    (0.03, "Waxing Crescent"),
    (0.2199, "Waxing Crescent"),
    (0.22, "First Quarter"),
    (0.28, "Waxing Gibbous"),
    (0.47, "Full Moon"),
    (0.5299, "Full Moon"),
    (0.53, "Waning Gibbous"),
    (0.72, "Last Quarter"),
    (0.78, "Waning Crescent"),
    (0.97, "Waning Crescent"),
    (0.9701, "New Moon"),
    (0.9999, "New Moon"),
])
def test_phase_boundaries(phase, expected):
    assert phase_name_for(phase) == expected


def test_every_fraction_maps_to_a_known_name():
    for step in range(10000):
        assert phase_name_for(step / 10000) in PHASE_NAMES


def test_illumination_stays_in_range_across_a_year():
    start = datetime(2026, 1, 1, tzinfo=timezone.utc)
    for hours in range(0, 24 * 366, 7):
        info = get_moon_info(start + timedelta(hours=hours))
        assert isinstance(info.illumination_percent, int)
        assert 0 <= info.illumination_percent <= 100
        assert info.phase_name in PHASE_NAMES


def test_moon_info_serializes_with_camel_case_keys():
    data = get_moon_info(REFERENCE_NEW_MOON).model_dump(by_alias=True)
    assert set(data) == {"phase", "phaseName", "illuminationPercent"}
