import math

import pytest

from pwpulse.volume import (
    DECIBEL_MININFTY,
    VOLUME_INVALID,
    VOLUME_MAX,
    VOLUME_MUTED,
    VOLUME_NORM,
    clamp_volume,
    sw_volume_divide,
    sw_volume_from_db,
    sw_volume_from_linear,
    sw_volume_multiply,
    sw_volume_to_db,
    sw_volume_to_db_string,
    sw_volume_to_linear,
    volume_is_valid,
    volume_to_string,
    volume_to_verbose_string,
)

SAMPLE_VOLUMES = [1, 100, 1000, 20000, VOLUME_NORM // 2, VOLUME_NORM, VOLUME_NORM * 2, 500000]


def test_validity_bounds():
    assert volume_is_valid(VOLUME_MUTED)
    assert volume_is_valid(VOLUME_MAX)
    assert not volume_is_valid(VOLUME_MAX + 1)
    assert not volume_is_valid(VOLUME_INVALID)
    assert not volume_is_valid(-1)


def test_clamp_volume():
    assert clamp_volume(-5) == VOLUME_MUTED
    assert clamp_volume(VOLUME_MAX + 10) == VOLUME_MAX
    assert clamp_volume(VOLUME_NORM) == VOLUME_NORM


def test_multiply_by_norm_is_identity():
    for v in SAMPLE_VOLUMES:
        assert sw_volume_multiply(v, VOLUME_NORM) == v
        assert sw_volume_multiply(VOLUME_NORM, v) == v


def test_multiply_by_muted_is_muted():
    assert sw_volume_multiply(VOLUME_NORM, VOLUME_MUTED) == VOLUME_MUTED


def test_multiply_clips_to_max():
    assert sw_volume_multiply(VOLUME_MAX, VOLUME_MAX) == VOLUME_MAX


def test_multiply_rejects_invalid():
    with pytest.raises(ValueError):
        sw_volume_multiply(VOLUME_INVALID, VOLUME_NORM)


def test_divide_inverse_of_multiply():
    for v in SAMPLE_VOLUMES:
        assert sw_volume_divide(v, VOLUME_NORM) == v
        assert sw_volume_divide(sw_volume_multiply(v, VOLUME_NORM), VOLUME_NORM) == v


def test_divide_by_muted_gives_zero():
    assert sw_volume_divide(VOLUME_NORM, VOLUME_MUTED) == 0


def test_divide_rejects_invalid():
    with pytest.raises(ValueError):
        sw_volume_divide(VOLUME_NORM, VOLUME_INVALID)


def test_linear_fixed_points():
    assert sw_volume_to_linear(VOLUME_NORM) == 1.0
    assert sw_volume_to_linear(VOLUME_MUTED) == 0.0
    assert sw_volume_from_linear(1.0) == VOLUME_NORM
    assert sw_volume_from_linear(0.0) == VOLUME_MUTED
    assert sw_volume_from_linear(-3.0) == VOLUME_MUTED


def test_linear_round_trip():
    for v in SAMPLE_VOLUMES:
        assert sw_volume_from_linear(sw_volume_to_linear(v)) == v


def test_linear_monotonic():
    values = [sw_volume_to_linear(v) for v in SAMPLE_VOLUMES]
    assert values == sorted(values)


def test_from_linear_huge_clamps():
    assert sw_volume_from_linear(math.inf) == VOLUME_MAX
    assert sw_volume_from_linear(1e300) == VOLUME_MAX


def test_to_linear_rejects_invalid():
    with pytest.raises(ValueError):
        sw_volume_to_linear(VOLUME_INVALID)


def test_db_fixed_points():
    assert sw_volume_to_db(VOLUME_NORM) == 0.0
    assert sw_volume_to_db(VOLUME_MUTED) == DECIBEL_MININFTY
    assert sw_volume_from_db(0.0) == VOLUME_NORM
    assert sw_volume_from_db(-math.inf) == VOLUME_MUTED


def test_db_round_trip():
    for v in SAMPLE_VOLUMES:
        assert sw_volume_from_db(sw_volume_to_db(v)) == v


def test_db_sign():
    assert sw_volume_to_db(VOLUME_NORM // 2) < 0.0
    assert sw_volume_to_db(VOLUME_NORM * 2) > 0.0


def test_to_db_rejects_invalid():
    with pytest.raises(ValueError):
        sw_volume_to_db(VOLUME_INVALID)


def test_volume_to_string():
    assert volume_to_string(VOLUME_NORM) == "100%"
    assert volume_to_string(VOLUME_MUTED) == "  0%"
    assert volume_to_string(VOLUME_INVALID) == "(invalid)"


def test_db_string():
    assert sw_volume_to_db_string(VOLUME_NORM) == "0.00 dB"
    assert sw_volume_to_db_string(VOLUME_MUTED) == "-inf dB"
    assert sw_volume_to_db_string(VOLUME_INVALID) == "(invalid)"


def test_verbose_string():
    assert volume_to_verbose_string(VOLUME_NORM, False) == "65536 / 100%"
    assert volume_to_verbose_string(VOLUME_NORM, True) == "65536 / 100% / 0.00 dB"
    assert volume_to_verbose_string(VOLUME_INVALID, True) == "(invalid)"


def test_verbose_string_contains_parts():
    v = VOLUME_NORM // 2
    text = volume_to_verbose_string(v, True)
    assert text.startswith(f"{v} / ")
    assert volume_to_string(v) in text
    assert text.endswith(sw_volume_to_db_string(v))