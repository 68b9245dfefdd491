"""Tests for difficulty levels and workout timings."""

import pytest
from pydantic import ValidationError

from plankflow.workouts.errors import InvalidLevelError, InvalidTimeScaleError
from plankflow.workouts.levels import (
    LEVEL_LABELS,
    MIN_EXERCISE_TICKS,
    WorkoutConfig,
    config_from_level,
    level_label,
    to_ticks,
    validate_time_scale,
)


@pytest.mark.parametrize(
    ("level", "exercise", "short_break", "long_break"),
    [
        (0, 35, 20, 70),
        (1, 40, 18, 65),
        (2, 45, 15, 60),
        (3, 60, 12, 50),
        (4, 70, 10, 45),
    ],
)
def test_config_from_level_table(level, exercise, short_break, long_break):
    config = config_from_level(level)
    assert config.exercise_duration == exercise
    assert config.short_break == short_break
    assert config.long_break == long_break
    # Deterministic
    assert config_from_level(level) == config


def test_harder_levels_hold_longer_and_rest_less():
    configs = [config_from_level(level) for level in range(len(LEVEL_LABELS))]
    for easier, harder in zip(configs, configs[1:]):
        assert harder.exercise_duration > easier.exercise_duration
        assert harder.short_break < easier.short_break
        assert harder.long_break < easier.long_break


@pytest.mark.parametrize("level", [-1, 5, 42])
def test_invalid_level_rejected(level):
    with pytest.raises(InvalidLevelError) as exc_info:
        config_from_level(level)
    assert exc_info.value.level == level
    # Still a ValueError for callers that only know the builtin
    assert isinstance(exc_info.value, ValueError)


def test_level_labels():
    assert level_label(0) == "Beginner"
    assert level_label(2) == "Intermediate"
    assert level_label(4) == "Expert"


def test_to_ticks_rounds_up():
    assert to_ticks(45) == 45
    assert to_ticks(45, 0.5) == 23
    assert to_ticks(10, 0.01) == 1
    assert to_ticks(0, 0.5) == 0


def test_break_duration_long_only_before_last():
    config = config_from_level(2)
    assert [config.break_duration(i, 10) for i in range(9)] == [15] * 8 + [60]
    assert config.break_ticks(8, 10) == 60


def test_scaled_config_ticks():
    config = config_from_level(1, time_scale=0.1, countdown=3)
    assert config.exercise_ticks == 4
    assert config.countdown_ticks == 1
    assert config.break_ticks(0, 10) == 2


def test_config_rejects_non_positive_scale():
    with pytest.raises(ValueError):
        WorkoutConfig(exercise_duration=45, short_break=15, long_break=60, time_scale=0)


def test_config_rejects_scale_too_small_to_switch_sides():
    # 35s at 0.05 is 2 ticks, no tick left between halfway and the end
    with pytest.raises(ValidationError):
        config_from_level(0, time_scale=0.05)
    assert config_from_level(2, time_scale=0.05).exercise_ticks == MIN_EXERCISE_TICKS


@pytest.mark.parametrize("time_scale", [0, -1, 0.04, 0.05])
def test_validate_time_scale_rejects(time_scale):
    with pytest.raises(InvalidTimeScaleError) as exc_info:
        validate_time_scale(time_scale)
    assert exc_info.value.time_scale == time_scale
    assert exc_info.value.minimum_ticks == MIN_EXERCISE_TICKS


def test_validate_time_scale_per_exercise_duration():
    assert validate_time_scale(0.06) == 0.06
    assert validate_time_scale(0.05, exercise_duration=45) == 0.05
    with pytest.raises(InvalidTimeScaleError):
        validate_time_scale(0.05, exercise_duration=35)
