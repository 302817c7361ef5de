"""
Tests for domain model validation.
"""

import pytest
from pydantic import ValidationError

from app.domain.models import UserPreferences


class TestUserPreferences:

    def test_default_timer_presets(self):
        assert UserPreferences().timer_presets == [15, 30, 60]

    @pytest.mark.parametrize("presets", [[0], [15, -5]])
    def test_timer_presets_must_be_positive(self, presets):
        with pytest.raises(ValidationError):
            UserPreferences(timer_presets=presets)

    def test_frame_interval_bounds(self):
        with pytest.raises(ValidationError):
            UserPreferences(frame_interval_ms=5)
