"""Unit tests for settings validation."""

import pytest
from pydantic import ValidationError

from liftout.config import (
    InvitationSettings,
    MatchingSettings,
    RecommendationThresholds,
    Settings,
)


class TestMatchingSettings:
    """Tests for scoring weight validation."""

    def test_defaults_sum_to_one_hundred(self):
        settings = MatchingSettings()

        assert sum(settings.team_weights.values()) == 100
        assert sum(settings.opportunity_weights.values()) == 100

    def test_weights_must_sum_to_one_hundred(self):
        weights = dict(MatchingSettings().team_weights, skills=40)

        with pytest.raises(ValidationError, match="sum to 100"):
            MatchingSettings(team_weights=weights)

    def test_unknown_factor_is_rejected(self):
        weights = dict(MatchingSettings().opportunity_weights)
        weights["vibes"] = weights.pop("urgency")

        with pytest.raises(ValidationError, match="Unknown scoring factors"):
            MatchingSettings(opportunity_weights=weights)

    def test_negative_weight_is_rejected(self):
        weights = dict(MatchingSettings().team_weights, skills=-10, industry=60)

        with pytest.raises(ValidationError, match="non-negative"):
            MatchingSettings(team_weights=weights)

    def test_thresholds_must_descend(self):
        with pytest.raises(ValidationError):
            RecommendationThresholds(excellent=70, good=70, fair=55)


class TestInvitationSettings:
    def test_token_entropy_floor(self):
        with pytest.raises(ValidationError):
            InvitationSettings(token_bytes=8)


class TestSettings:
    """Tests for derived API settings."""

    def test_development_urls(self):
        settings = Settings(environment="development")

        assert settings.api.base_url == "http://localhost:8000"
        assert settings.api.frontend_url == "http://localhost:3000"

    def test_production_urls(self):
        settings = Settings(
            environment="production",
            host="api.liftout.com",
            frontend_host="liftout.com",
        )

        assert settings.api.base_url == "https://api.liftout.com"
        assert settings.api.frontend_url == "https://liftout.com"
