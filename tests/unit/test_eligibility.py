"""Unit tests for the assessment cooldown."""

from datetime import datetime, timedelta, timezone

from schoolpulse.users.eligibility import as_utc, can_take_assessment, next_eligible_at

NOW = datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)


class TestCanTakeAssessment:
    def test_never_assessed(self):
        assert can_take_assessment(None, now=NOW) is True

    def test_exactly_seven_days_is_eligible(self):
        assert can_take_assessment(NOW - timedelta(days=7), now=NOW) is True

    def test_just_under_seven_days_is_not(self):
        last = NOW - timedelta(days=6, hours=23, minutes=59)
        assert can_take_assessment(last, now=NOW) is False

    def test_same_instant_is_not(self):
        assert can_take_assessment(NOW, now=NOW) is False

    def test_custom_cooldown(self):
        assert can_take_assessment(NOW - timedelta(days=1), now=NOW, cooldown=timedelta(hours=12)) is True

    def test_naive_datetimes_are_treated_as_utc(self):
        naive = (NOW - timedelta(days=8)).replace(tzinfo=None)
        assert can_take_assessment(naive, now=NOW) is True


class TestNextEligibleAt:
    def test_none_when_never_assessed(self):
        assert next_eligible_at(None) is None

    def test_adds_cooldown(self):
        assert next_eligible_at(NOW) == NOW + timedelta(days=7)

    def test_as_utc_keeps_aware_values(self):
        assert as_utc(NOW) is NOW
