"""Tests for fix priority derivation."""

import itertools

import pytest

from gym_audit.priority import derive_fix_priority


class TestFixPriority:

    @pytest.mark.parametrize(
        "facilities,imagery", list(itertools.product([True, False], repeat=2))
    )
    def test_missing_join_route_is_always_high(self, facilities, imagery):
        assert derive_fix_priority([facilities, imagery], False) == "High"
        assert derive_fix_priority([imagery, facilities], False) == "High"

    def test_low_only_when_everything_passes(self):
        assert derive_fix_priority([True, True], True) == "Low"

    @pytest.mark.parametrize("verdicts", [[True, False], [False, True]])
    def test_one_failure_is_medium(self, verdicts):
        assert derive_fix_priority(verdicts, True) == "Medium"

    def test_two_failures_is_high(self):
        assert derive_fix_priority([False, False], True) == "High"
