"""Unit tests for version comparison."""

import pytest

from lathe.core.versions import verify_min_version, version_greater_eq


class TestVersionGreaterEq:
    """Tests for version_greater_eq."""

    @pytest.mark.parametrize(
        "actual, required, expected",
        [
            ("2.0.0", "1.9.9", True),
            ("1.0.0", "1.0.0", True),
            ("1.0.0", "2.0.0", False),
            ("1.4.1", "1.4.0", True),
            ("1.4", "1.4.0", False),
            ("1.4.0", "1.4", True),
            ("1.10.0", "1.9.0", True),
            ("1.9.0", "1.10.0", False),
        ],
    )
    def test_comparison(self, actual, required, expected) -> None:
        """Test numeric comparison of dotted versions."""
        assert version_greater_eq(actual, required) is expected

    def test_qualifier_ignored(self) -> None:
        """Test that everything after the first hyphen is ignored."""
        assert version_greater_eq("1.5.0-SNAPSHOT", "1.5.0")
        assert version_greater_eq("1.5.0", "1.5.0-RC1")


class TestVerifyMinVersion:
    """Tests for verify_min_version."""

    def test_warns_when_too_old(self, log_messages) -> None:
        """Test that an old tool only produces a warning."""
        ok = verify_min_version({"min-lathe-version": "9.0.0"}, "1.4.0")

        assert ok is False
        assert any("requires Lathe version 9.0.0" in m for m in log_messages)

    def test_silent_when_new_enough(self, log_messages) -> None:
        """Test no warning for a satisfied requirement."""
        assert verify_min_version({"min-lathe-version": "1.0.0"}, "1.4.0")
        assert not any("requires Lathe" in m for m in log_messages)

    def test_no_requirement(self) -> None:
        """Test projects that declare no minimum."""
        assert verify_min_version({}, "0.0.1")
