"""Tests for the validation engine."""

import pytest

from bcrypt_app.engine.validator import validate_config
from bcrypt_app.models.config import Configuration


def make_config(**overrides) -> Configuration:
    """Helper to create a valid configuration for testing."""
    values = {"cost": "10", "type": "2b", "salt": b"abcdef0123456789"}
    values.update(overrides)
    return Configuration(**values)


def codes(config: Configuration) -> list[str]:
    return [r.code for r in validate_config(config).results]


class TestValidation:
    """Tests for configuration validation."""

    def test_valid_config(self):
        """Test that a valid configuration passes validation."""
        report = validate_config(make_config())
        assert report.valid
        assert report.messages == []

    @pytest.mark.parametrize("cost", ["5", "12", "31"])
    def test_cost_in_range(self, cost):
        assert validate_config(make_config(cost=cost)).valid

    @pytest.mark.parametrize("cost", ["0", "4", "32", "100"])
    def test_cost_out_of_range(self, cost):
        """Test that costs outside 5..31 are rejected."""
        assert codes(make_config(cost=cost)) == ["COST_OUT_OF_RANGE"]

    @pytest.mark.parametrize("cost", ["abc", "10.5", "-7", "", "1e1"])
    def test_cost_not_integer(self, cost):
        """Test that non-integers get a cost-specific error."""
        report = validate_config(make_config(cost=cost))
        assert codes(make_config(cost=cost)) == ["COST_NOT_INTEGER"]
        assert "Cost" in report.messages[0]

    @pytest.mark.parametrize("hash_type", ["2a", "2b", "2x", "2y"])
    def test_known_types(self, hash_type):
        assert validate_config(make_config(type=hash_type)).valid

    @pytest.mark.parametrize("hash_type", ["2", "2c", "2B", "$2b$", ""])
    def test_unknown_type(self, hash_type):
        """Test that only the four bcrypt variants are accepted."""
        report = validate_config(make_config(type=hash_type))
        assert codes(make_config(type=hash_type)) == ["TYPE_UNKNOWN"]
        assert "Type" in report.messages[0]

    @pytest.mark.parametrize(
        "salt",
        [b"", b"short", b"abcdef012345678", b"abcdef0123456789a", ("é" * 16).encode("utf-8")],
    )
    def test_salt_length(self, salt):
        """Test that the salt must be exactly 16 octets."""
        report = validate_config(make_config(salt=salt))
        assert codes(make_config(salt=salt)) == ["SALT_LENGTH"]
        assert str(len(salt)) in report.messages[0]

    def test_multibyte_salt_of_sixteen_octets(self):
        """Test that the length is counted in octets, not characters."""
        assert validate_config(make_config(salt=("é" * 8).encode("utf-8"))).valid

    def test_unencodable_salt(self):
        """Test that an encoding problem is reported instead of the length."""
        config = make_config(
            salt=b"", salt_error="Salt is not valid UTF-8 text (surrogates not allowed)"
        )
        report = validate_config(config)
        assert codes(config) == ["SALT_ENCODING"]
        assert report.messages == ["Salt is not valid UTF-8 text (surrogates not allowed)"]

    def test_all_problems_reported(self):
        """Test that every failing check is reported in one pass."""
        report = validate_config(make_config(cost="4", type="3z", salt=b"short"))
        assert not report.valid
        assert [r.code for r in report.results] == [
            "COST_OUT_OF_RANGE",
            "TYPE_UNKNOWN",
            "SALT_LENGTH",
        ]
        assert [r.field for r in report.results] == ["cost", "type", "salt"]
        assert len(report.messages) == 3
