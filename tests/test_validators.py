"""
Tests for input validation utilities.
"""

import pytest
from utils.validators import (
    validate_email,
    validate_price,
    validate_quantity,
    sanitize_input
)


class TestValidateEmail:
    """Tests for email validation."""

    def test_valid_email(self):
        """Test valid email formats."""
        assert validate_email('user@example.com') is True
        assert validate_email('user.name@example.com') is True
        assert validate_email('user+tag@example.co.uk') is True
        assert validate_email('john@john.john') is True

    def test_single_label_host_is_valid(self):
        """Browsers accept hosts without a TLD, so do we."""
        assert validate_email('Eli@gmail') is True

    def test_invalid_email(self):
        """Test invalid email formats."""
        assert validate_email('') is False
        assert validate_email(None) is False
        assert validate_email('invalid') is False
        assert validate_email('@nodomain.com') is False
        assert validate_email('spaces in@email.com') is False
        assert validate_email('user@-example.com') is False
        assert validate_email('a@' + 'b' * 260) is False


class TestValidateNumbers:
    """Tests for price and quantity validation."""

    @pytest.mark.parametrize('price', [0, 0.0, 4.5, '4.50', 100])
    def test_valid_prices(self, price):
        assert validate_price(price) is True

    @pytest.mark.parametrize('price', [-0.01, 'free', None, '', float('inf'), 'inf', float('nan')])
    def test_invalid_prices(self, price):
        assert validate_price(price) is False

    @pytest.mark.parametrize('quantity', [1, 2, '3', 10.0])
    def test_valid_quantities(self, quantity):
        assert validate_quantity(quantity) is True

    @pytest.mark.parametrize('quantity', [0, -1, 1.5, 'two', None, float('inf')])
    def test_invalid_quantities(self, quantity):
        assert validate_quantity(quantity) is False


class TestSanitizeInput:
    """Tests for input sanitization."""

    def test_strips_whitespace(self):
        assert sanitize_input('  John  ') == 'John'

    def test_empty_values(self):
        assert sanitize_input('') == ''
        assert sanitize_input(None) == ''
