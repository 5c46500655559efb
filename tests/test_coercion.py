"""
Tests for field coercion utilities.
"""

import pytest
from utils.coercion import clean_string, coerce_boolean, coerce_number, coerce_field


class TestCleanString:
    """Tests for clean_string."""

    def test_trims_whitespace(self):
        """Test leading and trailing whitespace is removed."""
        assert clean_string('  John Doe  ') == 'John Doe'
        assert clean_string('\tRoom 101\n') == 'Room 101'

    def test_empty_and_blank_strings(self):
        """Test empty and blank strings become empty."""
        assert clean_string('') == ''
        assert clean_string('   ') == ''

    @pytest.mark.parametrize('value', [None, 42, 3.5, True, False, ['a'], {'k': 'v'}])
    def test_non_strings_pass_through(self, value):
        """Test non-string values are returned unchanged."""
        assert clean_string(value) is value


class TestCoerceBoolean:
    """Tests for coerce_boolean."""

    def test_true_values(self):
        """Test only 'true' and True are true."""
        assert coerce_boolean('true') is True
        assert coerce_boolean(True) is True

    @pytest.mark.parametrize('value', ['false', '1', 'True', 'yes', '', 1, 0, None, False])
    def test_everything_else_is_false(self, value):
        """Test other inputs are false."""
        assert coerce_boolean(value) is False


class TestCoerceNumber:
    """Tests for coerce_number."""

    def test_integer_string(self):
        """Test integral strings parse to int."""
        assert coerce_number('42') == 42
        assert isinstance(coerce_number('42'), int)

    def test_decimal_string(self):
        """Test decimal strings parse to float."""
        assert coerce_number('3.5') == 3.5

    def test_whitespace_is_ignored(self):
        """Test surrounding whitespace is ignored."""
        assert coerce_number(' 7 ') == 7

    @pytest.mark.parametrize('value', ['abc', '', '   ', None, '12abc', [], {}])
    def test_unparsable_is_zero(self, value):
        """Test unparsable input defaults to 0."""
        assert coerce_number(value) == 0

    @pytest.mark.parametrize('value', ['nan', 'NaN', 'inf', '-Infinity', float('nan'), float('inf')])
    def test_non_finite_is_zero(self, value):
        """Test NaN and infinities never leak through."""
        assert coerce_number(value) == 0

    def test_numbers_pass_through(self):
        """Test numeric input is kept."""
        assert coerce_number(5) == 5
        assert coerce_number(2.25) == 2.25
        assert coerce_number(-3) == -3

    def test_booleans(self):
        """Test booleans count as 1 and 0."""
        assert coerce_number(True) == 1
        assert coerce_number(False) == 0

    def test_integers_beyond_64_bits_become_float(self):
        """Test integers SQLite cannot hold are stored as floats."""
        assert coerce_number('99999999999999999999') == 1e20
        assert isinstance(coerce_number('99999999999999999999'), float)
        assert coerce_number(-2 ** 70) == float(-2 ** 70)
        assert coerce_number(2 ** 63 - 1) == 2 ** 63 - 1
        assert isinstance(coerce_number(2 ** 63 - 1), int)

    def test_integer_too_large_for_float_is_zero(self):
        """Test integers past the float range default to 0."""
        assert coerce_number('1' + '0' * 400) == 0
        assert coerce_number(10 ** 400) == 0


class TestCoerceField:
    """Tests for classification-driven coercion."""

    BOOLEANS = {'vip'}
    NUMBERS = {'age'}

    def test_dispatch(self):
        """Test each class uses its coercion."""
        assert coerce_field('vip', 'true', self.BOOLEANS, self.NUMBERS) is True
        assert coerce_field('age', '31', self.BOOLEANS, self.NUMBERS) == 31
        assert coerce_field('name', ' Ann ', self.BOOLEANS, self.NUMBERS) == 'Ann'
        assert coerce_field('name', None, self.BOOLEANS, self.NUMBERS) is None
