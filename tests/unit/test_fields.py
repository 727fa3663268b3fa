"""Unit tests for attribute value coercion."""

from datetime import date

import pytest

from gan_parser.schemas.fields import (
    empty_string_to_none,
    force_to_list,
    force_to_string,
    string_to_bool,
    string_to_date,
    string_to_number,
    year_or_none,
)


class TestStringToNumber:
    """Test decimal string conversion."""

    @pytest.mark.parametrize('value, expected', [
        ('0', 0),
        ('42', 42),
        ('-1', -1),
        ('+7', 7),
        ('64.5', 64.5),
        ('.5', 0.5),
        ('100.0', 100.0),
    ])
    def test_valid_numbers(self, value, expected):
        assert string_to_number(value) == expected

    def test_integer_strings_stay_integers(self):
        assert isinstance(string_to_number('12'), int)

    @pytest.mark.parametrize('value', ['', 'abc', '1,5', '1e3', '1.', '--1', ' 1'])
    def test_invalid_numbers(self, value):
        with pytest.raises(ValueError):
            string_to_number(value)

    def test_non_string_rejected(self):
        with pytest.raises(ValueError):
            string_to_number(None)


class TestStringToBool:
    """Only the exact literals are accepted."""

    def test_literals(self):
        assert string_to_bool('true') is True
        assert string_to_bool('false') is False

    @pytest.mark.parametrize('value', ['True', 'FALSE', '1', '0', 'yes', ''])
    def test_other_values_rejected(self, value):
        with pytest.raises(ValueError):
            string_to_bool(value)


class TestStringToDate:
    """Test ISO and legacy day/month/year dates."""

    def test_iso_date(self):
        assert string_to_date('2024-01-04') == date(2024, 1, 4)

    def test_legacy_date_is_day_month_year(self):
        assert string_to_date('4/1/2024') == date(2024, 1, 4)
        assert string_to_date('31/12/2023') == date(2023, 12, 31)

    def test_formats_agree(self):
        assert string_to_date('10/1/2024') == string_to_date('2024-01-10')

    @pytest.mark.parametrize('value', [
        '2024-13-01',
        '2024-1-4',
        '24-01-04',
        '04/01/2024',
        '4-1-2024',
        '',
        'today',
    ])
    def test_invalid_formats_rejected(self, value):
        with pytest.raises(ValueError):
            string_to_date(value)

    def test_impossible_legacy_date_rejected(self):
        with pytest.raises(ValueError):
            string_to_date('31/2/2024')


class TestContainerHelpers:
    """Test the single-vs-list and empty-element normalizers."""

    def test_force_to_list_wraps_single_node(self):
        node = {'@_id': '1'}
        assert force_to_list(node) == [node]

    def test_force_to_list_keeps_lists(self):
        nodes = [{'@_id': '1'}, {'@_id': '2'}]
        assert force_to_list(nodes) is nodes

    def test_empty_string_to_none(self):
        assert empty_string_to_none('') is None
        assert empty_string_to_none({'a': 1}) == {'a': 1}

    def test_year_or_none(self):
        assert year_or_none('') is None
        assert year_or_none('2024') == 2024
        with pytest.raises(ValueError):
            year_or_none('20x4')

    def test_force_to_string(self):
        assert force_to_string(3) == '3'
        assert force_to_string('text') == 'text'
