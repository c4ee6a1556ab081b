"""Tests for sort_cities_array — first-character ordering, in place."""

from object_tasks.core.sort_cities import sort_cities_array


def _records():
    return [
        {"country": "Russia", "city": "Moscow"},
        {"country": "Belarus", "city": "Minsk"},
        {"country": "Poland", "city": "Warsaw"},
        {"country": "Russia", "city": "Saint Petersburg"},
        {"country": "Poland", "city": "Krakow"},
        {"country": "Belarus", "city": "Brest"},
    ]


def test_sorts_by_country_then_city():
    assert sort_cities_array(_records()) == [
        {"country": "Belarus", "city": "Brest"},
        {"country": "Belarus", "city": "Minsk"},
        {"country": "Poland", "city": "Krakow"},
        {"country": "Poland", "city": "Warsaw"},
        {"country": "Russia", "city": "Moscow"},
        {"country": "Russia", "city": "Saint Petersburg"},
    ]


def test_sorts_in_place_and_returns_same_list():
    records = _records()
    result = sort_cities_array(records)
    assert result is records
    assert records[0]["city"] == "Brest"


def test_only_first_character_is_compared():
    """Known limitation: 'Russia' and 'Romania' tie, input order is kept."""
    records = [
        {"country": "Russia", "city": "Omsk"},
        {"country": "Romania", "city": "Oradea"},
    ]
    assert sort_cities_array(records) == [
        {"country": "Russia", "city": "Omsk"},
        {"country": "Romania", "city": "Oradea"},
    ]


def test_city_ties_keep_input_order():
    records = [
        {"country": "Belarus", "city": "Minsk"},
        {"country": "Belarus", "city": "Mogilev"},
    ]
    assert [r["city"] for r in sort_cities_array(records)] == ["Minsk", "Mogilev"]


def test_empty_strings_sort_first():
    records = [{"country": "A", "city": "x"}, {"country": "", "city": "y"}]
    assert sort_cities_array(records)[0]["country"] == ""


def test_empty_list():
    assert sort_cities_array([]) == []
