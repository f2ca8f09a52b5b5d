import pytest

from workbench.restaurant import Breakfast, add_to_waitlist, eat_at_restaurant


def test_summer_breakfast_has_peaches():
    meal = Breakfast.summer("rye")
    assert meal.toast == "rye"
    assert meal.seasonal_fruit == "peaches"


def test_seasonal_fruit_is_read_only():
    meal = Breakfast.summer("rye")
    with pytest.raises(AttributeError):
        meal.seasonal_fruit = "blueberries"
    assert meal.seasonal_fruit == "peaches"


def test_toast_can_change():
    meal = Breakfast.summer("rye")
    meal.toast = "wheat"
    assert meal.toast == "wheat"
    assert meal.seasonal_fruit == "peaches"


def test_waitlist_positions_increase():
    first = add_to_waitlist()
    second = add_to_waitlist()
    assert second == first + 1


def test_eat_at_restaurant(capsys):
    before = add_to_waitlist()
    meal = eat_at_restaurant()
    assert meal.toast == "wheat"
    assert meal.seasonal_fruit == "peaches"
    assert capsys.readouterr().out == "I'd like wheat toast\n"
    assert add_to_waitlist() == before + 3