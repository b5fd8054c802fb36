import pytest

from studynotes.patterns.decorator import (
    BeefDecorator,
    EggDecorator,
    Finery,
    Food,
    FoodDecorator,
    FoodNoodle,
    FoodRice,
    HamDecorator,
    Jeans,
    Person,
    TShirt,
)


def test_base_dishes():
    assert FoodRice().describe() == "米饭"
    assert FoodRice().price == 2.5
    assert FoodNoodle().describe() == "面条"
    assert FoodNoodle().price == 6.6


def test_egg_on_rice():
    dish = EggDecorator(FoodRice())
    assert dish.describe() == "米饭+鸡蛋"
    assert dish.price == pytest.approx(3.0)


def test_stacked_toppings_order_and_price():
    dish = BeefDecorator(HamDecorator(FoodNoodle()))
    assert dish.describe() == "面条+火腿+牛肉"
    assert dish.price == pytest.approx(21.6)


@pytest.mark.parametrize(
    "decorator, extra", [(EggDecorator, 0.5), (BeefDecorator, 10), (HamDecorator, 5)]
)
def test_each_topping_adds_its_extra(decorator, extra):
    inner = FoodNoodle()
    assert decorator(inner).price - inner.price == pytest.approx(extra)


def test_plain_decorator_delegates():
    rice = FoodRice()
    wrapped = FoodDecorator(rice)
    assert wrapped.describe() == rice.describe()
    assert wrapped.price == rice.price


def test_food_is_abstract():
    with pytest.raises(TypeError):
        Food()


def test_person_show():
    assert Person("小菜").show() == "装饰的小菜"


def test_clothes_wrap_in_order():
    person = Person("小菜")
    jeans = Jeans()
    jeans.decorate(person)
    shirt = TShirt()
    shirt.decorate(jeans)
    assert shirt.show() == "白T恤 牛仔裤 装饰的小菜"


def test_undecorated_finery_shows_nothing():
    assert Finery().show() == ""