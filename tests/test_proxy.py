from studynotes.patterns.proxy import Boy, Bulb, SchoolGirl


def test_boy_messages():
    boy = Boy(SchoolGirl("娇娇"))
    assert boy.send_flowers() == "娇娇 送你花"
    assert boy.send_chocolate() == "娇娇 送你巧克力"
    assert boy.send_milk() == "娇娇 送你牛奶"


def test_bulb_matches_boy():
    girl = SchoolGirl("娇娇")
    bulb, boy = Bulb(girl), Boy(girl)
    assert bulb.send_flowers() == boy.send_flowers()
    assert bulb.send_chocolate() == boy.send_chocolate()
    assert bulb.send_milk() == boy.send_milk()


def test_bulb_uses_girl_name():
    assert Bulb(SchoolGirl("小美")).send_milk().startswith("小美 ")