from studynotes.patterns.prototype import Resume


def _resume():
    resume = Resume("大鸟")
    resume.set_personal_info("男", "29")
    resume.set_work_experience("1998-2000", "XX公司")
    return resume


def test_display_format():
    assert _resume().display() == "大鸟 男 29 工作经历: 1998-2000 XX公司"


def test_clone_is_equal_copy():
    original = _resume()
    duplicate = original.clone()
    assert duplicate is not original
    assert duplicate.display() == original.display()


def test_changing_clone_leaves_original():
    original = _resume()
    before = original.display()
    duplicate = original.clone()
    duplicate.set_work_experience("2000-2003", "YY企业")
    assert original.display() == before
    assert duplicate.company == "YY企业"


def test_fresh_resume_has_empty_fields():
    assert Resume("小菜").display() == "小菜   工作经历:  "