import pytest

from harbourpoly.dialogs import DialogBox, DialogBoxes


def test_confirm_click():
    box = DialogBox("Are you sure to quit?", "YES", "NO")
    box.update((720, 340), True)
    assert box.confirm
    assert not box.cancel


def test_cancel_click():
    box = DialogBox("Are you sure to quit?", "YES", "NO")
    box.update((720, 410), True)
    assert box.cancel
    assert not box.confirm


def test_single_button_box():
    box = DialogBox("Note", "OK")
    assert set(box.buttons) == {"YES"}
    box.update((720, 370), True)
    assert box.confirm
    assert not box.cancel


def test_reset_state():
    box = DialogBox("Are you sure to quit?", "YES", "NO")
    box.active = True
    box.update((720, 340), True)
    box.reset_state()
    assert (box.active, box.confirm, box.cancel) == (False, False, False)


def test_boxes_texts():
    boxes = DialogBoxes()
    assert boxes["EXIT"].text == "Are you sure to quit?"
    assert boxes["INCOME_TAX"].buttons["YES"].text == "$200"
    assert boxes["INCOME_TAX"].buttons["NO"].text == "10%"


def test_only_active_boxes_update():
    boxes = DialogBoxes()
    boxes.set_active("INCOME_TAX", True)
    boxes.update((720, 340), True)
    assert boxes.is_active("INCOME_TAX")
    assert boxes.is_confirm("INCOME_TAX")
    assert not boxes.is_confirm("EXIT")


def test_boxes_cancel_and_reset():
    boxes = DialogBoxes()
    boxes.set_active("EXIT", True)
    boxes.update((720, 410), True)
    assert boxes.is_cancel("EXIT")
    boxes.reset_state("EXIT")
    assert not boxes.is_cancel("EXIT")
    assert not boxes.is_active("EXIT")


def test_unknown_box():
    boxes = DialogBoxes()
    with pytest.raises(KeyError):
        boxes["MISSING"]
    with pytest.raises(KeyError):
        boxes.is_active("MISSING")