from harbourpoly.bank import Bank


def test_starting_amount():
    assert Bank().amount == 100000


def test_give_and_take_round_trip():
    bank = Bank()
    start = bank.amount
    bank.give_money(250)
    assert bank.amount > start
    bank.take_money(250)
    assert bank.amount == start


def test_take_can_go_negative():
    bank = Bank(amount=10)
    bank.take_money(30)
    assert bank.amount < 0