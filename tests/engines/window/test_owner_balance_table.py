from mintwatch.engines.window.balances import OwnerBalanceTable


def test_add_positive_balance():
    t = OwnerBalanceTable()
    t.add("A", 50)

    assert t.get("A") == 50
    assert "A" in t.as_dict()
    assert t.holder_count() == 1


def test_balance_reaching_zero_is_removed_not_stored():
    t = OwnerBalanceTable()
    t.add("A", 100)
    t.add("A", -100)

    assert "A" not in t.as_dict()
    assert t.holder_count() == 0
    assert t.get("A") == 0


def test_negative_balance_never_stored():
    """卖出量大于已知持仓（窗口前就持有）时，不能出现负数条目"""
    t = OwnerBalanceTable()
    t.add("A", -30)

    assert "A" not in t.as_dict()
    assert t.as_dict() == {}


def test_invariant_holds_after_every_apply():
    t = OwnerBalanceTable()
    steps = [
        {"A": 10, "B": 5},
        {"A": -10, "B": 3, "C": -1},
        {"C": 7, "B": -8},
        {"A": 2},
    ]
    for deltas in steps:
        t.apply(deltas)
        assert all(v > 0 for v in t.as_dict().values())

    assert t.as_dict() == {"C": 7, "A": 2}


def test_total_and_get_none():
    t = OwnerBalanceTable()
    t.apply({"A": 10 ** 30, "B": 1})

    assert t.total() == 10 ** 30 + 1
    assert t.get(None) == 0
