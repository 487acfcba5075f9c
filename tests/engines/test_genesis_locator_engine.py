import asyncio

import pytest

from mintwatch.engines.genesis_locator_engine import GenesisLocatorEngine
from mintwatch.utils.errors import LocateError

ADDR = "MintAddr"


def locate(ledger, **kw):
    return asyncio.run(GenesisLocatorEngine(ledger, **kw).locate(ADDR))


def test_short_history_single_page(ledger, make_sig):
    ledger.history[ADDR] = [make_sig("c", 300), make_sig("b", 200), make_sig("a", 100)]

    genesis = locate(ledger)

    assert genesis.signature == "a"
    assert genesis.block_time == 100


def test_min_time_wins_over_last_page_item(ledger, make_sig):
    """索引乱序：最后一条不是最早的"""
    ledger.history[ADDR] = [make_sig("c", 300), make_sig("b", 100), make_sig("a", 200)]

    assert locate(ledger).signature == "b"


def test_multi_page_walk_uses_oldest_item(ledger, make_sig):
    ledger.history[ADDR] = [make_sig(f"s{i}", 1000 - i) for i in range(5)]

    genesis = locate(ledger, page_limit=2)

    assert genesis.signature == "s4"
    walk = ledger.calls_for("getSignaturesForAddress")
    # 3 pages back (2, 2, 1) + 1 head page
    assert [c[2] for c in walk] == [None, "s1", "s3", None]


def test_untimestamped_oldest_falls_back_to_head_page(ledger, make_sig):
    ledger.history[ADDR] = [
        make_sig("s0", 500),
        make_sig("s1", 400),
        make_sig("s2", 300),
        make_sig("s3", 200),
        make_sig("s4", None),
    ]

    # candidates = head {s0, s1} ∪ oldest {s4}; s4 has no time
    assert locate(ledger, page_limit=2).signature == "s1"


def test_page_cap_bounds_the_walk(ledger, make_sig):
    ledger.history[ADDR] = [make_sig(f"s{i}", 1000 - i) for i in range(10)]

    genesis = locate(ledger, page_limit=2, max_pages=2)

    assert genesis.signature == "s3"
    assert len(ledger.calls_for("getSignaturesForAddress")) == 3


def test_no_timestamp_anywhere_raises(ledger, make_sig):
    ledger.history[ADDR] = [make_sig("a", None), make_sig("b", None)]

    with pytest.raises(LocateError):
        locate(ledger)


def test_empty_history_raises(ledger):
    with pytest.raises(LocateError):
        locate(ledger)


def test_pick_genesis_keeps_first_on_tie(make_sig):
    a, b = make_sig("a", 10), make_sig("b", 10)

    assert GenesisLocatorEngine.pick_genesis([a, b]) is a
    assert GenesisLocatorEngine.pick_genesis([]) is None
