from mintwatch.engines.window.deltas import estimate_volume_lamports, extract_owner_deltas
from mintwatch.rpc.models import TransactionMeta


# ============================================================
# owner deltas
# ============================================================
def test_delta_from_absent_pre_side(make_tx, mint):
    tx = make_tx(post={3: ("A", 50)})

    d = extract_owner_deltas(tx, mint)

    assert d.deltas == {"A": 50}
    assert d.had_movement


def test_delta_from_absent_post_side_uses_pre_owner(make_tx, mint):
    tx = make_tx(pre={1: ("A", 40)})

    d = extract_owner_deltas(tx, mint)

    assert d.deltas == {"A": -40}


def test_owner_prefers_post_record(make_tx, mint):
    tx = make_tx(pre={0: ("OLD", 10)}, post={0: ("NEW", 25)})

    assert extract_owner_deltas(tx, mint).deltas == {"NEW": 15}


def test_index_without_owner_is_skipped(make_tx, mint):
    tx = make_tx(pre={0: (None, 10)}, post={0: (None, 20), 1: ("B", 5)})

    assert extract_owner_deltas(tx, mint).deltas == {"B": 5}


def test_same_owner_multiple_accounts_accumulate(make_tx, mint):
    tx = make_tx(
        pre={0: ("A", 100), 1: ("A", 0)},
        post={0: ("A", 40), 1: ("A", 60)},
    )

    d = extract_owner_deltas(tx, mint)

    # -60 + 60 = 0 → dropped
    assert d.deltas == {}
    assert not d.had_movement


def test_transfer_between_owners(make_tx, mint):
    tx = make_tx(pre={0: ("A", 100), 1: ("B", 0)}, post={0: ("A", 0), 1: ("B", 100)})

    assert extract_owner_deltas(tx, mint).deltas == {"A": -100, "B": 100}


def test_other_mints_are_ignored(make_tx, mint):
    tx = make_tx(post={0: ("A", 999)}, token_mint="SomeOtherMint")

    d = extract_owner_deltas(tx, mint)

    assert d.deltas == {}
    assert not d.had_movement


# ============================================================
# volume heuristic
# ============================================================
def test_volume_min_of_inbound_outbound_without_fee(make_tx):
    tx = make_tx(lamports=[(10, 8), (0, 2)])

    assert estimate_volume_lamports(tx) == 2


def test_fee_subtracted_from_outbound(make_tx):
    # payer -1_005_000 (incl. 5000 fee), pool +1_000_000
    tx = make_tx(fee=5000, lamports=[(2_000_000, 995_000), (0, 1_000_000)])

    assert estimate_volume_lamports(tx) == 1_000_000


def test_fee_not_subtracted_when_outbound_not_greater(make_tx):
    # outbound == fee → left unchanged
    tx = make_tx(fee=5000, lamports=[(10_000, 5_000), (0, 7_000)])

    assert estimate_volume_lamports(tx) == 5000


def test_inbound_smaller_side_wins(make_tx):
    tx = make_tx(fee=0, lamports=[(100, 0), (0, 30)])

    assert estimate_volume_lamports(tx) == 30


def test_no_lamport_change_yields_zero(make_tx):
    tx = make_tx(fee=5000, lamports=[(100, 100), (7, 7)])

    assert estimate_volume_lamports(tx) == 0


def test_mismatched_balance_lengths_use_common_prefix():
    tx = TransactionMeta(fee=0, pre_balances=[10, 0, 0], post_balances=[5, 5])

    assert estimate_volume_lamports(tx) == 5
