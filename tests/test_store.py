import threading

import pandas as pd
import pytest

from data.portfolio import HoldingStore
from portfolio import Holding


@pytest.fixture
def store(tmp_path):
    return HoldingStore(tmp_path / "portfolio.txt")


def test_list_returns_independent_snapshot(store):
    store.add(Holding("AAPL", 10, 100.0))
    snapshot = store.list()
    snapshot.clear()
    assert len(store) == 1
    assert len(store.list()) == 1


def test_find_by_symbol_is_case_insensitive(store):
    store.add(Holding("aapl", 10, 100.0))
    found = store.find_by_symbol("AAPL")
    assert found is not None
    assert found.symbol == "AAPL"
    assert store.find_by_symbol("aApL") is found
    assert store.find_by_symbol("MSFT") is None


def test_duplicates_resolve_to_first_insertion(store):
    first = Holding("AAPL", 1, 10.0)
    second = Holding("AAPL", 1, 10.0)
    store.add(first)
    store.add(second)
    assert store.find_by_symbol("aapl") is first
    assert store.remove_by_symbol("aapl")
    remaining = store.list()
    assert len(remaining) == 1
    assert remaining[0] is second


def test_remove_absent_symbol_leaves_store_unchanged(store):
    holdings = [Holding("AAPL", 1, 1.0), Holding("MSFT", 2, 2.0)]
    for h in holdings:
        store.add(h)
    assert store.remove_by_symbol("GOOG") is False
    assert store.list() == holdings


def test_update_price_changes_first_match(store):
    store.add(Holding("AAPL", 10, 100.0))
    assert store.update_price("aapl", 150.0)
    assert store.find_by_symbol("AAPL").market_value() == 1500.0
    assert store.update_price("MSFT", 1.0) is False


def test_save_and_load_round_trip(store):
    store.add(Holding("AAPL", 10, 100.0, 150.0))
    store.add(Holding("msft", 2.5, 300.25))
    store.save_to_file()

    assert store.path.read_text(encoding="utf-8") == (
        "AAPL|10.0|100.0|150.0\nMSFT|2.5|300.25|300.25\n"
    )

    reloaded = HoldingStore(store.path)
    reloaded.load_from_file()
    assert reloaded.list() == store.list()


def test_save_to_explicit_path(store, tmp_path):
    store.add(Holding("AAPL", 1, 2.0))
    target = store.save_to_file(tmp_path / "other.txt")
    assert target.read_text(encoding="utf-8") == "AAPL|1.0|2.0|2.0\n"
    assert not store.path.exists()


def test_save_truncates_existing_file(store):
    store.path.write_text("OLD|1|1|1\nOLDER|2|2|2\n", encoding="utf-8")
    store.add(Holding("NEW", 1, 1.0))
    store.save_to_file()
    assert store.path.read_text(encoding="utf-8") == "NEW|1.0|1.0|1.0\n"


def test_save_to_unwritable_path_raises(store, tmp_path):
    with pytest.raises(OSError):
        store.save_to_file(tmp_path / "missing" / "portfolio.txt")


def test_load_skips_malformed_lines(store):
    store.path.write_text("AAPL|10|100|150\nnot a holding\n", encoding="utf-8")
    store.load_from_file()
    holdings = store.list()
    assert len(holdings) == 1
    assert holdings[0] == Holding("AAPL", 10, 100.0, 150.0)


def test_load_missing_file_clears_store(store):
    store.add(Holding("AAPL", 1, 1.0))
    store.load_from_file()
    assert store.list() == []


def test_load_replaces_existing_holdings(store):
    store.path.write_text("MSFT|1|2|3\n", encoding="utf-8")
    store.add(Holding("AAPL", 1, 1.0))
    store.load_from_file()
    assert [h.symbol for h in store.list()] == ["MSFT"]


def test_export_csv_formats_four_decimals(store, tmp_path):
    store.add(Holding("AAPL", 10, 100.0))
    store.update_price("AAPL", 150.0)
    target = tmp_path / "export.csv"
    store.export_csv(target)

    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines == [
        "Symbol,Quantity,BuyPrice,CurrentPrice,MarketValue,Invested,ProfitLoss",
        "AAPL,10.0000,100.0000,150.0000,1500.0000,1000.0000,500.0000",
    ]


def test_export_csv_preserves_order_and_negative_pnl(store, tmp_path):
    store.add(Holding("ZZZ", 2, 10.0, 7.5))
    store.add(Holding("AAA", 1, 1.0))
    target = tmp_path / "export.csv"
    store.export_csv(target)

    df = pd.read_csv(target)
    assert df["Symbol"].tolist() == ["ZZZ", "AAA"]
    assert df.loc[0, "ProfitLoss"] == pytest.approx(-5.0)


def test_export_empty_store_writes_header_only(store, tmp_path):
    target = tmp_path / "export.csv"
    store.export_csv(target)
    assert target.read_text(encoding="utf-8") == (
        "Symbol,Quantity,BuyPrice,CurrentPrice,MarketValue,Invested,ProfitLoss\n"
    )


def test_to_csv_matches_export(store, tmp_path):
    store.add(Holding("AAPL", 3, 1.5, 2.0))
    target = tmp_path / "export.csv"
    store.export_csv(target)
    assert store.to_csv() == target.read_text(encoding="utf-8")


def test_export_never_leaves_numeric_fields_blank(store, tmp_path):
    store.add(Holding("AAPL", float("nan"), 100.0))
    expected_row = "AAPL,NaN,100.0000,100.0000,NaN,NaN,NaN"

    assert store.to_csv().splitlines()[1] == expected_row
    target = tmp_path / "export.csv"
    store.export_csv(target)
    assert ",," not in target.read_text(encoding="utf-8")
    assert target.read_text(encoding="utf-8").splitlines()[1] == expected_row


def test_operations_wait_for_the_store_lock(store):
    store.add(Holding("AAPL", 1, 1.0))

    def replace_holding():
        store.add(Holding("MSFT", 2, 2.0))
        store.remove_by_symbol("AAPL")

    worker = threading.Thread(target=replace_holding)
    store._lock.acquire()
    try:
        worker.start()
        worker.join(timeout=0.2)
        assert worker.is_alive()
        # the lock is reentrant, so this thread can still read
        assert [h.symbol for h in store.list()] == ["AAPL"]
    finally:
        store._lock.release()

    worker.join(timeout=5)
    assert not worker.is_alive()
    assert [h.symbol for h in store.list()] == ["MSFT"]
