from pathlib import Path

from data.portfolio import HoldingStore
from portfolio import Holding, parse_number
from services.logging import log_error


def add_holding(
    store: HoldingStore, symbol: str, quantity: str, buy_price: str
) -> tuple[bool, str]:
    """Parse the add-stock form and append the new holding to ``store``."""

    sym = symbol.strip().upper()
    if not sym:
        msg = "Symbol is required."
        log_error(msg)
        return False, msg
    try:
        qty = parse_number(quantity)
        price = parse_number(buy_price)
    except ValueError:
        msg = "Invalid input."
        log_error(f"{msg} quantity={quantity!r} buy_price={buy_price!r}")
        return False, msg

    store.add(Holding(sym, qty, price))
    return True, f"Added {qty:g} shares of {sym} at {price:.4f}."


def update_price(store: HoldingStore, symbol: str, price: str) -> tuple[bool, str]:
    """Set the current price of the first holding matching ``symbol``."""

    sym = symbol.strip()
    if not sym:
        return False, ""
    if store.find_by_symbol(sym) is None:
        msg = "Stock not found."
        log_error(f"{msg} ({sym.upper()})")
        return False, msg
    try:
        new_price = parse_number(price)
    except ValueError:
        msg = "Invalid price."
        log_error(f"{msg} {price!r}")
        return False, msg

    if not store.update_price(sym, new_price):
        # removed by another callback between the lookup and the update
        msg = "Stock not found."
        log_error(f"{msg} ({sym.upper()})")
        return False, msg
    return True, f"Updated {sym.upper()} to {new_price:.4f}."


def remove_holding(store: HoldingStore, symbol: str) -> tuple[bool, str]:
    """Remove the first holding matching ``symbol``."""

    sym = symbol.strip()
    if not sym:
        return False, ""
    if not store.remove_by_symbol(sym):
        msg = "Stock not found."
        log_error(f"{msg} ({sym.upper()})")
        return False, msg
    return True, f"Removed {sym.upper()}."


def save_portfolio(store: HoldingStore) -> tuple[bool, str]:
    """Write ``store`` to its data file."""

    try:
        path = store.save_to_file()
    except OSError as exc:
        msg = f"Save failed: {exc}"
        log_error(msg)
        return False, msg
    return True, f"Saved to {path.resolve()}"


def load_portfolio(store: HoldingStore) -> tuple[bool, str]:
    """Replace the holdings in ``store`` with its data file contents."""

    try:
        path = store.load_from_file()
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Load failed: {exc}"
        log_error(msg)
        return False, msg
    return True, f"Loaded from {path.resolve()}"


def export_portfolio(store: HoldingStore, destination: str | Path) -> tuple[bool, str]:
    """Export ``store`` as CSV to ``destination``."""

    if not str(destination).strip():
        return False, "Enter a destination file."
    try:
        path = store.export_csv(Path(str(destination).strip()))
    except OSError as exc:
        msg = f"Export failed: {exc}"
        log_error(msg)
        return False, msg
    return True, f"Exported to {path.resolve()}"
