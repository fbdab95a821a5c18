import threading
from pathlib import Path
from typing import Optional

from config import CSV_FLOAT_FORMAT
from portfolio import Holding, holdings_frame


class HoldingStore:
    """Ordered, in-memory list of holdings backed by a flat file.

    Every public method holds the store lock for its whole duration, so a
    Streamlit callback and the render pass never interleave.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._holdings: list[Holding] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._holdings)

    def add(self, holding: Holding) -> None:
        """Append ``holding``; duplicate symbols are allowed."""

        with self._lock:
            self._holdings.append(holding)

    def list(self) -> list[Holding]:
        """Return a snapshot of the holdings in insertion order."""

        with self._lock:
            return list(self._holdings)

    def find_by_symbol(self, symbol: str) -> Optional[Holding]:
        """Return the first holding whose symbol matches, ignoring case."""

        with self._lock:
            return self._find(symbol)

    def remove_by_symbol(self, symbol: str) -> bool:
        """Remove the first case-insensitive match and report whether one existed."""

        with self._lock:
            holding = self._find(symbol)
            if holding is None:
                return False
            # identity, not equality: duplicates compare equal as dataclasses
            idx = next(i for i, h in enumerate(self._holdings) if h is holding)
            del self._holdings[idx]
            return True

    def update_price(self, symbol: str, price: float) -> bool:
        """Set the current price of the first match; ``False`` if none."""

        with self._lock:
            holding = self._find(symbol)
            if holding is None:
                return False
            holding.current_price = float(price)
            return True

    def _find(self, symbol: str) -> Optional[Holding]:
        wanted = symbol.casefold()
        for holding in self._holdings:
            if holding.symbol.casefold() == wanted:
                return holding
        return None

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def save_to_file(self, path: str | Path | None = None) -> Path:
        """Rewrite ``path`` (default: the store path) with one line per holding."""

        target = Path(path) if path is not None else self.path
        with self._lock:
            with target.open("w", encoding="utf-8", newline="\n") as fh:
                for holding in self._holdings:
                    fh.write(holding.serialize() + "\n")
        return target

    def load_from_file(self, path: str | Path | None = None) -> Path:
        """Replace the holdings with the contents of ``path``.

        The current list is cleared before reading. A missing file leaves the
        store empty; unparseable lines are skipped.
        """

        source = Path(path) if path is not None else self.path
        with self._lock:
            self._holdings.clear()
            if not source.exists():
                return source
            with source.open("r", encoding="utf-8") as fh:
                for line in fh:
                    holding = Holding.deserialize(line)
                    if holding is not None:
                        self._holdings.append(holding)
        return source

    def to_csv(self) -> str:
        """Return the CSV export as text."""

        with self._lock:
            df = holdings_frame(self._holdings)
        return df.to_csv(
            index=False,
            float_format=CSV_FLOAT_FORMAT,
            na_rep="NaN",
            lineterminator="\n",
        )

    def export_csv(self, path: str | Path) -> Path:
        """Write the holdings plus derived values to ``path`` as CSV."""

        target = Path(path)
        with self._lock:
            df = holdings_frame(self._holdings)
            df.to_csv(
                target,
                index=False,
                float_format=CSV_FLOAT_FORMAT,
                na_rep="NaN",
                lineterminator="\n",
                encoding="utf-8",
            )
        return target
