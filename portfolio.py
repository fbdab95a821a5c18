import math
from dataclasses import dataclass, field
from typing import Iterable, Optional

import pandas as pd

from config import (
    CSV_COLUMNS,
    FIELD_SEP,
    COL_SYMBOL,
    COL_QTY,
    COL_BUY,
    COL_CURRENT,
    COL_VALUE,
    COL_INVESTED,
    COL_PNL,
)

# ---------------------------------------------------------------------------
# Holding record and helpers
# ---------------------------------------------------------------------------


def parse_number(raw: str) -> float:
    """Return ``raw`` as a finite float or raise ``ValueError``.

    Stricter than ``float()``: digit separators (``1_000``), ``nan`` and
    ``inf`` are refused.
    """

    text = str(raw).strip()
    if "_" in text:
        raise ValueError(f"Invalid number: {raw!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Invalid number: {raw!r}")
    return value


@dataclass
class Holding:
    """Dataclass representing a single tracked stock position.

    ``current_price`` defaults to ``buy_price`` when omitted. Quantities and
    prices are not range-checked; zero or negative values are kept as given.
    """

    symbol: str
    quantity: float
    buy_price: float
    current_price: Optional[float] = field(default=None)

    def __post_init__(self) -> None:
        self.symbol = self.symbol.upper()
        self.quantity = float(self.quantity)
        self.buy_price = float(self.buy_price)
        if self.current_price is None:
            self.current_price = self.buy_price
        else:
            self.current_price = float(self.current_price)

    def market_value(self) -> float:
        return self.current_price * self.quantity

    def invested_amount(self) -> float:
        return self.buy_price * self.quantity

    def profit_loss(self) -> float:
        return self.market_value() - self.invested_amount()

    def serialize(self) -> str:
        """Return the ``SYMBOL|quantity|buy_price|current_price`` line."""

        # repr() gives the shortest round-trip text and ignores the locale
        return FIELD_SEP.join(
            [
                self.symbol,
                repr(self.quantity),
                repr(self.buy_price),
                repr(self.current_price),
            ]
        )

    @classmethod
    def deserialize(cls, line: str) -> Optional["Holding"]:
        """Parse a line written by :meth:`serialize`.

        Returns ``None`` when the line has fewer than four fields or a numeric
        field is not a finite number; callers skip such lines.
        """

        parts = line.rstrip("\r\n").split(FIELD_SEP)
        if len(parts) < 4:
            return None
        try:
            return cls(
                parts[0],
                parse_number(parts[1]),
                parse_number(parts[2]),
                parse_number(parts[3]),
            )
        except ValueError:
            return None

    def as_row(self) -> dict[str, float | str]:
        """Return the stored and derived values keyed by export column."""

        return {
            COL_SYMBOL: self.symbol,
            COL_QTY: self.quantity,
            COL_BUY: self.buy_price,
            COL_CURRENT: self.current_price,
            COL_VALUE: self.market_value(),
            COL_INVESTED: self.invested_amount(),
            COL_PNL: self.profit_loss(),
        }


def holdings_frame(holdings: Iterable[Holding]) -> pd.DataFrame:
    """Return ``holdings`` as a DataFrame with all export columns present."""

    df = pd.DataFrame([h.as_row() for h in holdings], columns=CSV_COLUMNS)
    numeric = CSV_COLUMNS[1:]
    df[numeric] = df[numeric].astype(float)
    return df
