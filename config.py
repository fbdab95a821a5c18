import os
from pathlib import Path

# Flat file holding the saved portfolio, relative to the working directory.
# Override with the PORTFOLIO_FILE environment variable.
DATA_FILE = Path(os.getenv("PORTFOLIO_FILE", "portfolio.txt"))

# Suggested destination for the CSV export
EXPORT_FILE = Path(os.getenv("PORTFOLIO_EXPORT_FILE", "portfolio_export.csv"))

# One record per line: SYMBOL|quantity|buy_price|current_price
FIELD_SEP = "|"

# Four decimals, independent of the process locale
CSV_FLOAT_FORMAT = "%.4f"

COL_SYMBOL = "Symbol"
COL_QTY = "Quantity"
COL_BUY = "BuyPrice"
COL_CURRENT = "CurrentPrice"
COL_VALUE = "MarketValue"
COL_INVESTED = "Invested"
COL_PNL = "ProfitLoss"

CSV_COLUMNS = [
    COL_SYMBOL,
    COL_QTY,
    COL_BUY,
    COL_CURRENT,
    COL_VALUE,
    COL_INVESTED,
    COL_PNL,
]

# Column labels used by the portfolio table
DISPLAY_COLUMNS = {
    COL_SYMBOL: "Symbol",
    COL_QTY: "Qty",
    COL_BUY: "Buy Price",
    COL_CURRENT: "Cur Price",
    COL_VALUE: "Market Value",
    COL_INVESTED: "Invested",
    COL_PNL: "P/L",
}

APP_TITLE = "Stock Portfolio Tracker"
