"""
Sales Dashboard — Configuration: paths, upstream feed, query constants.
"""
import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Paths — override with SALES_DATA_DIR env var for cloud deployment
# ---------------------------------------------------------------------------
_data_dir = Path(os.environ.get("SALES_DATA_DIR", str(Path.home() / "Sales Dashboard")))
BASE_FOLDER = _data_dir
SNAPSHOT_PATH = _data_dir / "transactions.json"
REPORTS_FOLDER = _data_dir / "reports"

# ---------------------------------------------------------------------------
# Upstream seed feed
# ---------------------------------------------------------------------------
SEED_URL = os.environ.get(
    "SALES_SEED_URL",
    "https://s3.amazonaws.com/roxiler.com/product_transaction.json",
)
SEED_TIMEOUT = float(os.environ.get("SALES_SEED_TIMEOUT", "30"))

# ---------------------------------------------------------------------------
# Record shape — upstream fields kept in the store (anything else is dropped)
# ---------------------------------------------------------------------------
TRANSACTION_COLUMNS = ["title", "description", "price", "dateOfSale", "category", "sold"]
TEXT_COLUMNS = ["title", "description", "category"]

# ---------------------------------------------------------------------------
# Query defaults
# ---------------------------------------------------------------------------
MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 4

# ---------------------------------------------------------------------------
# Bar chart price ranges (lower edge, upper edge). None = open-ended.
# ---------------------------------------------------------------------------
PRICE_RANGES = [
    (0, 100),
    (101, 200),
    (201, 300),
    (301, 400),
    (401, 500),
    (501, 600),
    (601, 700),
    (701, 800),
    (801, 900),
    (901, None),
]
