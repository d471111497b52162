"""Transaction loading, normalization, and in-memory query engine."""
from .loader import fetch_seed_records, load_snapshot, save_snapshot, reseed
from .store import DataStore
from .schemas import MonthFilter, PriceRange, TransactionQuery, parse_month, price_ranges
from .normalize import normalize_columns, records_to_frame, frame_to_records
