import structlog
from prometheus_client import Counter, Histogram

log = structlog.get_logger(__name__)

# --- Counters ---
address_lookup_calls_total       = Counter("address_lookup_calls_total",       "Total address lookup API calls", ["status_code"])
address_lookup_errors_total      = Counter("address_lookup_errors_total",      "Total address lookup errors by type", ["error_type"])
workflow_failures_total          = Counter("address_entry_workflow_failures_total", "Address entry submissions that ended in an error", ["workflow", "error_type"])
address_searches_total           = Counter("address_entry_searches_total",     "Address searches that returned candidates")
address_book_entries_added_total = Counter("address_book_entries_added_total", "Entries handed to the address book")

# --- Histograms ---
address_lookup_duration_hist     = Histogram("address_lookup_request_duration_seconds", "Address lookup request durations", ["status_code"], buckets=[0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10, 30])
