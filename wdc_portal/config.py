import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _optional_int(name: str) -> Optional[int]:
	value = os.getenv(name)
	if value is None or value.strip() == "":
		return None
	return int(value)


class Settings:
	# Hosted backend (auth, REST tables, edge functions)
	supabase_url: str = os.getenv("SUPABASE_URL", "http://localhost:54321")
	supabase_anon_key: str = os.getenv("SUPABASE_ANON_KEY", "test")
	backend_timeout_seconds: float = float(os.getenv("BACKEND_TIMEOUT_SECONDS", "30"))
	backend_max_retries: int = int(os.getenv("BACKEND_MAX_RETRIES", "1"))

	# Upstream feed tables, one per source
	usgs_table: str = os.getenv("USGS_TABLE", "usgs_earthquakes")
	gdacs_table: str = os.getenv("GDACS_TABLE", "gdacs_alerts")
	firms_table: str = os.getenv("FIRMS_TABLE", "nasa_firms_fires")
	acled_table: str = os.getenv("ACLED_TABLE", "acled_events")

	# Aggregation
	source_fetch_timeout_seconds: float = float(os.getenv("SOURCE_FETCH_TIMEOUT_SECONDS", "10"))
	alerts_window_hours: int = int(os.getenv("ALERTS_WINDOW_HOURS", "24"))
	trends_window_days: int = int(os.getenv("TRENDS_WINDOW_DAYS", "7"))
	# When set, reported as totalSources instead of the computed count. This is a
	# display figure and may exceed the number of configured feeds; leave unset to
	# keep totalSources bounded by the feed registry.
	legacy_total_sources: Optional[int] = _optional_int("LEGACY_TOTAL_SOURCES")

	# Edge function names
	plans_function: str = os.getenv("PLANS_FUNCTION", "get-plans")
	checkout_function: str = os.getenv("CHECKOUT_FUNCTION", "create-checkout-session")
	payment_intent_function: str = os.getenv("PAYMENT_INTENT_FUNCTION", "create-payment-intent")
	world_summary_function: str = os.getenv("WORLD_SUMMARY_FUNCTION", "-generate-world-summary-")

	port: int = int(os.getenv("PORT", "8000"))

settings = Settings()
