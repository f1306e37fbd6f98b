"""
Centralized Default Configuration for Wtyczka.

Fallbacks used when a setting is missing from the database (AppSettings).
The gate dates (CONTACT_DATE, PAYMENT_OPEN_DATE) are intentionally absent:
"not configured" is a meaningful state for them and each gate carries its
own default.
"""

DEFAULT_APP_CONFIGS = {
    # --- Event ---
    'EVENT_DATE': '2025-10-23',   # Participants must be 18+ on this day

    # --- Registration age bounds (inclusive lower, exclusive upper) ---
    'REGISTRATION_MIN_AGE': 18,
    'REGISTRATION_MAX_AGE': 70,
}
