"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

KEY_PREFIX = "samia"

SESSION_KEY = "samia_suite_session"
USERS_KEY = "samia_users_db"
LOGS_KEY = "samia_activity_logs"
MESSAGES_KEY = "samia_internal_messages"

ACTIVITY_LOG_CAP = 500

DEFAULT_SESSION_DAYS = 7
DEFAULT_MIN_THRESHOLD = 5

PAYROLL_DAYS_PER_MONTH = 30
BUDGET_PER_CLIENT = 150

BOSS_IDENTIFIER = "1"
