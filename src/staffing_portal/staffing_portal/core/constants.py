"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SESSION_DAYS = 7
DEFAULT_LIST_LIMIT = 500

# Reporting manager value that marks a root of the team tree.
ROOT_MANAGER_NAME = "Admin"

# Vendor value used for candidates hired directly by a client.
DIRECT_VENDOR = "Direct"
DEFAULT_DIRECT_CLIENT_REVENUE = 10000
DEFAULT_TEAM_SALARY = 30000

TOP_ROLE_METRICS = 5

SETTINGS_COLLECTION = "settings"
SETTINGS_DOC_ID = "appSettings"

EMPLOYEE_ID_PREFIX = "EMP"

# Statutory payroll rates.
PF_RATE = 0.12
EMPLOYEE_ESI_RATE = 0.0075
EMPLOYER_ESI_RATE = 0.0325
ESI_ANNUAL_CTC_LIMIT = 280000
ESI_MONTHLY_GROSS_LIMIT = 21000
NET_TO_GROSS_MAX_ITERATIONS = 20
NET_TO_GROSS_TOLERANCE = 0.5

# Lineups entered without an email get "<phone digits>@" + this domain.
LINEUP_EMAIL_DOMAIN = "lineup.local"
