"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"

DEFAULT_ROSTER_RANGE = "BAZA!A2:F"
DEFAULT_ATTENDANCE_SHEET = "Evidencija"
ATTENDANCE_HEADER = ["DATUM", "LOKACIJA", "BROJ DJECE", "BROJ VOLONTERA", "VOLONTERI"]
ATTENDANCE_COLUMNS = "A:E"

NAMES_DELIMITER = ", "
DISPLAY_DATE_FORMAT = "%d/%m/%Y"

DEFAULT_EXPORT_TIMEOUT = 30
