SECRET_KEY = "test-secret"

SHEETS_CONFIG = {
    "spreadsheet_id": "test-spreadsheet",
    "client_email": "",
    "private_key": "",
    "service_account_json": "",
}
ROSTER_RANGE = "BAZA!A2:F"
ATTENDANCE_SHEET = "Evidencija"
STATS_EXPORT_URL = "https://example.invalid/export?output=tsv"
EXPORT_TIMEOUT = 5
AUTH_CLIENT_ID = ""
ALLOWED_EMAILS = []
CORS_ORIGINS = ["*"]
PORT = 3000

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
