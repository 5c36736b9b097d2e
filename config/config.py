import os


def env_list(name: str, default: str = "") -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    # Backing spreadsheet (service account)
    SHEETS_CONFIG = {
        "spreadsheet_id": os.environ.get("SPREADSHEET_ID", ""),
        "client_email": os.environ.get("GOOGLE_CLIENT_EMAIL", ""),
        "private_key": os.environ.get("GOOGLE_PRIVATE_KEY", ""),
        "service_account_json": os.environ.get("GOOGLE_SERVICE_ACCOUNT_JSON", ""),
    }
    ROSTER_RANGE = os.environ.get("ROSTER_RANGE", "BAZA!A2:F")
    ATTENDANCE_SHEET = os.environ.get("ATTENDANCE_SHEET", "Evidencija")

    # Published statistics export (tab-separated)
    STATS_EXPORT_URL = os.environ.get("STATS_EXPORT_URL", "")
    EXPORT_TIMEOUT = float(os.environ.get("EXPORT_TIMEOUT", "30"))

    # Bearer ID-token check on attendance writes; empty client id disables it
    AUTH_CLIENT_ID = os.environ.get("AUTH_CLIENT_ID", "")
    ALLOWED_EMAILS = env_list("ALLOWED_EMAILS")

    CORS_ORIGINS = env_list("CORS_ORIGINS", "*") or ["*"]
    PORT = int(os.environ.get("PORT", "3000"))
