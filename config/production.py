import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
SHEETS_CONFIG = Config.SHEETS_CONFIG
ROSTER_RANGE = Config.ROSTER_RANGE
ATTENDANCE_SHEET = Config.ATTENDANCE_SHEET
STATS_EXPORT_URL = Config.STATS_EXPORT_URL
EXPORT_TIMEOUT = Config.EXPORT_TIMEOUT
AUTH_CLIENT_ID = Config.AUTH_CLIENT_ID
ALLOWED_EMAILS = Config.ALLOWED_EMAILS
CORS_ORIGINS = Config.CORS_ORIGINS
PORT = Config.PORT

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
