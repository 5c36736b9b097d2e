from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build

from ..core.constants import GOOGLE_TOKEN_URI, SHEETS_SCOPES
from ..core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class SheetsConfig:
    spreadsheet_id: str
    client_email: str = ""
    private_key: str = ""
    service_account_json: str = ""

    @property
    def has_credentials(self) -> bool:
        return bool(self.service_account_json or (self.client_email and self.private_key))


class SheetsConnection:
    """Singleton-like Sheets API service factory.

    Note: The service is built lazily on first use, so a missing credential is
    reported on the first request that needs the spreadsheet, not at import.
    """

    _instance: Optional["SheetsConnection"] = None

    def __init__(self, config: SheetsConfig):
        self._config = config
        self._service: Any = None

    @classmethod
    def get_instance(cls, config: SheetsConfig) -> "SheetsConnection":
        if cls._instance is None:
            cls._instance = SheetsConnection(config)
        return cls._instance

    @property
    def spreadsheet_id(self) -> str:
        if not self._config.spreadsheet_id:
            raise ConfigurationError("SPREADSHEET_ID is not configured")
        return self._config.spreadsheet_id

    def credentials(self) -> Credentials:
        if self._config.service_account_json:
            try:
                info = json.loads(self._config.service_account_json)
            except json.JSONDecodeError as exc:
                raise ConfigurationError("GOOGLE_SERVICE_ACCOUNT_JSON is not valid JSON") from exc
        elif self._config.client_email and self._config.private_key:
            info = {
                "client_email": self._config.client_email,
                # Keys stored on one line carry literal "\n" sequences.
                "private_key": self._config.private_key.replace("\\n", "\n"),
                "token_uri": GOOGLE_TOKEN_URI,
            }
        else:
            raise ConfigurationError("Missing Google service account credentials")

        try:
            return Credentials.from_service_account_info(info, scopes=SHEETS_SCOPES)
        except (ValueError, KeyError) as exc:
            raise ConfigurationError(f"Invalid service account credentials: {exc}") from exc

    def service(self):
        if self._service is None:
            logger.debug("Building Google Sheets client for spreadsheet %s", self.spreadsheet_id)
            self._service = build("sheets", "v4", credentials=self.credentials(), cache_discovery=False)
        return self._service
