from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .attendance.sheets_attendance_repository import SheetsAttendanceRepository
from .auth.verifier import GoogleTokenVerifier, TokenVerifier
from .core.constants import DEFAULT_ATTENDANCE_SHEET, DEFAULT_EXPORT_TIMEOUT, DEFAULT_ROSTER_RANGE
from .sheets.connection import SheetsConfig, SheetsConnection
from .statistics.export_client import ExportClient
from .statistics.service import StatisticsService
from .volunteers.repository import VolunteerRepository
from .volunteers.service import VolunteerService
from .volunteers.sheets_volunteer_repository import SheetsVolunteerRepository


@dataclass(frozen=True)
class Container:
    volunteers_repo: VolunteerRepository
    attendance_repo: AttendanceRepository
    export_client: ExportClient
    token_verifier: TokenVerifier

    volunteer_service: VolunteerService
    attendance_service: AttendanceService
    statistics_service: StatisticsService


def build_services(
    *,
    volunteers_repo: VolunteerRepository,
    attendance_repo: AttendanceRepository,
    export_client: ExportClient,
    token_verifier: TokenVerifier,
) -> Container:
    """Wire services around already-built repositories (tests pass fakes here)."""
    return Container(
        volunteers_repo=volunteers_repo,
        attendance_repo=attendance_repo,
        export_client=export_client,
        token_verifier=token_verifier,
        volunteer_service=VolunteerService(volunteers_repo),
        attendance_service=AttendanceService(attendance_repo),
        statistics_service=StatisticsService(export_client),
    )


def build_container(*, settings: Any) -> Container:
    sheets_config = getattr(settings, "SHEETS_CONFIG", {})
    config = SheetsConfig(
        spreadsheet_id=str(sheets_config.get("spreadsheet_id", "")),
        client_email=str(sheets_config.get("client_email", "")),
        private_key=str(sheets_config.get("private_key", "")),
        service_account_json=str(sheets_config.get("service_account_json", "")),
    )
    conn = SheetsConnection.get_instance(config)

    return build_services(
        volunteers_repo=SheetsVolunteerRepository(
            conn, range_name=getattr(settings, "ROSTER_RANGE", DEFAULT_ROSTER_RANGE)
        ),
        attendance_repo=SheetsAttendanceRepository(
            conn, sheet=getattr(settings, "ATTENDANCE_SHEET", DEFAULT_ATTENDANCE_SHEET)
        ),
        export_client=ExportClient(
            getattr(settings, "STATS_EXPORT_URL", ""),
            timeout=float(getattr(settings, "EXPORT_TIMEOUT", DEFAULT_EXPORT_TIMEOUT)),
        ),
        token_verifier=GoogleTokenVerifier(
            getattr(settings, "AUTH_CLIENT_ID", ""),
            allowed_emails=getattr(settings, "ALLOWED_EMAILS", []),
        ),
    )
