from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Iterator, List, Sequence

from googleapiclient.errors import HttpError

from ..core.exceptions import ConfigurationError, RangeNotFoundError, UpstreamError
from .connection import SheetsConnection

logger = logging.getLogger(__name__)


@contextmanager
def sheets_call(operation: str) -> Iterator[None]:
    """Convert Sheets API failures into UpstreamError.

    ConfigurationError passes through untouched.
    """

    try:
        yield
    except (ConfigurationError, UpstreamError):
        raise
    except HttpError as exc:
        status = getattr(exc.resp, "status", None)
        reason = str(getattr(exc, "reason", "") or exc)
        logger.error("Sheets API error during %s: status=%s reason=%s", operation, status, reason)
        if str(status) == "400" and "Unable to parse range" in reason:
            raise RangeNotFoundError(f"{operation}: {reason}") from exc
        raise UpstreamError(f"{operation} failed ({status})") from exc
    except Exception as exc:
        logger.exception("Sheets backend unreachable during %s", operation)
        raise UpstreamError(f"{operation} failed") from exc


def read_range(conn: SheetsConnection, range_name: str) -> List[List[Any]]:
    with sheets_call(f"read {range_name}"):
        response = (
            conn.service()
            .spreadsheets()
            .values()
            .get(spreadsheetId=conn.spreadsheet_id, range=range_name)
            .execute()
        )
    return list(response.get("values") or [])


def append_rows(conn: SheetsConnection, range_name: str, rows: Sequence[Sequence[Any]]) -> None:
    with sheets_call(f"append {range_name}"):
        (
            conn.service()
            .spreadsheets()
            .values()
            .append(
                spreadsheetId=conn.spreadsheet_id,
                range=range_name,
                valueInputOption="RAW",
                body={"values": [list(r) for r in rows]},
            )
            .execute()
        )


def sheet_titles(conn: SheetsConnection) -> List[str]:
    with sheets_call("list sheets"):
        response = (
            conn.service()
            .spreadsheets()
            .get(spreadsheetId=conn.spreadsheet_id, fields="sheets(properties(title))")
            .execute()
        )
    return [
        s["properties"]["title"]
        for s in response.get("sheets", [])
        if s.get("properties") and "title" in s["properties"]
    ]


def add_sheet(conn: SheetsConnection, title: str) -> None:
    with sheets_call(f"add sheet {title}"):
        (
            conn.service()
            .spreadsheets()
            .batchUpdate(
                spreadsheetId=conn.spreadsheet_id,
                body={"requests": [{"addSheet": {"properties": {"title": title}}}]},
            )
            .execute()
        )


def a1_range(sheet: str, cells: str) -> str:
    """Quote sheet titles the way the Sheets API expects ("My sheet" -> "'My sheet'!A:E")."""
    if any(ch in sheet for ch in " '!"):
        sheet = "'" + sheet.replace("'", "''") + "'"
    return f"{sheet}!{cells}"
