"""Back up the roster and the attendance log to CSV files.

Note: The spreadsheet stays the source of truth; this is a point-in-time copy
written to backups/ next to the repository.
"""

from __future__ import annotations

import csv
import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.volunteer_roster.volunteer_roster.container import build_container
from src.volunteer_roster.volunteer_roster.core.constants import ATTENDANCE_HEADER


def _write(path: Path, header: list[str], rows: list[list]) -> None:
    with path.open("w", newline="", encoding="utf-8-sig") as fh:
        writer = csv.writer(fh)
        writer.writerow(header)
        writer.writerows(rows)


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")

    volunteers = container.volunteers_repo.list_all()
    _write(
        out_dir / f"roster_{ts}.csv",
        ["name", "school", "grade", "locations", "phone", "hours"],
        [[v.name, v.school, v.grade, ", ".join(v.locations), v.phone, v.hours] for v in volunteers],
    )

    entries = container.attendance_repo.list_all()
    _write(
        out_dir / f"attendance_{ts}.csv",
        ATTENDANCE_HEADER,
        [[e.date, e.location, e.children_count, e.volunteer_count, ", ".join(e.volunteers)] for e in entries],
    )

    print(f"OK: {len(volunteers)} volunteers, {len(entries)} attendance rows -> {out_dir}")


if __name__ == "__main__":
    main()
