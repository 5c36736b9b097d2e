from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.volunteer_roster.volunteer_roster.container import build_container


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)

    created = container.attendance_repo.ensure_sheet()
    state = "created" if created else "already present"
    print(f"OK: attendance sheet {settings.ATTENDANCE_SHEET!r} {state}")


if __name__ == "__main__":
    main()
