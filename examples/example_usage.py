"""Example: use the service layer without Flask.

Runs the statistics pipeline on a local export file, or on the configured
published export when no file is given.
"""

import importlib
import json
import sys

from config import get_settings_module

from src.volunteer_roster.volunteer_roster.container import build_container
from src.volunteer_roster.volunteer_roster.statistics.builder import build_statistics


def main():
    if len(sys.argv) > 1:
        with open(sys.argv[1], encoding="utf-8") as fh:
            data = build_statistics(fh.read())
        if data is None:
            print("No header row found in", sys.argv[1])
            return
    else:
        settings = importlib.import_module(get_settings_module())
        container = build_container(settings=settings)
        data = container.statistics_service.get_statistics()

    for card in data["summaryCards"]:
        print(f"{card['label']}: {card['value']}", card.get("delta", ""))
    print(json.dumps(data["filters"], ensure_ascii=False))


if __name__ == "__main__":
    main()
