from __future__ import annotations

import importlib

from config import get_settings_module

from . import create_app


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    app = create_app()
    app.run(
        host="0.0.0.0",
        port=int(getattr(settings, "PORT", 3000)),
        debug=bool(getattr(settings, "DEBUG", False)),
    )


if __name__ == "__main__":
    main()
