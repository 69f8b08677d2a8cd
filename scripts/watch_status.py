"""Print one user's session status every refresh interval until Ctrl+C.

Usage: python scripts/watch_status.py <user_id>
"""

from __future__ import annotations

import importlib
import logging
import sys
import time
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module

from src.site_pulse.site_pulse.container import build_container


def _print_status(status) -> None:
    line = "  ".join(f"{label}={s.state.value}{'*' if s.can_edit else ''}" for label, s in status.items())
    print(f"[{time.strftime('%H:%M:%S')}] {line}", flush=True)


def main(argv: list[str]) -> int:
    if len(argv) != 2 or not argv[1].isdigit():
        print(__doc__.strip().splitlines()[-1], file=sys.stderr)
        return 2

    load_dotenv(override=False)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=settings.DB_CONFIG,
        status_refresh_seconds=float(getattr(settings, "STATUS_REFRESH_SECONDS", 60)),
    )

    ticker = container.status_ticker(int(argv[1]), on_update=_print_status)
    ticker.start()
    try:
        while ticker.is_running:
            time.sleep(1)
    except KeyboardInterrupt:
        pass
    finally:
        ticker.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
