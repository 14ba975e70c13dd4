# Copyright (C) 2026 Cubeconf Contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
# See LICENSE for the full text.

import argparse
import sys
import traceback
from datetime import datetime, timezone
from pathlib import Path

_ROOT = Path(__file__).resolve().parent
_CACHE_DIR = _ROOT / "cache"
_CRASH_LOG = _CACHE_DIR / "latest.log"


def _install_crash_logger() -> None:
    """Replace the default exception hook so unhandled errors are written
    to ``cache/latest.log`` before the process terminates."""
    _original_hook = sys.excepthook

    def _crash_hook(exc_type, exc_value, exc_tb):
        try:
            _CACHE_DIR.mkdir(parents=True, exist_ok=True)
            tb_text = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
            timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")
            header = (
                f"Cubeconf crash log\n"
                f"==================\n"
                f"Timestamp : {timestamp}\n"
                f"Python    : {sys.version}\n"
                f"Exception : {exc_type.__name__}: {exc_value}\n"
                f"\n"
            )
            _CRASH_LOG.write_text(header + tb_text, encoding="utf-8")
        except OSError:
            pass
        _original_hook(exc_type, exc_value, exc_tb)

    sys.excepthook = _crash_hook


def _apply_debug_logging() -> None:
    """Configure Python logging based on the user's debug settings."""
    import logging
    from cubeconf.core.config import Config

    cfg = Config.load()
    if not cfg.debug_logging:
        logging.basicConfig(level=logging.WARNING, force=True)
        return

    level = getattr(logging, cfg.debug_log_level.upper(), logging.WARNING)
    _CACHE_DIR.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(str(_CACHE_DIR / "cubeconf_debug.log"), encoding="utf-8"),
            logging.StreamHandler(sys.stderr),
        ],
        force=True,
    )


def _menu_tag(value: str) -> str:
    """argparse type: accept only registered serialized menu tags."""
    from cubeconf.settings.errors import SettingsError
    from cubeconf.settings.menu_tag import parse

    try:
        if parse(value) is None:
            raise argparse.ArgumentTypeError("menu tag must not be empty")
    except SettingsError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return value


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cubeconf", description="Edit GameCube/Wii emulator settings.",
    )
    parser.add_argument(
        "--game", default="", metavar="ID",
        help="edit the per-game profile of this game id instead of the global one",
    )
    parser.add_argument(
        "--menu", type=_menu_tag, default=None, metavar="TAG",
        help="open this menu first, e.g. 'graphics' or 'gcpad|0'",
    )
    return parser.parse_known_args(argv)[0]


def main():
    _install_crash_logger()
    _apply_debug_logging()
    args = _parse_args(sys.argv[1:])
    from cubeconf.app import CubeconfApp
    app = CubeconfApp(sys.argv, content_id=args.game, menu=args.menu)
    sys.exit(app.run())


if __name__ == "__main__":
    main()
