from __future__ import annotations

import argparse
from typing import List, Optional

from config import get_config, load_config_from_file, setup_logging
from checkers.gui.checkers_ui import CheckersUI


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Play checkers against a random-move computer")
    ap.add_argument("--config", default=None, help="JSON configuration file")
    ap.add_argument("--human", choices=["red", "black"], default=None, help="Side you play (you always move first)")
    ap.add_argument("--delay", type=int, default=None, help="Computer thinking delay in ms")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the computer's random choices")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    config = load_config_from_file(args.config) if args.config else get_config()
    updates = {}
    if args.human is not None:
        updates.setdefault("rules", {})["human_player"] = args.human
    if args.seed is not None:
        updates.setdefault("rules", {})["ai_seed"] = args.seed
    if args.delay is not None:
        updates["ui"] = {"ai_move_delay_ms": args.delay}
    config.update_from_dict(updates)

    setup_logging(config.logging)
    app = CheckersUI(config)
    app.mainloop()


if __name__ == "__main__":
    main()
