import argparse
import logging
import sys
from typing import List, Optional

import pygame

from starquads.config import PanelConfig
from starquads.content.layout import LayoutError, load_layout
from starquads.engine import Engine
from starquads.logging_config import setup_logging

log = logging.getLogger("starquads.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="starquads", description="Draw four star patterns, one per quadrant.")
    parser.add_argument("--output", "-o", metavar="PATH", help="save the frame to an image file instead of opening a window")
    parser.add_argument("--debug-log", metavar="PATH", help="append debug logging to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="log debug output to the console")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = PanelConfig(debug_log_path=args.debug_log)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, cfg.debug_log_path)

    try:
        requests = load_layout(cfg)
        engine = Engine(cfg, requests)
        if args.output:
            engine.save(args.output)
        else:
            engine.run()
    except LayoutError as e:
        log.error("Bad quadrant layout: %s", e)
        return 2
    except pygame.error as e:
        log.error("Graphics failure: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
