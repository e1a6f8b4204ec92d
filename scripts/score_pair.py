#!/usr/bin/env python3
"""Score Pair CLI - Debug utility to trace threeset scoring for two strings.

Usage:
    python scripts/score_pair.py "Первая строка" "Вторая фраза"
    python scripts/score_pair.py "Café Münchner" "cafe munchner" --show-skipped
"""

import argparse
import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from threeset.similarity import ThreeSetCompare, format_breakdown  # noqa: E402
from threeset.utils.io_utils import load_settings, validate_settings  # noqa: E402
from threeset.utils.logging_utils import (  # noqa: E402
    DEFAULT_FORMAT,
    get_logger,
    is_level_name,
    setup_logging,
)
from threeset.utils.path_utils import get_config_path  # noqa: E402

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Trace threeset similarity scoring for two strings",
    )
    parser.add_argument("text_a", help="First string")
    parser.add_argument("text_b", help="Second string")
    parser.add_argument(
        "--config", default=str(get_config_path()), help="Path to config file",
    )
    parser.add_argument(
        "--log-level", default=None, help="Override the configured logging level",
    )
    parser.add_argument(
        "--show-skipped",
        action="store_true",
        help="Also list pairs skipped by the minimum word length filter",
    )

    args = parser.parse_args(argv)

    settings = load_settings(args.config)
    log_cfg = settings.get("logging") or {}
    level = args.log_level or log_cfg.get("level", "INFO")

    warnings = validate_settings(settings)
    if not is_level_name(level):
        if args.log_level:
            warnings.append(f"--log-level must be a logging level name, got {level}")
        level = "INFO"

    setup_logging(level, log_cfg.get("file"), log_cfg.get("format", DEFAULT_FORMAT))
    for warning in warnings:
        logger.warning(warning)

    comparator = ThreeSetCompare.from_settings(settings)
    breakdown = comparator.explain(args.text_a, args.text_b)

    print("=" * 80)
    print("THREESET SIMILARITY TRACE")
    print("=" * 80)
    print(format_breakdown(breakdown, show_skipped=args.show_skipped))
    print("=" * 80)
    print(f"\nFINAL RESULT: {breakdown['score']:.7f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
