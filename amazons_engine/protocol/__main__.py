"""
Main entry point for playing Amazons from a terminal.

Usage:
    python -m amazons_engine.protocol [--config amazons.toml] [--depth N]
"""

import argparse

from amazons_engine.config import EngineConfig, SearchConfig
from amazons_engine.protocol.interface import GameController, setup_logger


def main(argv=None):
    parser = argparse.ArgumentParser(description="Game of the Amazons")
    parser.add_argument("--config", help="TOML configuration file")
    parser.add_argument("--depth", type=int, help="Fixed search depth")
    parser.add_argument("--log-level", help="Logging level (default from config)")
    parser.add_argument("--log-file", help="Log to this file instead of stderr")
    args = parser.parse_args(argv)

    config = EngineConfig.load_from_toml(args.config)
    if args.depth is not None:
        config.search = SearchConfig(
            depth_thresholds=config.search.depth_thresholds,
            fixed_depth=args.depth,
            time_limit_ms=config.search.time_limit_ms,
        )

    setup_logger(args.log_level or config.log_level, args.log_file or config.log_file)
    GameController(config=config).run()


if __name__ == "__main__":
    main()
