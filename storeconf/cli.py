"""Validate cache and object store configuration fragments"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from storeconf.core.config import AppSettings
from storeconf.core.errors import ConfigError
from storeconf.core.redis_client import RedisClientFactory
from storeconf.services.resolver import ConfigResolver
from storeconf.utils.sources import find_fragments

logger = logging.getLogger("storeconf")

EXIT_OK = 0
EXIT_CONFIG_ERROR = 1
EXIT_PING_FAILED = 2
EXIT_USAGE = 64


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storeconf-check",
        description="Validate cache and object store configuration fragments",
    )
    parser.add_argument("fragments", nargs="*", help="Fragment files, merged in the given order")
    parser.add_argument("--dir", dest="directory", help="Directory of fragments to merge")
    parser.add_argument("--pattern", help="Fragment file pattern used with --dir")
    parser.add_argument("--ping", action="store_true", help="Ping the configured Redis server")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None, app_settings: Optional[AppSettings] = None) -> int:
    args = build_parser().parse_args(argv)
    app_settings = app_settings or AppSettings()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else app_settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    fragments = args.fragments or app_settings.CONFIG_PATHS
    directory = args.directory or app_settings.CONFIG_DIR
    if not fragments and not directory:
        logger.error("No configuration given: pass fragment files or --dir, or set STORECONF_CONFIG_PATHS")
        return EXIT_USAGE

    resolver = ConfigResolver(pattern=args.pattern or app_settings.CONFIG_PATTERN)
    try:
        sources = []
        if directory:
            sources.extend(find_fragments(directory, resolver.pattern))
        # Explicit fragments are applied on top of the directory
        sources.extend(fragments)
        resolved = resolver.load_all(sources)
    except ConfigError as e:
        print(f"{type(e).__name__}: {e.message}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    print(json.dumps(resolved.redacted(), indent=2, sort_keys=True))

    if args.ping:
        cache = resolved.cache
        if cache is None:
            logger.error("--ping needs a 'redis' section")
            return EXIT_PING_FAILED
        factory = RedisClientFactory(cache, app_settings)
        try:
            if not factory.health_check():
                return EXIT_PING_FAILED
        finally:
            factory.close()
        logger.info("Redis answered ping")

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
