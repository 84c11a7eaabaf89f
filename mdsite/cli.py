from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from .config import UNCATEGORIZED_POLICIES, load_config, site_config_from_mapping
from .errors import SiteError, format_error_chain
from .site import build_site
from .utils import parse_bool

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    root = logging.getLogger("mdsite")
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)
    for handler in root.handlers:
        handler.setLevel(level)


def build_parser(config: dict, config_path: str) -> argparse.ArgumentParser:
    def cfg_str(key: str, default: str) -> str:
        value = config.get(key)
        return default if value is None else str(value)

    def cfg_bool(key: str, default: bool) -> bool:
        value = config.get(key)
        return default if value is None else parse_bool(value)

    parser = argparse.ArgumentParser(description="Markdown static site generator.")
    parser.add_argument("--config", default=config_path, help="Path to site config file (TOML/YAML/JSON).")
    parser.add_argument("--content", default=cfg_str("content", "src/content"), help="Directory containing Markdown content.")
    parser.add_argument("--templates", default=cfg_str("templates", "src/template"), help="Directory containing templates.")
    parser.add_argument("--assets", default=cfg_str("assets", "src/assets"), help="Directory copied to <output>/assets.")
    parser.add_argument("--cname", default=cfg_str("cname", "src/CNAME"), help="CNAME file copied to the output root if present.")
    parser.add_argument("--output", default=cfg_str("output", "dist"), help="Output directory for the site.")
    parser.add_argument(
        "--metadata",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("metadata", True),
        help="Read title/image/description/date from frontmatter.",
    )
    parser.add_argument(
        "--listings",
        action=argparse.BooleanOptionalAction,
        default=cfg_bool("listings", True),
        help="Generate one listing page per category.",
    )
    parser.add_argument(
        "--uncategorized",
        choices=UNCATEGORIZED_POLICIES,
        default=cfg_str("uncategorized", "render"),
        help="What to do with content outside every category.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log every written page.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors.")
    return parser


def run(argv: list[str] | None = None) -> int:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("--config", default="site.toml")
    pre_args, _ = pre_parser.parse_known_args(argv)

    try:
        config = load_config(Path(pre_args.config))
    except SiteError as exc:
        for line in format_error_chain(exc):
            print(line, file=sys.stderr)
        return 1

    args = build_parser(config, pre_args.config).parse_args(argv)
    setup_logging(args.verbose, args.quiet)

    overrides = {
        "content": args.content,
        "templates": args.templates,
        "assets": args.assets,
        "cname": args.cname,
        "output": args.output,
        "metadata": args.metadata,
        "listings": args.listings,
        "uncategorized": args.uncategorized,
    }
    start = time.perf_counter()
    try:
        site_config = site_config_from_mapping({**config, **overrides})
        build_site(site_config)
    except SiteError as exc:
        for line in format_error_chain(exc):
            print(line, file=sys.stderr)
        return 1
    logger.info("Build completed in %.2fs.", time.perf_counter() - start)
    print(f"Static site generated successfully in `{args.output}`")
    return 0


def main() -> None:
    sys.exit(run())
