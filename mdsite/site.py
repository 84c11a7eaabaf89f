"""Site aggregation.

A build is one sequential pass over the content tree followed by the pages
that depend on the collected metadata: the homepage and one listing per
category. Listing order follows the walk order, which is sorted by path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import jinja2

from .assets import copy_assets, copy_cname
from .config import SiteConfig
from .content import PostMetadata
from .errors import OutputError, UnknownCategoryError
from .pages import build_page, load_content_file
from .render import load_templates, render_template, write_text
from .scanner import scan_content

logger = logging.getLogger(__name__)

HOMEPAGE_FILENAME = "index.html"
ASSETS_DIRNAME = "assets"


@dataclass
class BuildResult:
    output_dir: Path
    pages: int = 0
    listings: list[str] = field(default_factory=list)
    posts: dict[str, list[PostMetadata]] = field(default_factory=dict)
    assets: int = 0
    cname: bool = False


def collect_pages(config: SiteConfig, env: jinja2.Environment) -> tuple[int, dict[str, list[PostMetadata]]]:
    """Build every content page and group the returned metadata by category."""
    posts: dict[str, list[PostMetadata]] = {category.name: [] for category in config.categories}
    count = 0
    for path in scan_content(config.content_dir, config.content_extension):
        content_file = load_content_file(path, config)
        meta = build_page(content_file, config, env)
        count += 1
        if content_file.category is not None:
            posts[content_file.category.name].append(meta)
    return count, posts


def build_homepage(config: SiteConfig, env: jinja2.Environment) -> Path:
    html_doc = render_template(env, config.homepage_template, title="Homepage")
    path = config.output_dir / HOMEPAGE_FILENAME
    write_text(path, html_doc)
    logger.debug("Wrote %s", path)
    return path


def build_listing(
    name: str, posts: list[PostMetadata], config: SiteConfig, env: jinja2.Environment
) -> Path:
    category = config.category(name)
    if category is None:
        raise UnknownCategoryError(f"Unknown category: {name}")
    html_doc = render_template(
        env,
        category.list_template,
        posts=[post.as_dict() for post in posts],
        title=category.title,
        category=category.name,
    )
    path = config.output_dir / f"{category.name}.html"
    write_text(path, html_doc)
    logger.debug("Wrote %s", path)
    return path


def build_site(config: SiteConfig) -> BuildResult:
    try:
        config.output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputError(f"Failed to create output directory {config.output_dir}") from exc

    env = load_templates(config.templates_dir)
    result = BuildResult(output_dir=config.output_dir)

    result.pages, result.posts = collect_pages(config, env)
    logger.info("Rendered %d pages", result.pages)

    build_homepage(config, env)
    if config.listings:
        for category in config.categories:
            build_listing(category.name, result.posts[category.name], config, env)
            result.listings.append(category.name)
            logger.info("Listed %d posts in %s", len(result.posts[category.name]), category.name)

    result.assets = copy_assets(config.assets_dir, config.output_dir / ASSETS_DIRNAME)
    result.cname = copy_cname(config.cname_file, config.output_dir)
    logger.info("Copied %d assets", result.assets)
    return result
