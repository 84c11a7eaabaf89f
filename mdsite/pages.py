from __future__ import annotations

import logging
from pathlib import Path

import jinja2

from .config import SiteConfig
from .content import ContentFile, PostMetadata, read_metadata, split_frontmatter
from .errors import ContentError, UncategorizedContentError
from .render import render_markdown, render_template, write_text

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = ".html"


def load_content_file(path: Path, config: SiteConfig) -> ContentFile:
    try:
        relative = path.relative_to(config.content_dir)
    except ValueError as exc:
        raise ContentError(f"{path} is not inside the content directory {config.content_dir}") from exc
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ContentError(f"Failed to read markdown file {path}") from exc
    return ContentFile(path=path, relative=relative, category=config.classify(relative), text=text)


def output_path_for(content_file: ContentFile, output_dir: Path) -> Path:
    return (output_dir / content_file.relative).with_suffix(OUTPUT_SUFFIX)


def check_uncategorized(content_file: ContentFile, policy: str) -> None:
    if content_file.category is not None or policy == "render":
        return
    if policy == "error":
        raise UncategorizedContentError(f"{content_file.path} does not belong to any category")
    logger.warning("%s does not belong to any category; it will not be listed", content_file.path)


def build_page(content_file: ContentFile, config: SiteConfig, env: jinja2.Environment) -> PostMetadata:
    """Render one content file into the output tree and return its metadata."""
    check_uncategorized(content_file, config.uncategorized)

    frontmatter, body = split_frontmatter(content_file.text)
    meta = read_metadata(frontmatter, content_file.path, config.defaults, enabled=config.extract_metadata)
    html_content = render_markdown(body)

    category = content_file.category
    template_name = category.detail_template if category else config.fallback_template
    html_doc = render_template(
        env,
        template_name,
        content=html_content,
        title=meta.title,
        image=meta.image,
        description=meta.description,
        date=meta.date,
        slug=meta.slug,
        category=category.name if category else "",
    )

    destination = output_path_for(content_file, config.output_dir)
    write_text(destination, html_doc)
    logger.debug("Wrote %s", destination)
    return meta
