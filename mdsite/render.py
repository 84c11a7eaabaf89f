from __future__ import annotations

import logging
from pathlib import Path

import jinja2
import markdown

from .errors import OutputError, TemplateError

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["fenced_code"]
TEMPLATE_EXTENSIONS = ["html"]


def render_markdown(text: str) -> str:
    md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS, output_format="html")
    return md.convert(text)


def load_templates(templates_dir: Path) -> jinja2.Environment:
    """Build the template environment and compile every ``.html`` template up front."""
    if not templates_dir.is_dir():
        raise TemplateError(f"Templates directory not found: {templates_dir}")
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(templates_dir)),
        autoescape=jinja2.select_autoescape(["html", "htm", "xml"]),
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
    )
    names = env.list_templates(extensions=TEMPLATE_EXTENSIONS)
    for name in names:
        try:
            env.get_template(name)
        except (jinja2.TemplateSyntaxError, UnicodeDecodeError, OSError) as exc:
            raise TemplateError(f"Failed to load template {name}") from exc
    logger.debug("Loaded %d templates from %s", len(names), templates_dir)
    return env


def render_template(env: jinja2.Environment, name: str, **context: object) -> str:
    try:
        template = env.get_template(name)
    except jinja2.TemplateNotFound as exc:
        raise TemplateError(f"Template not found: {name}") from exc
    except (jinja2.TemplateSyntaxError, UnicodeDecodeError, OSError) as exc:
        raise TemplateError(f"Failed to load template {name}") from exc
    try:
        return template.render(**context)
    except jinja2.TemplateError as exc:
        raise TemplateError(f"Failed to render template {name}") from exc


def write_text(path: Path, text: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputError(f"Failed to create output directory {path.parent}") from exc
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"Failed to write {path}") from exc
