from __future__ import annotations

from pathlib import Path

import pytest

from mdsite.config import SiteConfig

DETAIL_TEMPLATE = (
    "<title>{{ title }}</title>\n"
    '<img src="{{ image }}">\n'
    "<p class=\"description\">{{ description }}</p>\n"
    "<p class=\"date\">{{ date }}</p>\n"
    "{{ content | safe }}"
)
LIST_TEMPLATE = (
    "<h1>{{ title }}</h1>\n"
    "<ul>{% for post in posts %}<li data-slug=\"{{ post.slug }}\">{{ post.title }}</li>{% endfor %}</ul>"
)
TEMPLATES = {
    "base.html": "<main>{{ content | safe }}</main>",
    "blog_detail.html": DETAIL_TEMPLATE,
    "book_detail.html": DETAIL_TEMPLATE,
    "blog_list.html": LIST_TEMPLATE,
    "book_list.html": LIST_TEMPLATE,
    "homepage.html": "<h1>{{ title }}</h1>",
}


def write_file(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    for name, text in TEMPLATES.items():
        write_file(tmp_path / "src" / "template" / name, text)
    (tmp_path / "src" / "content").mkdir(parents=True)
    return tmp_path


@pytest.fixture
def site_config(site_root: Path) -> SiteConfig:
    src = site_root / "src"
    return SiteConfig(
        content_dir=src / "content",
        templates_dir=src / "template",
        assets_dir=src / "assets",
        cname_file=src / "CNAME",
        output_dir=site_root / "dist",
    )
