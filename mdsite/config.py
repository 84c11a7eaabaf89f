from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

import yaml

try:
    import tomllib as toml
except ImportError:
    import tomli as toml

from .errors import ConfigError
from .utils import parse_bool

UNCATEGORIZED_POLICIES = ("render", "warn", "error")

DEFAULT_TITLE = "Untitled"
DEFAULT_IMAGE = "/assets/images/rubber-duck.jpg"
DEFAULT_DESCRIPTION = "No description"
DEFAULT_DATE = "No date"


@dataclass(frozen=True)
class Category:
    """A group of content files sharing a detail template and a listing page."""

    name: str
    directory: str
    detail_template: str
    list_template: str
    listing_title: str = ""

    @property
    def title(self) -> str:
        return self.listing_title or f"{self.name} Listing"


@dataclass(frozen=True)
class MetadataDefaults:
    title: str = DEFAULT_TITLE
    image: str = DEFAULT_IMAGE
    description: str = DEFAULT_DESCRIPTION
    date: str = DEFAULT_DATE


def default_categories() -> tuple[Category, ...]:
    return (
        Category("blog", "blog", "blog_detail.html", "blog_list.html"),
        Category("books", "books", "book_detail.html", "book_list.html"),
    )


@dataclass
class SiteConfig:
    content_dir: Path = Path("src/content")
    templates_dir: Path = Path("src/template")
    assets_dir: Path = Path("src/assets")
    cname_file: Path = Path("src/CNAME")
    output_dir: Path = Path("dist")
    content_extension: str = ".md"
    categories: tuple[Category, ...] = field(default_factory=default_categories)
    fallback_template: str = "base.html"
    homepage_template: str = "homepage.html"
    defaults: MetadataDefaults = field(default_factory=MetadataDefaults)
    extract_metadata: bool = True
    listings: bool = True
    uncategorized: str = "render"

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.uncategorized not in UNCATEGORIZED_POLICIES:
            choices = ", ".join(UNCATEGORIZED_POLICIES)
            raise ConfigError(f"uncategorized must be one of {choices}, got {self.uncategorized!r}")
        if not self.content_extension.startswith("."):
            self.content_extension = f".{self.content_extension}"
        names = [category.name for category in self.categories]
        if len(names) != len(set(names)):
            raise ConfigError(f"Duplicate category names: {', '.join(names)}")

    def category(self, name: str) -> Category | None:
        for category in self.categories:
            if category.name == name:
                return category
        return None

    def classify(self, relative: Path) -> Category | None:
        """Return the category owning a path relative to the content root."""
        parts = relative.parts
        for category in self.categories:
            prefix = Path(category.directory).parts
            if prefix and parts[: len(prefix)] == prefix and len(parts) > len(prefix):
                return category
        return None


def load_config(path: Path) -> dict:
    if not path.exists():
        return {}
    suffix = path.suffix.lower()
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read config file {path}") from exc
    if suffix == ".toml":
        try:
            data = toml.loads(text)
        except toml.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in config file {path}") from exc
    elif suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in config file {path}") from exc
        if data is None:
            return {}
    else:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ConfigError(f"Invalid JSON in config file {path}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a mapping: {path}")
    return data


def parse_categories(value: object) -> tuple[Category, ...]:
    if not isinstance(value, dict):
        raise ConfigError("categories must be a table of category name to settings")
    categories = []
    for name, settings in value.items():
        if not isinstance(name, str):
            raise ConfigError(f"Category names must be strings, got {name!r}")
        settings = settings or {}
        if not isinstance(settings, dict):
            raise ConfigError(f"Settings for category {name!r} must be a table")
        singular = name[:-1] if name.endswith("s") else name
        categories.append(
            Category(
                name=name,
                directory=str(settings.get("directory", name)),
                detail_template=str(settings.get("detail_template", f"{singular}_detail.html")),
                list_template=str(settings.get("list_template", f"{singular}_list.html")),
                listing_title=str(settings.get("listing_title", "")),
            )
        )
    return tuple(categories)


def parse_defaults(value: object) -> MetadataDefaults:
    if not isinstance(value, dict):
        raise ConfigError("defaults must be a table")
    base = MetadataDefaults()
    return MetadataDefaults(
        title=str(value.get("title", base.title)),
        image=str(value.get("image", base.image)),
        description=str(value.get("description", base.description)),
        date=str(value.get("date", base.date)),
    )


def site_config_from_mapping(data: dict) -> SiteConfig:
    config = SiteConfig()
    paths = {
        "content": "content_dir",
        "templates": "templates_dir",
        "assets": "assets_dir",
        "cname": "cname_file",
        "output": "output_dir",
    }
    for key, attr in paths.items():
        if data.get(key) is not None:
            setattr(config, attr, Path(str(data[key])))
    for key in ("content_extension", "fallback_template", "homepage_template", "uncategorized"):
        if data.get(key) is not None:
            setattr(config, key, str(data[key]))
    if data.get("metadata") is not None:
        config.extract_metadata = parse_bool(data["metadata"])
    if data.get("listings") is not None:
        config.listings = parse_bool(data["listings"])
    if data.get("categories") is not None:
        config.categories = parse_categories(data["categories"])
    if data.get("defaults") is not None:
        config.defaults = parse_defaults(data["defaults"])
    config.validate()
    return config
