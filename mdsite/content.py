from __future__ import annotations

from dataclasses import asdict, dataclass
from pathlib import Path

from .config import Category, MetadataDefaults
from .utils import split_lines

FRONTMATTER_DELIMITER = "---"
METADATA_KEYS = ("title", "image", "description", "date")


@dataclass(frozen=True)
class ContentFile:
    path: Path
    relative: Path
    category: Category | None
    text: str


@dataclass(frozen=True)
class PostMetadata:
    title: str
    slug: str
    image: str
    description: str
    date: str

    def as_dict(self) -> dict:
        return asdict(self)


def split_frontmatter(text: str) -> tuple[str, str]:
    """Separate a leading ``---`` delimited block from the body.

    An opening delimiter without a closing one swallows the rest of the file,
    leaving an empty body.
    """
    lines = split_lines(text)
    if not lines or lines[0] != FRONTMATTER_DELIMITER:
        return "", text

    frontmatter = []
    index = 1
    while index < len(lines):
        line = lines[index]
        index += 1
        if line == FRONTMATTER_DELIMITER:
            break
        frontmatter.append(f"{line}\n")
    body = [f"{line}\n" for line in lines[index:]]
    return "".join(frontmatter), "".join(body)


def extract_metadata(frontmatter: str, key: str) -> str | None:
    prefix = f"{key}:"
    for line in split_lines(frontmatter):
        if line.startswith(prefix):
            return line[len(prefix) :].strip()
    return None


def slug_for(path: Path) -> str:
    return path.stem


def read_metadata(
    frontmatter: str, path: Path, defaults: MetadataDefaults, enabled: bool = True
) -> PostMetadata:
    values = {}
    for key in METADATA_KEYS:
        value = extract_metadata(frontmatter, key) if enabled else None
        values[key] = getattr(defaults, key) if value is None else value
    return PostMetadata(slug=slug_for(path), **values)
