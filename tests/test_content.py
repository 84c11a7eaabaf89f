"""Tests for frontmatter splitting and metadata extraction."""

from pathlib import Path

from mdsite.config import MetadataDefaults
from mdsite.content import extract_metadata, read_metadata, slug_for, split_frontmatter


class TestSplitFrontmatter:
    def test_no_frontmatter_returns_text_unchanged(self):
        text = "# Title\n\nBody text"
        assert split_frontmatter(text) == ("", text)

    def test_splits_block_and_body(self):
        text = "---\ntitle: Hello\ndate: 2024-01-01\n---\n# Hi\nmore\n"
        frontmatter, body = split_frontmatter(text)
        assert frontmatter == "title: Hello\ndate: 2024-01-01\n"
        assert body == "# Hi\nmore\n"

    def test_body_lines_get_trailing_newline(self):
        _, body = split_frontmatter("---\n---\nlast line without newline")
        assert body == "last line without newline\n"

    def test_unclosed_block_leaves_empty_body(self):
        frontmatter, body = split_frontmatter("---\ntitle: Open\n# Heading\n")
        assert frontmatter == "title: Open\n# Heading\n"
        assert body == ""

    def test_delimiter_must_be_first_line(self):
        text = "\n---\ntitle: Late\n---\n"
        assert split_frontmatter(text) == ("", text)

    def test_delimiter_must_match_exactly(self):
        text = "--- \ntitle: Spaced\n---\nbody\n"
        assert split_frontmatter(text) == ("", text)

    def test_crlf_line_endings(self):
        frontmatter, body = split_frontmatter("---\r\ntitle: Win\r\n---\r\nbody\r\n")
        assert frontmatter == "title: Win\n"
        assert body == "body\n"

    def test_empty_string(self):
        assert split_frontmatter("") == ("", "")


class TestExtractMetadata:
    def test_returns_trimmed_value(self):
        assert extract_metadata("title:   Hello world  \n", "title") == "Hello world"

    def test_missing_key(self):
        assert extract_metadata("date: 2024\n", "title") is None

    def test_first_occurrence_wins(self):
        assert extract_metadata("title: First\ntitle: Second\n", "title") == "First"

    def test_case_sensitive(self):
        assert extract_metadata("Title: Upper\n", "title") is None

    def test_prefix_must_start_line(self):
        assert extract_metadata("  title: Indented\n", "title") is None

    def test_key_order_and_unrelated_keys(self):
        block = "tags: a, b\nimage: /x.png\ntitle: Ordered\n"
        assert extract_metadata(block, "title") == "Ordered"

    def test_malformed_date_kept_verbatim(self):
        assert extract_metadata("date: sometime in May\n", "date") == "sometime in May"

    def test_value_may_contain_colons(self):
        assert extract_metadata("title: Part 1: Start\n", "title") == "Part 1: Start"


class TestReadMetadata:
    def test_defaults_without_frontmatter(self):
        meta = read_metadata("", Path("content/blog/hello.md"), MetadataDefaults())
        assert meta.title == "Untitled"
        assert meta.image == "/assets/images/rubber-duck.jpg"
        assert meta.description == "No description"
        assert meta.date == "No date"
        assert meta.slug == "hello"

    def test_values_from_frontmatter(self):
        block = "title: Hello\nimage: /a.png\ndescription: Short\ndate: 2024-02-03\n"
        meta = read_metadata(block, Path("post.md"), MetadataDefaults())
        assert meta.as_dict() == {
            "title": "Hello",
            "slug": "post",
            "image": "/a.png",
            "description": "Short",
            "date": "2024-02-03",
        }

    def test_disabled_extraction_uses_defaults(self):
        meta = read_metadata("title: Ignored\n", Path("x.md"), MetadataDefaults(), enabled=False)
        assert meta.title == "Untitled"
        assert meta.slug == "x"

    def test_custom_defaults(self):
        meta = read_metadata("", Path("x.md"), MetadataDefaults(title="Draft"))
        assert meta.title == "Draft"


class TestSlug:
    def test_strips_extension_only(self):
        assert slug_for(Path("a/b/my-post.md")) == "my-post"

    def test_keeps_inner_dots(self):
        assert slug_for(Path("v1.2-notes.md")) == "v1.2-notes"
