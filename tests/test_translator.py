"""Tests for app.services.translator."""

from app.models.crawl_request import CrawlRequest
from app.models.options import Format
from app.models.request import ScrapeRequest
from app.services.translator import (
    CRAWL_FORMATS,
    SCRAPE_FORMATS,
    build_crawl_options,
    build_scrape_options,
    normalize_formats,
)

_SCHEMA = {
    "type": "object",
    "properties": {"title": {"type": "string"}},
    "required": ["title"],
}


class TestNormalizeFormats:
    def test_recognised_tokens_keep_order(self):
        assert normalize_formats(["html", "markdown"], SCRAPE_FORMATS) == [
            Format.HTML,
            Format.MARKDOWN,
        ]

    def test_tokens_are_case_insensitive(self):
        assert normalize_formats(["MarkDown", "HTML"], SCRAPE_FORMATS) == [
            Format.MARKDOWN,
            Format.HTML,
        ]

    def test_unknown_tokens_are_dropped(self):
        result = normalize_formats(["invalid_format", "markdown"], SCRAPE_FORMATS)
        assert result == [Format.MARKDOWN]

    def test_duplicates_collapse_to_first_occurrence(self):
        result = normalize_formats(["html", "markdown", "HTML", "markdown"], SCRAPE_FORMATS)
        assert result == [Format.HTML, Format.MARKDOWN]

    def test_none_falls_back_to_markdown(self):
        assert normalize_formats(None, SCRAPE_FORMATS) == [Format.MARKDOWN]

    def test_empty_list_falls_back_to_markdown(self):
        assert normalize_formats([], CRAWL_FORMATS) == [Format.MARKDOWN]

    def test_all_unknown_falls_back_to_markdown(self):
        assert normalize_formats(["pdf", "screenshot"], SCRAPE_FORMATS) == [Format.MARKDOWN]

    def test_non_string_tokens_are_ignored(self):
        assert normalize_formats([42, None, {"a": 1}, "html"], SCRAPE_FORMATS) == [Format.HTML]

    def test_extract_is_not_a_crawl_format(self):
        assert normalize_formats(["extract", "html"], CRAWL_FORMATS) == [Format.HTML]
        assert normalize_formats(["extract"], CRAWL_FORMATS) == [Format.MARKDOWN]

    def test_extract_is_a_scrape_format(self):
        assert normalize_formats(["extract"], SCRAPE_FORMATS) == [Format.EXTRACT]


class TestBuildScrapeOptions:
    def test_defaults_to_markdown_without_extract(self):
        options = build_scrape_options(ScrapeRequest(url="https://example.com"))
        assert options.formats == [Format.MARKDOWN]
        assert options.extract is None

    def test_schema_appends_extract_format(self):
        request = ScrapeRequest(url="https://example.com", formats=["markdown"], schema=_SCHEMA)
        options = build_scrape_options(request)
        assert options.formats == [Format.MARKDOWN, Format.EXTRACT]
        assert options.extract is not None
        assert options.extract.schema_ == _SCHEMA

    def test_schema_with_explicit_extract_is_not_duplicated(self):
        request = ScrapeRequest(
            url="https://example.com", formats=["markdown", "extract"], schema=_SCHEMA
        )
        options = build_scrape_options(request)
        assert options.formats.count(Format.EXTRACT) == 1
        assert options.formats == [Format.MARKDOWN, Format.EXTRACT]

    def test_schema_with_only_unknown_formats_keeps_markdown(self):
        request = ScrapeRequest(url="https://example.com", formats=["bogus"], schema=_SCHEMA)
        options = build_scrape_options(request)
        assert options.formats == [Format.MARKDOWN, Format.EXTRACT]

    def test_extract_directive_carries_only_the_schema(self):
        request = ScrapeRequest(url="https://example.com", schema=_SCHEMA)
        extract = build_scrape_options(request).extract
        assert extract.model_dump(by_alias=True) == {"schema": _SCHEMA}

    def test_schema_is_forwarded_untouched(self):
        schema = {"anything": ["goes", 1, None]}
        request = ScrapeRequest(url="https://example.com", schema=schema)
        assert build_scrape_options(request).extract.schema_ == schema


class TestBuildCrawlOptions:
    def test_limit_defaults_to_100(self):
        options = build_crawl_options(CrawlRequest(url="https://example.com"))
        assert options.limit == 100
        assert options.formats == [Format.MARKDOWN]

    def test_explicit_limit_is_used(self):
        options = build_crawl_options(CrawlRequest(url="https://example.com", limit=1))
        assert options.limit == 1

    def test_zero_limit_is_kept(self):
        options = build_crawl_options(CrawlRequest(url="https://example.com", limit=0))
        assert options.limit == 0

    def test_formats_use_crawl_vocabulary(self):
        request = CrawlRequest(url="https://example.com", formats=["HTML", "extract", "markdown"])
        assert build_crawl_options(request).formats == [Format.HTML, Format.MARKDOWN]
