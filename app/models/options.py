from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Format(str, Enum):
    """Output representations understood by the scraping service."""

    MARKDOWN = "markdown"
    HTML = "html"
    EXTRACT = "extract"


class ExtractOptions(BaseModel):
    """Structured-extraction directive attached to a scrape."""

    model_config = ConfigDict(populate_by_name=True)

    schema_: Any = Field(default=None, alias="schema")


class ScrapeOptions(BaseModel):
    formats: List[Format] = Field(min_length=1)
    extract: Optional[ExtractOptions] = None


class CrawlOptions(BaseModel):
    formats: List[Format] = Field(min_length=1)
    limit: int
