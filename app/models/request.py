from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ScrapeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    url: str = Field(description="Page to scrape. Validity is judged by the scraping service.")
    formats: Optional[List[Any]] = Field(
        default=None,
        description="Output formats, case-insensitive: markdown, html, extract.",
        examples=[["markdown", "html"]],
    )
    schema_: Optional[Any] = Field(default=None, alias="schema")
    """JSON schema for structured extraction.

    When present, the ``extract`` format is requested automatically and the
    schema is forwarded untouched to the scraping service.
    """
