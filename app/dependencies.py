from fastapi import Request
from firecrawl import AsyncFirecrawl


def get_firecrawl(request: Request) -> AsyncFirecrawl:
    """Return the Firecrawl client created at startup (see ``app.main.lifespan``)."""
    return request.app.state.firecrawl
