"""
Web search fallback: Wikipedia first, then SerpAPI, then a canned reply.
"""

from typing import Optional
from urllib.parse import quote

import httpx
from loguru import logger

from webchat.config import settings
from webchat.models.schemas import SearchResult
from webchat.services.responder import extract_search_term


def no_results_response(term: str) -> str:
    return (
        f'I searched for information about "{term}" but couldn\'t find detailed results. '
        "This might be a specialized topic or require more specific terms."
    )


async def search_wikipedia(client: httpx.AsyncClient, term: str) -> Optional[SearchResult]:
    """
    Search Wikipedia for `term` and return the summary extract of the top hit.
    Returns None when there is no hit, no extract, or the request fails.
    """
    try:
        search_resp = await client.get(
            settings.WIKIPEDIA_SEARCH_URL,
            params={
                "action": "query",
                "list": "search",
                "srsearch": term,
                "format": "json",
                "origin": "*",
            },
        )
        hits = (search_resp.json().get("query") or {}).get("search") or []
        if not hits:
            logger.debug(f"Wikipedia: no results for '{term}'")
            return None

        title = hits[0]["title"]
        summary_resp = await client.get(
            settings.WIKIPEDIA_SUMMARY_URL + quote(title, safe="!*'()")
        )
        extract = summary_resp.json().get("extract")
        if not extract:
            logger.debug(f"Wikipedia: no extract for '{title}'")
            return None

        logger.info(f"Wikipedia hit for '{term}': {title}")
        return SearchResult(snippet=extract, source_label="Wikipedia")

    except Exception as e:
        logger.error(f"Wikipedia search API error: {e}")
        return None


async def search_serpapi(client: httpx.AsyncClient, term: str) -> Optional[SearchResult]:
    """Query SerpAPI's Google engine; prefer the first organic result over the knowledge graph."""
    try:
        response = await client.get(
            settings.SERPAPI_URL,
            params={"engine": "google", "q": term, "api_key": settings.SERPAPI_KEY},
        )
        if not response.is_success:
            logger.warning(f"SerpAPI returned {response.status_code} for '{term}'")
            return None

        data = response.json()
        organic = data.get("organic_results") or []
        if organic:
            first = organic[0]
            return SearchResult(
                snippet=str(first.get("snippet", "")),
                source_label=str(first.get("source", "")),
            )

        kg = data.get("knowledge_graph")
        if kg:
            return SearchResult(
                snippet=str(kg.get("description") or kg.get("title", "")),
                source_label="Google Knowledge Graph",
            )
        return None

    except Exception as e:
        logger.error(f"SerpAPI search error: {e}")
        return None


async def _search(client: httpx.AsyncClient, query: str) -> str:
    term = extract_search_term(query)

    result = await search_wikipedia(client, term)
    if result is None:
        result = await search_serpapi(client, term)

    if result is not None:
        return result.format()
    logger.info(f"No web results for '{term}'")
    return no_results_response(term)


async def search_web(query: str, client: Optional[httpx.AsyncClient] = None) -> Optional[str]:
    """
    Look `query` up on the web. Providers are tried one after the other and
    their failures are swallowed; None is returned only if the lookup itself
    breaks outside the providers.
    """
    try:
        if client is not None:
            return await _search(client, query)

        async with httpx.AsyncClient(
            timeout=settings.SEARCH_TIMEOUT,
            headers={"User-Agent": settings.USER_AGENT},
        ) as own_client:
            return await _search(own_client, query)

    except Exception as e:
        logger.error(f"Web search error: {e}")
        return None
