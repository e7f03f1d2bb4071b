"""Unit tests for the web search fallback."""
from typing import List

import httpx
import pytest

from webchat.services import search_service
from webchat.services.search_service import no_results_response, search_web


def _router(wiki_search=None, wiki_summary=None, serp=None, calls: List[httpx.Request] = None):
    """Build a MockTransport handler answering each provider with a canned response."""
    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        if request.url.host == "en.wikipedia.org" and request.url.path == "/w/api.php":
            target = wiki_search
        elif request.url.host == "en.wikipedia.org":
            target = wiki_summary
        elif request.url.host == "serpapi.com":
            target = serp
        else:
            raise AssertionError(f"unexpected request to {request.url}")

        if target is None:
            raise AssertionError(f"provider should not be called: {request.url}")
        if isinstance(target, Exception):
            raise target
        return target
    return handler


EMPTY_WIKI = httpx.Response(200, json={"query": {"search": []}})
EMPTY_SERP = httpx.Response(200, json={})


class TestWikipedia:
    """Tests for the first provider."""

    @pytest.mark.asyncio
    async def test_wikipedia_hit(self, mock_http):
        """Test formatting of a Wikipedia summary extract."""
        calls = []
        handler = _router(
            wiki_search=httpx.Response(200, json={"query": {"search": [{"title": "Albert Einstein"}]}}),
            wiki_summary=httpx.Response(200, json={"extract": "Einstein was a physicist."}),
            calls=calls,
        )
        async with mock_http(handler) as http:
            result = await search_web("Who is Albert Einstein?", client=http)

        assert result == "Based on web search: Einstein was a physicist.\n\nSource: Wikipedia"
        assert len(calls) == 2
        assert calls[0].url.params["srsearch"] == "albert einstein"
        assert calls[0].url.params["list"] == "search"
        assert calls[1].url.raw_path == b"/api/rest_v1/page/summary/Albert%20Einstein"

    @pytest.mark.asyncio
    async def test_missing_extract_falls_through(self, mock_http):
        """Test that a hit without an extract moves on to the second provider."""
        handler = _router(
            wiki_search=httpx.Response(200, json={"query": {"search": [{"title": "Foo"}]}}),
            wiki_summary=httpx.Response(200, json={"title": "Foo"}),
            serp=httpx.Response(200, json={"organic_results": [{"snippet": "Foo bar.", "source": "foo.org"}]}),
        )
        async with mock_http(handler) as http:
            result = await search_web("foo", client=http)

        assert result == "Based on web search: Foo bar.\n\nSource: foo.org"

    @pytest.mark.asyncio
    async def test_network_error_falls_through(self, mock_http):
        """Test that a Wikipedia connection failure is swallowed."""
        handler = _router(
            wiki_search=httpx.ConnectError("connection refused"),
            serp=httpx.Response(200, json={"organic_results": [{"snippet": "Rust is a language.", "source": "rust-lang.org"}]}),
        )
        async with mock_http(handler) as http:
            result = await search_web("rust language", client=http)

        assert result == "Based on web search: Rust is a language.\n\nSource: rust-lang.org"

    @pytest.mark.asyncio
    async def test_malformed_json_falls_through(self, mock_http):
        """Test that an unparseable Wikipedia body is treated as no result."""
        handler = _router(
            wiki_search=httpx.Response(200, text="<html>oops</html>"),
            serp=EMPTY_SERP,
        )
        async with mock_http(handler) as http:
            result = await search_web("oops", client=http)

        assert result == no_results_response("oops")


class TestSerpApi:
    """Tests for the second provider."""

    @pytest.mark.asyncio
    async def test_organic_result_preferred(self, mock_http):
        """Test that the first organic result wins over the knowledge graph."""
        calls = []
        handler = _router(
            wiki_search=EMPTY_WIKI,
            serp=httpx.Response(200, json={
                "organic_results": [
                    {"snippet": "First.", "source": "one.com"},
                    {"snippet": "Second.", "source": "two.com"},
                ],
                "knowledge_graph": {"description": "Graph."},
            }),
            calls=calls,
        )
        async with mock_http(handler) as http:
            result = await search_web("what is a quark", client=http)

        assert result == "Based on web search: First.\n\nSource: one.com"
        assert calls[-1].url.params["q"] == "a quark"
        assert calls[-1].url.params["engine"] == "google"
        assert calls[-1].url.params["api_key"] == "demo"

    @pytest.mark.asyncio
    async def test_knowledge_graph_description(self, mock_http):
        """Test the knowledge graph fallback."""
        handler = _router(
            wiki_search=EMPTY_WIKI,
            serp=httpx.Response(200, json={"knowledge_graph": {"title": "Quark", "description": "A particle."}}),
        )
        async with mock_http(handler) as http:
            result = await search_web("quark", client=http)

        assert result == "Based on web search: A particle.\n\nSource: Google Knowledge Graph"

    @pytest.mark.asyncio
    async def test_knowledge_graph_title_when_no_description(self, mock_http):
        """Test that the title stands in for a missing description."""
        handler = _router(
            wiki_search=EMPTY_WIKI,
            serp=httpx.Response(200, json={"knowledge_graph": {"title": "Quark"}}),
        )
        async with mock_http(handler) as http:
            result = await search_web("quark", client=http)

        assert result == "Based on web search: Quark\n\nSource: Google Knowledge Graph"

    @pytest.mark.asyncio
    async def test_error_status_gives_no_results(self, mock_http):
        """Test that a non-success status from SerpAPI is ignored."""
        handler = _router(
            wiki_search=EMPTY_WIKI,
            serp=httpx.Response(401, json={"error": "Invalid API key"}),
        )
        async with mock_http(handler) as http:
            result = await search_web("quark", client=http)

        assert result == no_results_response("quark")


class TestFallbacks:
    """Tests for the canned reply and the outer failure path."""

    @pytest.mark.asyncio
    async def test_no_results_names_topic(self, mock_http):
        """Test the canned reply when both providers come up empty."""
        handler = _router(wiki_search=EMPTY_WIKI, serp=EMPTY_SERP)
        async with mock_http(handler) as http:
            result = await search_web("What is quantum physics?", client=http)

        assert result == (
            'I searched for information about "quantum physics" but couldn\'t find detailed '
            "results. This might be a specialized topic or require more specific terms."
        )

    @pytest.mark.asyncio
    async def test_outer_failure_returns_none(self, mock_http, monkeypatch):
        """Test that a failure outside the providers yields None instead of raising."""
        def broken(query):
            raise RuntimeError("boom")

        monkeypatch.setattr(search_service, "extract_search_term", broken)
        async with mock_http(_router()) as http:
            result = await search_web("anything", client=http)

        assert result is None
