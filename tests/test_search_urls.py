"""Tests for query URL construction."""

from __future__ import annotations

import httpx
import pytest
import pytest_asyncio

from brave_search.config import ClientConfig
from brave_search.domain.models import SearchKind, SearchOptions
from brave_search.services.search import SearchClient

WEB = "https://api.search.brave.com/res/v1/web/search"
SUGGEST = "https://api.search.brave.com/res/v1/suggest/search"
SPELLCHECK = "https://api.search.brave.com/res/v1/spellcheck/search"


@pytest_asyncio.fixture
async def client():
    async with httpx.AsyncClient() as http_client:
        yield SearchClient("test-key", http_client)


def test_web_url_without_options(client):
    assert client.build_search_url("panda") == f"{WEB}?q=panda"


def test_web_url_omits_absent_options(client):
    url = client.build_url(SearchKind.WEB, "cat", SearchOptions(country="jp", size=5))
    assert url == f"{WEB}?q=cat&country=jp&count=5"


def test_web_url_accepts_mapping_options(client):
    assert client.build_search_url("cat", {"country": "jp", "size": 5}) == f"{WEB}?q=cat&country=jp&count=5"


def test_web_url_keeps_fixed_parameter_order(client):
    options = {
        "filters": "news,videos",
        "offset": 2,
        "size": 20,
        "country": "de",
        "language": "de",
    }
    assert client.build_search_url("berlin", options) == (
        f"{WEB}?q=berlin&search_lang=de&country=de&count=20&offset=2&result_filter=news%2Cvideos"
    )


def test_suggest_url_uses_language_and_country(client):
    options = SearchOptions(language="fr", country="ca", size=3, filters="news")
    assert client.build_suggest_url("hello", options) == f"{SUGGEST}?q=hello&language=fr&country=ca"


def test_spellcheck_url_only_sends_language(client):
    options = SearchOptions(language="en", country="us", offset=1)
    assert client.build_spellcheck_url("helo", options) == f"{SPELLCHECK}?q=helo&language=en"


def test_kind_may_be_passed_as_string(client):
    assert client.build_url("suggest", "x") == f"{SUGGEST}?q=x"


def test_unknown_kind_is_rejected(client):
    with pytest.raises(ValueError):
        client.build_url("images", "x")


def test_term_special_characters_are_percent_encoded(client):
    url = client.build_search_url("a&b=c?d e")
    assert url == f"{WEB}?q=a%26b%3Dc%3Fd%20e"
    params = httpx.URL(url).params
    assert params.get_list("q") == ["a&b=c?d e"]


def test_encoding_matches_encode_uri_component(client):
    assert client.build_search_url("it's (ok)!*~") == f"{WEB}?q=it's%20(ok)!*~"
    assert client.build_search_url("café/1+1") == f"{WEB}?q=caf%C3%A9%2F1%2B1"


def test_option_values_are_encoded(client):
    url = client.build_suggest_url("q", {"language": "zh hans", "country": "a&b"})
    assert url == f"{SUGGEST}?q=q&language=zh%20hans&country=a%26b"


def test_zero_offset_is_sent(client):
    assert client.build_search_url("cat", {"offset": 0}) == f"{WEB}?q=cat&offset=0"


def test_out_of_range_values_pass_through(client):
    assert client.build_search_url("cat", {"size": 500, "offset": -1}) == f"{WEB}?q=cat&count=500&offset=-1"


def test_unknown_option_keys_are_ignored(client):
    assert client.build_search_url("cat", {"safesearch": "off"}) == f"{WEB}?q=cat"


def test_option_values_of_any_type_pass_through(client):
    assert client.build_search_url("cat", {"size": 5.5}) == f"{WEB}?q=cat&count=5.5"
    assert client.build_search_url("cat", {"language": 5}) == f"{WEB}?q=cat&search_lang=5"
    assert client.build_search_url("cat", {"size": "10"}) == f"{WEB}?q=cat&count=10"


@pytest.mark.asyncio
async def test_config_overrides_base_urls():
    config = ClientConfig(api_key="k", web_search_url="http://proxy.local/web")
    async with httpx.AsyncClient() as http_client:
        client = SearchClient(config=config, http_client=http_client)
        assert client.build_search_url("cat") == "http://proxy.local/web?q=cat"
        assert client.build_suggest_url("cat") == f"{SUGGEST}?q=cat"
