import pytest
import requests
import responses

from exercisekit.link_checker import (
    CrawlCommand,
    CrawlError,
    CrawlState,
    check_links,
    visit_page,
)


@pytest.fixture
def web():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


def _page(*hrefs):
    anchors = "".join(f'<a href="{href}">link</a>' for href in hrefs)
    return f"<html><body>{anchors}<a>no target</a></body></html>"


def test_visit_page_resolves_links(web):
    web.add(
        responses.GET,
        "https://example.com/",
        body=_page("/a", "https://other.example.org/b"),
        content_type="text/html",
    )
    with requests.Session() as session:
        links = visit_page(session, CrawlCommand("https://example.com/", True))
    assert links == ["https://example.com/a", "https://other.example.org/b"]


def test_visit_page_ignores_unparsable_links(web):
    web.add(
        responses.GET,
        "https://example.com/",
        body=_page("http://[oops", "/ok"),
        content_type="text/html",
    )
    with requests.Session() as session:
        links = visit_page(session, CrawlCommand("https://example.com/", True))
    assert links == ["https://example.com/ok"]


def test_visit_page_without_extraction_returns_no_links(web):
    web.add(responses.GET, "https://example.com/", body=_page("/a"), content_type="text/html")
    with requests.Session() as session:
        assert visit_page(session, CrawlCommand("https://example.com/", False)) == []


def test_visit_page_bad_status(web):
    web.add(responses.GET, "https://example.com/gone", status=404)
    with requests.Session() as session:
        with pytest.raises(CrawlError) as info:
            visit_page(session, CrawlCommand("https://example.com/gone", True))
    assert str(info.value).startswith("bad http response: 404")


def test_visit_page_request_failure(web):
    with requests.Session() as session:
        with pytest.raises(CrawlError) as info:
            visit_page(session, CrawlCommand("https://example.com/unknown", True))
    assert str(info.value).startswith("request error: ")


def test_crawl_state_marks_pages_once():
    state = CrawlState("https://example.com")
    assert state.mark_visited("https://example.com/") is False
    assert state.mark_visited("https://example.com/a") is True
    assert state.mark_visited("https://example.com/a") is False


def test_crawl_state_extracts_only_on_start_domain():
    state = CrawlState("https://example.com/")
    assert state.should_extract_links("https://example.com/deep/page") is True
    assert state.should_extract_links("https://other.example.org/") is False
    assert state.should_extract_links("http://127.0.0.1/") is False


def test_crawl_state_needs_a_domain():
    with pytest.raises(ValueError):
        CrawlState("http://127.0.0.1/")


def test_check_links_reports_bad_urls(web):
    web.add(
        responses.GET,
        "https://example.com/",
        body=_page("/a", "/missing", "https://other.example.org/page", "/"),
        content_type="text/html",
    )
    web.add(
        responses.GET,
        "https://example.com/a",
        body=_page("/", "/missing"),
        content_type="text/html",
    )
    web.add(responses.GET, "https://example.com/missing", status=404)
    web.add(
        responses.GET,
        "https://other.example.org/page",
        body=_page("/never"),
        content_type="text/html",
    )

    bad = check_links("https://example.com/", thread_count=4)

    assert bad == ["https://example.com/missing"]
    requested = sorted(call.request.url for call in web.calls)
    assert requested == sorted(
        [
            "https://example.com/",
            "https://example.com/a",
            "https://example.com/missing",
            "https://other.example.org/page",
        ]
    )


def test_check_links_bad_start_page(web):
    web.add(responses.GET, "https://example.com/", status=500)
    assert check_links("https://example.com/", thread_count=2) == ["https://example.com/"]


def test_check_links_needs_a_thread():
    with pytest.raises(ValueError):
        check_links("https://example.com/", thread_count=0)