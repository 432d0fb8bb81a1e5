"""Crawl a site from a start page and report the links that fail to load."""

from __future__ import annotations

import argparse
import ipaddress
import queue
import sys
import threading
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import urljoin, urlsplit, urlunsplit

import requests
from bs4 import BeautifulSoup


class CrawlError(Exception):
    """Raised when a page cannot be fetched or answers with a failure status."""


@dataclass(frozen=True)
class CrawlCommand:
    """A page to visit, and whether to collect the links on it."""

    url: str
    extract_links: bool


def _normalize(url: str) -> str:
    parts = urlsplit(url)
    if parts.netloc and not parts.path:
        parts = parts._replace(path="/")
    return urlunsplit(parts)


def _domain(url: str) -> Optional[str]:
    host = urlsplit(url).hostname
    if not host:
        return None
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return host
    return None


def visit_page(session: requests.Session, command: CrawlCommand) -> list[str]:
    """Fetch the page and return the absolute URLs of its links.

    Links are only collected when ``command.extract_links`` is set.
    """
    print(f"Checking {command.url}")
    try:
        response = session.get(command.url)
    except requests.RequestException as exc:
        raise CrawlError(f"request error: {exc}") from exc
    if not 200 <= response.status_code < 300:
        status = f"{response.status_code} {response.reason or ''}".rstrip()
        raise CrawlError(f"bad http response: {status}")

    if not command.extract_links:
        return []

    base_url = response.url
    document = BeautifulSoup(response.text, "html.parser")
    links = []
    for anchor in document.find_all("a", href=True):
        href = anchor["href"]
        try:
            links.append(urljoin(base_url, href))
        except ValueError as exc:
            print(f"On {base_url}: ignored unparsable {href!r}: {exc}")
    return links


class CrawlState:
    """Tracks the start domain and the pages already visited."""

    def __init__(self, start_url: str) -> None:
        start_url = _normalize(start_url)
        domain = _domain(start_url)
        if domain is None:
            raise ValueError(f"start URL has no domain: {start_url!r}")
        self.domain = domain
        self.visited_pages: set[str] = {start_url}

    def should_extract_links(self, url: str) -> bool:
        """Return whether links within the given page should be extracted."""
        return _domain(url) == self.domain

    def mark_visited(self, url: str) -> bool:
        """Mark the page as visited; return False if it had been visited already."""
        url = _normalize(url)
        if url in self.visited_pages:
            return False
        self.visited_pages.add(url)
        return True


@dataclass
class _Outcome:
    command: CrawlCommand
    links: list[str] = field(default_factory=list)
    error: Optional[Exception] = None


def _crawl_worker(commands: queue.Queue, results: queue.Queue) -> None:
    with requests.Session() as session:
        while (command := commands.get()) is not None:
            try:
                results.put(_Outcome(command, links=visit_page(session, command)))
            except Exception as exc:
                results.put(_Outcome(command, error=exc))


def check_links(start_url: str, thread_count: int = 16) -> list[str]:
    """Crawl from ``start_url`` with ``thread_count`` threads; return the bad URLs.

    Links on pages of the start URL's domain are followed; pages elsewhere are
    only checked.
    """
    if thread_count < 1:
        raise ValueError("thread_count must be at least 1")
    start_url = _normalize(start_url)
    state = CrawlState(start_url)
    commands: queue.Queue = queue.Queue()
    results: queue.Queue = queue.Queue()
    workers = [
        threading.Thread(target=_crawl_worker, args=(commands, results), daemon=True)
        for _ in range(thread_count)
    ]
    for worker in workers:
        worker.start()

    try:
        commands.put(CrawlCommand(start_url, extract_links=True))
        pending = 1
        bad_urls = []
        while pending:
            outcome = results.get()
            pending -= 1
            if isinstance(outcome.error, CrawlError):
                bad_urls.append(outcome.command.url)
                print(f"Got crawling error: {outcome.error}")
                continue
            if outcome.error is not None:
                raise outcome.error
            for url in outcome.links:
                if state.mark_visited(url):
                    commands.put(CrawlCommand(url, state.should_extract_links(url)))
                    pending += 1
        return bad_urls
    finally:
        for _ in workers:
            commands.put(None)


def main(argv: list[str] | None = None) -> int:
    """Check the links reachable from a start page and print the bad ones."""
    parser = argparse.ArgumentParser(description="Report links that fail to load.")
    parser.add_argument("start_url", nargs="?", default="https://www.google.org")
    parser.add_argument("--threads", type=int, default=16, help="number of crawler threads")
    args = parser.parse_args(argv)
    try:
        bad_urls = check_links(args.start_url, args.threads)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    print(f"Bad URLs: {bad_urls!r}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())