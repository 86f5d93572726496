"""ProEmailHunter: one-level domain crawler and email extractor.

Overview
--------
ProEmailHunter reads domains (one per line) and, for each of them, fetches the
home page, follows the same-host links found on it exactly one level deep, and
reports every email address discovered together with the page it came from.

Execution Stages
----------------
1) Seed Fetch: The domain URL is fetched with ``aiohttp``; ``href`` values and
   the raw body are scanned for addresses and same-host links.
2) Fan-out: Every same-host link found on the seed page is fetched once, with at
   most ``concurrency`` requests in flight (``asyncio.Semaphore``).
3) Merge: Per-page results are folded into a single ``email -> [source URLs]``
   mapping as they complete. The seed page is always merged first.
4) Reporting: A colored summary is printed per domain (``colorama``).

Transport failures (DNS, refused connections, timeouts) are recorded per page
and never abort a crawl. Non-2xx responses simply yield nothing.

Configuration
-------------
Settings are loaded from ``config.json`` (or the file named by
``EMAILHUNTER_CONFIG``) and then from environment variables:

- ``concurrency`` / ``EMAILHUNTER_CONCURRENCY``: Maximum concurrent fetches
- ``timeout`` / ``EMAILHUNTER_TIMEOUT``: Per-request timeout in seconds
- ``max_body_bytes`` / ``EMAILHUNTER_MAX_BODY_BYTES``: Response body read cap

CLI Usage
---------
    cat domains.txt | python3 email_hunter.py [options]
    python3 email_hunter.py [options] example.com other.org

Options:
- ``-c``, ``--concurrency``: Number of concurrent requests
- ``-t``, ``--timeout``: Request timeout in seconds
- ``--silent``: Do not print the banner
- ``--version``: Print the version and exit
- ``--verbose``: Print per-page progress and errors
- ``--max-body-bytes``: Maximum bytes read per page (0 disables the cap)
- ``--no-color``: Plain text output
"""

import os
import re
import sys
import json
import argparse
import asyncio
import errno
import logging
from logging.handlers import RotatingFileHandler
import socket
import ssl
from dataclasses import dataclass
from typing import (
    Awaitable,
    Callable,
    Dict,
    FrozenSet,
    Iterable,
    Iterator,
    List,
    Optional,
    Set,
    TextIO,
    Tuple,
)
from urllib.parse import urljoin, urlparse

import aiohttp
from colorama import Fore, Style, just_fix_windows_console

__version__ = "1.0.0"

DEFAULT_CONCURRENCY = 30
DEFAULT_TIMEOUT = 15.0
DEFAULT_MAX_BODY_BYTES = 5_000_000


logger = logging.getLogger(__name__)


# ---------------------- Logging ----------------------


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Send log records to stderr and, optionally, a small rotating file.

    ``EMAILHUNTER_LOG_FILE`` names the file (default ``email_hunter.log``); an
    empty value keeps logging on stderr only. Later calls only change the level.
    """
    root_logger = logging.getLogger()
    if getattr(configure_logging, "_configured", False):
        root_logger.setLevel(level)
        return logger

    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s", datefmt="%H:%M:%S")
    handlers = [logging.StreamHandler()]
    log_file = os.environ.get("EMAILHUNTER_LOG_FILE", "email_hunter.log")
    if log_file:
        handlers.append(RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=2, delay=True))
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    logging.getLogger("aiohttp").setLevel(logging.WARNING)

    configure_logging._configured = True
    return logger


# ---------------------- Config & input normalization ----------------------


# (key, environment variable, cast, accepts)
_SETTINGS = (
    ("concurrency", "EMAILHUNTER_CONCURRENCY", int, lambda v: v >= 1),
    ("timeout", "EMAILHUNTER_TIMEOUT", float, lambda v: v > 0),
    ("max_body_bytes", "EMAILHUNTER_MAX_BODY_BYTES", int, lambda v: v >= 0),
)


def _coerce_setting(value, cast, accepts):
    """Cast a raw setting and range-check it; raises ValueError when unusable."""
    if isinstance(value, bool):
        raise ValueError("boolean is not a number")
    if isinstance(value, str):
        value = value.strip()
    converted = cast(value)
    if cast is int and isinstance(value, float) and value != converted:
        raise ValueError("not a whole number")
    if not accepts(converted):
        raise ValueError("out of range")
    return converted


def load_config(path: Optional[str] = None) -> dict:
    """Load crawl settings from a JSON file and the environment.

    Args:
        path: Config file to read. Defaults to ``EMAILHUNTER_CONFIG`` or
            ``config.json`` in the working directory.

    Returns:
        A dictionary like ``{"concurrency": int, "timeout": float,
        "max_body_bytes": int}``. Environment variables win over the file.
        Values that do not parse, or fall outside ``concurrency >= 1``,
        ``timeout > 0`` and ``max_body_bytes >= 0``, are logged and ignored.
    """
    config = {
        "concurrency": DEFAULT_CONCURRENCY,
        "timeout": DEFAULT_TIMEOUT,
        "max_body_bytes": DEFAULT_MAX_BODY_BYTES,
    }
    path = path or os.environ.get("EMAILHUNTER_CONFIG", "config.json")
    data = {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
            logger.debug("Loaded configuration from %s", path)
    except (OSError, ValueError) as exc:
        logger.debug("Could not load %s: %s", path, exc)
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a JSON object", path)
        data = {}

    for key, env_name, cast, accepts in _SETTINGS:
        raw = data.get(key)
        if raw is None or raw == "":
            continue
        try:
            config[key] = _coerce_setting(raw, cast, accepts)
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid %s=%r in %s", key, raw, path)

    for key, env_name, cast, accepts in _SETTINGS:
        raw = os.environ.get(env_name)
        if raw is None or not raw.strip():
            continue
        try:
            config[key] = _coerce_setting(raw, cast, accepts)
        except ValueError:
            logger.warning("Ignoring invalid %s=%r", env_name, raw)
    return config


def normalize_domain_url(raw: str) -> Optional[str]:
    """Turn an input line into the seed URL for a crawl.

    Bare hosts such as ``example.com`` get an ``https://`` scheme; anything that
    already names a scheme is used verbatim.

    Returns:
        The seed URL, or ``None`` for blank input.
    """
    s = (raw or "").strip()
    if not s:
        return None
    if "://" not in s:
        s = "https://" + s
    return s


# ---------------------- Extraction rules ----------------------

# Global: substrings that mark a link as a non-page asset (never crawled or scanned)
EXCLUDE_PATTERNS: Tuple[str, ...] = (
    ".jpg", ".png", ".gif", ".webp", ".ico", ".mp4", ".pdf", ".eot",
    ".doc", ".docx", ".xls", ".xlsx", ".woff", ".woff2", ".css", ".json",
    ".xml", ".rss", ".svg", ".yaml", ".yml", ".csv", ".dockerfile", ".cfg",
    ".lock", ".js", ".md", ".toml",
)

# Global: email extraction regex (ASCII word boundaries, TLD of 2+ letters)
EMAIL_RE = re.compile(
    r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b", re.ASCII)

# Global: href attribute scanners, one per quote style
HREF_RES: Tuple[re.Pattern, ...] = (
    re.compile(r'href="([^"]*)"'),
    re.compile(r"href='([^']*)'"),
)

_MAILTO = "mailto:"


@dataclass(frozen=True)
class ExtractionRules:
    """Filters applied while scanning a page.

    Built once and shared by every fetch of a run. ``DEFAULT_RULES`` keeps the
    historical heuristics, including rejecting any address that contains
    ``email``; pass a different instance to relax them.
    """

    exclude_patterns: Tuple[str, ...] = EXCLUDE_PATTERNS
    email_re: re.Pattern = EMAIL_RE
    rejected_substrings: Tuple[str, ...] = ("example", "email")
    image_markers: Tuple[str, ...] = (".png", ".jpg", ".webp", ".gif")
    min_length: int = 5

    def should_exclude(self, link: str) -> bool:
        """Return True if the link points at an excluded asset type."""
        lower_link = link.lower()
        return any(pattern in lower_link for pattern in self.exclude_patterns)

    def is_valid_email(self, email: str) -> bool:
        """Reject placeholders, too-short tokens and misparsed image names.

        Args:
            email: A token matched by ``email_re``.

        Returns:
            True when none of the rejection heuristics apply.
        """
        lower_email = email.lower()
        if any(sub in lower_email for sub in self.rejected_substrings):
            return False
        if len(email) < self.min_length:
            return False
        # foo@2x.png style asset names (case-sensitive)
        if any(marker in email for marker in self.image_markers):
            return False
        return True

    def find_emails(self, text: str) -> List[str]:
        return [m for m in self.email_re.findall(text) if m and self.is_valid_email(m)]


DEFAULT_RULES = ExtractionRules()


def should_exclude(link: str, rules: ExtractionRules = DEFAULT_RULES) -> bool:
    """Module-level shortcut for :meth:`ExtractionRules.should_exclude`."""
    return rules.should_exclude(link)


def is_valid_email(email: str, rules: ExtractionRules = DEFAULT_RULES) -> bool:
    """Module-level shortcut for :meth:`ExtractionRules.is_valid_email`."""
    return rules.is_valid_email(email)


# ---------------------- Page extraction ----------------------


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of fetching and scanning a single page.

    Attributes:
        source_url: The URL that was fetched.
        emails: Validated addresses found on the page.
        links: Absolute same-host URLs discovered on the page.
        fetch_error: The transport error, if the request itself failed.
    """

    source_url: str
    emails: FrozenSet[str] = frozenset()
    links: FrozenSet[str] = frozenset()
    fetch_error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.fetch_error is None


def _host_key(url: str) -> Tuple[str, Optional[int]]:
    """Hostname/port pair used for same-origin checks. May raise ValueError."""
    parsed = urlparse(url)
    return (parsed.hostname or "").lower(), parsed.port


def _resolve_same_origin(
    link: str, target_url: str, origin_key: Tuple[str, Optional[int]]
) -> Optional[str]:
    """Resolve ``link`` against the page URL and keep it only if same-host.

    Args:
        link: Raw ``href`` value.
        target_url: URL of the page the link was found on.
        origin_key: ``(hostname, port)`` of the crawl's seed URL.

    Returns:
        The absolute URL when it lives on the origin host; otherwise ``None``.
    """
    try:
        resolved = urljoin(target_url, link)
        key = _host_key(resolved)
    except ValueError as exc:
        # Malformed IPv6 literals, bad ports and the like
        logger.debug("Dropping malformed link %r on %s: %s", link, target_url, exc)
        return None
    if not key[0] or key != origin_key:
        return None
    return resolved


def extract_from_html(
    html: str,
    target_url: str,
    origin_url: str,
    rules: ExtractionRules = DEFAULT_RULES,
) -> Tuple[Set[str], Set[str]]:
    """Scan raw markup for email addresses and same-host links.

    This is a textual scan, not a DOM parse: ``href="..."`` and ``href='...'``
    occurrences are collected independently, wherever they appear (comments
    and inline scripts included), and the whole body is scanned for addresses
    afterwards.

    Steps per ``href`` value:
    - Skip it entirely when it contains an excluded asset pattern.
    - ``mailto:`` targets contribute their addresses and nothing else.
    - Any other value is scanned for embedded addresses and, if it resolves to
      the origin host, recorded as a link.

    Args:
        html: Decoded page body.
        target_url: URL the body was fetched from (base for relative links).
        origin_url: Seed URL of the crawl; decides which hosts are in scope.
        rules: Exclusion and validation rules.

    Returns:
        ``(emails, links)`` as sets.
    """
    emails: Set[str] = set()
    links: Set[str] = set()

    try:
        origin_key = _host_key(origin_url)
    except ValueError as exc:
        logger.debug("Origin %s is not a valid URL: %s", origin_url, exc)
        origin_key = ("", None)

    for href_re in HREF_RES:
        for link in href_re.findall(html):
            if rules.should_exclude(link):
                continue

            if link.lower().startswith(_MAILTO):
                emails.update(rules.find_emails(link[len(_MAILTO):]))
                continue

            # Broken anchors sometimes carry a bare address in the href
            emails.update(rules.find_emails(link))

            resolved = _resolve_same_origin(link, target_url, origin_key)
            if resolved:
                links.add(resolved)

    emails.update(rules.find_emails(html))
    return emails, links


# ---------------------- Fetching ----------------------

_DEFAULT_HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/119 Safari/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
}

_CHUNK_SIZE = 64 * 1024

# Errors that mean the request itself failed (as opposed to a bad status)
TRANSPORT_ERRORS = (aiohttp.ClientError, asyncio.TimeoutError, ValueError)


def _classify_net_error(exc: BaseException) -> str:
    """Label a failed fetch for the ``[ERROR]`` line: timeout, tls, dns, refused, connect, url or other."""
    if isinstance(exc, asyncio.TimeoutError):
        return "timeout"
    if isinstance(exc, (aiohttp.ClientSSLError, ssl.SSLError)):
        return "tls"
    cause = getattr(exc, "os_error", exc)
    if isinstance(cause, socket.gaierror):
        return "dns"
    if isinstance(exc, aiohttp.ClientConnectorError):
        return "refused" if cause.errno == errno.ECONNREFUSED else "connect"
    if isinstance(exc, ValueError):
        return "url"
    return "other"


async def _read_capped(resp: aiohttp.ClientResponse, limit: Optional[int]) -> Tuple[bytes, bool]:
    """Read at most ``limit`` bytes of a response body.

    Returns:
        ``(body, truncated)``; ``truncated`` is True when bytes were left unread.
    """
    if not limit:
        return await resp.read(), False
    chunks: List[bytes] = []
    size = 0
    async for chunk in resp.content.iter_chunked(_CHUNK_SIZE):
        remaining = limit - size
        if len(chunk) > remaining:
            chunks.append(chunk[:remaining])
            return b"".join(chunks), True
        chunks.append(chunk)
        size += len(chunk)
    return b"".join(chunks), False


def _decode_body(body: bytes, charset: Optional[str]) -> str:
    try:
        return body.decode(charset or "utf-8", errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")


async def fetch_page(
    session: aiohttp.ClientSession,
    target_url: str,
    origin_url: str,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    verbose: bool = False,
    rules: ExtractionRules = DEFAULT_RULES,
    max_body_bytes: Optional[int] = DEFAULT_MAX_BODY_BYTES,
) -> ExtractionResult:
    """Fetch one page and extract its emails and same-host links.

    Policy:
      - One GET, bounded by ``timeout`` seconds. Transport failures are
        captured in ``fetch_error`` and return empty sets.
      - A non-2xx status returns empty sets without an error.
      - At most ``max_body_bytes`` of the body are read; a truncated body is
        scanned as-is.

    Args:
        session: Shared ``aiohttp`` session for the current crawl.
        target_url: Absolute URL to fetch.
        origin_url: Seed URL of the crawl, used for same-host checks.
        timeout: Total request timeout in seconds.
        verbose: Emit ``[PROCESSING]``/``[ERROR]`` diagnostics.
        rules: Exclusion and validation rules.
        max_body_bytes: Body read cap in bytes; ``None`` or 0 disables it.

    Returns:
        The page's :class:`ExtractionResult`.
    """
    if verbose:
        logger.info("[PROCESSING] %s", target_url)

    try:
        async with session.get(
            target_url,
            allow_redirects=True,
            timeout=aiohttp.ClientTimeout(total=timeout),
        ) as resp:
            if not 200 <= resp.status < 300:
                if verbose:
                    logger.warning("[ERROR] HTTP %d for %s", resp.status, target_url)
                return ExtractionResult(source_url=target_url)
            body, truncated = await _read_capped(resp, max_body_bytes)
            charset = resp.charset
    except TRANSPORT_ERRORS as exc:
        if verbose:
            logger.warning(
                "[ERROR] Could not fetch %s (%s) -> %s",
                target_url, _classify_net_error(exc), str(exc) or exc.__class__.__name__,
            )
        return ExtractionResult(source_url=target_url, fetch_error=exc)

    if truncated:
        logger.debug("Body of %s truncated at %d bytes", target_url, max_body_bytes)

    emails, links = extract_from_html(
        _decode_body(body, charset), target_url, origin_url, rules)
    return ExtractionResult(
        source_url=target_url,
        emails=frozenset(emails),
        links=frozenset(links),
    )


# ---------------------- Results & reporting ----------------------


class DomainReport:
    """Deduplicated ``email -> [source URLs]`` mapping for one domain.

    Source lists keep merge order, so the seed page comes first for any
    address it contained.
    """

    def __init__(self, domain_url: str):
        self.domain_url = domain_url
        self.sources: Dict[str, List[str]] = {}
        self.pages_fetched = 0
        self.pages_failed = 0

    def merge(self, result: ExtractionResult, source: Optional[str] = None) -> int:
        """Fold one page's result into the report.

        Args:
            result: A completed :class:`ExtractionResult`.
            source: Attribution URL; defaults to ``result.source_url``.

        Returns:
            Number of addresses that were new to this report.
        """
        source = source or result.source_url
        if result.ok:
            self.pages_fetched += 1
        else:
            self.pages_failed += 1

        added = 0
        for email in sorted(result.emails):
            urls = self.sources.get(email)
            if urls is None:
                self.sources[email] = [source]
                added += 1
                logger.debug("Found email: %s (source: %s)", email, source)
            elif source not in urls:
                urls.append(source)
                logger.debug("Duplicate email: %s (new source: %s)", email, source)
        return added

    @property
    def emails(self) -> List[str]:
        return list(self.sources)

    def first_source(self, email: str) -> str:
        return self.sources[email][0]

    def __len__(self) -> int:
        return len(self.sources)

    def __contains__(self, email: object) -> bool:
        return email in self.sources

    def __repr__(self) -> str:
        return f"DomainReport({self.domain_url!r}, emails={len(self)})"


_RULE = "═" * 80


def render_report(report: DomainReport, color: bool = True) -> str:
    """Format a report the way it is printed on the terminal.

    Args:
        report: The finished domain report.
        color: Include ANSI color codes.

    Returns:
        Multi-line text ending with a newline.
    """
    def paint(text: str, fore: str) -> str:
        return f"{fore}{text}{Style.RESET_ALL}" if color else text

    if not report:
        return f"\n{paint('❌ NO EMAILS FOUND:', Fore.LIGHTRED_EX)} {report.domain_url}\n\n"

    lines = [
        "",
        paint(_RULE, Fore.LIGHTBLUE_EX),
        f"{paint('🎯 DOMAIN:', Fore.LIGHTGREEN_EX)} {report.domain_url}",
        f"{paint('📧 FOUND:', Fore.LIGHTGREEN_EX)} {len(report)} unique email(s)",
        paint(_RULE, Fore.LIGHTBLUE_EX),
    ]
    for i, (email, sources) in enumerate(report.sources.items(), start=1):
        source_info = sources[0]
        if len(sources) > 1:
            source_info = f"{sources[0]} (+{len(sources) - 1} more pages)"
        lines.append(
            f"{paint(f'{i}.', Fore.LIGHTCYAN_EX)} {source_info} :: {paint(email, Fore.LIGHTGREEN_EX)}")
    lines.append(paint(_RULE, Fore.LIGHTBLUE_EX))
    return "\n".join(lines) + "\n\n"


# ---------------------- High level crawl ----------------------

Fetcher = Callable[..., Awaitable[ExtractionResult]]


async def crawl_domain(
    domain_url: str,
    *,
    max_concurrency: int = DEFAULT_CONCURRENCY,
    timeout: float = DEFAULT_TIMEOUT,
    verbose: bool = False,
    rules: ExtractionRules = DEFAULT_RULES,
    max_body_bytes: Optional[int] = DEFAULT_MAX_BODY_BYTES,
    fetcher: Optional[Fetcher] = None,
) -> DomainReport:
    """Crawl the seed page plus its same-host links and merge the results.

    The seed page is fetched and merged first. Its links form a fixed frontier;
    pages fetched from the frontier never add to it. Every frontier URL is
    fetched exactly once with at most ``max_concurrency`` requests in flight,
    and results are merged here, one at a time, in completion order.

    Args:
        domain_url: Seed URL; also the origin for every same-host check.
        max_concurrency: Maximum simultaneous frontier fetches.
        timeout: Per-request timeout in seconds.
        verbose: Per-page diagnostics.
        rules: Exclusion and validation rules shared by every fetch.
        max_body_bytes: Body read cap passed to each fetch.
        fetcher: Replacement for :func:`fetch_page` (same signature).

    Returns:
        The merged :class:`DomainReport`.
    """
    if max_concurrency < 1:
        raise ValueError("max_concurrency must be at least 1")

    fetch = fetcher or fetch_page
    report = DomainReport(domain_url)
    connector = aiohttp.TCPConnector(limit=max_concurrency, ttl_dns_cache=120)

    async with aiohttp.ClientSession(connector=connector, headers=_DEFAULT_HEADERS) as session:
        async def _fetch(url: str) -> ExtractionResult:
            return await fetch(
                session, url, domain_url,
                timeout=timeout, verbose=verbose,
                rules=rules, max_body_bytes=max_body_bytes,
            )

        seed = await _fetch(domain_url)
        report.merge(seed, source=domain_url)

        frontier = sorted(seed.links)  # stabilize dispatch order
        logger.debug("Seed %s yielded %d email(s) and %d link(s)",
                     domain_url, len(seed.emails), len(frontier))

        if frontier:
            semaphore = asyncio.Semaphore(max_concurrency)

            async def _bounded(url: str) -> ExtractionResult:
                async with semaphore:
                    return await _fetch(url)

            tasks = [asyncio.ensure_future(_bounded(url)) for url in frontier]
            try:
                for next_done in asyncio.as_completed(tasks):
                    report.merge(await next_done)
            finally:
                # nothing may outlive the session
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)

    logger.debug(
        "Crawl of %s complete: %d page(s) fetched, %d failed, %d unique email(s)",
        domain_url, report.pages_fetched, report.pages_failed, len(report),
    )
    return report


async def process_domain(
    domain_url: str,
    max_concurrency: int = DEFAULT_CONCURRENCY,
    timeout: float = DEFAULT_TIMEOUT,
    verbose: bool = False,
    *,
    rules: ExtractionRules = DEFAULT_RULES,
    max_body_bytes: Optional[int] = DEFAULT_MAX_BODY_BYTES,
    color: bool = True,
    out: Optional[TextIO] = None,
) -> DomainReport:
    """Crawl a domain and print its report.

    Args:
        domain_url: Seed URL of the domain.
        max_concurrency: Maximum simultaneous frontier fetches.
        timeout: Per-request timeout in seconds.
        verbose: Per-page diagnostics.
        rules: Exclusion and validation rules.
        max_body_bytes: Body read cap in bytes.
        color: Colorize the printed report.
        out: Stream to print to (defaults to ``sys.stdout``).

    Returns:
        The report that was printed.
    """
    report = await crawl_domain(
        domain_url,
        max_concurrency=max_concurrency,
        timeout=timeout,
        verbose=verbose,
        rules=rules,
        max_body_bytes=max_body_bytes,
    )
    out = out or sys.stdout
    out.write(render_report(report, color=color))
    out.flush()
    return report


class InputReadError(Exception):
    """The domain list could not be read."""


def read_domains(stream: Iterable[str]) -> Iterator[str]:
    """Yield lines from ``stream``, wrapping read failures in InputReadError."""
    try:
        for line in stream:
            yield line
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(exc) from exc


async def hunt(
    lines: Iterable[str],
    max_concurrency: int = DEFAULT_CONCURRENCY,
    timeout: float = DEFAULT_TIMEOUT,
    verbose: bool = False,
    **kwargs,
) -> List[DomainReport]:
    """Run one crawl per non-blank input line, strictly one after another.

    Lines are pulled lazily, so the next domain is read only after the
    previous report has been printed. Errors raised while reading ``lines``
    propagate to the caller.

    Returns:
        The reports in input order.
    """
    reports: List[DomainReport] = []
    for line in lines:
        domain_url = normalize_domain_url(line)
        if not domain_url:
            continue
        reports.append(await process_domain(
            domain_url, max_concurrency, timeout, verbose, **kwargs))
    return reports


# ---------------------- CLI ----------------------

_BANNER = r"""
    ____               ______                _ __   __  __            __
   / __ \_________    / ____/___ ___  ____ _(_) /  / / / /_  ______  / /____  _____
  / /_/ / ___/ __ \  / __/ / __ `__ \/ __ `/ / /  / /_/ / / / / __ \/ __/ _ \/ ___/
 / ____/ /  / /_/ / / /___/ / / / / / /_/ / / /  / __  / /_/ / / / / /_/  __/ /
/_/   /_/   \____/ /_____/_/ /_/ /_/\__,_/_/_/  /_/ /_/\__,_/_/ /_/\__/\___/_/
"""


def print_banner(stream: Optional[TextIO] = None, color: bool = True) -> None:
    stream = stream or sys.stderr
    text = f"{Fore.LIGHTCYAN_EX}{_BANNER}{Style.RESET_ALL}" if color else _BANNER
    stream.write(text + "\n")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def _positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return number


def parse_args(argv: Optional[List[str]] = None, config: Optional[dict] = None) -> argparse.Namespace:
    """Define and parse CLI arguments.

    Args:
        argv: Argument list (defaults to ``sys.argv[1:]``).
        config: Result of :func:`load_config`, used for option defaults.

    Returns:
        An ``argparse.Namespace`` with parsed options.
    """
    config = config or load_config()
    parser = argparse.ArgumentParser(
        prog="proemailhunter",
        description="Crawl domains one level deep and report the email addresses found")
    parser.add_argument("domains", nargs="*", metavar="domain",
                        help="Domains to scan (read from stdin when omitted)")
    parser.add_argument("-c", "--concurrency", type=_positive_int,
                        default=config["concurrency"], metavar="N",
                        help="Number of concurrent requests (default: %(default)s)")
    parser.add_argument("-t", "--timeout", type=_positive_float,
                        default=config["timeout"], metavar="SECONDS",
                        help="Request timeout in seconds (default: %(default)s)")
    parser.add_argument("-silent", "--silent", action="store_true",
                        help="Silent mode (no banner)")
    parser.add_argument("-version", "--version", action="store_true",
                        help="Print the version of the tool and exit")
    parser.add_argument("-verbose", "-v", "--verbose", action="store_true",
                        help="Enable verbose output")
    parser.add_argument("--max-body-bytes", type=_non_negative_int,
                        default=config["max_body_bytes"], metavar="N",
                        help="Maximum bytes read per page, 0 for no limit (default: %(default)s)")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable colored output")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for CLI execution.

    Loads configuration, parses options, then crawls every domain given on the
    command line or, when none are given, every line read from stdin.

    Returns:
        Process exit code: 0 on success, 1 when stdin could not be read.
    """
    args = parse_args(argv, load_config())
    color = not args.no_color and not os.environ.get("NO_COLOR")
    if color:
        just_fix_windows_console()

    if args.version:
        print_banner(sys.stdout, color=color)
        print(f"proemailhunter v{__version__}")
        return 0

    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    if not args.silent:
        print_banner(color=color)

    lines: Iterable[str] = args.domains or read_domains(sys.stdin)
    try:
        asyncio.run(hunt(
            lines,
            args.concurrency,
            args.timeout,
            args.verbose,
            max_body_bytes=args.max_body_bytes or None,
            color=color,
        ))
    except InputReadError as exc:
        sys.stderr.write(f"Error reading input: {exc}\n")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
