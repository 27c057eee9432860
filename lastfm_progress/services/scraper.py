"""
Scrapes the Last.fm API documentation page for the documented method names
"""
import logging
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple

import httpx
from bs4 import BeautifulSoup, Tag

from lastfm_progress.config import settings
from lastfm_progress.exceptions import FetchError, ParseError
from lastfm_progress.schemas import MethodCatalog

logger = logging.getLogger(__name__)

PANEL_CLASS = "wspanel"
PACKAGE_CLASS = "package"
PANEL_HEADING = "API Methods"


def _has_class(tag: Tag, name: str) -> bool:
    """Substring match against the raw class attribute, e.g. "wspanel" matches "wspanel-inner" too"""
    classes = tag.get("class")
    if not classes:
        return False
    if not isinstance(classes, str):
        classes = " ".join(classes)
    return name in classes


def _previous_node(node, steps: int = 1):
    """Walk back over sibling nodes, text nodes included"""
    for _ in range(steps):
        if node is None:
            return None
        node = node.previous_sibling
    return node


def _is_panel(tag: Tag) -> bool:
    if not _has_class(tag, PANEL_CLASS):
        return False
    # The method panel sits right after the heading, with a whitespace node in between
    heading = _previous_node(tag, 2)
    if not isinstance(heading, Tag):
        return False
    return heading.name == "h2" and heading.get_text() == PANEL_HEADING


def _text(tag: Tag) -> str:
    """Text content with the spacing between nested nodes kept, runs of whitespace collapsed"""
    return " ".join(tag.get_text().split())


def _fragment(html: str) -> str:
    limit = settings.PARSE_ERROR_FRAGMENT_LENGTH
    if len(html) <= limit:
        return html
    return html[:limit] + "..."


def extract_catalog(html: str) -> MethodCatalog:
    """Extract category -> method names from the API intro page markup

    Raises:
        ParseError: If the method panel or a package's heading/list is missing
    """
    soup = BeautifulSoup(html, "html.parser")

    panel = soup.find(_is_panel)
    if panel is None:
        raise ParseError(f"Couldn't find {PANEL_CLASS} after '{PANEL_HEADING}' heading in HTML", _fragment(html))

    catalog: Dict[str, Tuple[str, ...]] = {}

    # each package is a section of the API
    for package in panel.find_all(lambda tag: _has_class(tag, PACKAGE_CLASS)):
        h3 = package.find("h3", recursive=False)
        ul = package.find("ul", recursive=False)
        if h3 is None or ul is None:
            raise ParseError("Package without an h3 heading and ul method list", _fragment(str(package)))

        category = _text(h3)
        methods: List[str] = []
        for li in ul.find_all("li", recursive=False):
            method = _text(li)
            if method and method not in methods:
                methods.append(method)

        if category in catalog:
            logger.warning(f"Category '{category}' listed more than once, keeping the last one")
        catalog[category] = tuple(methods)

    logger.debug(f"Extracted {len(catalog)} categories, {sum(len(m) for m in catalog.values())} methods")
    return MappingProxyType(catalog)


def _get(client: httpx.Client, url: str) -> httpx.Response:
    try:
        return client.get(url)
    except httpx.HTTPError as e:
        logger.error(f"HTTP error for GET {url}: {str(e)}")
        raise


def fetch_api_methods(
    url: Optional[str] = None,
    client: Optional[httpx.Client] = None,
    timeout: Optional[float] = None,
) -> MethodCatalog:
    """Scrape the API documentation for all the method names

    Raises:
        FetchError: If the server returns a non-success status
        ParseError: If the page structure isn't recognised
        httpx.HTTPError: On transport failures (connection, timeout)
    """
    url = url or settings.API_INTRO_PAGE
    logger.info(f"Fetching {url}")

    if client is not None:
        response = _get(client, url)
    else:
        with httpx.Client(
            timeout=settings.HTTP_TIMEOUT if timeout is None else timeout,
            follow_redirects=settings.FOLLOW_REDIRECTS,
            headers={"User-Agent": settings.USER_AGENT},
        ) as own_client:
            response = _get(own_client, url)

    if not response.is_success:
        logger.error(f"Request failed ({response.status_code}) for GET {url}")
        raise FetchError(url, response.status_code, response.reason_phrase)

    return extract_catalog(response.text)
