"""Default extraction engine built on readability-lxml and BeautifulSoup."""
import logging
import re
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag
from readability import Document
from readability.readability import Unparseable

from src.errors import ExtractionError
from ..models import Article


logger = logging.getLogger(__name__)

BYLINE_HINTS = re.compile(r"byline|author|dateline|writtenby|p-author", re.IGNORECASE)
MAX_BYLINE_LENGTH = 100

TITLE_META_KEYS = ("dc:title", "dcterm:title", "og:title", "weibo:article:title", "twitter:title")
BYLINE_META_KEYS = ("dc:creator", "dcterm:creator", "author", "article:author")
EXCERPT_META_KEYS = ("dc:description", "dcterm:description", "og:description", "description", "twitter:description")
IMAGE_META_KEYS = ("og:image", "image", "twitter:image")


class ReadabilityEngine:
    """
    Extract the main content and metadata of a page.

    Content comes from readability-lxml's scoring (with links made absolute
    against base_url); metadata is read from the original document's meta
    tags, falling back to the page structure the way Readability does.
    """

    def extract(self, document: BeautifulSoup, base_url: str) -> Article:
        """
        Extract an article from a parsed page.

        Args:
            document: Page parsed by SoupDocumentParser
            base_url: URL the page is treated as coming from

        Returns:
            Article with the content node and metadata

        Raises:
            ExtractionError: If readability cannot find any readable content
        """
        readable = Document(str(document), url=base_url)
        try:
            # summary() prunes readable's tree, so read the title first
            fallback_title = readable.short_title()
            summary_html = readable.summary(html_partial=True)
        except Unparseable as e:
            raise ExtractionError(f"readability could not parse document: {e}") from e

        node = _first_element(BeautifulSoup(summary_html, "lxml"))
        if node is None:
            raise ExtractionError("readability returned no content")

        text_content = node.get_text()
        if not text_content.strip():
            raise ExtractionError("document has no readable content")

        meta = _collect_meta(document)

        return Article(
            node=node,
            title=_first_meta(meta, TITLE_META_KEYS) or fallback_title,
            byline=_first_meta(meta, BYLINE_META_KEYS) or _find_byline(document),
            excerpt=_first_meta(meta, EXCERPT_META_KEYS) or _first_paragraph(node),
            site_name=meta.get("og:site_name", ""),
            language=_document_language(document),
            length=len(text_content),
            text_content=text_content,
            image=_absolute(base_url, _first_meta(meta, IMAGE_META_KEYS)),
            favicon=_absolute(base_url, _find_favicon(document)),
        )


def _first_element(fragment: BeautifulSoup) -> Tag | None:
    """Return the top-level element of a parsed HTML fragment."""
    container = fragment.body or fragment
    return container.find(True, recursive=False)


def _collect_meta(document: BeautifulSoup) -> dict[str, str]:
    """Map lowercased meta name/property keys to their trimmed content."""
    meta: dict[str, str] = {}
    for tag in document.find_all("meta"):
        content = (tag.get("content") or "").strip()
        if not content:
            continue
        for attr in ("name", "property", "itemprop"):
            key = tag.get(attr)
            if isinstance(key, list):
                key = " ".join(key)
            if key:
                for part in key.lower().split():
                    meta.setdefault(part, content)
    return meta


def _first_meta(meta: dict[str, str], keys: tuple[str, ...]) -> str:
    for key in keys:
        if meta.get(key):
            return meta[key]
    return ""


def _find_byline(document: BeautifulSoup) -> str:
    """Look for an author element by rel, itemprop, class or id."""
    candidates = document.select('[rel~="author"], [itemprop~="author"]')
    candidates += [
        tag for tag in document.find_all(True)
        if BYLINE_HINTS.search(" ".join(tag.get("class", [])) + " " + tag.get("id", ""))
    ]

    for tag in candidates:
        text = tag.get_text(" ", strip=True)
        if text and len(text) < MAX_BYLINE_LENGTH:
            return text
    return ""


def _first_paragraph(node: Tag) -> str:
    paragraph = node.find("p")
    if paragraph is None:
        return ""
    return paragraph.get_text().strip()


def _document_language(document: BeautifulSoup) -> str:
    html = document.find("html")
    if html is None:
        return ""
    return (html.get("lang") or "").strip()


def _find_favicon(document: BeautifulSoup) -> str:
    for link in document.find_all("link", href=True):
        rel = link.get("rel") or []
        if "icon" in [value.lower() for value in rel]:
            return link["href"]
    return ""


def _absolute(base_url: str, url: str) -> str:
    if not url:
        return ""
    return urljoin(base_url, url)
