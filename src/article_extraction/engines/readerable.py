"""Readability's "probably readerable" heuristic over a BeautifulSoup document."""
import math
import re

from bs4 import BeautifulSoup, Tag


UNLIKELY_CANDIDATES = re.compile(
    r"-ad-|ai2html|banner|breadcrumbs|combx|comment|community|cover-wrap|disqus|extra|"
    r"footer|gdpr|header|legends|menu|related|remark|replies|rss|shoutbox|sidebar|"
    r"skyscraper|social|sponsor|supplemental|ad-break|agegate|pagination|pager|popup|"
    r"yom-remote",
    re.IGNORECASE,
)
MAYBE_CANDIDATE = re.compile(r"and|article|body|column|content|main|shadow", re.IGNORECASE)
DISPLAY_NONE = re.compile(r"display\s*:\s*none", re.IGNORECASE)


class ProbablyReaderableChecker:
    """
    Decide whether a page looks like it has an article worth extracting.

    Every visible <p>, <pre> and <article> (plus every <div> holding a <br>)
    with at least min_content_length characters of text contributes
    sqrt(length - min_content_length) to a score. Nodes whose class/id look
    like boilerplate, and paragraphs inside list items, are ignored. The page
    is readerable as soon as the score exceeds min_score.

    This is a cheap pre-check; it never looks at what extraction produces.
    """

    def __init__(self, min_content_length: int = 140, min_score: float = 20):
        self.min_content_length = min_content_length
        self.min_score = min_score

    def is_readerable(self, document: BeautifulSoup) -> bool:
        score = 0.0

        for node in _candidate_nodes(document):
            if not _is_node_visible(node):
                continue

            match_string = " ".join(node.get("class", [])) + " " + node.get("id", "")
            if UNLIKELY_CANDIDATES.search(match_string) and not MAYBE_CANDIDATE.search(match_string):
                continue

            if node.name == "p" and node.find_parent("li") is not None:
                continue

            text_length = len(node.get_text().strip())
            if text_length < self.min_content_length:
                continue

            score += math.sqrt(text_length - self.min_content_length)
            if score > self.min_score:
                return True

        return False


def _candidate_nodes(document: BeautifulSoup) -> list[Tag]:
    """Return p/pre/article nodes then parents of div > br, without duplicates."""
    nodes = list(document.select("p, pre, article"))
    seen = {id(node) for node in nodes}

    for br in document.select("div > br"):
        parent = br.parent
        if id(parent) not in seen:
            seen.add(id(parent))
            nodes.append(parent)

    return nodes


def _is_node_visible(node: Tag) -> bool:
    style = node.get("style")
    if style and DISPLAY_NONE.search(style):
        return False

    if node.has_attr("hidden"):
        return False

    if node.get("aria-hidden") == "true":
        return "fallback-image" in " ".join(node.get("class", []))

    return True
