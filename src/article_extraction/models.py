"""Article models for the extraction invoker."""
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


FAKE_BASE_URL = "http://fakehost/test/page.html"


class Article(BaseModel):
    """
    Result of running the extraction engine over a document.

    The node is whatever DOM subtree type the engine works with; the harness
    only hands it to the renderer. Missing string metadata is normalized to
    the empty string so "absent" has exactly one representation.

    Attributes:
        node: Extracted main-content subtree
        title: Article title
        byline: Author line
        excerpt: Short description or first paragraph
        site_name: Publisher name
        language: Detected document language
        length: Length of the plain-text content
        text_content: Plain-text content
        image: Lead image URL
        favicon: Site icon URL
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    node: Any
    title: str = ""
    byline: str = ""
    excerpt: str = ""
    site_name: str = ""
    language: str = ""
    length: int = 0
    text_content: str = ""
    image: str = ""
    favicon: str = ""

    @field_validator(
        "title", "byline", "excerpt", "site_name", "language",
        "text_content", "image", "favicon",
        mode="before",
    )
    @classmethod
    def normalize_missing_string(cls, v: str | None) -> str:
        """Convert None to empty string."""
        if v is None:
            return ""
        return v


class ExtractionResult(BaseModel):
    """
    Extracted article plus the readerable verdict for the original document.

    The two answer different questions ("what did extraction produce" and
    "was the page worth extracting") and are captured separately.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    article: Article
    readerable: bool
