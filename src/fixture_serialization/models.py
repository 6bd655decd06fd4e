"""Expected-output models."""
import json

from pydantic import BaseModel, ConfigDict, Field

from src.article_extraction.models import Article


EXPECTED_HTML_FILENAME = "expected.html"
EXPECTED_METADATA_FILENAME = "expected-metadata.json"
JSON_INDENT = 4


class FixtureMetadata(BaseModel):
    """
    Metadata record stored in expected-metadata.json.

    Field order here is the key order on disk. String fields default to ""
    and are omitted when empty; readerable has no default so it is always
    written.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    byline: str = ""
    excerpt: str = ""
    language: str = ""
    site_name: str = Field(default="", alias="siteName")
    readerable: bool

    @classmethod
    def from_article(cls, article: Article, readerable: bool) -> "FixtureMetadata":
        return cls(
            title=article.title,
            byline=article.byline,
            excerpt=article.excerpt,
            language=article.language,
            site_name=article.site_name,
            readerable=readerable,
        )

    def to_json(self) -> str:
        """Render as 4-space indented JSON with empty fields dropped."""
        data = self.model_dump(by_alias=True, exclude_defaults=True)
        return json.dumps(data, indent=JSON_INDENT, ensure_ascii=False)
