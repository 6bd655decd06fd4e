"""
Preview what the default extraction engine produces for a live page.

Fetches the URL, extracts it against its own address (not the synthetic
fixture URL) and prints the metadata and plain text. Nothing is written to
disk; use generate_test.py to record a fixture.

Usage:
    uv run python scripts/preview_article.py https://example.com/some-article
    uv run python scripts/preview_article.py https://example.com/some-article --timeout 10
"""
import argparse
import sys
from pathlib import Path

import requests
from loguru import logger

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from config.log_config import configure_logging
from src.article_extraction.engines.readability_engine import ReadabilityEngine
from src.article_extraction.engines.soup import SoupDocumentParser
from src.errors import FixtureGenerationError, ValidationError
from src.source_acquisition.service import validate_source_url


def main() -> int:
    parser = argparse.ArgumentParser(description="Preview readability extraction for a URL")
    parser.add_argument("url", help="page to extract")
    parser.add_argument("--timeout", type=float, default=30.0, help="HTTP timeout in seconds")
    args = parser.parse_args()

    configure_logging()

    try:
        validate_source_url(args.url)
    except ValidationError as e:
        logger.error(f"{e}")
        return 1

    try:
        response = requests.get(args.url, timeout=args.timeout)
    except requests.RequestException as e:
        logger.error(f"failed to fetch {args.url}: {e}")
        return 1

    document = SoupDocumentParser().parse(response.content)
    try:
        article = ReadabilityEngine().extract(document, args.url)
    except FixtureGenerationError as e:
        logger.error(f"failed to parse {args.url}: {e}")
        return 1

    print(f"URL     : {args.url}")
    print(f"Title   : {article.title}")
    print(f"Author  : {article.byline}")
    print(f"Length  : {article.length}")
    print(f"Excerpt : {article.excerpt}")
    print(f"SiteName: {article.site_name}")
    print(f"Image   : {article.image}")
    print(f"Favicon : {article.favicon}")
    print()
    print(article.text_content)
    return 0


if __name__ == "__main__":
    sys.exit(main())
