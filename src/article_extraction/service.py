"""Extraction invoker: parse a source document and run the engine over it."""
import logging

from src.errors import ExtractionError, ParseError
from src.source_acquisition.models import SourceDocument
from .base import DocumentParser, ExtractionEngine, ReaderableChecker
from .engines.readability_engine import ReadabilityEngine
from .engines.readerable import ProbablyReaderableChecker
from .engines.soup import SoupDocumentParser
from .models import FAKE_BASE_URL, ExtractionResult


logger = logging.getLogger(__name__)


class ExtractionInvoker:
    """
    Turn a source document into an extracted article plus readerable flag.

    Workflow:
    1. Read source bytes and parse them with the injected parser
    2. Evaluate the readerable check on the untouched document
    3. Run the engine with the fixed synthetic base URL

    Extraction is treated as deterministic, so nothing is retried.

    Example:
        # Default stack (BeautifulSoup + readability-lxml)
        invoker = ExtractionInvoker()
        result = invoker.invoke(source)

        # Fake engine (testing)
        invoker = ExtractionInvoker(
            parser=FakeParser(),
            engine=FakeEngine(),
            readerable_checker=FakeReaderableChecker(),
        )
    """

    def __init__(
        self,
        parser: DocumentParser | None = None,
        engine: ExtractionEngine | None = None,
        readerable_checker: ReaderableChecker | None = None,
        base_url: str = FAKE_BASE_URL,
    ):
        """
        Initialize invoker with the extraction stack.

        Args:
            parser: HTML parser (default: SoupDocumentParser())
            engine: Extraction engine (default: ReadabilityEngine())
            readerable_checker: Readerable heuristic
                (default: ProbablyReaderableChecker())
            base_url: URL every document is extracted against
        """
        self.parser = parser or SoupDocumentParser()
        self.engine = engine or ReadabilityEngine()
        self.readerable_checker = readerable_checker or ProbablyReaderableChecker()
        self.base_url = base_url

    def invoke(self, source: SourceDocument) -> ExtractionResult:
        """
        Extract the article from a source document.

        Args:
            source: Source document on disk

        Returns:
            ExtractionResult with the article and the readerable verdict

        Raises:
            ParseError: If the source cannot be read or parsed
            ExtractionError: If the readerable check or the engine fails, or the
                engine produces no content
        """
        try:
            content = source.path.read_bytes()
        except OSError as e:
            raise ParseError(f"failed to open source {source.path}: {e}") from e

        try:
            document = self.parser.parse(content)
        except Exception as e:
            raise ParseError(f"failed to decode source {source.path}: {e}") from e

        # Engines may rewrite the document, so judge it first.
        try:
            readerable = self.readerable_checker.is_readerable(document)
        except Exception as e:
            raise ExtractionError(f"failed to check readerability of {source.path}: {e}") from e

        try:
            article = self.engine.extract(document, self.base_url)
        except ExtractionError:
            raise
        except Exception as e:
            raise ExtractionError(f"failed to parse source {source.path}: {e}") from e

        if article.node is None:
            raise ExtractionError(f"extraction of {source.path} produced no content node")

        logger.info(
            f"Extracted article {article.title!r}",
            extra={"path": str(source.path), "length": article.length, "readerable": readerable},
        )
        return ExtractionResult(article=article, readerable=readerable)
