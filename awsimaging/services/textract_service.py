"""
Textract service for synchronous document text detection.
"""
from typing import Any, TYPE_CHECKING

from awsimaging.logger_config import get_logger
from awsimaging.models import ExtractedTextResult
from awsimaging.utils.decorators import remote_call
from awsimaging.utils.encoding import decode_base64_image
from awsimaging.utils.exceptions import ValidationError

if TYPE_CHECKING:
    from mypy_boto3_textract import TextractClient
else:
    TextractClient = Any

logger = get_logger(__name__)

LINE_BLOCK_TYPE = 'LINE'


class TextractService:
    """Service for Textract text extraction."""

    def __init__(self, client: TextractClient):
        self.client = client

    @remote_call('textract', 'DetectDocumentText')
    def _detect_document_text(self, image_bytes: bytes) -> dict:
        return self.client.detect_document_text(Document={'Bytes': image_bytes})

    def extract_text(self, base64_image: str) -> ExtractedTextResult:
        """
        Extract the text lines of a base64 encoded image.

        Args:
            base64_image: Base64 encoded image (JPEG, PNG, TIFF or single-page PDF)

        Returns:
            ExtractedTextResult with one output line per LINE block

        Raises:
            ValidationError: If the input is not valid base64
            RemoteServiceError: If the Textract call fails
        """
        image_bytes = decode_base64_image(base64_image)
        return self.extract_text_from_bytes(image_bytes)

    def extract_text_from_bytes(self, image_bytes: bytes) -> ExtractedTextResult:
        """
        Extract the text lines of raw document bytes.

        Only LINE blocks are kept, in the order Textract returns them; WORD
        and PAGE blocks are ignored.

        Args:
            image_bytes: Raw document bytes

        Returns:
            ExtractedTextResult

        Raises:
            ValidationError: If the document is empty
            RemoteServiceError: If the Textract call fails
        """
        if not image_bytes:
            raise ValidationError('image is empty', field='image')

        response = self._detect_document_text(image_bytes)

        lines = [
            block.get('Text', '')
            for block in response.get('Blocks', [])
            if block.get('BlockType') == LINE_BLOCK_TYPE
        ]
        logger.info(f'Extracted {len(lines)} lines of text')
        return ExtractedTextResult.from_lines(lines)
