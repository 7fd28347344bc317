"""
Rekognition service for label detection.
"""
from typing import Any, TYPE_CHECKING

from awsimaging.config import DEFAULT_MAX_LABELS
from awsimaging.logger_config import get_logger
from awsimaging.models import Label, LabelDetectionResult
from awsimaging.utils.decorators import remote_call
from awsimaging.utils.exceptions import ValidationError

if TYPE_CHECKING:
    from mypy_boto3_rekognition import RekognitionClient
else:
    RekognitionClient = Any

logger = get_logger(__name__)


class RekognitionService:
    """Service for Rekognition label detection."""

    def __init__(self, client: RekognitionClient, max_labels: int = DEFAULT_MAX_LABELS):
        """
        Initialize Rekognition service.

        Args:
            client: Rekognition client
            max_labels: Maximum number of labels returned per image
        """
        if max_labels < 1:
            raise ValidationError(
                f'max_labels must be at least 1, got: {max_labels}',
                field='max_labels',
                value=max_labels
            )
        self.client = client
        self.max_labels = max_labels

    @remote_call('rekognition', 'DetectLabels')
    def _detect_labels(self, image_bytes: bytes, min_confidence: float) -> dict:
        return self.client.detect_labels(
            Image={'Bytes': image_bytes},
            MaxLabels=self.max_labels,
            MinConfidence=min_confidence
        )

    def detect_labels(self, image_bytes: bytes, min_confidence: float) -> LabelDetectionResult:
        """
        Detect labels in an image.

        The service is asked to apply both limits, and they are applied again
        to the response so the result never exceeds them.

        Args:
            image_bytes: Raw image bytes (JPEG or PNG)
            min_confidence: Minimum confidence (0-100) for a label to be kept

        Returns:
            LabelDetectionResult in service order

        Raises:
            ValidationError: If the image is empty or the threshold is out of range
            RemoteServiceError: If the Rekognition call fails
        """
        if not image_bytes:
            raise ValidationError('image is empty', field='image')
        try:
            threshold = float(min_confidence)
        except (TypeError, ValueError):
            raise ValidationError(
                f'min_confidence must be a number, got: {min_confidence!r}',
                field='min_confidence',
                value=min_confidence
            )
        if not 0 <= threshold <= 100:
            raise ValidationError(
                f'min_confidence must be between 0 and 100, got: {min_confidence}',
                field='min_confidence',
                value=min_confidence
            )
        min_confidence = threshold

        response = self._detect_labels(image_bytes, min_confidence)

        labels = [
            Label.from_response(label)
            for label in response.get('Labels', [])
            if float(label.get('Confidence', 0.0)) >= min_confidence
        ][:self.max_labels]

        logger.info(
            f'Detected {len(labels)} labels '
            f'(min_confidence={min_confidence}, max_labels={self.max_labels})'
        )
        return LabelDetectionResult(
            labels=tuple(labels),
            label_model_version=response.get('LabelModelVersion')
        )

    def detect_labels_from_file(self, file_path: str, min_confidence: float) -> LabelDetectionResult:
        """
        Read an image file and detect labels in it.

        Args:
            file_path: Path to a local image file
            min_confidence: Minimum confidence (0-100) for a label to be kept

        Returns:
            LabelDetectionResult

        Raises:
            ValidationError: If the file cannot be read
            RemoteServiceError: If the Rekognition call fails
        """
        try:
            with open(file_path, 'rb') as f:
                image_bytes = f.read()
        except OSError as e:
            raise ValidationError(
                f'failed to read image file {file_path}: {e.strerror or e}',
                field='file_path',
                value=file_path
            )
        return self.detect_labels(image_bytes, min_confidence)
