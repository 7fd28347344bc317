"""
awsimaging: Rekognition label detection, S3 image upload and Textract text
extraction behind one credential-scoped session.
"""
from awsimaging.clients import AWSClients, build_clients, create_clients
from awsimaging.models import (
    BoundingBox,
    ExtractedTextResult,
    Label,
    LabelDetectionResult,
    UploadResult,
)
from awsimaging.services import RekognitionService, S3Service, TextractService
from awsimaging.session import SessionContext, resolve_session
from awsimaging.utils.exceptions import (
    ConfigurationError,
    RemoteServiceError,
    ValidationError,
)

__version__ = '0.1.0'

__all__ = [
    'AWSClients',
    'BoundingBox',
    'ConfigurationError',
    'ExtractedTextResult',
    'Label',
    'LabelDetectionResult',
    'RekognitionService',
    'RemoteServiceError',
    'S3Service',
    'SessionContext',
    'TextractService',
    'UploadResult',
    'ValidationError',
    'build_clients',
    'create_clients',
    'resolve_session',
]
