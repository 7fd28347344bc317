"""
Lambda handler functions for the awsimaging services.

Each handler resolves a session from configuration, builds the clients and
calls exactly one service. Images arrive base64 encoded in the event.
"""
from awsimaging.clients import AWSClients, create_clients
from awsimaging.config import get_config
from awsimaging.logger_config import get_logger, set_log_level
from awsimaging.services.rekognition_service import RekognitionService
from awsimaging.services.s3_service import S3Service
from awsimaging.services.textract_service import TextractService
from awsimaging.utils.decorators import lambda_handler
from awsimaging.utils.encoding import decode_base64_image
from awsimaging.utils.exceptions import ValidationError

logger = get_logger(__name__)


def _require(event: dict, field: str) -> str:
    value = event.get(field)
    if not value:
        raise ValidationError(f'{field} is required', field=field)
    return value


def get_clients() -> AWSClients:
    """Build service clients from the configured region and credentials."""
    config = get_config()
    set_log_level(config.log_level)
    return create_clients(
        config.aws_region,
        access_key_id=config.access_key_id,
        secret_access_key=config.secret_access_key,
        session_token=config.session_token,
        client_config=config.client_config()
    )


@lambda_handler
def detect_labels(event, context):
    """Detect labels in a base64 encoded image."""
    config = get_config()

    image_bytes = decode_base64_image(_require(event, 'image'))

    min_confidence = event.get('min_confidence', config.min_confidence)
    if min_confidence is None:
        raise ValidationError(
            'min_confidence is required when MIN_CONFIDENCE is not configured',
            field='min_confidence'
        )

    clients = get_clients()
    service = RekognitionService(clients.rekognition, max_labels=config.max_labels)
    return service.detect_labels(image_bytes, float(min_confidence)).to_dict()


@lambda_handler
def upload_image(event, context):
    """Upload a base64 encoded image to S3 and return its URL."""
    config = get_config()

    base64_image = _require(event, 'image')
    bucket_name = _require(event, 'bucket')
    object_key = _require(event, 'key')

    clients = get_clients()
    service = S3Service(clients.context, client=clients.s3, acl=config.upload_acl)
    return service.upload(base64_image, bucket_name, object_key).to_dict()


@lambda_handler
def extract_text(event, context):
    """Extract the text lines of a base64 encoded image."""
    base64_image = _require(event, 'image')

    clients = get_clients()
    service = TextractService(clients.textract)
    return service.extract_text(base64_image).to_dict()
