"""
S3 service for image uploads.

Buckets may live outside the session's default region, so every upload
looks the bucket region up, builds a client for that region and only then
writes. The bucket region is never cached.
"""
from typing import Any, Optional, TYPE_CHECKING

from awsimaging.config import DEFAULT_UPLOAD_ACL
from awsimaging.logger_config import get_logger
from awsimaging.models import UploadResult
from awsimaging.session import SessionContext
from awsimaging.utils.decorators import remote_call
from awsimaging.utils.encoding import decode_base64_image
from awsimaging.utils.exceptions import RemoteServiceError, ValidationError

if TYPE_CHECKING:
    from mypy_boto3_s3 import S3Client
else:
    S3Client = Any

logger = get_logger(__name__)

# GetBucketLocation returns no constraint for us-east-1 and 'EU' for
# buckets created with the legacy eu-west-1 constraint.
LEGACY_LOCATION_CONSTRAINTS = {
    None: 'us-east-1',
    '': 'us-east-1',
    'EU': 'eu-west-1',
}

OBJECT_URL_TEMPLATE = 'https://{bucket}.s3.{region}.amazonaws.com/{key}'


def build_object_url(bucket_name: str, region: str, object_key: str) -> str:
    """Virtual-hosted-style URL of an object."""
    return OBJECT_URL_TEMPLATE.format(bucket=bucket_name, region=region, key=object_key)


class S3Service:
    """Service for S3 uploads."""

    def __init__(
        self,
        context: SessionContext,
        client: Optional[S3Client] = None,
        acl: Optional[str] = DEFAULT_UPLOAD_ACL
    ):
        """
        Initialize S3 service.

        Args:
            context: Session context the clients are built from
            client: Optional S3 client in the context region
            acl: Canned ACL set on uploaded objects, or None to send no ACL.
                Defaults to 'public-read', which makes every upload world
                readable.
        """
        self.context = context
        self.acl = acl
        self._s3_client = client

        if acl == 'public-read':
            logger.warning('S3 uploads will be stored with the public-read ACL')

    @property
    def s3_client(self) -> S3Client:
        """Lazy initialization of S3 client in the context region."""
        if self._s3_client is None:
            self._s3_client = self.context.client('s3')
        return self._s3_client

    def client_for_region(self, region: str) -> S3Client:
        """
        Get an S3 client for a region without touching the default client.

        Args:
            region: Target region

        Returns:
            The default client if the region matches, a new client otherwise
        """
        if region == self.context.region:
            return self.s3_client
        return self.context.with_region(region).client('s3')

    @remote_call('s3', 'GetBucketLocation')
    def get_bucket_region(self, bucket_name: str) -> str:
        """
        Look up the region a bucket lives in.

        Args:
            bucket_name: Name of the S3 bucket

        Returns:
            Region name

        Raises:
            RemoteServiceError: If the lookup fails
        """
        response = self.s3_client.get_bucket_location(Bucket=bucket_name)
        constraint = response.get('LocationConstraint')
        region = LEGACY_LOCATION_CONSTRAINTS.get(constraint, constraint)
        if not isinstance(region, str) or not region.strip():
            raise RemoteServiceError(
                f'GetBucketLocation returned an unusable region for {bucket_name}: {constraint!r}',
                service='s3',
                operation='GetBucketLocation'
            )
        return region

    @remote_call('s3', 'PutObject')
    def _put_object(self, client: S3Client, bucket_name: str, object_key: str, body: bytes) -> None:
        put_kwargs = {
            'Bucket': bucket_name,
            'Key': object_key,
            'Body': body,
        }
        if self.acl:
            put_kwargs['ACL'] = self.acl
        client.put_object(**put_kwargs)

    def upload(self, base64_image: str, bucket_name: str, object_key: str) -> UploadResult:
        """
        Upload a base64 encoded image to a bucket.

        Args:
            base64_image: Base64 encoded image
            bucket_name: Name of the S3 bucket
            object_key: S3 object key

        Returns:
            UploadResult with the object's URL

        Raises:
            ValidationError: If the input is not valid base64 or names are empty
            RemoteServiceError: If the region lookup or the write fails
        """
        if not bucket_name:
            raise ValidationError('bucket_name is required', field='bucket_name')
        if not object_key:
            raise ValidationError('object_key is required', field='object_key')

        image_bytes = decode_base64_image(base64_image)

        bucket_region = self.get_bucket_region(bucket_name)
        client = self.client_for_region(bucket_region)
        self._put_object(client, bucket_name, object_key, image_bytes)

        logger.info(
            f'Successfully put {len(image_bytes)} bytes to '
            f's3://{bucket_name}/{object_key} ({bucket_region})'
        )
        return UploadResult(
            url=build_object_url(bucket_name, bucket_region, object_key),
            bucket=bucket_name,
            key=object_key,
            region=bucket_region
        )
