"""
Service layer wrapping one AWS call per adapter.

Each service maps a single Rekognition, S3 or Textract call onto a local
result type from awsimaging.models.
"""
from awsimaging.services.rekognition_service import RekognitionService
from awsimaging.services.s3_service import S3Service
from awsimaging.services.textract_service import TextractService

__all__ = ['RekognitionService', 'S3Service', 'TextractService']
