"""
Base64 decoding for image payloads received as text.
"""
import base64
import binascii

from awsimaging.utils.exceptions import ValidationError


def decode_base64_image(base64_image: str, field: str = 'image') -> bytes:
    """
    Decode standard (padded) base64 text into raw image bytes.

    Line breaks are ignored; any other character outside the base64
    alphabet is rejected rather than silently dropped.

    Args:
        base64_image: Base64 encoded image
        field: Name of the input, used in error messages

    Returns:
        Decoded image bytes

    Raises:
        ValidationError: If the input is empty or not valid base64
    """
    if isinstance(base64_image, bytes):
        try:
            base64_image = base64_image.decode('ascii')
        except UnicodeDecodeError:
            raise ValidationError(f'{field} is not valid base64 text', field=field)

    if not isinstance(base64_image, str):
        raise ValidationError(
            f'{field} must be base64 text, got {type(base64_image).__name__}',
            field=field
        )

    cleaned = base64_image.replace('\r', '').replace('\n', '')
    if not cleaned:
        raise ValidationError(f'{field} is empty', field=field)

    try:
        return base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValidationError(f'failed to decode base64 {field}: {e}', field=field)
