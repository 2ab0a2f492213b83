"""
Image payload utility functions.
"""
import base64
import binascii

from faceiq.core.exceptions import InvalidImageError


def decode_base64_image(image_base64: str) -> bytes:
    """Decode a base64 image, accepting an optional ``data:`` URL prefix.

    Args:
        image_base64: Base64 string, e.g. from a canvas ``toDataURL`` call

    Returns:
        bytes: Raw image bytes

    Raises:
        InvalidImageError: If the payload is empty or not valid base64
    """
    payload = image_base64.strip()
    if payload.startswith("data:") and "," in payload:
        payload = payload.split(",", 1)[1]
    if not payload:
        raise InvalidImageError("Empty image payload")

    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidImageError(f"Invalid base64 image: {str(e)}")
