"""
Binary signature validation.

Sniffs the sfnt/WOFF header before any table parsing is attempted.
"""

from typing import Optional

from .config import CONFIG, PipelineConfig
from .errors import InvalidSignature


def validate_signature(data: bytes, config: Optional[PipelineConfig] = None) -> str:
    """
    Confirm that a buffer looks like a font file.

    Args:
        data: Raw font bytes
        config: Pipeline configuration (defaults to CONFIG)

    Returns:
        Short container name ("TTF", "OTF", "WOFF" or "WOFF2")

    Raises:
        InvalidSignature: If the buffer is empty, too small, or carries an
            unknown signature
    """
    config = config or CONFIG

    if not data:
        raise InvalidSignature("Empty or invalid font buffer")

    if len(data) < config.MIN_FONT_SIZE:
        raise InvalidSignature(
            f"Font file too small to be valid ({len(data)} bytes)",
            signature=bytes(data[:4]).hex(),
        )

    signature = bytes(data[:4])
    container = config.FONT_SIGNATURES.get(signature)
    if container is None:
        raise InvalidSignature(
            f"Invalid font signature: {signature.hex()}", signature=signature.hex()
        )
    return container
