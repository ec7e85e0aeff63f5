"""Exceptions raised by the font metadata pipeline."""


class FontProcessingError(Exception):
    """Base class for pipeline errors."""


class InvalidSignature(FontProcessingError):
    """The buffer is not recognizably a font file.

    This is the only error that escapes ``process_font``.
    """

    def __init__(self, message: str, signature: str = ""):
        super().__init__(message)
        self.signature = signature


class UnparsableFont(FontProcessingError):
    """fontTools could not decode the font tables."""
