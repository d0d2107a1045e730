from typing import Iterable


class WatermarkError(Exception):
    """Base exception for all watermarking operations."""


class InvalidConfiguration(WatermarkError):
    """Raised when a watermark configuration or position fails validation.

    Every violated constraint is collected in ``errors`` so callers can report
    all problems in one pass.
    """

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid watermark configuration")


class PDFProcessingError(WatermarkError):
    """Raised when a PDF cannot be read or watermarked."""
