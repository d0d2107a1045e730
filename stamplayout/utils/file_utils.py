from pathlib import Path
from typing import Optional

from fastapi import HTTPException, UploadFile, status


def ensure_pdf(upload: UploadFile) -> None:
    """Reject uploads that are not declared as PDF, by content type or extension."""
    content_type = (upload.content_type or "").lower()
    suffix = Path(upload.filename or "").suffix.lower()
    if not content_type.endswith("pdf") and suffix != ".pdf":
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="The uploaded file must be a PDF.",
        )


def output_filename(original: Optional[str]) -> str:
    stem = Path(original or "document.pdf").stem or "document"
    return f"{stem}_wm.pdf"
