"""Page-area relative font sizing.

All sizes are expressed relative to a US Letter page (612 x 792 points), on which
the reference watermark size is 24pt.
"""
from __future__ import annotations

import math

from stamplayout.models.config import DocumentType
from stamplayout.models.geometry import PageDimensions

REFERENCE_AREA = 612.0 * 792.0
REFERENCE_FONT_SIZE = 24.0
MIN_BASE_FONT_SIZE = 8.0
MAX_BASE_FONT_SIZE = 72.0

DOCUMENT_TYPE_MULTIPLIERS = {
    DocumentType.legal: 0.7,
    DocumentType.academic: 0.8,
    DocumentType.business: 1.0,
    DocumentType.certificate: 1.5,
    DocumentType.marketing: 1.3,
    DocumentType.technical: 0.9,
    DocumentType.creative: 1.2,
}


def _area_scale(page_area: float) -> float:
    return math.sqrt(page_area / REFERENCE_AREA)


def calculate_base_font_size(page_area: float) -> float:
    size = REFERENCE_FONT_SIZE * _area_scale(page_area)
    return max(MIN_BASE_FONT_SIZE, min(MAX_BASE_FONT_SIZE, size))


def get_recommended_size(page_dimensions: PageDimensions, document_type: DocumentType) -> float:
    """Base size for the page, scaled down for legal/technical and up for certificates/marketing."""
    return calculate_base_font_size(page_dimensions.area) * DOCUMENT_TYPE_MULTIPLIERS[document_type]


def apply_dynamic_scaling(base_size: float, scale_factor: float, page_dimensions: PageDimensions) -> float:
    return base_size * scale_factor * _area_scale(page_dimensions.area)
