from __future__ import annotations

import random
from io import BytesIO
from typing import List, Optional, Sequence, Tuple

from pypdf import PageObject, PdfReader, PdfWriter
from pypdf.errors import PdfReadError
from reportlab.pdfgen import canvas

from stamplayout.core.config import Settings, get_settings
from stamplayout.core.errors import InvalidConfiguration, PDFProcessingError
from stamplayout.core.logging import configure_logging
from stamplayout.models.config import WatermarkConfig
from stamplayout.models.geometry import PageDimensions
from stamplayout.models.layout import WatermarkInstance
from stamplayout.services.generator import generate_instances_with_seeds
from stamplayout.services.renderer import ReportlabPageDrawer, draw_instance, resolve_font_name
from stamplayout.services.validator import validate_config

logger = configure_logging(__name__)

MS_PER_WATERMARK = 50
MS_PER_PAGE = 10


def estimate_rendering_time(page_count: int, watermark_count: int) -> int:
    """Rough processing time in milliseconds for stamping a whole document."""
    return page_count * watermark_count * MS_PER_WATERMARK + page_count * MS_PER_PAGE


class WatermarkPDFService:
    """Applies resolved watermark layouts to every page of a PDF."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.font_name = resolve_font_name(self.settings.font_name)

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------
    @staticmethod
    def read(pdf_bytes: bytes) -> PdfReader:
        try:
            reader = PdfReader(BytesIO(pdf_bytes))
            if reader.is_encrypted:
                raise PDFProcessingError("PDF is encrypted and cannot be watermarked.")
            if not reader.pages:
                raise PDFProcessingError("PDF has no pages.")
            return reader
        except (PdfReadError, ValueError) as exc:
            raise PDFProcessingError(f"Failed to read PDF: {exc}") from exc

    def page_dimensions(self, pdf_bytes: bytes) -> List[PageDimensions]:
        reader = self.read(pdf_bytes)
        return [PageDimensions.from_mediabox(page) for page in reader.pages]

    # ------------------------------------------------------------------
    # Watermarking
    # ------------------------------------------------------------------
    def apply_watermarks(
        self,
        pdf_bytes: bytes,
        config: WatermarkConfig,
        rng: Optional[random.Random] = None,
    ) -> bytes:
        return self.stamp_document(self.read(pdf_bytes), config, rng)

    def stamp_document(
        self,
        reader: PdfReader,
        config: WatermarkConfig,
        rng: Optional[random.Random] = None,
    ) -> bytes:
        """Stamp every page of an already parsed document and return the new one.

        Each page gets its own freshly generated instances; all pages draw their
        seeds from one base source so a seeded ``rng`` reproduces the document.
        Rotated pages are turned upright first so stamps read as laid out.
        """
        pages = [self._upright(page) for page in reader.pages]
        errors = validate_config(config, PageDimensions.from_mediabox(pages[0]))
        if errors:
            raise InvalidConfiguration(errors)

        rng = rng or random.Random()
        writer = PdfWriter()

        for page in pages:
            dimensions = PageDimensions.from_mediabox(page)
            stamped = generate_instances_with_seeds(dimensions, config, rng)
            overlay = self._create_watermark_page(dimensions, stamped, config)
            left, bottom = self._origin(page)
            page.merge_translated_page(overlay.pages[0], left, bottom)
            writer.add_page(page)

        logger.info(
            "Applied %d watermark(s) to each of %d page(s)",
            config.quantity,
            len(pages),
        )
        return self._write_writer(writer)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _upright(page: PageObject) -> PageObject:
        if page.rotation % 360:
            page.transfer_rotation_to_content()
        return page

    @staticmethod
    def _origin(page: PageObject) -> Tuple[float, float]:
        # Layouts are computed from (0, 0); the media box may start elsewhere.
        box = page.mediabox
        return min(float(box.left), float(box.right)), min(float(box.bottom), float(box.top))

    @staticmethod
    def _write_writer(writer: PdfWriter) -> bytes:
        buffer = BytesIO()
        writer.write(buffer)
        return buffer.getvalue()

    def _create_watermark_page(
        self,
        dimensions: PageDimensions,
        stamped: Sequence[Tuple[WatermarkInstance, int]],
        config: WatermarkConfig,
    ) -> PdfReader:
        packet = BytesIO()
        c = canvas.Canvas(packet, pagesize=(dimensions.width, dimensions.height))
        c.setFillAlpha(self.settings.fill_opacity)

        drawer = ReportlabPageDrawer(c)
        for instance, seed in stamped:
            draw_instance(drawer, instance, config.color, seed, font_name=self.font_name)

        c.save()
        packet.seek(0)
        return PdfReader(packet)
