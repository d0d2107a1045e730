import random
from io import BytesIO

import pytest
from reportlab.lib.pagesizes import A4, landscape, letter
from reportlab.pdfgen import canvas

from stamplayout.models import PageDimensions


@pytest.fixture
def letter_page() -> PageDimensions:
    return PageDimensions(612, 792)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(20240601)


@pytest.fixture
def sample_pdf() -> bytes:
    """Two-page PDF: a US Letter page followed by a landscape A4 page."""
    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=letter)
    c.drawString(72, 720, "Page one")
    c.showPage()
    c.setPageSize(landscape(A4))
    c.drawString(72, 500, "Page two")
    c.showPage()
    c.save()
    return buffer.getvalue()
