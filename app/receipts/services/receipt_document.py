import io
import re

from reportlab.lib.colors import Color, HexColor
from reportlab.lib.pagesizes import A5
from reportlab.lib.units import cm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfgen import canvas

from app.core.datetime_utils import as_utc
from app.receipts.schemas.receipt import Receipt
from app.stores.schemas.store import StoreTheme

_HEX_COLOR = re.compile(r"#[0-9a-fA-F]{6}")
_WHITESPACE = re.compile(r"\s+")

DEFAULT_THEME = StoreTheme()


def _theme_color(value: str, fallback: str) -> Color:
    return HexColor(value if _HEX_COLOR.fullmatch(value) else fallback)


def receipt_filename(receipt: Receipt) -> str:
    """Download name, e.g. ``Recibo_Aragorn_Filho.pdf``."""
    return f"Recibo_{_WHITESPACE.sub('_', receipt.customer.name.strip())}.pdf"


class ReceiptDocumentService:
    @staticmethod
    def generate_receipt_pdf(receipt: Receipt, theme: StoreTheme | None = None) -> bytes:
        """Render the parchment receipt, token stamp included, as a PDF."""
        theme = theme or DEFAULT_THEME
        parchment = _theme_color(theme.parchment_color, DEFAULT_THEME.parchment_color)
        ink = _theme_color(theme.ink_color, DEFAULT_THEME.ink_color)

        buffer = io.BytesIO()
        page_width, page_height = A5
        c = canvas.Canvas(buffer, pagesize=A5)
        c.setTitle(f"Recibo {receipt.receipt_id}")

        def draw_frame() -> None:
            c.setFillColor(parchment)
            c.rect(0, 0, page_width, page_height, fill=1, stroke=0)
            c.setStrokeColor(ink)
            c.setLineWidth(2)
            c.rect(1 * cm, 1 * cm, page_width - 2 * cm, page_height - 2 * cm, fill=0, stroke=1)
            c.setLineWidth(0.5)
            c.rect(1.2 * cm, 1.2 * cm, page_width - 2.4 * cm, page_height - 2.4 * cm, stroke=1)
            c.setFillColor(ink)

        def centered(text: str, y: float, font: str, size: int) -> None:
            c.setFont(font, size)
            c.drawString((page_width - c.stringWidth(text, font, size)) / 2, y, text)

        left = 1.8 * cm
        right = page_width - 1.8 * cm

        draw_frame()
        y = page_height - 2.6 * cm
        centered("RECIBO IMPERIAL", y, "Times-Bold", 22)
        y -= 0.6 * cm
        centered("AUTENTICADO PELO SINDICATO DOS DRAGÕES", y, "Helvetica", 7)
        y -= 0.5 * cm
        centered(receipt.store_name, y, "Times-Italic", 10)
        y -= 0.35 * cm
        issued = as_utc(receipt.issued_at).strftime("%d/%m/%Y %H:%M UTC")
        centered(f"Emitido em {issued}", y, "Helvetica", 6)
        y -= 0.4 * cm
        c.line(left, y, right, y)

        y -= 0.8 * cm
        c.setFont("Helvetica", 6)
        c.drawString(left, y, "PORTADOR:")
        c.drawRightString(right, y, "CLASSE:")
        y -= 0.45 * cm
        c.setFont("Helvetica-Bold", 10)
        c.drawString(left, y, receipt.customer.name)
        c.drawRightString(right, y, receipt.customer.character_class)
        if receipt.customer.guild:
            y -= 0.4 * cm
            c.setFont("Helvetica-Oblique", 7)
            c.drawString(left, y, f"Guilda: {receipt.customer.guild}")

        y -= 0.9 * cm
        c.setFont("Helvetica-Bold", 7)
        c.drawString(left, y, "ITEM")
        c.drawCentredString(page_width * 0.68, y, "QTD")
        c.drawRightString(right, y, "TOTAL")
        y -= 0.2 * cm
        c.line(left, y, right, y)

        c.setFont("Helvetica", 8)
        for line in receipt.lines:
            y -= 0.5 * cm
            if y < 6 * cm:
                c.showPage()
                draw_frame()
                c.setFont("Helvetica", 8)
                y = page_height - 2.5 * cm
            c.drawString(left, y, line.name[:48])
            c.drawCentredString(page_width * 0.68, y, str(line.quantity))
            c.drawRightString(right, y, f"{line.line_total} {receipt.currency}")

        y -= 0.4 * cm
        c.line(left, y, right, y)
        totals_left = page_width * 0.55
        for label, amount in (("TOTAL:", receipt.total), ("PAGO:", receipt.paid)):
            y -= 0.45 * cm
            c.setFont("Helvetica", 7)
            c.drawString(totals_left, y, label)
            c.drawRightString(right, y, f"{amount} {receipt.currency}")
        y -= 0.6 * cm
        c.setFont("Helvetica-Bold", 12)
        c.drawString(totals_left, y, "TROCO:")
        c.drawRightString(right, y, f"{receipt.change} {receipt.currency}")

        # Flavor text bottom-left, token stamp bottom-right
        stamp_width = 5.2 * cm
        stamp_height = 1.3 * cm
        stamp_x = right - stamp_width
        stamp_y = 2.6 * cm
        c.setFont("Helvetica-Oblique", 7)
        flavor_lines = simpleSplit(
            f'"{receipt.flavor_text}"', "Helvetica-Oblique", 7, stamp_x - left - 0.4 * cm
        )
        for offset, text in enumerate(reversed(flavor_lines)):
            c.drawString(left, stamp_y + offset * 0.3 * cm, text)

        c.saveState()
        c.translate(stamp_x + stamp_width / 2, stamp_y + stamp_height / 2)
        c.rotate(2)
        c.rect(-stamp_width / 2, -stamp_height / 2, stamp_width, stamp_height, fill=0, stroke=1)
        c.setFont("Helvetica-Bold", 6)
        c.drawCentredString(0, 0.2 * cm, "TOKEN RÚNICO")
        c.setFont("Courier-Bold", 10)
        c.drawCentredString(0, -0.35 * cm, receipt.receipt_id)
        c.restoreState()

        c.setFont("Helvetica", 6)
        c.drawCentredString(page_width / 2, 1.6 * cm, f"Verifique em: {receipt.verify_url}")

        c.showPage()
        c.save()

        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
