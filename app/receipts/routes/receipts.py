"""
Receipt endpoints: verification of receipt tokens and the downloadable receipt.
"""

from urllib.parse import quote

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import ValidationError
from app.core.rate_limit import limiter
from app.db.session import get_db
from app.receipts.schemas.receipt import Receipt, VerifyRequest, VerifyResponse
from app.receipts.services.receipt_document import ReceiptDocumentService, receipt_filename
from app.receipts.token import validate_receipt_token
from app.receipts.verification import VerificationResult, verify_user_input
from app.stores.schemas.store import StoreTheme
from app.stores.services.store_service import StoreRepository

router = APIRouter(prefix="/receipts", tags=["receipts"])


def _verify_response(result: VerificationResult) -> VerifyResponse:
    return VerifyResponse(
        token=result.token,
        valid=result.valid,
        status=result.status.value,
        reason=result.reason,
        headline=result.copy.headline,
        message=result.copy.message,
    )


@router.post("/verify", response_model=VerifyResponse)
@limiter.limit(settings.VERIFY_RATE_LIMIT)
async def verify_receipt(request: Request, verify_request: VerifyRequest) -> VerifyResponse:
    """
    Check a receipt token typed by a user.

    Input is trimmed and uppercased first. Empty input answers ``idle``.
    Only the token itself is inspected; nothing is looked up.
    """
    return _verify_response(verify_user_input(verify_request.token))


@router.get("/verify/{token}", response_model=VerifyResponse)
@limiter.limit(settings.VERIFY_RATE_LIMIT)
async def verify_receipt_link(request: Request, token: str) -> VerifyResponse:
    """Verification link printed on receipts (QR payload)."""
    return _verify_response(verify_user_input(token))


@router.post("/document", response_class=Response)
def download_receipt_document(receipt: Receipt, db: Session = Depends(get_db)) -> Response:
    """Render a receipt as a PDF, styled with its store's parchment and ink colors."""
    if not validate_receipt_token(receipt.receipt_id):
        raise ValidationError("Token do recibo inválido", field="receiptId")

    store = StoreRepository(db).find_by_slug(receipt.store_slug)
    theme = StoreTheme.model_validate(store.theme or {}) if store else None

    pdf_bytes = ReceiptDocumentService.generate_receipt_pdf(receipt, theme)

    filename = receipt_filename(receipt)
    ascii_fallback = (
        filename.encode("ascii", "replace").decode("ascii").replace("?", "_").replace("\"", "_")
    )
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": (
                f"attachment; filename=\"{ascii_fallback}\"; filename*=UTF-8''{quote(filename)}"
            )
        },
    )
