"""Display state for the "verify a receipt" screen."""

import enum
from dataclasses import dataclass

from app.receipts.token import check_receipt_token, normalize_token_input


class VerificationStatus(str, enum.Enum):
    IDLE = "idle"
    VALID = "valid"
    INVALID = "invalid"


@dataclass(frozen=True)
class VerificationCopy:
    headline: str
    message: str


STATUS_COPY: dict[VerificationStatus, VerificationCopy] = {
    VerificationStatus.IDLE: VerificationCopy(
        headline="Verificar Autenticidade",
        message=(
            "Insira o código rúnico (ID do Recibo) para verificar se o documento "
            "foi emitido legalmente pelo Empório."
        ),
    ),
    VerificationStatus.VALID: VerificationCopy(
        headline="Documento Legítimo",
        message="A assinatura mágica confere.",
    ),
    VerificationStatus.INVALID: VerificationCopy(
        headline="Falsificação Detectada",
        message="Este documento não possui a aura do dragão.",
    ),
}


@dataclass(frozen=True)
class VerificationResult:
    token: str
    status: VerificationStatus
    reason: str | None

    @property
    def valid(self) -> bool:
        return self.status is VerificationStatus.VALID

    @property
    def copy(self) -> VerificationCopy:
        return STATUS_COPY[self.status]


def verify_user_input(raw: str | None) -> VerificationResult:
    """Normalize free-text input and map the validator verdict to a display status.

    Empty input has not been submitted yet and stays ``idle``.
    """
    token = normalize_token_input(raw)
    if not token:
        return VerificationResult(token=token, status=VerificationStatus.IDLE, reason=None)

    check = check_receipt_token(token)
    status = VerificationStatus.VALID if check.valid else VerificationStatus.INVALID
    return VerificationResult(token=token, status=status, reason=check.reason)


def verification_status(raw: str | None) -> VerificationStatus:
    return verify_user_input(raw).status
