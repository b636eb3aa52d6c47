"""Payment provider adapters."""

from abc import ABC, abstractmethod

import stripe

from events.domain.errors import VerificationError


class SignatureVerifier(ABC):
    @abstractmethod
    def verify(self, payload: bytes, signature: str | None) -> None:
        """Raise VerificationError unless ``signature`` signs ``payload``."""
        ...


class StripeSignatureVerifier(SignatureVerifier):
    """Checks the ``Stripe-Signature`` header with the endpoint secret."""

    def __init__(self, secret: str, tolerance: int = stripe.Webhook.DEFAULT_TOLERANCE) -> None:
        self._secret = secret
        self._tolerance = tolerance

    def verify(self, payload: bytes, signature: str | None) -> None:
        if not signature:
            raise VerificationError("No signature header")
        if not self._secret:
            raise VerificationError("Webhook secret is not configured")
        try:
            text = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise VerificationError("Payload is not valid UTF-8") from exc
        try:
            stripe.WebhookSignature.verify_header(text, signature, self._secret, self._tolerance)
        except stripe.SignatureVerificationError as exc:
            raise VerificationError(str(exc)) from exc
