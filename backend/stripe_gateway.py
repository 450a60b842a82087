from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

import stripe


@dataclass
class StripeGateway:
    api_key: str

    def create_payment_intent(
        self,
        amount: int,
        currency: str,
        metadata: Optional[Dict[str, str]] = None,
    ) -> stripe.PaymentIntent:
        return stripe.PaymentIntent.create(
            amount=amount,
            currency=currency,
            metadata=metadata or {},
            api_key=self.api_key,
        )

    def retrieve_payment_intent(self, payment_intent_id: str) -> stripe.PaymentIntent:
        return stripe.PaymentIntent.retrieve(payment_intent_id, api_key=self.api_key)
