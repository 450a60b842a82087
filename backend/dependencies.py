from functools import lru_cache
from typing import Any, Callable, Dict

from config import settings
from firebase_client import get_firestore_client, verify_id_token
from stripe_gateway import StripeGateway

TokenVerifier = Callable[[str], Dict[str, Any]]


def get_db():
    return get_firestore_client()


@lru_cache(maxsize=None)
def get_payments() -> StripeGateway:
    return StripeGateway(api_key=settings.stripe_secret_key)


def get_token_verifier() -> TokenVerifier:
    return verify_id_token
