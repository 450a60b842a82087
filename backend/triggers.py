"""Cloud Functions bound to Firestore document events.

``main`` imports the decorated handlers so the functions runtime registers
them from its entry module. Event unpacking lives in ``handle_*`` helpers
that take the Firestore client explicitly.
"""
import logging
from typing import Any

from firebase_functions import firestore_fn

from config import settings
from firebase_client import get_firestore_client
from services import notifications_service, search_index_service
from store_collections import ORDERS, PRODUCTS

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger("storefront")


def handle_order_created(db, event: Any) -> None:
    if event.data is None:
        logger.warning("order created event without data order=%s", event.params.get("orderId"))
        return
    notifications_service.send_order_confirmation(
        db,
        event.params["orderId"],
        event.data.to_dict() or {},
    )


def handle_product_written(db, event: Any) -> None:
    after = event.data.after if event.data is not None else None
    product = after.to_dict() if after is not None and after.exists else None
    search_index_service.sync_product(db, event.params["productId"], product)


@firestore_fn.on_document_created(document=f"{ORDERS}/{{orderId}}")
def send_order_confirmation(
    event: firestore_fn.Event[firestore_fn.DocumentSnapshot | None],
) -> None:
    handle_order_created(get_firestore_client(), event)


@firestore_fn.on_document_written(document=f"{PRODUCTS}/{{productId}}")
def update_search_index(
    event: firestore_fn.Event[firestore_fn.Change[firestore_fn.DocumentSnapshot | None]],
) -> None:
    handle_product_written(get_firestore_client(), event)
