from typing import Any, Dict

from firebase_admin import firestore

from store_collections import SEARCH_INDEX


def upsert_entry(db, product_id: str, entry: Dict[str, Any]) -> None:
    db.collection(SEARCH_INDEX).document(product_id).set(
        {**entry, "updatedAt": firestore.SERVER_TIMESTAMP}
    )


def delete_entry(db, product_id: str) -> None:
    db.collection(SEARCH_INDEX).document(product_id).delete()
