from typing import Any, Dict, Iterable, List

from firebase_admin import firestore

from store_collections import PRODUCTS


def decrement_stock(db, items: Iterable[Dict[str, Any]]) -> int:
    batch = db.batch()
    count = 0
    for item in items:
        ref = db.collection(PRODUCTS).document(item["productId"])
        batch.update(ref, {"stock": firestore.Increment(-item["quantity"])})
        count += 1
    batch.commit()
    return count


def fetch_all_products(db) -> List[Dict[str, Any]]:
    return [{"id": doc.id, **doc.to_dict()} for doc in db.collection(PRODUCTS).stream()]
