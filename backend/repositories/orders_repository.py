from typing import Any, Dict, List

from firebase_admin import firestore

from store_collections import ORDERS


def insert_order(db, record: Dict[str, Any]) -> str:
    payload = {
        **record,
        "createdAt": firestore.SERVER_TIMESTAMP,
        "updatedAt": firestore.SERVER_TIMESTAMP,
    }
    _, ref = db.collection(ORDERS).add(payload)
    return ref.id


def fetch_all_orders(db) -> List[Dict[str, Any]]:
    return [{"id": doc.id, **doc.to_dict()} for doc in db.collection(ORDERS).stream()]
