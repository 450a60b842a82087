from typing import Any, Dict, List, Optional

from store_collections import USERS


def fetch_user(db, uid: str) -> Optional[Dict[str, Any]]:
    snapshot = db.collection(USERS).document(uid).get()
    if not snapshot.exists:
        return None
    return snapshot.to_dict()


def fetch_all_users(db) -> List[Dict[str, Any]]:
    return [{"id": doc.id, **doc.to_dict()} for doc in db.collection(USERS).stream()]
