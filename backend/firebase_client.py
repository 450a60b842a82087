from functools import lru_cache
from typing import Any, Dict

import firebase_admin
from firebase_admin import auth, credentials, firestore

from config import settings


@lru_cache(maxsize=None)
def get_firebase_app() -> firebase_admin.App:
    cred = (
        credentials.Certificate(settings.firebase_credentials)
        if settings.firebase_credentials
        else None
    )
    options = (
        {"projectId": settings.firebase_project_id}
        if settings.firebase_project_id
        else None
    )
    return firebase_admin.initialize_app(cred, options)


@lru_cache(maxsize=None)
def get_firestore_client():
    return firestore.client(app=get_firebase_app())


def verify_id_token(token: str) -> Dict[str, Any]:
    return auth.verify_id_token(token, app=get_firebase_app())
