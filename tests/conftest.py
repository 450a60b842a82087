import os
import uuid
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

os.environ.setdefault("STRIPE_SECRET_KEY", "sk_test_storefront")

import stripe  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from firebase_admin import firestore  # noqa: E402
from google.api_core.exceptions import NotFound  # noqa: E402


class FakeSnapshot:
    def __init__(self, doc_id, data):
        self.id = doc_id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return dict(self._data) if self._data is not None else None


class FakeDocument:
    def __init__(self, store, collection, doc_id):
        self._store = store
        self.collection_name = collection
        self.id = doc_id

    @property
    def _docs(self):
        return self._store.data.setdefault(self.collection_name, {})

    def get(self):
        return FakeSnapshot(self.id, self._docs.get(self.id))

    def set(self, data, merge=False):
        base = dict(self._docs.get(self.id) or {}) if merge else {}
        self._docs[self.id] = self._store.apply(base, data)
        self._store.writes.append(("set", self.collection_name, self.id))

    def update(self, data):
        if self.id not in self._docs:
            raise NotFound(f"No document to update: {self.collection_name}/{self.id}")
        self._docs[self.id] = self._store.apply(dict(self._docs[self.id]), data)
        self._store.writes.append(("update", self.collection_name, self.id))

    def delete(self):
        self._docs.pop(self.id, None)
        self._store.writes.append(("delete", self.collection_name, self.id))


class FakeCollection:
    def __init__(self, store, name):
        self._store = store
        self.name = name

    def document(self, doc_id=None):
        return FakeDocument(self._store, self.name, doc_id or uuid.uuid4().hex[:20])

    def add(self, data):
        ref = self.document()
        ref.set(data)
        return datetime.now(timezone.utc), ref

    def stream(self):
        self._store.scans.append(self.name)
        docs = self._store.data.get(self.name, {})
        return iter([FakeSnapshot(doc_id, dict(data)) for doc_id, data in docs.items()])


class FakeBatch:
    def __init__(self, store):
        self._store = store
        self._ops = []

    def update(self, ref, data):
        self._ops.append((ref, data))

    def commit(self):
        for ref, _ in self._ops:
            if ref.id not in ref._docs:
                raise NotFound(f"No document to update: {ref.collection_name}/{ref.id}")
        for ref, data in self._ops:
            ref.update(data)


class FakeFirestore:
    """In-memory Firestore that understands the transforms the app writes."""

    def __init__(self):
        self.data = {}
        self.writes = []
        self.scans = []

    def collection(self, name):
        return FakeCollection(self, name)

    def batch(self):
        return FakeBatch(self)

    def seed(self, collection, doc_id, data):
        self.data.setdefault(collection, {})[doc_id] = dict(data)

    def docs(self, collection):
        return self.data.get(collection, {})

    def apply(self, base, data):
        for key, value in data.items():
            if value is firestore.SERVER_TIMESTAMP:
                base[key] = datetime.now(timezone.utc)
            elif isinstance(value, firestore.Increment):
                base[key] = (base.get(key) or 0) + value.value
            else:
                base[key] = value
        return base


class FakeGateway:
    def __init__(self):
        self.intents = {}
        self.created = []

    def add_intent(self, intent_id, status):
        self.intents[intent_id] = SimpleNamespace(id=intent_id, status=status)

    def create_payment_intent(self, amount, currency, metadata=None):
        intent_id = f"pi_{len(self.created) + 1}"
        self.created.append(
            {"amount": amount, "currency": currency, "metadata": metadata or {}}
        )
        return SimpleNamespace(
            id=intent_id,
            status="requires_payment_method",
            client_secret=f"{intent_id}_secret",
        )

    def retrieve_payment_intent(self, payment_intent_id):
        if payment_intent_id not in self.intents:
            raise stripe.InvalidRequestError(
                f"No such payment_intent: '{payment_intent_id}'", "id"
            )
        return self.intents[payment_intent_id]


TOKENS = {"admin-token": "admin-uid", "customer-token": "customer-uid"}


def fake_verify(token):
    if token not in TOKENS:
        raise ValueError("Invalid ID token")
    return {"uid": TOKENS[token]}


@pytest.fixture
def db():
    return FakeFirestore()


@pytest.fixture
def payments():
    return FakeGateway()


@pytest.fixture
def client(db, payments):
    from dependencies import get_db, get_payments, get_token_verifier
    from main import app

    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_payments] = lambda: payments
    app.dependency_overrides[get_token_verifier] = lambda: fake_verify
    yield TestClient(app)
    app.dependency_overrides.clear()
