"""
Firestore document store.

Paths are tuples of alternating collection / document ids, e.g.
    ("admin", admin_id, "district", district_id, "school", school_id, "inventory", item_cd)
"""

import logging

from firebase_admin import firestore

logger = logging.getLogger("vsdc_gateway.store")


class DocumentStore:
    """Thin wrapper over the Firestore client. The client is created on first use."""

    def __init__(self, client=None):
        self._client = client

    @property
    def client(self):
        if self._client is None:
            from apps.authentication.firebase import get_firebase_app
            self._client = firestore.client(app=get_firebase_app())
        return self._client

    # ── Sentinels ─────────────────────────────────────────────────────────────
    def server_timestamp(self):
        return firestore.SERVER_TIMESTAMP

    def increment(self, amount=1):
        return firestore.Increment(amount)

    # ── Documents ─────────────────────────────────────────────────────────────
    def set(self, path, data: dict, merge=True) -> None:
        self.client.document(*path).set(data, merge=merge)

    def get(self, path):
        """Return the document as a dict, or None when it does not exist."""
        snapshot = self.client.document(*path).get()
        return snapshot.to_dict() if snapshot.exists else None

    def exists(self, path) -> bool:
        return self.client.document(*path).get().exists

    def update(self, path, data: dict) -> None:
        self.client.document(*path).update(data)

    def add(self, collection_path, data: dict) -> str:
        """Add a document with an auto-generated id and return the id."""
        _, ref = self.client.collection(*collection_path).add(data)
        return ref.id

    # ── Queries ───────────────────────────────────────────────────────────────
    def where_equal(self, collection_path, field, value) -> list:
        """[(doc_id, data)] for documents of one collection with field == value."""
        query = self.client.collection(*collection_path).where(
            filter=firestore.FieldFilter(field, "==", value)
        )
        return [(doc.id, doc.to_dict()) for doc in query.stream()]

    def group_where_equal(self, collection_id, field, value) -> list:
        """Same as where_equal across every collection named collection_id."""
        query = self.client.collection_group(collection_id).where(
            filter=firestore.FieldFilter(field, "==", value)
        )
        return [(doc.id, doc.to_dict()) for doc in query.stream()]

    def latest(self, collection_path, field, value, order_by):
        """Document with field == value and the highest order_by, or None."""
        query = (
            self.client.collection(*collection_path)
            .where(filter=firestore.FieldFilter(field, "==", value))
            .order_by(order_by, direction=firestore.Query.DESCENDING)
            .limit(1)
        )
        for doc in query.stream():
            return doc.to_dict()
        return None


_store = None


def get_document_store() -> DocumentStore:
    global _store
    if _store is None:
        _store = DocumentStore()
    return _store
