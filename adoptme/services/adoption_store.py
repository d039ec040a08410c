# adoptme/services/adoption_store.py
import logging
import uuid
from typing import List, Optional
from firebase_admin import firestore

from adoptme.models.adoption import Adoption
from adoptme.utils.datetime_utils import DateTimeUtils


class FirestoreAdoptionStore:
    """Persistence for the 'adoptions' collection."""
    def __init__(self, db=None):
        self.db = db or firestore.client()
        self.adoptions_ref = self.db.collection('adoptions')

    def create(self, owner_id: str, pet_id: str) -> Adoption:
        adoption_id = str(uuid.uuid4())
        adoption = Adoption(adoption_id=adoption_id, owner=owner_id, pet=pet_id)
        self.adoptions_ref.document(adoption_id).set(DateTimeUtils.for_firestore(adoption.to_dict()))
        logging.info(f"Adoption record created: {adoption_id} (owner={owner_id}, pet={pet_id})")
        return adoption

    def find_by_id(self, adoption_id: str) -> Optional[Adoption]:
        doc = self.adoptions_ref.document(adoption_id).get()
        if not doc.exists:
            return None
        return Adoption.from_dict(doc.to_dict())

    def find_by(self, owner_id: Optional[str] = None, pet_id: Optional[str] = None) -> Optional[Adoption]:
        """First adoption matching every given filter."""
        query = self.adoptions_ref
        if owner_id is not None:
            query = query.where('owner', '==', owner_id)
        if pet_id is not None:
            query = query.where('pet', '==', pet_id)
        doc = next(query.limit(1).stream(), None)
        return Adoption.from_dict(doc.to_dict()) if doc else None

    def list_all(self) -> List[Adoption]:
        docs = self.adoptions_ref.order_by('created_at').stream()
        return [Adoption.from_dict(doc.to_dict()) for doc in docs]

    def delete(self, adoption_id: str) -> None:
        self.adoptions_ref.document(adoption_id).delete()
        logging.info(f"Adoption record deleted: {adoption_id}")
