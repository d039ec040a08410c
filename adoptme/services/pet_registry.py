# adoptme/services/pet_registry.py
import logging
import uuid
from typing import Any, Dict, Optional
from firebase_admin import firestore
from firebase_admin.firestore import Transaction

from adoptme.core.errors import AlreadyAdopted, PetNotFound
from adoptme.models.pet import Pet
from adoptme.utils.datetime_utils import DateTimeUtils


class FirestorePetRegistry:
    """Lookups and adoption-state updates on the 'pets' collection."""
    def __init__(self, db=None):
        self.db = db or firestore.client()
        self.pets_ref = self.db.collection('pets')

    def create(self, pet_data: Dict[str, Any]) -> Pet:
        pet_id = str(uuid.uuid4())
        new_pet = Pet(
            pet_id=pet_id,
            name=pet_data['name'],
            specie=pet_data['specie'],
            birth_date=pet_data.get('birth_date'),
            image=pet_data.get('image'),
        )
        self.pets_ref.document(pet_id).set(DateTimeUtils.for_firestore(new_pet.to_dict()))
        logging.info(f"Pet created: {pet_id}")
        return new_pet

    def find_by_id(self, pet_id: str) -> Optional[Pet]:
        doc = self.pets_ref.document(pet_id).get()
        if not doc.exists:
            return None
        return Pet.from_dict(doc.to_dict())

    def mark_adopted(self, pet_id: str, owner_id: str) -> None:
        """[Transaction] Available -> Adopted, only if nobody adopted the pet in the meantime."""
        transaction = self.db.transaction()
        pet_ref = self.pets_ref.document(pet_id)

        @firestore.transactional
        def _mark_in_transaction(transaction: Transaction):
            snapshot = pet_ref.get(transaction=transaction)
            if not snapshot.exists:
                raise PetNotFound()
            if snapshot.to_dict().get('adopted'):
                raise AlreadyAdopted()
            transaction.update(pet_ref, {'adopted': True, 'owner': owner_id})

        _mark_in_transaction(transaction)
        logging.info(f"Pet {pet_id} marked adopted by {owner_id}")

    def release(self, pet_id: str) -> None:
        """Undo mark_adopted. Only the failed-adoption path calls this."""
        self.pets_ref.document(pet_id).update({'adopted': False, 'owner': None})
        logging.info(f"Pet {pet_id} released back to available")

    def delete(self, pet_id: str) -> None:
        self.pets_ref.document(pet_id).delete()
        logging.info(f"Pet deleted: {pet_id}")
