# adoptme/services/user_directory.py
import logging
import uuid
from typing import Any, Dict, Optional
from firebase_admin import firestore

from adoptme.models.user import User, UserRole
from adoptme.utils.datetime_utils import DateTimeUtils


class FirestoreUserDirectory:
    """Lookups and narrow updates on the 'users' collection."""
    def __init__(self, db=None):
        self.db = db or firestore.client()
        self.users_ref = self.db.collection('users')

    def create(self, user_data: Dict[str, Any]) -> User:
        """Stores a new user. Emails are unique across the collection."""
        email = user_data['email']
        existing = next(self.users_ref.where('email', '==', email).limit(1).stream(), None)
        if existing:
            raise ValueError("User already exists")

        user_id = str(uuid.uuid4())
        new_user = User(
            user_id=user_id,
            first_name=user_data['first_name'],
            last_name=user_data['last_name'],
            email=email,
            password=user_data['password'],
            role=UserRole(user_data.get('role', UserRole.USER.value)),
            pets=list(user_data.get('pets') or []),
        )
        self.users_ref.document(user_id).set(DateTimeUtils.for_firestore(new_user.to_dict()))
        logging.info(f"User created: {user_id}")
        return new_user

    def find_by_id(self, user_id: str) -> Optional[User]:
        doc = self.users_ref.document(user_id).get()
        if not doc.exists:
            return None
        return User.from_dict(doc.to_dict())

    def append_pet(self, user_id: str, pet_id: str) -> None:
        # ArrayUnion keeps set semantics and is atomic on the document.
        self.users_ref.document(user_id).update({'pets': firestore.ArrayUnion([pet_id])})

    def delete(self, user_id: str) -> None:
        self.users_ref.document(user_id).delete()
        logging.info(f"User deleted: {user_id}")
