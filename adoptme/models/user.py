# adoptme/models/user.py
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List
import logging

from adoptme.utils.datetime_utils import DateTimeUtils


class UserRole(Enum):
    USER = "user"
    ADMIN = "admin"


@dataclass
class User:
    """
    Document layout of the Firestore 'users' collection.
    `pets` holds pet ids with set semantics; order carries no meaning.
    """
    user_id: str
    first_name: str
    last_name: str
    email: str
    password: str
    role: UserRole = UserRole.USER
    pets: List[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=DateTimeUtils.now)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        processed_data = DateTimeUtils.from_firestore(dict(data))

        role = processed_data.get('role')
        if isinstance(role, str):
            try:
                processed_data['role'] = UserRole(role)
            except ValueError:
                logging.warning(f"Invalid role '{role}' for user {processed_data.get('user_id')}. Defaulting to user.")
                processed_data['role'] = UserRole.USER
        elif role is None:
            processed_data['role'] = UserRole.USER

        if processed_data.get('pets') is None:
            processed_data['pets'] = []
        if processed_data.get('created_at') is None:
            processed_data.pop('created_at', None)

        known = cls.__dataclass_fields__.keys()
        return cls(**{k: v for k, v in processed_data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return {
            'user_id': self.user_id,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'email': self.email,
            'password': self.password,
            'role': self.role.value,
            'pets': list(self.pets),
            'created_at': self.created_at,
        }
