# adoptme/models/pet.py
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Dict, Any
import logging

from adoptme.utils.datetime_utils import DateTimeUtils


@dataclass
class Pet:
    """
    Document layout of the Firestore 'pets' collection.

    A pet is either Available (adopted=False, owner=None) or
    Adopted (adopted=True, owner=<user_id>). Only the adoption
    workflow moves a pet from the first state to the second.
    """
    pet_id: str
    name: str
    specie: str
    birth_date: Optional[date] = None
    adopted: bool = False
    owner: Optional[str] = None
    image: Optional[str] = None
    created_at: datetime = field(default_factory=DateTimeUtils.now)

    @property
    def is_available(self) -> bool:
        return not self.adopted

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pet":
        """
        Build a Pet from a Firestore document.
        Timestamps become datetimes and the stored birth date becomes a date.
        """
        processed_data = DateTimeUtils.from_firestore(dict(data))

        birth_date = processed_data.get('birth_date')
        if birth_date is not None:
            try:
                processed_data['birth_date'] = DateTimeUtils.to_date(birth_date)
            except ValueError:
                logging.warning(f"Invalid birth_date '{birth_date}' for pet {processed_data.get('pet_id')}")
                processed_data['birth_date'] = None

        processed_data['adopted'] = bool(processed_data.get('adopted', False))
        if processed_data.get('created_at') is None:
            processed_data.pop('created_at', None)

        known = cls.__dataclass_fields__.keys()
        return cls(**{k: v for k, v in processed_data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return {
            'pet_id': self.pet_id,
            'name': self.name,
            'specie': self.specie,
            'birth_date': self.birth_date,
            'adopted': self.adopted,
            'owner': self.owner,
            'image': self.image,
            'created_at': self.created_at,
        }
