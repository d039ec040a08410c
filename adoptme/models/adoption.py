# adoptme/models/adoption.py
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from adoptme.utils.datetime_utils import DateTimeUtils


@dataclass
class Adoption:
    """
    Document layout of the Firestore 'adoptions' collection.
    Written once per successful adoption and never updated afterwards.
    """
    adoption_id: str
    owner: str
    pet: str
    created_at: datetime = field(default_factory=DateTimeUtils.now)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Adoption":
        processed_data = DateTimeUtils.from_firestore(dict(data))
        return cls(
            adoption_id=processed_data['adoption_id'],
            owner=processed_data['owner'],
            pet=processed_data['pet'],
            created_at=processed_data.get('created_at') or DateTimeUtils.now(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'adoption_id': self.adoption_id,
            'owner': self.owner,
            'pet': self.pet,
            'created_at': self.created_at,
        }
