# adoptme/core/repository_protocols.py
"""
Contracts between the adoption workflow and the record store.

The workflow only ever touches users and pets through these narrow
mutations, which bounds the places where the adoption invariants can be
broken. Firestore implementations live in adoptme/services/.
"""
from typing import Any, Dict, List, Optional, Protocol

from adoptme.models.adoption import Adoption
from adoptme.models.pet import Pet
from adoptme.models.user import User


class UserDirectory(Protocol):
    def create(self, user_data: Dict[str, Any]) -> User: ...
    def find_by_id(self, user_id: str) -> Optional[User]: ...
    def append_pet(self, user_id: str, pet_id: str) -> None: ...
    def delete(self, user_id: str) -> None: ...


class PetRegistry(Protocol):
    def create(self, pet_data: Dict[str, Any]) -> Pet: ...
    def find_by_id(self, pet_id: str) -> Optional[Pet]: ...
    def mark_adopted(self, pet_id: str, owner_id: str) -> None:
        """Set adopted/owner only if the pet is still available, else raise AlreadyAdopted."""
        ...
    def release(self, pet_id: str) -> None: ...
    def delete(self, pet_id: str) -> None: ...


class AdoptionStore(Protocol):
    def create(self, owner_id: str, pet_id: str) -> Adoption: ...
    def find_by_id(self, adoption_id: str) -> Optional[Adoption]: ...
    def find_by(self, owner_id: Optional[str] = None, pet_id: Optional[str] = None) -> Optional[Adoption]: ...
    def list_all(self) -> List[Adoption]: ...
    def delete(self, adoption_id: str) -> None: ...
