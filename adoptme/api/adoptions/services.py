# adoptme/api/adoptions/services.py
import logging
from typing import Any, Callable, Dict, List

from adoptme.core.errors import (
    AdoptionError,
    AdoptionNotFound,
    AdoptionPersistenceFailure,
    AlreadyAdopted,
    PetNotFound,
    UserNotFound,
)
from adoptme.core.repository_protocols import AdoptionStore, PetRegistry, UserDirectory
from adoptme.models.adoption import Adoption

logger = logging.getLogger(__name__)


class AdoptionService:
    """
    Adoption workflow: links a user to a pet across three collections.

    The record store has no multi-document transactions, so a successful
    adoption is three separate writes run as a saga:
      a. create the Adoption record
      b. mark the pet adopted (compare-and-set on the pet's adopted flag)
      c. append the pet to the user's pet list
    When a later step fails the earlier ones are compensated in reverse
    order before the failure is reported. A process crash between a write
    and its compensation can still leave an orphan Adoption record.
    """
    def __init__(self,
                 user_directory: UserDirectory,
                 pet_registry: PetRegistry,
                 adoption_store: AdoptionStore):
        self.user_directory = user_directory
        self.pet_registry = pet_registry
        self.adoption_store = adoption_store

    def initiate_adoption(self, user_id: str, pet_id: str) -> Adoption:
        """Adopts pet_id for user_id and returns the new Adoption."""
        user = self.user_directory.find_by_id(user_id)
        if user is None:
            logger.warning(f"Adoption rejected: user {user_id} not found")
            raise UserNotFound()

        pet = self.pet_registry.find_by_id(pet_id)
        if pet is None:
            logger.warning(f"Adoption rejected: pet {pet_id} not found")
            raise PetNotFound()

        if pet.adopted:
            logger.warning(f"Adoption rejected: pet {pet_id} is already adopted by {pet.owner}")
            raise AlreadyAdopted()

        try:
            adoption = self.adoption_store.create(user_id, pet_id)
        except Exception as e:
            logger.error(f"Adoption record creation failed (user={user_id}, pet={pet_id}): {e}", exc_info=True)
            raise AdoptionPersistenceFailure('create_adoption') from e

        try:
            self.pet_registry.mark_adopted(pet_id, user_id)
        except AdoptionError:
            # Lost the race against a concurrent adoption, or the pet vanished.
            logger.warning(f"Pet {pet_id} changed state during adoption {adoption.adoption_id}; rolling back")
            self._compensate('delete_adoption', self.adoption_store.delete, adoption.adoption_id)
            raise
        except Exception as e:
            logger.error(f"Marking pet {pet_id} adopted failed: {e}", exc_info=True)
            self._compensate('delete_adoption', self.adoption_store.delete, adoption.adoption_id)
            raise AdoptionPersistenceFailure('mark_pet_adopted') from e

        try:
            self.user_directory.append_pet(user_id, pet_id)
        except Exception as e:
            logger.error(f"Appending pet {pet_id} to user {user_id} failed: {e}", exc_info=True)
            self._compensate('release_pet', self.pet_registry.release, pet_id)
            self._compensate('delete_adoption', self.adoption_store.delete, adoption.adoption_id)
            raise AdoptionPersistenceFailure('append_pet_to_user') from e

        logger.info(f"Pet {pet_id} adopted by user {user_id} (adoption {adoption.adoption_id})")
        return adoption

    def get_adoption(self, adoption_id: str, expand: bool = False) -> Dict[str, Any]:
        """
        Returns the adoption as a dict. With expand=True the owner and pet
        ids are replaced by their documents (None if the record is gone).
        """
        adoption = self.adoption_store.find_by_id(adoption_id)
        if adoption is None:
            raise AdoptionNotFound()

        result = adoption.to_dict()
        if expand:
            owner = self.user_directory.find_by_id(adoption.owner)
            pet = self.pet_registry.find_by_id(adoption.pet)
            result['owner'] = owner.to_dict() if owner else None
            result['pet'] = pet.to_dict() if pet else None
        return result

    def list_adoptions(self) -> List[Adoption]:
        return self.adoption_store.list_all()

    def delete_adoption(self, adoption_id: str) -> None:
        """Removes the record only; pet and user state are left as they are."""
        if self.adoption_store.find_by_id(adoption_id) is None:
            raise AdoptionNotFound()
        self.adoption_store.delete(adoption_id)
        logger.info(f"Adoption {adoption_id} deleted")

    def _compensate(self, action_name: str, action: Callable[..., None], *args: Any) -> None:
        # A failed compensation must not mask the error that triggered it.
        try:
            action(*args)
            logger.info(f"Compensation '{action_name}' applied for {args}")
        except Exception as e:
            logger.error(f"Compensation '{action_name}' failed for {args}: {e}", exc_info=True)
