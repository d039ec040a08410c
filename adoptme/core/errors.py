# adoptme/core/errors.py
"""
Adoption workflow error taxonomy.

Each error carries the user-facing message and the HTTP status the router
answers with, so the API layer never has to map exception types by hand.
"""
from typing import Optional


class AdoptionError(Exception):
    """Base class for every failure the adoption workflow reports."""
    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"status": "error", "error": self.message}


class UserNotFound(AdoptionError):
    status_code = 404
    message = "user Not found"


class PetNotFound(AdoptionError):
    status_code = 404
    message = "Pet not found"


class AdoptionNotFound(AdoptionError):
    status_code = 404
    message = "Adoption not found"


class AlreadyAdopted(AdoptionError):
    status_code = 400
    message = "Pet is already adopted"


class AdoptionPersistenceFailure(AdoptionError):
    """A write failed after every precondition had passed."""
    status_code = 500
    message = "Adoption could not be completed"

    def __init__(self, step: str, message: Optional[str] = None):
        self.step = step
        super().__init__(message)
