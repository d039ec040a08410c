"""Shared test fixtures: in-memory repositories and a Flask test client."""
import copy
import os
import uuid
from datetime import date

import pytest

os.environ.setdefault("FLASK_ENV", "testing")

from adoptme import create_app
from adoptme.api.adoptions.services import AdoptionService
from adoptme.core.errors import AlreadyAdopted, PetNotFound
from adoptme.models.adoption import Adoption
from adoptme.models.pet import Pet
from adoptme.models.user import User, UserRole


class InMemoryUserDirectory:
    def __init__(self):
        self.records = {}

    def create(self, user_data):
        if any(u.email == user_data['email'] for u in self.records.values()):
            raise ValueError("User already exists")
        user = User(
            user_id=uuid.uuid4().hex[:24],
            first_name=user_data['first_name'],
            last_name=user_data['last_name'],
            email=user_data['email'],
            password=user_data['password'],
            role=UserRole(user_data.get('role', 'user')),
            pets=list(user_data.get('pets') or []),
        )
        self.records[user.user_id] = user
        return copy.deepcopy(user)

    def find_by_id(self, user_id):
        user = self.records.get(user_id)
        return copy.deepcopy(user) if user else None

    def append_pet(self, user_id, pet_id):
        user = self.records[user_id]
        if pet_id not in user.pets:
            user.pets.append(pet_id)

    def delete(self, user_id):
        self.records.pop(user_id, None)


class InMemoryPetRegistry:
    def __init__(self):
        self.records = {}

    def create(self, pet_data):
        pet = Pet(
            pet_id=uuid.uuid4().hex[:24],
            name=pet_data['name'],
            specie=pet_data['specie'],
            birth_date=pet_data.get('birth_date'),
            adopted=pet_data.get('adopted', False),
            owner=pet_data.get('owner'),
            image=pet_data.get('image'),
        )
        self.records[pet.pet_id] = pet
        return copy.deepcopy(pet)

    def find_by_id(self, pet_id):
        pet = self.records.get(pet_id)
        return copy.deepcopy(pet) if pet else None

    def mark_adopted(self, pet_id, owner_id):
        pet = self.records.get(pet_id)
        if pet is None:
            raise PetNotFound()
        if pet.adopted:
            raise AlreadyAdopted()
        pet.adopted = True
        pet.owner = owner_id

    def release(self, pet_id):
        pet = self.records[pet_id]
        pet.adopted = False
        pet.owner = None

    def delete(self, pet_id):
        self.records.pop(pet_id, None)


class InMemoryAdoptionStore:
    def __init__(self):
        self.records = {}

    def create(self, owner_id, pet_id):
        adoption = Adoption(adoption_id=uuid.uuid4().hex[:24], owner=owner_id, pet=pet_id)
        self.records[adoption.adoption_id] = adoption
        return copy.deepcopy(adoption)

    def find_by_id(self, adoption_id):
        adoption = self.records.get(adoption_id)
        return copy.deepcopy(adoption) if adoption else None

    def find_by(self, owner_id=None, pet_id=None):
        for adoption in self.records.values():
            if owner_id is not None and adoption.owner != owner_id:
                continue
            if pet_id is not None and adoption.pet != pet_id:
                continue
            return copy.deepcopy(adoption)
        return None

    def list_all(self):
        return [copy.deepcopy(a) for a in self.records.values()]

    def delete(self, adoption_id):
        self.records.pop(adoption_id, None)


@pytest.fixture
def user_directory():
    return InMemoryUserDirectory()


@pytest.fixture
def pet_registry():
    return InMemoryPetRegistry()


@pytest.fixture
def adoption_store():
    return InMemoryAdoptionStore()


@pytest.fixture
def adoption_service(user_directory, pet_registry, adoption_store):
    return AdoptionService(user_directory, pet_registry, adoption_store)


@pytest.fixture
def app(user_directory, pet_registry, adoption_store, adoption_service):
    services = {
        'users': user_directory,
        'pets': pet_registry,
        'adoption_records': adoption_store,
        'adoptions': adoption_service,
    }
    return create_app('testing', services=services)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def user(user_directory):
    return user_directory.create({
        'first_name': 'Test',
        'last_name': 'User',
        'email': 'testingUser@example.com',
        'password': 'testpassword',
        'pets': [],
    })


@pytest.fixture
def pet(pet_registry):
    return pet_registry.create({
        'name': 'testPet',
        'specie': 'dog',
        'birth_date': date(2023, 1, 1),
    })
