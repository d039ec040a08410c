# adoptme/api/adoptions/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app
from marshmallow import ValidationError

from adoptme.core.errors import AdoptionError
from .schemas import (
    AdoptionRequestSchema,
    AdoptionLookupSchema,
    AdoptionResponseSchema,
    ExpandedAdoptionResponseSchema
)

adoptions_bp = Blueprint('adoptions_bp', __name__)


IDENTIFIER_FIELDS = {"user_id", "pet_id", "adoption_id"}


def _bad_request(err: ValidationError):
    error = "Invalid identifier" if IDENTIFIER_FIELDS & set(err.messages) else "Invalid request"
    return jsonify({"status": "error", "error": error, "details": err.messages}), 400


@adoptions_bp.route('', methods=['GET'])
def list_adoptions():
    """Every adoption record."""
    adoption_service = current_app.services['adoptions']
    try:
        adoptions = [adoption.to_dict() for adoption in adoption_service.list_adoptions()]
        return jsonify({"status": "success", "payload": AdoptionResponseSchema(many=True).dump(adoptions)}), 200
    except Exception as e:
        logging.error(f"List adoptions API error: {e}", exc_info=True)
        return jsonify({"status": "error", "error": "Could not fetch adoptions"}), 500


@adoptions_bp.route('/<string:adoption_id>', methods=['GET'])
def get_adoption(adoption_id: str):
    """One adoption; ?expand=true resolves the owner and the pet."""
    adoption_service = current_app.services['adoptions']
    try:
        params = AdoptionLookupSchema().load({**request.args.to_dict(), 'adoption_id': adoption_id})
    except ValidationError as err:
        return _bad_request(err)

    try:
        adoption = adoption_service.get_adoption(params['adoption_id'], expand=params['expand'])
        schema = ExpandedAdoptionResponseSchema() if params['expand'] else AdoptionResponseSchema()
        return jsonify({"status": "success", "payload": schema.dump(adoption)}), 200
    except AdoptionError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"Get adoption API error (adoption_id: {adoption_id}): {e}", exc_info=True)
        return jsonify({"status": "error", "error": "Could not fetch adoption"}), 500


@adoptions_bp.route('/<string:user_id>/<string:pet_id>', methods=['POST'])
def create_adoption(user_id: str, pet_id: str):
    """Adopts a pet: creates the adoption, marks the pet and updates the user."""
    adoption_service = current_app.services['adoptions']
    try:
        params = AdoptionRequestSchema().load({'user_id': user_id, 'pet_id': pet_id})
    except ValidationError as err:
        return _bad_request(err)

    try:
        adoption = adoption_service.initiate_adoption(params['user_id'], params['pet_id'])
        return jsonify({
            "status": "success",
            "message": "Pet adopted",
            "payload": {"adoption_id": adoption.adoption_id}
        }), 200
    except AdoptionError as e:
        return jsonify(e.to_dict()), e.status_code
    except Exception as e:
        logging.error(f"Adoption API error (user_id: {user_id}, pet_id: {pet_id}): {e}", exc_info=True)
        return jsonify({"status": "error", "error": "Internal server error"}), 500
