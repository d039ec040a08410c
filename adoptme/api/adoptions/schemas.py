# adoptme/api/adoptions/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE

from adoptme.utils.datetime_utils import DateTimeUtils

# Firestore document id rules: non-empty, at most 1500 bytes, no '/',
# not '.' or '..', and not of the reserved form __name__.
DOCUMENT_ID_VALIDATORS = [
    validate.Length(min=1, max=1500),
    validate.Regexp(r'^(?!__.*__$)[^/]+$', error="Malformed identifier."),
    validate.NoneOf(['.', '..'], error="Malformed identifier."),
]


def document_id_field(**kwargs):
    return fields.Str(required=True, validate=DOCUMENT_ID_VALIDATORS, **kwargs)


def _iso_created_at(obj):
    created_at = obj.get('created_at')
    return DateTimeUtils.to_iso_string(created_at) if created_at else None


class AdoptionRequestSchema(Schema):
    """POST /api/adoptions/<user_id>/<pet_id> path parameters."""
    user_id = document_id_field()
    pet_id = document_id_field()


class AdoptionLookupSchema(Schema):
    """GET /api/adoptions/<adoption_id> path and query parameters."""
    class Meta:
        unknown = EXCLUDE

    adoption_id = document_id_field()
    expand = fields.Bool(load_default=False)


class AdoptionResponseSchema(Schema):
    """Adoption with owner and pet as ids."""
    adoption_id = fields.Str(data_key='_id')
    owner = fields.Str()
    pet = fields.Str()
    created_at = fields.Function(_iso_created_at)


class OwnerSummarySchema(Schema):
    """Public user fields. The password credential is never dumped."""
    user_id = fields.Str(data_key='_id')
    first_name = fields.Str()
    last_name = fields.Str()
    email = fields.Email()
    role = fields.Str()
    pets = fields.List(fields.Str())


class PetSummarySchema(Schema):
    pet_id = fields.Str(data_key='_id')
    name = fields.Str()
    specie = fields.Str()
    birth_date = fields.Date(allow_none=True)
    adopted = fields.Bool()
    owner = fields.Str(allow_none=True)
    image = fields.Str(allow_none=True)


class ExpandedAdoptionResponseSchema(Schema):
    """Adoption with the owner and pet documents resolved."""
    adoption_id = fields.Str(data_key='_id')
    owner = fields.Nested(OwnerSummarySchema, allow_none=True)
    pet = fields.Nested(PetSummarySchema, allow_none=True)
    created_at = fields.Function(_iso_created_at)
