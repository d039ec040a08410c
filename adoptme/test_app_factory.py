# adoptme/test_app_factory.py
import pytest

from adoptme import create_app
from adoptme.core.config import TestingConfig


def test_testing_config_selected(app):
    assert app.config['TESTING'] is True
    assert app.config['DEBUG'] is False


def test_injected_services_are_used(app, adoption_service):
    assert app.services['adoptions'] is adoption_service


def test_adoptions_blueprint_registered(app):
    rules = {rule.rule for rule in app.url_map.iter_rules()}
    assert '/api/adoptions' in rules
    assert '/api/adoptions/<string:adoption_id>' in rules
    assert '/api/adoptions/<string:user_id>/<string:pet_id>' in rules


def test_missing_firebase_credentials(monkeypatch):
    monkeypatch.setattr(TestingConfig, 'FIREBASE_CREDENTIALS_PATH', '/nonexistent/credentials.json')

    with pytest.raises(FileNotFoundError):
        create_app('testing')


def test_unhandled_error_uses_envelope(app, client, adoption_service, mocker):
    mocker.patch.object(adoption_service, 'list_adoptions', side_effect=RuntimeError("boom"))

    res = client.get('/api/adoptions')

    assert res.status_code == 500
    assert res.get_json() == {"status": "error", "error": "Could not fetch adoptions"}
