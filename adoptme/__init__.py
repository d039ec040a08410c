# adoptme/__init__.py

# =====================================================================================
# 1. Environment (must run before the config module is imported)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. Module imports
# =====================================================================================
import os
import logging
from flask import Flask, jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException
import firebase_admin
from firebase_admin import credentials

# - config
from adoptme.core.config import config_by_name

# - API blueprints
from adoptme.api.adoptions.routes import adoptions_bp

# - services
from adoptme.api.adoptions.services import AdoptionService
from adoptme.services.user_directory import FirestoreUserDirectory
from adoptme.services.pet_registry import FirestorePetRegistry
from adoptme.services.adoption_store import FirestoreAdoptionStore


def _init_firebase(app: Flask) -> None:
    if firebase_admin._apps:
        return
    cred_path = app.config.get('FIREBASE_CREDENTIALS_PATH')
    if not cred_path or not os.path.exists(cred_path):
        raise FileNotFoundError(f"Firebase credentials file not found: {cred_path}")
    cred = credentials.Certificate(cred_path)
    options = {'projectId': app.config['FIREBASE_PROJECT_ID']} if app.config.get('FIREBASE_PROJECT_ID') else None
    firebase_admin.initialize_app(cred, options)


def _build_services() -> dict:
    """Firestore-backed repositories wired into the adoption workflow."""
    services = {
        'users': FirestoreUserDirectory(),
        'pets': FirestorePetRegistry(),
        'adoption_records': FirestoreAdoptionStore(),
    }
    services['adoptions'] = AdoptionService(
        user_directory=services['users'],
        pet_registry=services['pets'],
        adoption_store=services['adoption_records']
    )
    return services


def create_app(config_name=None, services=None):
    """
    Flask application factory.

    `services` lets callers (tests, scripts) inject ready-made repositories;
    Firebase is only initialised when it is omitted.
    """
    # =====================================================================================
    # 3. App and configuration
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False
    app.json.sort_keys = app.config['JSON_SORT_KEYS']

    if not app.debug:
        logging.basicConfig(
            level=app.config['LOG_LEVEL'],
            format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        )

    # =====================================================================================
    # 4. Services (dependency injection through app.services)
    # =====================================================================================
    if services is None:
        try:
            _init_firebase(app)
            services = _build_services()
            logging.info("Firestore repositories initialized successfully")
        except Exception as e:
            logging.error(f"Failed to initialize Firestore repositories: {e}")
            raise
    app.services = services

    # =====================================================================================
    # 5. Blueprints
    # =====================================================================================
    app.register_blueprint(adoptions_bp, url_prefix='/api/adoptions')

    # =====================================================================================
    # 6. Global error handlers
    # =====================================================================================
    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        return jsonify({"status": "error", "error": "Invalid request", "details": err.messages}), 400

    @app.errorhandler(HTTPException)
    def handle_http_exception(err):
        return jsonify({"status": "error", "error": err.description}), err.code

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        # Anything the blueprints did not handle themselves.
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        return jsonify({"status": "error", "error": "Internal server error"}), 500

    logging.info(f"Flask app created for '{config_name}' environment.")
    return app
