# adoptme/core/config.py

import os


class Config:
    """Settings shared by every environment."""
    # Firestore project override; the service-account file normally carries it.
    FIREBASE_PROJECT_ID = os.getenv('FIREBASE_PROJECT_ID')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    JSON_SORT_KEYS = False


class DevelopmentConfig(Config):
    """Local development: debug server, development Firebase project."""
    DEBUG = True
    FIREBASE_CREDENTIALS_PATH = os.getenv('DEV_FIREBASE_CREDENTIALS_PATH')


class TestingConfig(Config):
    """Test runs. Repositories are usually injected, so Firebase stays untouched."""
    TESTING = True
    DEBUG = False
    FIREBASE_CREDENTIALS_PATH = os.getenv('TEST_FIREBASE_CREDENTIALS_PATH')


class ProductionConfig(Config):
    DEBUG = False
    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')


# Selected in create_app() from FLASK_ENV.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
