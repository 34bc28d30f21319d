import os
import sys
import pytest

# Ensure the backend root (containing the `gamedev_server` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from gamedev_server import create_app, db


class TestConfig:
    TESTING = True
    APP_NAME = 'Test Server'
    LOG_LEVEL = 'DEBUG'
    STORE_BACKEND = 'sql'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    NEWS_TABLE = 'test-news'
    SCORES_TABLE = 'test-scores'
    DEFAULT_SERVICE = 'VERSION1'
    NEWS_PAGE_LIMIT = 50
    TOP_SCORES_LIMIT = 5
    ID_ALLOCATION_ATTEMPTS = 3


class DynamoTestConfig(TestConfig):
    STORE_BACKEND = 'dynamodb'
    NEWS_TABLE = 'UWS-MobileGameDevNews'
    SCORES_TABLE = 'UWS-MobileGameDevScores'


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import gamedev_server.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def dynamodb_client():
    import boto3
    return boto3.client(
        'dynamodb',
        region_name='eu-west-1',
        aws_access_key_id='testing',
        aws_secret_access_key='testing',
    )


@pytest.fixture()
def post_news(client):
    def _post(heading='Patch', text='Fixed bugs', service='VERSION1'):
        return client.post('/news/postNews/', json={'service': service, 'heading': heading, 'text': text})
    return _post


@pytest.fixture()
def post_score(client):
    def _post(highscore, name, service='VERSION1'):
        return client.post('/score/postScore/', json={'service': service, 'highscore': highscore, 'name': name})
    return _post
