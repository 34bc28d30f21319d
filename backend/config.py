import os

class Config:
    APP_NAME = os.environ.get('APP_NAME') or 'MobileGameDev Server'
    PORT = os.environ.get('PORT', '3005')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    # Record store backend: 'dynamodb' (hosted tables) or 'sql' (local development)
    STORE_BACKEND = os.environ.get('STORE_BACKEND', 'dynamodb')
    # JSON file with accessKeyId / secretAccessKey / region
    GAMEDEV_AWS_SETTINGS_FILE = os.environ.get('GAMEDEV_AWS_SETTINGS_FILE', 'aws_config.json')
    AWS_REGION = os.environ.get('AWS_REGION', 'eu-west-1')
    DYNAMODB_ENDPOINT_URL = os.environ.get('DYNAMODB_ENDPOINT_URL')
    NEWS_TABLE = os.environ.get('NEWS_TABLE', 'UWS-MobileGameDevNews')
    SCORES_TABLE = os.environ.get('SCORES_TABLE', 'UWS-MobileGameDevScores')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///gamedev.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Partition listed by getNews / getScores
    DEFAULT_SERVICE = os.environ.get('DEFAULT_SERVICE', 'VERSION1')
    NEWS_PAGE_LIMIT = int(os.environ.get('NEWS_PAGE_LIMIT', '50'))
    TOP_SCORES_LIMIT = int(os.environ.get('TOP_SCORES_LIMIT', '5'))
    # Conditional-put attempts before giving up on a PostID
    ID_ALLOCATION_ATTEMPTS = int(os.environ.get('ID_ALLOCATION_ATTEMPTS', '5'))


FALLBACK_PORT = 3000


def resolve_port(value, fallback=FALLBACK_PORT):
    """Return *value* as a port number, or *fallback* when it is unusable.

    Anything below 2000 is treated as a port that is most likely reserved.
    """
    try:
        port = int(value)
    except (TypeError, ValueError):
        return fallback
    if 2000 <= port <= 65535:
        return port
    return fallback
