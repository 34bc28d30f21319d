"""HTTP blueprints. Each factory receives the service it routes to."""
from gamedev_server.api.errors import register_error_handlers
from gamedev_server.api.news import create_news_blueprint
from gamedev_server.api.scores import create_scores_blueprint

__all__ = ['register_error_handlers', 'create_news_blueprint', 'create_scores_blueprint']
