import logging
import time

import click
from flask import Flask
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy

from config import Config

db = SQLAlchemy()


def create_app(config_class=Config, dynamodb_client=None):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(getattr(logging, str(flask_app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))

    db.init_app(flask_app)
    # Game clients call from any origin
    CORS(flask_app)

    from gamedev_server.models import NEWS_SCHEMA, SCORES_SCHEMA
    from gamedev_server.store import build_record_store
    from gamedev_server.services import NewsService, ScoreService, SequentialIDAllocator

    cfg = flask_app.config
    news_store = build_record_store(flask_app, cfg['NEWS_TABLE'], NEWS_SCHEMA, client=dynamodb_client)
    scores_store = build_record_store(flask_app, cfg['SCORES_TABLE'], SCORES_SCHEMA, client=dynamodb_client)

    news_service = NewsService(
        news_store,
        SequentialIDAllocator(news_store, max_attempts=cfg.get('ID_ALLOCATION_ATTEMPTS', 5)),
        default_service=cfg.get('DEFAULT_SERVICE', 'VERSION1'),
        page_limit=int(cfg.get('NEWS_PAGE_LIMIT', 50)),
    )
    score_service = ScoreService(
        scores_store,
        default_service=cfg.get('DEFAULT_SERVICE', 'VERSION1'),
        top_limit=int(cfg.get('TOP_SCORES_LIMIT', 5)),
    )
    flask_app.extensions['gamedev'] = {
        'started_at': time.time(),
        'news': news_service,
        'scores': score_service,
        'stores': (news_store, scores_store),
    }

    # Import and register blueprints here
    from gamedev_server.main import main
    flask_app.register_blueprint(main)

    from gamedev_server.api import create_news_blueprint, create_scores_blueprint, register_error_handlers
    flask_app.register_blueprint(create_news_blueprint(news_service), url_prefix='/news')
    flask_app.register_blueprint(create_scores_blueprint(score_service), url_prefix='/score')
    register_error_handlers(flask_app)

    flask_app.logger.info(
        f"[startup] {cfg['APP_NAME']} backend={cfg.get('STORE_BACKEND')} "
        f"news_table={cfg['NEWS_TABLE']} scores_table={cfg['SCORES_TABLE']}"
    )

    @click.command('init-tables')
    def init_tables_command():
        """Creates the news and scores tables on the configured backend."""
        with flask_app.app_context():
            for store in flask_app.extensions['gamedev']['stores']:
                created = store.create_table()
                state = 'created' if created else 'already exists'
                print(f"Table {store.table_name}: {state}")

    flask_app.cli.add_command(init_tables_command)

    return flask_app
