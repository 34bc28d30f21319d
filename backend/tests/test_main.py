import re

import pytest

from config import resolve_port
from gamedev_server.main import to_minutes
from gamedev_server.store import build_record_store
from gamedev_server.models import NEWS_SCHEMA


def test_uptime_message(client, flask_app):
    flask_app.extensions['gamedev']['started_at'] -= 90
    res = client.get('/')
    assert res.status_code == 200
    message = res.get_json()['Time Active']
    assert re.fullmatch(r'Test Server online for \d+\.\d{2} mins', message)
    assert message.startswith('Test Server online for 1.5')


def test_to_minutes():
    assert to_minutes(1000 * 60) == '1.00'
    assert to_minutes(0) == '0.00'
    assert to_minutes(1000 * 60 * 2.5) == '2.50'


@pytest.mark.parametrize('value, expected', [
    (3005, 3005),
    ('3005', 3005),
    ('2000', 2000),
    (80, 3000),
    ('1999', 3000),
    ('70000', 3000),
    ('not-a-port', 3000),
    (None, 3000),
])
def test_resolve_port(value, expected):
    assert resolve_port(value) == expected


def test_cors_headers(client):
    res = client.get('/score/getScores/', headers={'Origin': 'http://example.com'})
    assert res.headers.get('Access-Control-Allow-Origin') in ('*', 'http://example.com')


def test_unknown_store_backend(flask_app):
    flask_app.config['STORE_BACKEND'] = 'redis'
    with pytest.raises(ValueError):
        build_record_store(flask_app, 'news', NEWS_SCHEMA)


def test_init_tables_command(flask_app):
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['init-tables'])
    assert result.exit_code == 0
    assert 'Table test-news' in result.output
    assert 'Table test-scores' in result.output
