import time

from flask import Blueprint, current_app, jsonify

main = Blueprint('main', __name__)


def to_minutes(milliseconds):
    """Format an elapsed time in milliseconds as minutes with two decimals."""
    return f"{milliseconds / 1000 / 60:.2f}"


@main.route('/')
def index():
    started_at = current_app.extensions['gamedev']['started_at']
    elapsed_ms = (time.time() - started_at) * 1000
    message = f"{current_app.config['APP_NAME']} online for {to_minutes(elapsed_ms)} mins"
    return jsonify({'Time Active': message})
