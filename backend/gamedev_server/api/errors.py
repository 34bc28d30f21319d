from flask import current_app, jsonify

from gamedev_server.errors import ConditionFailedError, StoreError, ValidationError


def handle_validation_error(exc):
    return jsonify({'msg': exc.message, 'fields': exc.fields}), 400


def handle_condition_failed(exc):
    current_app.logger.info(f"[condition-failed] {exc.message}")
    return jsonify({'msg': exc.to_dict()}), 409


def handle_store_error(exc):
    current_app.logger.error(f"[store-error] code={exc.code} message={exc.message}")
    return jsonify({'msg': exc.client_message or exc.to_dict()}), 502


def register_error_handlers(flask_app):
    flask_app.register_error_handler(ValidationError, handle_validation_error)
    flask_app.register_error_handler(ConditionFailedError, handle_condition_failed)
    flask_app.register_error_handler(StoreError, handle_store_error)
