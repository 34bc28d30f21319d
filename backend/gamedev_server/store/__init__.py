"""Key/sort-key record stores.

``build_record_store`` picks the backend named by the ``STORE_BACKEND``
config value. Backends are imported lazily so the SQL models are only
loaded once the application (and its ``db``) exists.
"""
from gamedev_server.store.base import RecordStore, TableSchema

BACKENDS = ('dynamodb', 'sql')


def build_record_store(app, table_name, schema, client=None):
    backend = app.config.get('STORE_BACKEND', 'dynamodb')
    if backend == 'dynamodb':
        from gamedev_server.store.dynamodb import DynamoRecordStore, build_dynamodb_client
        if client is None:
            client = build_dynamodb_client(app.config)
        return DynamoRecordStore(client, table_name, schema)
    if backend == 'sql':
        from gamedev_server.store.sql import SqlRecordStore
        return SqlRecordStore(table_name, schema)
    raise ValueError(f"Unknown STORE_BACKEND {backend!r}; expected one of {BACKENDS}")


__all__ = ['RecordStore', 'TableSchema', 'build_record_store', 'BACKENDS']
