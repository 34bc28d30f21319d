"""SQL-backed record store for local development and tests.

Rows of every table live in one ``record`` table keyed by
(table_name, partition, sort_key); non-key attributes are kept as JSON.
"""
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from gamedev_server import db
from gamedev_server.errors import ConditionFailedError, StoreError
from gamedev_server.models import RecordRow
from gamedev_server.store.base import RecordStore

log = logging.getLogger(__name__)


class SqlRecordStore(RecordStore):

    def _split(self, item):
        partition = item[self.schema.partition_key]
        sort_value = int(item[self.schema.sort_key])
        attributes = {
            k: v for k, v in item.items()
            if k not in (self.schema.partition_key, self.schema.sort_key)
        }
        return partition, sort_value, attributes

    def _get(self, partition, sort_value):
        return db.session.get(RecordRow, (self.table_name, partition, int(sort_value)))

    def put(self, item, if_absent=False):
        partition, sort_value, attributes = self._split(item)
        try:
            row = self._get(partition, sort_value)
            if row is not None and if_absent:
                raise ConditionFailedError()
            if row is None:
                row = RecordRow(
                    table_name=self.table_name,
                    partition=partition,
                    sort_key=sort_value,
                )
                db.session.add(row)
            row.attributes = attributes
            db.session.commit()
        except IntegrityError as exc:
            db.session.rollback()
            raise ConditionFailedError() from exc
        except SQLAlchemyError as exc:
            db.session.rollback()
            log.error(f"[sql-error] table={self.table_name} op=put error={exc}")
            raise StoreError(type(exc).__name__, str(exc)) from exc

    def query_desc(self, partition, limit=None, attributes=None):
        try:
            query = (
                RecordRow.query
                .filter_by(table_name=self.table_name, partition=partition)
                .filter(RecordRow.sort_key >= 0)
                .order_by(RecordRow.sort_key.desc())
            )
            if limit is not None:
                query = query.limit(limit)
            rows = query.all()
        except SQLAlchemyError as exc:
            log.error(f"[sql-error] table={self.table_name} op=query error={exc}")
            raise StoreError(type(exc).__name__, str(exc)) from exc
        names = set(attributes) if attributes else None
        return [row.to_item(self.schema, names) for row in rows]

    def delete(self, key, expected=None):
        partition, sort_value, _ = self._split(key)
        try:
            row = self._get(partition, sort_value)
            if expected:
                stored = row.to_item(self.schema) if row is not None else {}
                if any(stored.get(name) != value for name, value in expected.items()):
                    raise ConditionFailedError()
            if row is not None:
                db.session.delete(row)
                db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            log.error(f"[sql-error] table={self.table_name} op=delete error={exc}")
            raise StoreError(type(exc).__name__, str(exc)) from exc

    def create_table(self):
        db.create_all()
        return True
