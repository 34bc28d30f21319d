"""Record store interface shared by the DynamoDB and SQL backends."""
from typing import Dict, Iterable, List, NamedTuple, Optional, Tuple


class TableSchema(NamedTuple):
    """Key layout of a single table: string partition key, numeric sort key."""
    partition_key: str
    sort_key: str
    attributes: Tuple[str, ...] = ()


class RecordStore:
    """A single key/sort-key table.

    Items are plain dicts keyed by attribute name; the partition key holds a
    ``str`` and the sort key an ``int``. Backends raise
    :class:`~gamedev_server.errors.StoreError` for failed calls and
    :class:`~gamedev_server.errors.ConditionFailedError` when a conditional
    write or delete does not apply.
    """

    def __init__(self, table_name: str, schema: TableSchema) -> None:
        self.table_name = table_name
        self.schema = schema

    def key_for(self, partition: str, sort_value: int) -> Dict:
        return {self.schema.partition_key: partition, self.schema.sort_key: int(sort_value)}

    def put(self, item: Dict, if_absent: bool = False) -> None:
        raise NotImplementedError

    def query_desc(self, partition: str, limit: Optional[int] = None,
                   attributes: Optional[Iterable[str]] = None) -> List[Dict]:
        """Return rows of *partition* with sort key >= 0, highest first."""
        raise NotImplementedError

    def delete(self, key: Dict, expected: Optional[Dict] = None) -> None:
        raise NotImplementedError

    def create_table(self) -> None:
        raise NotImplementedError
