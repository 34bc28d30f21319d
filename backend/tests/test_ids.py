import pytest

from gamedev_server.errors import ConditionFailedError, StoreError
from gamedev_server.models import NEWS_SCHEMA
from gamedev_server.services.ids import SequentialIDAllocator
from gamedev_server.store.base import RecordStore


class MemoryStore(RecordStore):
    """Dict-backed store; ``racing_ids`` are taken by a concurrent writer on first put."""

    def __init__(self, racing_ids=()):
        super().__init__('memory-news', NEWS_SCHEMA)
        self.rows = {}
        self.racing_ids = list(racing_ids)
        self.puts = []

    def put(self, item, if_absent=False):
        key = (item['Service'], int(item['PostID']))
        self.puts.append(key)
        if self.racing_ids and key[1] == self.racing_ids[0]:
            self.racing_ids.pop(0)
            self.rows[key] = dict(item, Heading='from another request')
        if if_absent and key in self.rows:
            raise ConditionFailedError()
        self.rows[key] = dict(item)

    def query_desc(self, partition, limit=None, attributes=None):
        rows = sorted(
            (row for (p, _), row in self.rows.items() if p == partition),
            key=lambda row: row['PostID'],
            reverse=True,
        )
        return rows[:limit] if limit is not None else rows


def _item(post_id):
    return {'Service': 'VERSION1', 'PostID': int(post_id), 'Heading': 'h', 'Text': 't'}


def test_next_id_on_empty_partition():
    allocator = SequentialIDAllocator(MemoryStore())
    assert allocator.next_id('VERSION1') == '0'


def test_next_id_is_one_past_highest():
    store = MemoryStore()
    for post_id in (3, 11, 4):
        store.put(_item(post_id))
    assert SequentialIDAllocator(store).next_id('VERSION1') == '12'
    assert SequentialIDAllocator(store).next_id('VERSION2') == '0'


def test_allocate_writes_item_with_new_id():
    store = MemoryStore()
    allocator = SequentialIDAllocator(store)
    assert allocator.allocate('VERSION1', _item) == '0'
    assert allocator.allocate('VERSION1', _item) == '1'
    assert set(store.rows) == {('VERSION1', 0), ('VERSION1', 1)}


def test_allocate_retries_when_id_is_taken_concurrently():
    store = MemoryStore(racing_ids=[0])
    allocator = SequentialIDAllocator(store)
    assert allocator.allocate('VERSION1', _item) == '1'
    # The concurrent writer's row is left untouched
    assert store.rows[('VERSION1', 0)]['Heading'] == 'from another request'
    assert store.puts == [('VERSION1', 0), ('VERSION1', 1)]


def test_allocate_gives_up_after_max_attempts():
    store = MemoryStore(racing_ids=[0, 1, 2])
    allocator = SequentialIDAllocator(store, max_attempts=3)
    with pytest.raises(StoreError) as excinfo:
        allocator.allocate('VERSION1', _item)
    assert excinfo.value.code == 'IDAllocationFailed'
    assert len(store.puts) == 3
