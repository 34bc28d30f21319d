import logging

from gamedev_server.errors import ConditionFailedError, StoreError

log = logging.getLogger(__name__)


class SequentialIDAllocator:
    """Hands out increasing sort-key IDs within a partition.

    The next ID is one past the highest stored sort key ("0" for an empty
    partition). ``allocate`` writes with a does-not-exist condition, so two
    writers that computed the same ID cannot overwrite each other; the loser
    re-reads and tries the following ID.
    """

    def __init__(self, store, max_attempts=5):
        self.store = store
        self.max_attempts = max(1, int(max_attempts))

    def next_id(self, partition: str) -> str:
        sort_key = self.store.schema.sort_key
        rows = self.store.query_desc(partition, limit=1, attributes=[sort_key])
        if not rows:
            return '0'
        return str(int(rows[0][sort_key]) + 1)

    def allocate(self, partition: str, build_item) -> str:
        """Write ``build_item(post_id)`` under a fresh ID and return the ID."""
        for attempt in range(1, self.max_attempts + 1):
            post_id = self.next_id(partition)
            try:
                self.store.put(build_item(post_id), if_absent=True)
                return post_id
            except ConditionFailedError:
                log.warning(
                    f"[id-collision] table={self.store.table_name} partition={partition} "
                    f"id={post_id} attempt={attempt}/{self.max_attempts}"
                )
        raise StoreError(
            'IDAllocationFailed',
            f"Could not allocate an ID in partition {partition!r} after {self.max_attempts} attempts",
        )
