"""High score table, one partition per game version."""
import logging

from gamedev_server.errors import StoreError
from gamedev_server.models import ScoreEntry
from gamedev_server.services.fields import require_fields, to_sort_value

log = logging.getLogger(__name__)

SCORE_FIELDS = ('service', 'highscore', 'name')

MSG_INVALID_PARAMS = 'Invalid params'
MSG_INVALID_REQUEST = 'invalid request'
MSG_POSTED = 'Score Posted'
MSG_POST_FAILED = 'Score Post Failed'
MSG_DELETED = 'item deleted successful'


class ScoreService:

    def __init__(self, store, default_service='VERSION1', top_limit=5):
        self.store = store
        self.default_service = default_service
        self.top_limit = top_limit
        self.session_posts = 0

    def post_score(self, data: dict) -> dict:
        """Store a score; an existing entry with the same (service, highscore) is replaced."""
        fields = require_fields(data, SCORE_FIELDS, MSG_INVALID_PARAMS)
        highscore = to_sort_value(fields['highscore'], 'highscore', MSG_INVALID_PARAMS)
        entry = ScoreEntry(str(fields['service']), highscore, str(fields['name']))
        try:
            self.store.put(entry.to_item())
        except StoreError as exc:
            raise StoreError(exc.code, exc.message, client_message=MSG_POST_FAILED) from exc
        self.session_posts += 1
        log.info(
            f"[score-post] service={entry.service} highscore={entry.highscore} "
            f"session_posts={self.session_posts}"
        )
        return {'msg': MSG_POSTED}

    def get_top_scores(self):
        items = self.store.query_desc(
            self.default_service,
            limit=self.top_limit,
            attributes=['Service', 'Highscore', 'Name'],
        )
        return [ScoreEntry.from_item(item) for item in items]

    def delete_score(self, data: dict) -> dict:
        """Delete the entry at (service, highscore) only if it belongs to ``name``."""
        fields = require_fields(data, SCORE_FIELDS, MSG_INVALID_REQUEST)
        highscore = to_sort_value(fields['highscore'], 'highscore', MSG_INVALID_REQUEST)
        self.store.delete(
            self.store.key_for(str(fields['service']), highscore),
            expected={'Name': str(fields['name'])},
        )
        log.info(f"[score-delete] service={fields['service']} highscore={highscore}")
        return {'msg': MSG_DELETED}
