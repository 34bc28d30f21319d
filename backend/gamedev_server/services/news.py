"""News posts shown on the game's start screen."""
import logging

from gamedev_server.models import NewsPost
from gamedev_server.services.fields import require_fields, to_sort_value

log = logging.getLogger(__name__)

POST_FIELDS = ('service', 'heading', 'text')
DELETE_FIELDS = ('service', 'postID')

MSG_MISSING_POST_FIELDS = 'Didnt provide all information needed'
MSG_INVALID_REQUEST = 'invalid request'
MSG_POSTED = 'News Posted'
MSG_DELETED = 'item deleted successful'


class NewsService:

    def __init__(self, store, allocator, default_service='VERSION1', page_limit=50):
        self.store = store
        self.allocator = allocator
        self.default_service = default_service
        self.page_limit = page_limit
        # Posts accepted by this process; only reported in logs
        self.session_posts = 0

    def post_news(self, data: dict) -> dict:
        fields = require_fields(data, POST_FIELDS, MSG_MISSING_POST_FIELDS)
        service = str(fields['service'])

        def build_item(post_id):
            return NewsPost(service, post_id, str(fields['heading']), str(fields['text'])).to_item()

        post_id = self.allocator.allocate(service, build_item)
        self.session_posts += 1
        log.info(f"[news-post] service={service} post_id={post_id} session_posts={self.session_posts}")
        return {'msg': MSG_POSTED, 'postID': post_id}

    def list_news(self, limit=None):
        """Newest-first posts of the default service, at most ``page_limit`` of them."""
        limit = self.page_limit if limit is None else min(limit, self.page_limit)
        items = self.store.query_desc(
            self.default_service,
            limit=limit,
            attributes=['Heading', 'PostID', 'Text', 'Service'],
        )
        return [NewsPost.from_item(item) for item in items]

    def delete_news(self, data: dict) -> dict:
        fields = require_fields(data, DELETE_FIELDS, MSG_INVALID_REQUEST)
        post_id = to_sort_value(fields['postID'], 'postID', MSG_INVALID_REQUEST)
        # Deleting a key that is not stored is not an error
        self.store.delete(self.store.key_for(str(fields['service']), post_id))
        log.info(f"[news-delete] service={fields['service']} post_id={post_id}")
        return {'msg': MSG_DELETED}
