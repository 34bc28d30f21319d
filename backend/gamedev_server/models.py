from gamedev_server import db
from gamedev_server.store.base import TableSchema


NEWS_SCHEMA = TableSchema(
    partition_key='Service',
    sort_key='PostID',
    attributes=('Heading', 'Text'),
)

SCORES_SCHEMA = TableSchema(
    partition_key='Service',
    sort_key='Highscore',
    attributes=('Name',),
)


class RecordRow(db.Model):
    """One item of a key/sort-key table, stored by the SQL record store."""
    __tablename__ = 'record'
    table_name = db.Column(db.String(128), primary_key=True)
    partition = db.Column(db.String(256), primary_key=True)
    sort_key = db.Column(db.BigInteger, primary_key=True, autoincrement=False)
    attributes = db.Column(db.JSON, nullable=False, default=dict)

    def to_item(self, schema, names=None):
        item = {
            schema.partition_key: self.partition,
            schema.sort_key: self.sort_key,
        }
        item.update(self.attributes or {})
        if names:
            item = {k: v for k, v in item.items() if k in names}
        return item


class NewsPost:
    def __init__(self, service, post_id, heading, text):
        self.service = service
        self.post_id = int(post_id)
        self.heading = heading
        self.text = text

    @classmethod
    def from_item(cls, item):
        return cls(
            service=item.get('Service'),
            post_id=item.get('PostID'),
            heading=item.get('Heading'),
            text=item.get('Text'),
        )

    def to_item(self):
        return {
            'Heading': self.heading,
            'PostID': self.post_id,
            'Service': self.service,
            'Text': self.text,
        }

    def to_dict(self):
        return self.to_item()


class ScoreEntry:
    def __init__(self, service, highscore, name):
        self.service = service
        self.highscore = int(highscore)
        self.name = name

    @classmethod
    def from_item(cls, item):
        return cls(
            service=item.get('Service'),
            highscore=item.get('Highscore'),
            name=item.get('Name'),
        )

    def to_item(self):
        return {
            'Service': self.service,
            'Highscore': self.highscore,
            'Name': self.name,
        }

    def to_dict(self):
        return self.to_item()
