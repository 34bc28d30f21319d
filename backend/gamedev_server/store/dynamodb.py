"""DynamoDB-backed record store using the low-level boto3 client."""
import json
import logging
import os
from decimal import Decimal

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from gamedev_server.errors import ConditionFailedError, StoreError
from gamedev_server.store.base import RecordStore

log = logging.getLogger(__name__)

# Keys accepted in the JSON credentials file -> boto3 Session kwargs
_AWS_FILE_KEYS = {
    'accessKeyId': 'aws_access_key_id',
    'secretAccessKey': 'aws_secret_access_key',
    'sessionToken': 'aws_session_token',
    'region': 'region_name',
}


def load_aws_settings(path):
    """Read region/credentials from a JSON file into boto3 Session kwargs.

    A missing file returns an empty dict so boto3 falls back to its default
    credential chain. A file that exists but cannot be parsed is an error.
    """
    if not path or not os.path.exists(path):
        return {}
    try:
        with open(path, 'r') as fh:
            raw = json.load(fh)
    except (OSError, json.JSONDecodeError) as exc:
        raise RuntimeError(f"Could not load AWS settings from {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise RuntimeError(f"Could not load AWS settings from {path}: expected a JSON object")
    return {_AWS_FILE_KEYS[k]: v for k, v in raw.items() if k in _AWS_FILE_KEYS and v}


def build_dynamodb_client(config):
    settings = load_aws_settings(config.get('GAMEDEV_AWS_SETTINGS_FILE'))
    settings.setdefault('region_name', config.get('AWS_REGION', 'eu-west-1'))
    session = boto3.session.Session(**settings)
    return session.client('dynamodb', endpoint_url=config.get('DYNAMODB_ENDPOINT_URL') or None)


def encode_value(value):
    if isinstance(value, bool):
        raise TypeError('boolean attributes are not supported')
    if isinstance(value, (int, float, Decimal)):
        return {'N': str(value)}
    return {'S': str(value)}


def decode_value(attr):
    if 'N' in attr:
        number = attr['N']
        try:
            return int(number)
        except ValueError:
            return Decimal(number)
    if 'S' in attr:
        return attr['S']
    raise StoreError('UnsupportedAttribute', f"Unsupported attribute value: {attr!r}")


def encode_item(item):
    return {name: encode_value(value) for name, value in item.items()}


def decode_item(item):
    return {name: decode_value(attr) for name, attr in item.items()}


class DynamoRecordStore(RecordStore):

    def __init__(self, client, table_name, schema):
        super().__init__(table_name, schema)
        self.client = client

    def _call(self, operation, **params):
        try:
            return getattr(self.client, operation)(**params)
        except ClientError as exc:
            error = exc.response.get('Error', {})
            code = error.get('Code', 'ClientError')
            message = error.get('Message', str(exc))
            if code == 'ConditionalCheckFailedException':
                raise ConditionFailedError(message) from exc
            log.error(f"[dynamodb-error] table={self.table_name} op={operation} code={code} message={message}")
            raise StoreError(code, message) from exc
        except BotoCoreError as exc:
            log.error(f"[dynamodb-error] table={self.table_name} op={operation} error={exc}")
            raise StoreError(type(exc).__name__, str(exc)) from exc

    def put(self, item, if_absent=False):
        params = {'TableName': self.table_name, 'Item': encode_item(item)}
        if if_absent:
            params['ConditionExpression'] = 'attribute_not_exists(#sk)'
            params['ExpressionAttributeNames'] = {'#sk': self.schema.sort_key}
        self._call('put_item', **params)

    def query_desc(self, partition, limit=None, attributes=None):
        params = {
            'TableName': self.table_name,
            'KeyConditionExpression': '#pk = :pk AND #sk >= :zero',
            'ExpressionAttributeNames': {
                '#pk': self.schema.partition_key,
                '#sk': self.schema.sort_key,
            },
            'ExpressionAttributeValues': {
                ':pk': {'S': partition},
                ':zero': {'N': '0'},
            },
            'ScanIndexForward': False,
        }
        if attributes:
            placeholders = []
            for i, name in enumerate(attributes):
                params['ExpressionAttributeNames'][f'#a{i}'] = name
                placeholders.append(f'#a{i}')
            params['ProjectionExpression'] = ', '.join(placeholders)

        rows = []
        while True:
            if limit is not None:
                params['Limit'] = limit - len(rows)
            response = self._call('query', **params)
            rows.extend(decode_item(item) for item in response.get('Items', []))
            last_key = response.get('LastEvaluatedKey')
            if not last_key or (limit is not None and len(rows) >= limit):
                break
            params['ExclusiveStartKey'] = last_key
        return rows

    def delete(self, key, expected=None):
        params = {'TableName': self.table_name, 'Key': encode_item(key)}
        if expected:
            names, values, clauses = {}, {}, []
            for i, (name, value) in enumerate(expected.items()):
                names[f'#e{i}'] = name
                values[f':e{i}'] = encode_value(value)
                clauses.append(f'#e{i} = :e{i}')
            params['ConditionExpression'] = ' AND '.join(clauses)
            params['ExpressionAttributeNames'] = names
            params['ExpressionAttributeValues'] = values
        self._call('delete_item', **params)

    def create_table(self):
        """Create the table; returns False when it already exists."""
        try:
            self._call(
                'create_table',
                TableName=self.table_name,
                KeySchema=[
                    {'AttributeName': self.schema.partition_key, 'KeyType': 'HASH'},
                    {'AttributeName': self.schema.sort_key, 'KeyType': 'RANGE'},
                ],
                AttributeDefinitions=[
                    {'AttributeName': self.schema.partition_key, 'AttributeType': 'S'},
                    {'AttributeName': self.schema.sort_key, 'AttributeType': 'N'},
                ],
                BillingMode='PAY_PER_REQUEST',
            )
        except StoreError as exc:
            if exc.code == 'ResourceInUseException':
                return False
            raise
        self.client.get_waiter('table_exists').wait(TableName=self.table_name)
        return True
