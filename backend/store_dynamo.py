# backend/store_dynamo.py
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError, NoRegionError

from backend.backends import KeyValueParams
from backend.errors import BackendConnectionError, ConfigurationError, RestaurantNotFound
from backend.store import coerce_count

LOG = logging.getLogger(__name__)

KEY_ATTR = "name"
COUNT_ATTR = "restaurantcount"


def _attr_value(attr: Dict[str, Any]) -> Any:
    # low-level client shape: {"N": "42"} or {"S": "42"}
    for t in ("N", "S"):
        if t in attr:
            return attr[t]
    return attr


def new_client(region: str):
    """Build a DynamoDB client from a fresh Session rather than the shared default one."""
    try:
        return boto3.session.Session().client("dynamodb", region_name=region)
    except BotoCoreError as e:
        raise ConfigurationError(f"unable to build dynamodb client for {region!r}: {e}") from e


class DynamoCountStore:
    name = "dynamodb"

    def __init__(self, params: KeyValueParams, client: Optional[Any] = None):
        params.validate()
        self.params = params
        self.client = client if client is not None else new_client(params.region)

    def read_count(self, restaurant: str) -> int:
        try:
            resp = self.client.get_item(
                TableName=self.params.table_name,
                Key={KEY_ATTR: {"S": restaurant}},
            )
        except (NoRegionError, NoCredentialsError) as e:
            raise ConfigurationError(f"AWS client not configured: {e}") from e
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "")
            LOG.error("dynamodb get_item on %s failed: %s", self.params.table_name, code or e)
            raise BackendConnectionError(
                f"dynamodb rejected get_item on {self.params.table_name}: {code or e}"
            ) from e
        except BotoCoreError as e:
            LOG.error("dynamodb unreachable in %s: %s", self.params.region, e)
            raise BackendConnectionError(f"unable to reach dynamodb in {self.params.region}") from e

        item = resp.get("Item")
        if not item or COUNT_ATTR not in item:
            raise RestaurantNotFound(restaurant, self.name)
        return coerce_count(_attr_value(item[COUNT_ATTR]), restaurant)
