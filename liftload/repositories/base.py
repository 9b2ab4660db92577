import json
from typing import Any, Dict, Generic, List, TypeVar

from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from liftload.repositories.errors import RepoError
from liftload.utils import dates, db
from liftload.utils.log import logger

T = TypeVar("T")


class DynamoRepository(Generic[T]):
    """
    Base class for DynamoDB repositories with common query/error handling.

    Each logical collection is a single item whose ``data`` attribute holds
    the collection's JSON document.
    """

    def __init__(self, table=None, owner: str | None = None):
        self._table = table or db.get_table()
        self._pk = db.build_store_pk(owner)

    def _to_model(self, item: dict) -> T:
        """This should be overridden in subclasses"""
        raise NotImplementedError

    def _safe_query(self, **kwargs) -> List[dict]:
        """Execute query and handle ClientError"""
        try:
            response = self._table.query(**kwargs)
            return response.get("Items", [])
        except ClientError as e:
            logger.exception("DynamoDB query failed")
            raise RepoError("Failed to query database") from e

    def _safe_put(self, item: dict) -> None:
        """Safely put item"""
        try:
            self._table.put_item(Item=item)
        except ClientError as e:
            logger.exception("DynamoDB put_item failed")
            raise RepoError("Failed to write to database") from e

    def _safe_get(self, **kwargs) -> dict | None:
        try:
            resp = self._table.get_item(**kwargs)
            return resp.get("Item")
        except ClientError as e:
            logger.exception("DynamoDB get_item failed")
            raise RepoError("Failed to read from database") from e

    # ----------------------- Collections -----------------------------

    def _collection_key(self, collection: str) -> Dict[str, str]:
        return {"PK": self._pk, "SK": db.build_collection_sk(collection)}

    def _load_document(self, collection: str) -> Any:
        """
        Return the decoded document for a collection, or None if never written.
        """
        item = self._safe_get(Key=self._collection_key(collection))
        if not item:
            logger.debug(f"No stored document for collection {collection}")
            return None

        try:
            return json.loads(item["data"])
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Stored {collection} document is unreadable: {e}")
            raise RepoError(f"Stored {collection} data is corrupt") from e

    def _save_document(self, collection: str, document: Any) -> None:
        item = {
            **self._collection_key(collection),
            "type": "collection",
            "data": json.dumps(document),
            "updated_at": dates.dt_to_iso(dates.now()),
        }
        self._safe_put(item)

    def clear_all(self) -> None:
        """
        Delete every collection item in this store.
        """
        items = self._safe_query(
            KeyConditionExpression=Key("PK").eq(self._pk)
            & Key("SK").begins_with("COLLECTION#")
        )
        logger.debug(f"Found {len(items)} collection items to delete")

        if not items:
            return

        # batch_writer bundles into batches and auto retries unprocessed items
        try:
            with self._table.batch_writer() as batch:
                for item in items:
                    batch.delete_item(Key={"PK": item["PK"], "SK": item["SK"]})
        except ClientError as e:
            logger.exception("Batch delete failed")
            raise RepoError("Failed to clear stored data") from e
