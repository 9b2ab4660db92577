import json

import pytest
from botocore.exceptions import ClientError

# ─────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────


def _client_error(
    op_name: str, *, code: str = "500", message: str | None = None
) -> ClientError:
    """botocore ClientError as raised by a failing table call."""
    msg = message or f"{op_name} exploded"
    return ClientError(
        error_response={"Error": {"Code": code, "Message": msg}},
        operation_name=op_name,
    )


# ─────────────────────────────────────────────────────────────
# Fake DynamoDB Table + batch_writer
# ─────────────────────────────────────────────────────────────


OP_NAMES = {
    "query": "Query",
    "get_item": "GetItem",
    "put_item": "PutItem",
    "batch_writer": "BatchWriteItem",
}


class FakeBatchWriter:
    """Context manager mirroring Table.batch_writer(); only deletes are used."""

    def __init__(self, table: "FakeTable"):
        self._table = table

    def __enter__(self) -> "FakeBatchWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        return False

    def delete_item(self, Key: dict) -> None:
        self._table.deleted_keys.append(Key)
        self._table.items.pop((Key["PK"], Key["SK"]), None)


class FakeTable:
    """
    A lightweight, dict-backed fake for boto3 DynamoDB Table.

    - `items`: stored items keyed by (PK, SK); put/get and batch deletes act on it
    - `response`: returned by get_item/query when nothing stored matches
    - `fail_on`: set of operation names that should raise ClientError
      (e.g. {"get_item", "put_item"})
    """

    def __init__(
        self, response: dict | None = None, *, fail_on: set[str] | None = None
    ):
        self.items: dict[tuple[str, str], dict] = {}
        self.response: dict = response or {}
        self.fail_on: set[str] = set(fail_on or [])

        self.last_query_kwargs = None
        self.last_get_kwargs = None
        self.last_put_kwargs = None

        self.deleted_keys: list[dict] = []

    def _check(self, op: str) -> None:
        if self.fail_on & {op, OP_NAMES[op]}:
            raise _client_error(OP_NAMES[op])

    def query(self, **kwargs):
        self._check("query")
        self.last_query_kwargs = kwargs
        if "Items" in self.response:
            return self.response
        return {"Items": list(self.items.values())}

    def get_item(self, **kwargs):
        self._check("get_item")
        self.last_get_kwargs = kwargs
        key = kwargs.get("Key") or {}
        stored = self.items.get((key.get("PK"), key.get("SK")))
        if stored is not None:
            return {"Item": stored}
        return self.response

    def put_item(self, **kwargs):
        self._check("put_item")
        self.last_put_kwargs = kwargs
        item = kwargs["Item"]
        self.items[(item["PK"], item["SK"])] = item
        return {}

    def batch_writer(self):
        self._check("batch_writer")
        return FakeBatchWriter(self)

    def stored_document(self, pk: str, sk: str):
        """Decoded ``data`` attribute of a stored collection item."""
        return json.loads(self.items[(pk, sk)]["data"])


# ─────────────────────────────────────────────────────────────
# Fixtures
# ─────────────────────────────────────────────────────────────


@pytest.fixture
def fake_table() -> FakeTable:
    return FakeTable()


@pytest.fixture
def failing_query_table() -> FakeTable:
    return FakeTable(fail_on={"query"})


@pytest.fixture
def failing_get_table() -> FakeTable:
    return FakeTable(fail_on={"get_item"})


@pytest.fixture
def failing_put_table() -> FakeTable:
    return FakeTable(fail_on={"put_item"})


@pytest.fixture
def corrupt_table() -> FakeTable:
    """
    Returns an item whose data attribute is not JSON.
    """
    return FakeTable(response={"Item": {"PK": "x", "SK": "y", "data": "{not json"}})
