import boto3

from liftload.settings import settings

REGION_NAME = settings.REGION
TABLE_NAME = settings.DDB_TABLE_NAME

COLLECTIONS: tuple[str, ...] = (
    "exercises",
    "routines",
    "cycles",
    "selected_routine",
)


def get_dynamo_resource():
    if settings.DDB_ENDPOINT_URL:
        return boto3.resource(
            "dynamodb",
            region_name=REGION_NAME,
            endpoint_url=settings.DDB_ENDPOINT_URL,
        )
    return boto3.resource("dynamodb", region_name=REGION_NAME)


def get_table():
    resource = get_dynamo_resource()
    return resource.Table(TABLE_NAME)  # type: ignore


def build_store_pk(owner: str | None = None) -> str:
    """
    Partition key for every collection in one local store.
    Example: STORE#local
    """
    return f"STORE#{owner or settings.STORE_OWNER}"


def build_collection_sk(collection: str) -> str:
    """
    Sort key for one logical collection.
    Example: COLLECTION#exercises
    """
    if collection not in COLLECTIONS:
        raise ValueError(f"Unknown collection: {collection}")
    return f"COLLECTION#{collection}"
