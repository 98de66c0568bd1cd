import logging
from pymongo import MongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

# Set pymongo logger to WARNING to reduce noise from driver-level logs
pymongo_logger = logging.getLogger('pymongo')
pymongo_logger.setLevel(logging.WARNING)

USERS_COLLECTION_NAME = 'users'


def create_mongodb_client(mongo_url: str) -> MongoClient:
    """Build the process-wide MongoDB client.

    The driver connects lazily, so this never blocks on the network. Call
    ping() to find out whether the server is actually reachable.
    """
    return MongoClient(
        mongo_url,
        serverSelectionTimeoutMS=5000,
        connectTimeoutMS=5000,
        socketTimeoutMS=30000,
        maxPoolSize=10,
        minPoolSize=0,
        maxIdleTimeMS=30000,
        waitQueueTimeoutMS=10000,
        retryWrites=True,
        retryReads=True,
        compressors=['zlib'],
        zlibCompressionLevel=1,
        tz_aware=True,
    )


def ping(client: MongoClient | None) -> bool:
    """Return True if the server answers a ping."""
    if client is None:
        return False
    try:
        client.admin.command('ping')
        return True
    except PyMongoError as e:
        logger.error(f"[MONGODB] Ping failed: {str(e)[:200]}")
        return False
