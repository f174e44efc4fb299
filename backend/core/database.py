"""
Database connection and initialization
"""
import os
from motor.motor_asyncio import AsyncIOMotorClient

mongo_url = os.environ['MONGO_URL']

# Optimized MongoDB connection with connection pooling
client = AsyncIOMotorClient(
    mongo_url,
    maxPoolSize=100,
    minPoolSize=10,
    maxIdleTimeMS=30000,
    connectTimeoutMS=5000,
    serverSelectionTimeoutMS=5000,
    waitQueueTimeoutMS=10000
)

db = client[os.environ['DB_NAME']]


async def create_database_indexes():
    """Create necessary indexes for optimal query performance"""
    # Albums collection indexes
    await db.albums.create_index("id", unique=True)
    await db.albums.create_index("slug", unique=True)
    await db.albums.create_index([("created_at", -1)])

    # Notifications indexes
    await db.notifications.create_index([("created_at", -1)])
    await db.notifications.create_index("status")
    await db.notifications.create_index("album_id")
    await db.notifications.create_index("customer_id")

    # Translations indexes
    await db.translations.create_index([("locale", 1), ("key", 1)], unique=True)

    # Audit logs indexes
    await db.audit_logs.create_index([("created_at", -1)])
    await db.audit_logs.create_index("action")
    await db.audit_logs.create_index("resource_type")
