from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie
from app.core.config import settings


async def init_db():
    """
    Initialize MongoDB connection and Beanie ODM.
    """
    client = AsyncIOMotorClient(settings.DATABASE_URL)

    # Selecting the database name from the URL or default
    db_name = client.get_default_database(settings.DATABASE_NAME).name
    if not db_name or db_name == 'test':
        db_name = settings.DATABASE_NAME

    # Import models
    from app.models.user import UserRecord

    # Initialize Beanie
    await init_beanie(
        database=client[db_name],
        document_models=[
            UserRecord
        ]
    )
