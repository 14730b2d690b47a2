"""
Banners collection accessor.
Every pymongo failure is re-raised as a service error so the HTTP layer
only ever deals with ``BannerServiceError``.
"""
import logging

from pymongo.errors import PyMongoError

from errors import BannerQueryError, BannerWriteError
from models.banner import Banner

logger = logging.getLogger(__name__)


class BannerRepository:
    def __init__(self, connection, collection_name: str = "banners"):
        self.connection = connection
        self.collection_name = collection_name

    def _collection(self):
        return self.connection.connect()[self.collection_name]

    def active_urls(self) -> list[str]:
        """URLs of every active banner, in the order the store returns them."""
        collection = self._collection()
        try:
            docs = list(collection.find({"active": True}, {"url": 1, "_id": 0}))
        except PyMongoError as exc:
            raise BannerQueryError(str(exc)) from exc

        urls = []
        for doc in docs:
            url = doc.get("url")
            if not url:
                logger.warning("Skipping active banner without url")
                continue
            urls.append(url)
        return urls

    def deactivate_all(self) -> int:
        """Flip every active banner to inactive; return how many changed."""
        collection = self._collection()
        try:
            result = collection.update_many(
                {"active": True},
                {"$set": {"active": False}},
            )
        except PyMongoError as exc:
            raise BannerWriteError(str(exc)) from exc
        return result.modified_count

    def add(self, banner: Banner) -> str:
        """Insert a banner and return its id as a string."""
        collection = self._collection()
        try:
            result = collection.insert_one(banner.to_document())
        except PyMongoError as exc:
            raise BannerWriteError(str(exc)) from exc
        return str(result.inserted_id)

    def all(self) -> list[Banner]:
        """Every stored banner, active or not, oldest first."""
        collection = self._collection()
        try:
            docs = list(collection.find({}, {"_id": 0}).sort("createdAt", 1))
        except PyMongoError as exc:
            raise BannerQueryError(str(exc)) from exc
        return [Banner.from_document(d) for d in docs]
