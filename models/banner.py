"""
Banner record schema.
Maps between the ``Banner`` dataclass and its MongoDB document.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone

from errors import InvalidBannerError


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Banner:
    url: str
    active: bool = True
    created_at: datetime = field(default_factory=_now)

    def __post_init__(self):
        if not isinstance(self.url, str) or not self.url.strip():
            raise InvalidBannerError("banner url is required")
        if not isinstance(self.active, bool):
            raise InvalidBannerError("banner active flag must be a boolean")
        if not isinstance(self.created_at, datetime):
            raise InvalidBannerError("banner createdAt must be a datetime")

    def to_document(self) -> dict:
        """Storage representation; field names follow the collection."""
        return {
            "url": self.url,
            "active": self.active,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_document(cls, doc: dict) -> "Banner":
        """
        Build a Banner from a stored document. Missing ``active`` and
        ``createdAt`` fall back to the schema defaults; ``_id`` is ignored.
        """
        if "url" not in doc:
            raise InvalidBannerError("stored banner has no url")
        kwargs = {"url": doc["url"], "active": doc.get("active", True)}
        if doc.get("createdAt") is not None:
            kwargs["created_at"] = doc["createdAt"]
        return cls(**kwargs)
