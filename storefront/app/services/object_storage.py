from abc import ABC, abstractmethod

from pydantic import BaseModel


class StorageError(Exception):
    """Raised when the object store rejects an upload or deletion"""


class StoredFile(BaseModel):
    """Reference to a file kept in the object store"""

    public_id: str
    url: str


class ObjectStorage(ABC):
    """Object storage collaborator for user uploaded files"""

    @abstractmethod
    async def upload(self, file: str, folder: str = "") -> StoredFile:
        """Upload a file (data URI or remote URL) into folder. Raises StorageError."""
        pass

    @abstractmethod
    async def delete(self, public_id: str) -> None:
        """Delete a stored file by its public id. Raises StorageError."""
        pass
