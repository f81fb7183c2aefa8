"""Generic list/create/update/delete operations over a Beanie document."""

from datetime import datetime
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from beanie import Document, UpdateResponse
from bson import ObjectId
from pydantic import BaseModel, ValidationError
from pymongo.errors import DuplicateKeyError

from hospital.core.logging import logger
from hospital.shared.exceptions import BadRequestException, ConflictException, NotFoundException


DocumentT = TypeVar("DocumentT", bound=Document)

# Fields the store owns; never copied from a patch or a merged document
_STORE_FIELDS = {"id", "revision_id", "version", "created_at", "updated_at"}


class ResourceService(Generic[DocumentT]):
    """
    CRUD operations shared by every stored resource.

    Subclasses set ``model`` (the document class), ``response_schema`` and a
    human readable ``label`` used in log lines and error messages.
    """

    model: Type[DocumentT]
    response_schema: Type[BaseModel]
    label: str = "Resource"

    @classmethod
    def to_response(cls, document: DocumentT) -> BaseModel:
        """Convert a stored document to its response schema."""
        payload = document.model_dump(exclude={"id", "revision_id"})
        payload["id"] = str(document.id)
        return cls.response_schema.model_validate(payload)

    @classmethod
    async def list(cls) -> List[DocumentT]:
        """Return every document of this type."""
        return await cls.model.find_all().to_list()

    @classmethod
    async def get(cls, resource_id: str) -> DocumentT:
        """Get a document by its MongoDB _id."""
        if not ObjectId.is_valid(resource_id):
            raise NotFoundException(f"{cls.label} not found")

        document = await cls.model.get(ObjectId(resource_id))
        if not document:
            raise NotFoundException(f"{cls.label} not found")

        return document

    @classmethod
    async def create(cls, request: BaseModel) -> DocumentT:
        """Validate and insert a new document."""
        try:
            document = cls.model(**request.model_dump(exclude_none=True))
        except ValidationError:
            raise BadRequestException(f"Invalid {cls.label.lower()} data")

        try:
            await document.insert()
        except DuplicateKeyError:
            raise ConflictException(f"{cls.label} already exists")

        logger.info(f"Created {cls.label.lower()} {document.id}")
        return document

    @classmethod
    def check_update(cls, current: DocumentT, updated: DocumentT) -> None:
        """Hook for resource-specific rules on a merged update. Raise to reject."""

    @classmethod
    async def update(cls, resource_id: str, request: BaseModel) -> DocumentT:
        """
        Merge the provided fields onto the stored document and write it back.

        The merged document is validated against the full model. The write
        only applies if the document's version is unchanged since it was
        read (or matches the ``version`` the caller sent).
        """
        document = await cls.get(resource_id)

        changes: Dict[str, Any] = request.model_dump(exclude_unset=True)
        expected_version: Optional[int] = changes.pop("version", None)
        if expected_version is None:
            expected_version = document.version
        elif expected_version != document.version:
            raise ConflictException(
                f"{cls.label} has been modified (version {document.version}, expected {expected_version})"
            )

        for field in _STORE_FIELDS:
            changes.pop(field, None)

        merged = document.model_dump(exclude={"id", "revision_id"})
        merged.update(changes)
        try:
            updated = cls.model.model_validate(merged)
        except ValidationError:
            raise BadRequestException(f"Invalid {cls.label.lower()} data")

        cls.check_update(document, updated)

        fields = updated.model_dump(include=set(changes))
        fields["updated_at"] = datetime.utcnow()

        try:
            result = await cls.model.find_one(
                {"_id": document.id, "version": expected_version}
            ).update(
                {"$set": fields, "$inc": {"version": 1}},
                response_type=UpdateResponse.NEW_DOCUMENT,
            )
        except DuplicateKeyError:
            raise ConflictException(f"{cls.label} already exists")

        if result is None:
            logger.warning(f"Concurrent write rejected for {cls.label.lower()} {resource_id}")
            raise ConflictException(f"{cls.label} was modified by another request")

        logger.info(f"Updated {cls.label.lower()} {resource_id}")
        return result

    @classmethod
    async def delete(cls, resource_id: str) -> None:
        """Permanently delete a document."""
        document = await cls.get(resource_id)
        await document.delete()

        logger.info(f"Deleted {cls.label.lower()} {resource_id}")
