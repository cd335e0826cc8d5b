from typing import Generic, Type, TypeVar

from src.clients.firestore_client import FirestoreClient
from src.model.content import Document
from src.utils.exceptions import BadRequestException

# Generic type for content documents
DocumentType = TypeVar("DocumentType", bound=Document)


class BaseRepository(Generic[DocumentType]):
    """
    Base repository with the write operations every content collection supports.

    Documents are always written whole: an update replaces the stored document
    with the full record minus its id.

    Usage:
        class CourseRepository(BaseRepository[Course]):
            def __init__(self, client: FirestoreClient):
                super().__init__(Course, "courses", "Course", client)
    """
    model: Type[DocumentType]

    def __init__(
            self,
            model: Type[DocumentType],
            collection: str,
            label: str,
            client: FirestoreClient,
    ):
        """
        Initialize repository with model class, collection name and client.

        Args:
            model: Document model class
            collection: Collection name under the app's data path
            label: Human-readable entity name used in notifications
            client: Firestore client
        """
        self.model = model
        self.collection = collection
        self.label = label
        self.client = client

    # ==================== CREATE ====================

    async def create(self, obj_in: DocumentType) -> DocumentType:
        """
        Create a new document.

        Args:
            obj_in: Document to create; any id it carries is ignored

        Returns:
            The document with its backend-assigned id
        """
        doc_id = await self.client.add(self.collection, obj_in.to_document())
        return obj_in.model_copy(update={"id": doc_id})

    # ==================== UPDATE ====================

    async def replace(self, obj_in: DocumentType) -> DocumentType:
        """
        Replace an existing document with obj_in.

        Raises:
            BadRequestException: if obj_in has no id
        """
        if not obj_in.id:
            raise BadRequestException(f"{self.label} has no id to update")

        await self.client.set(self.collection, obj_in.id, obj_in.to_document())
        return obj_in

    # ==================== DELETE ====================

    async def delete(self, doc_id: str) -> None:
        await self.client.delete(self.collection, doc_id)
