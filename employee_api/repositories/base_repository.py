"""
Base repository with generic CRUD operations for MongoDB.
Entity-specific repositories inherit from this.
"""
from typing import Optional, List, Dict, Any
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
import logging

from employee_api.utils.logger import log_database_operation

logger = logging.getLogger(__name__)


def to_object_id(doc_id: Any) -> Optional[ObjectId]:
    """
    Convert a string id to ObjectId.

    Returns:
        ObjectId, or None if the value is not a valid ObjectId
    """
    if isinstance(doc_id, ObjectId):
        return doc_id
    if isinstance(doc_id, str) and ObjectId.is_valid(doc_id):
        return ObjectId(doc_id)
    return None


def _expose_id(document: Dict[str, Any]) -> Dict[str, Any]:
    if '_id' in document:
        document['id'] = str(document.pop('_id'))
    return document


class BaseRepository:
    """
    Generic repository for MongoDB CRUD operations.
    
    Provides standard methods: create, find_by_id, find_all, delete.
    """
    
    def __init__(self, collection: AsyncIOMotorCollection):
        """
        Initialize repository with MongoDB collection.
        
        Args:
            collection: Motor AsyncIOMotorCollection instance
        """
        self.collection = collection
    
    async def create(self, document: Dict[str, Any]) -> str:
        """
        Create a new document.
        
        Args:
            document: Document data
            
        Returns:
            str: Created document ID
        """
        result = await self.collection.insert_one(document)
        logger.info(f"Created document in {self.collection.name}: {result.inserted_id}")
        return str(result.inserted_id)
    
    async def find_by_id(self, doc_id: str) -> Optional[Dict[str, Any]]:
        """
        Find document by ID.
        
        Args:
            doc_id: Document ID (string or ObjectId)
            
        Returns:
            Document data or None if not found or the ID is malformed
        """
        object_id = to_object_id(doc_id)
        if object_id is None:
            logger.debug(f"Malformed ID for {self.collection.name}: {doc_id}")
            return None
        
        log_database_operation(logger, "find_one", self.collection.name, str(object_id))
        document = await self.collection.find_one({"_id": object_id})
        
        return _expose_id(document) if document else None
    
    async def find_all(
        self,
        filter_query: Optional[Dict[str, Any]] = None,
        sort: Optional[List[tuple]] = None
    ) -> List[Dict[str, Any]]:
        """
        Find all documents matching filter.
        
        Args:
            filter_query: MongoDB filter query (None for all documents)
            sort: List of (field, direction) tuples for sorting
            
        Returns:
            List of documents
        """
        query = filter_query or {}
        log_database_operation(logger, "find", self.collection.name)
        cursor = self.collection.find(query)
        
        if sort:
            cursor = cursor.sort(sort)
        
        documents = await cursor.to_list(length=None)
        return [_expose_id(doc) for doc in documents]
    
    async def delete(self, doc_id: str) -> bool:
        """
        Delete document by ID in a single atomic operation.
        
        Args:
            doc_id: Document ID
            
        Returns:
            True if a document was removed, False otherwise
        """
        object_id = to_object_id(doc_id)
        if object_id is None:
            return False
        
        result = await self.collection.delete_one({"_id": object_id})
        
        if result.deleted_count > 0:
            logger.info(f"Deleted document from {self.collection.name}: {doc_id}")
            return True
        
        return False
