"""
Envoltorio fino sobre la colección de Mongo (motor).

Todas las operaciones traducen los fallos del driver a ``StoreError`` con el
texto original del error, que el handler global devuelve como 500.
"""
import logging
from typing import Any, Dict, List, Optional
import pydantic
from pymongo.errors import PyMongoError
from motor.motor_asyncio import AsyncIOMotorCollection
from .exceptions import StoreError
from .schemas.pet import Pet, DeleteSummary

logger = logging.getLogger(__name__)

# ValueError/TypeError: validación de argumentos de pymongo
# (p. ej. un update sin operadores $) antes de llegar al servidor
DRIVER_ERRORS = (PyMongoError, ValueError, TypeError)


class PetStore:
    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    @staticmethod
    def _decode(doc: Dict[str, Any]) -> Pet:
        try:
            return Pet.model_validate(doc)
        except pydantic.ValidationError as e:
            raise StoreError(f"cannot decode stored record {doc.get('_id')}: {e}") from e

    async def find(self, filter: Dict[str, Any]) -> List[Pet]:
        try:
            docs = await self.collection.find(filter).to_list(None)
        except DRIVER_ERRORS as e:
            raise StoreError(str(e)) from e
        return [self._decode(d) for d in docs]

    async def find_one(self, filter: Dict[str, Any]) -> Optional[Pet]:
        try:
            doc = await self.collection.find_one(filter)
        except DRIVER_ERRORS as e:
            raise StoreError(str(e)) from e
        return self._decode(doc) if doc else None

    async def insert_one(self, doc: Dict[str, Any]) -> Any:
        # insert_one añade _id al dict que recibe; se le pasa una copia
        try:
            res = await self.collection.insert_one(dict(doc))
        except DRIVER_ERRORS as e:
            raise StoreError(str(e)) from e
        return res.inserted_id

    async def update_many(self, filter: Dict[str, Any], update: Dict[str, Any]) -> int:
        try:
            res = await self.collection.update_many(filter, update)
        except DRIVER_ERRORS as e:
            raise StoreError(str(e)) from e
        return res.modified_count

    async def delete_many(self, filter: Dict[str, Any]) -> DeleteSummary:
        try:
            res = await self.collection.delete_many(filter)
        except DRIVER_ERRORS as e:
            raise StoreError(str(e)) from e
        return DeleteSummary(deleted_count=res.deleted_count)
