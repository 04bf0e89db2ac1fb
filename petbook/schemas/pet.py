from datetime import datetime
from typing import Any, Dict, Optional
from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator
import pydantic

# orden en que se comprueban los campos obligatorios (gana el primero que falle)
REQUIRED_FIELDS = ("name", "dob", "owner_name", "species", "height", "weight", "favorite_toy")


def _is_empty(value: Any) -> bool:
    # omitempty: cadena vacía, entero cero o ausente
    if isinstance(value, bool):
        return False
    return value is None or value == "" or (isinstance(value, int) and value == 0)


class Pet(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id")
    name: str = ""
    dob: Optional[datetime] = None
    owner_name: str = ""
    species: str = ""
    height: int = 0
    weight: int = 0
    favorite_toy: str = ""
    breed: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> Any:
        if isinstance(v, ObjectId):
            return str(v)
        return v

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "Pet":
        """
        Construye un candidato a partir del cuerpo de un POST.
        El _id lo asigna el almacén, así que se descarta si viene en el cuerpo.
        Un valor con tipo incorrecto se descarta y el campo queda vacío, así
        missing_field() sigue informando del primero que falle en orden.
        """
        data = {k: v for k, v in payload.items() if k not in ("_id", "id")}
        try:
            return cls.model_validate(data)
        except pydantic.ValidationError as e:
            bad = {str(err["loc"][0]) for err in e.errors() if err.get("loc")}
        return cls.model_validate({k: v for k, v in data.items() if k not in bad})

    def missing_field(self) -> Optional[str]:
        for field in REQUIRED_FIELDS:
            value = getattr(self, field)
            if field == "dob":
                if value is None or value.replace(tzinfo=None) == datetime.min:
                    return field
            elif field in ("height", "weight"):
                if value <= 0:
                    return field
            elif value == "":
                return field
        return None

    def apply_defaults(self) -> None:
        if self.species == "dog" and self.breed == "":
            self.breed = "unknown"

    def to_document(self) -> Dict[str, Any]:
        doc = self.model_dump(exclude={"id"})
        return {k: v for k, v in doc.items() if not _is_empty(v)}

    def to_out(self) -> Dict[str, Any]:
        doc = self.model_dump(by_alias=True, mode="json")
        return {k: v for k, v in doc.items() if not _is_empty(v)}


class DeleteSummary(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    deleted_count: int = Field(0, alias="DeletedCount")
