import logging
from typing import Any, Dict, List
from fastapi import APIRouter, Depends, Request
from ..config import get_settings
from ..db import get_store
from ..schemas.pet import Pet
from ..store import PetStore
from ..exceptions import StoreError, ValidationError
from ..utils import parse_body, filter_expression, record_payload, update_pair, pets_out

router = APIRouter()
logger = logging.getLogger(__name__)
settings = get_settings()

# Los cuerpos se leen a mano (también en GET y DELETE): el filtro del cliente
# va tal cual a Mongo, incluidos operadores como $gt.


async def _body(request: Request) -> Any:
    return parse_body(await request.body(), lenient=settings.lenient_body_parsing)


@router.get("")
async def read_pets(request: Request, store: PetStore = Depends(get_store)) -> List[Dict[str, Any]]:
    flt = filter_expression(await _body(request), lenient=settings.lenient_body_parsing)
    pets = await store.find(flt)
    return pets_out(pets)


@router.post("")
async def create_pet(request: Request, store: PetStore = Depends(get_store)) -> Dict[str, Any]:
    payload = record_payload(await _body(request), lenient=settings.lenient_body_parsing)
    candidate = Pet.from_payload(payload)

    field = candidate.missing_field()
    if field:
        raise ValidationError.missing_field(field)

    candidate.apply_defaults()
    inserted_id = await store.insert_one(candidate.to_document())

    # se relee el registro para devolver lo que quedó guardado (con _id)
    try:
        stored = await store.find_one({"_id": inserted_id})
    except StoreError as e:
        logger.warning("Pet %s inserted but re-read failed: %s", inserted_id, e.message)
        return candidate.to_out()
    if stored is None:
        logger.warning("Pet %s inserted but not found on re-read", inserted_id)
        return candidate.to_out()
    return stored.to_out()


@router.patch("")
async def update_pets(request: Request, store: PetStore = Depends(get_store)) -> List[Dict[str, Any]]:
    # PATCH responde siempre "Invalid request." si el cuerpo no es [filtro, update],
    # también cuando ni siquiera es JSON
    flt, update = update_pair(parse_body(await request.body(), lenient=True))
    modified = await store.update_many(flt, update)
    logger.info("Updated %d pets", modified)

    # mismo filtro tras la mutación: los registros que dejaron de cumplirlo
    # no aparecen en la respuesta aunque se hayan actualizado
    pets = await store.find(flt)
    return pets_out(pets)


@router.delete("")
async def delete_pets(request: Request, store: PetStore = Depends(get_store)) -> Dict[str, Any]:
    flt = filter_expression(await _body(request), lenient=settings.lenient_body_parsing)
    summary = await store.delete_many(flt)
    logger.info("Deleted %d pets", summary.deleted_count)
    return summary.model_dump(by_alias=True)
