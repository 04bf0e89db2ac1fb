# petbook/utils.py
import logging
from typing import Any, Dict, List, Optional, Tuple
from bson import json_util
from bson.errors import BSONError
from .exceptions import ValidationError

logger = logging.getLogger(__name__)

MALFORMED_BODY = "Malformed request body."


def parse_body(raw: bytes, lenient: bool = False) -> Optional[Any]:
    """
    Decodifica el cuerpo como Extended JSON de MongoDB, de modo que el cliente
    puede mandar operadores ($gt, $set...) y tipos ({"$oid": ...}, {"$date": ...}).
    Cuerpo vacío -> None.
    Con lenient=True un cuerpo ilegible también se trata como vacío.
    """
    if not raw or not raw.strip():
        return None
    try:
        return json_util.loads(raw)
    except (ValueError, TypeError, BSONError) as e:
        if lenient:
            logger.debug("Ignoring unparsable body: %s", e)
            return None
        raise ValidationError(MALFORMED_BODY) from e


def filter_expression(body: Optional[Any], lenient: bool = False) -> Dict[str, Any]:
    """Filtro de GET/DELETE. Sin cuerpo equivale a {} (todos los registros)."""
    if body is None:
        return {}
    if not isinstance(body, dict):
        if lenient:
            return {}
        raise ValidationError(MALFORMED_BODY)
    return body


def record_payload(body: Optional[Any], lenient: bool = False) -> Dict[str, Any]:
    """Cuerpo de POST: un objeto JSON o nada. Sin cuerpo equivale a un candidato vacío."""
    if body is None:
        return {}
    if not isinstance(body, dict):
        if lenient:
            return {}
        raise ValidationError(MALFORMED_BODY)
    return body


def update_pair(body: Optional[Any]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """PATCH espera exactamente [filtro, update]; cualquier otra cosa es 400."""
    if not isinstance(body, list) or len(body) != 2:
        raise ValidationError("Invalid request.")
    flt, update = body
    if not isinstance(flt, dict) or not isinstance(update, dict):
        raise ValidationError("Invalid request.")
    return flt, update


def pets_out(pets: List[Any]) -> List[Dict[str, Any]]:
    return [p.to_out() for p in pets]
