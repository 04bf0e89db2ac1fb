"""
Errores de la pasarela PetBook.

Los handlers globales de ``main.py`` los convierten en respuestas de texto plano:
    PetBookError
    ├── ValidationError  → 400 (campo ausente/inválido, cuerpo mal formado)
    └── StoreError       → 500 (cualquier fallo de MongoDB, texto original)
"""
from typing import Optional


class PetBookError(Exception):
    status_code = 500

    def __init__(self, message: str = "Unexpected error"):
        self.message = message
        super().__init__(message)


class ValidationError(PetBookError):
    """El cliente envió algo que puede corregir. No se reintenta."""
    status_code = 400

    def __init__(self, message: str = "Invalid request.", field: Optional[str] = None):
        super().__init__(message)
        self.field = field

    @classmethod
    def missing_field(cls, field: str) -> "ValidationError":
        return cls(f"Missing or invalid field: {field}", field=field)


class StoreError(PetBookError):
    """Fallo del almacén (conexión, sintaxis de la consulta, ejecución)."""
    status_code = 500
