# backend/beautyshop/core/exceptions.py
"""
Excepciones de dominio de la API.

Cada excepción lleva el mensaje público que verá el cliente y el código
HTTP asociado. Los manejadores globales (api/error_handlers.py) las
convierten en un cuerpo JSON de forma fija: {"error": "<mensaje>"}.

Jerarquía:
- CatalogError: base común
- NotFoundError (404): búsqueda de una fila que no existe
- ValidationError (400): campo requerido ausente o inválido
- StoreError (500): cualquier fallo de la base de datos; el detalle
  interno se registra en el log y nunca se devuelve al cliente
"""

from typing import Optional

from starlette import status


class CatalogError(Exception):
    """Base de todas las excepciones de la API."""

    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        """Cuerpo JSON que se envía al cliente."""
        return {"error": self.message}


class NotFoundError(CatalogError):
    """El recurso solicitado no existe."""

    http_status = status.HTTP_404_NOT_FOUND


class ValidationError(CatalogError):
    """Falta un campo requerido o su valor no es válido."""

    http_status = status.HTTP_400_BAD_REQUEST


class StoreError(CatalogError):
    """Fallo al ejecutar una sentencia contra la base de datos."""

    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        detail: str,
        operation: str = "query",
        message: Optional[str] = None,
    ):
        super().__init__(message or "Internal Server Error")
        self.detail = detail
        self.operation = operation
