# backend/beautyshop/schemas/message_schema.py
"""
Esquemas de respuesta genéricos para las operaciones de escritura.
"""

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Confirmación de una operación de escritura."""
    message: str


class CreatedResponse(MessageResponse):
    """Confirmación de una inserción, con el ID generado por la base de datos."""
    id: int
