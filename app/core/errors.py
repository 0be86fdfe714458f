"""
Errores de dominio que lanzan los servicios.

Los routers los traducen a HTTPException usando `status_code`; el mensaje
se devuelve tal cual en `detail`.
"""
from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} with id {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class ForeignKeyMissingError(AppError):
    """Una fila referencia un flock/feed/material que no existe."""

    def __init__(self, entity: str, entity_id: int) -> None:
        super().__init__(f"{entity} with id {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class DuplicateCompositionError(AppError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, finished_feed_id: int, raw_material_id: int) -> None:
        super().__init__(
            f"Composition already exists for finished feed {finished_feed_id} "
            f"and raw material {raw_material_id}"
        )


class EntityInUseError(AppError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, entity: str, entity_id: int, referenced_by: str) -> None:
        super().__init__(
            f"{entity} with id {entity_id} is still referenced by {referenced_by}"
        )


class UnsupportedEntityError(AppError):
    def __init__(self, entity_type: str) -> None:
        super().__init__(f"Unsupported entity type: {entity_type}")
        self.entity_type = entity_type


class InvalidFilterError(AppError):
    pass


class FlockCountError(AppError):
    def __init__(self, current_count: int, initial_count: int) -> None:
        super().__init__(
            f"Current count {current_count} exceeds initial count {initial_count}"
        )
