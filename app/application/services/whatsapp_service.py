"""WhatsApp service — connect and disconnect the business channels."""

from typing import List

import structlog
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.core.exceptions import AppError, ConflictException, EntityNotFoundException
from app.core.timeutils import now
from app.domain.models.whatsapp_connection import WhatsAppConnection
from app.domain.repositories.connection_repository import ConnectionRepository
from app.domain.schemas.whatsapp import (
    ConnectionCreate,
    ConnectionPanel,
    ConnectionRead,
    ConnectionSlots,
    ConnectionType,
)

logger = structlog.get_logger(__name__)


def list_connections(repo: ConnectionRepository, business_id: int) -> List[WhatsAppConnection]:
    return repo.list_for_business(business_id)


def find_connection(connections: List[WhatsAppConnection], connection_type: ConnectionType) -> WhatsAppConnection | None:
    """First connection of the given type, if any."""
    for connection in connections:
        if connection.connection_type == connection_type.value:
            return connection
    return None


def build_slots(connections: List[WhatsAppConnection]) -> ConnectionSlots:
    slots = {}
    for connection_type in ConnectionType:
        connection = find_connection(connections, connection_type)
        slots[connection_type.value] = ConnectionRead.model_validate(connection) if connection else None
    return ConnectionSlots(**slots)


def get_connection_panel(repo: ConnectionRepository, business_id: int) -> ConnectionPanel:
    connections = list_connections(repo, business_id)
    return ConnectionPanel(
        slots=build_slots(connections),
        connections=[ConnectionRead.model_validate(c) for c in connections],
    )


def connect(repo: ConnectionRepository, business_id: int, data: ConnectionCreate) -> ConnectionPanel:
    """Store a channel credential and reload the panel.

    Only one connection per type is allowed for a business.
    """
    connection_type = ConnectionType(data.connection_type)
    if find_connection(list_connections(repo, business_id), connection_type) is not None:
        raise ConflictException(
            f"A {connection_type.value} WhatsApp connection already exists",
            {"connection_type": connection_type.value},
        )

    try:
        connection = repo.create({
            "business_id": business_id,
            "phone_number": data.phone_number,
            "api_key": data.api_key,
            "connection_type": connection_type.value,
            "is_active": True,
            "connected_at": now(),
        })
    except IntegrityError:
        repo.rollback()
        logger.warning("Concurrent WhatsApp connect rejected", business_id=business_id, connection_type=connection_type.value)
        raise ConflictException(
            f"A {connection_type.value} WhatsApp connection already exists",
            {"connection_type": connection_type.value},
        )
    except SQLAlchemyError:
        repo.rollback()
        logger.exception("Error connecting WhatsApp", business_id=business_id)
        raise AppError("Could not connect WhatsApp")

    logger.info(
        "WhatsApp connected",
        business_id=business_id,
        connection_id=connection.id,
        connection_type=connection_type.value,
    )
    return get_connection_panel(repo, business_id)


def disconnect(repo: ConnectionRepository, business_id: int, connection_id: int) -> ConnectionPanel:
    """Delete a connection and reload the panel."""
    connection = repo.get_for_business(business_id, connection_id)
    if connection is None:
        raise EntityNotFoundException("WhatsApp connection not found", {"connection_id": connection_id})

    repo.delete(connection.id)
    logger.info("WhatsApp disconnected", business_id=business_id, connection_id=connection_id)
    return get_connection_panel(repo, business_id)
