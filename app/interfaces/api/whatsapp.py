"""WhatsApp API routes — list, connect and disconnect channels."""

from fastapi import APIRouter, Depends, status

from app.interfaces.api.deps import get_current_business
from app.interfaces.deps import get_connection_repository
from app.domain.models.business import Business
from app.domain.repositories.connection_repository import ConnectionRepository
from app.domain.schemas.whatsapp import ConnectionCreate, ConnectionPanel
from app.application.services.whatsapp_service import connect, disconnect, get_connection_panel

router = APIRouter(prefix="/api/whatsapp", tags=["WhatsApp"])


@router.get("/connections", response_model=ConnectionPanel)
def list_connections(
    repo: ConnectionRepository = Depends(get_connection_repository),
    business: Business = Depends(get_current_business),
):
    return get_connection_panel(repo, business.id)


@router.post("/connections", response_model=ConnectionPanel, status_code=status.HTTP_201_CREATED)
def create_connection(
    body: ConnectionCreate,
    repo: ConnectionRepository = Depends(get_connection_repository),
    business: Business = Depends(get_current_business),
):
    return connect(repo, business.id, body)


@router.delete("/connections/{connection_id}", response_model=ConnectionPanel)
def delete_connection(
    connection_id: int,
    repo: ConnectionRepository = Depends(get_connection_repository),
    business: Business = Depends(get_current_business),
):
    return disconnect(repo, business.id, connection_id)
