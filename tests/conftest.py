import os

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("TIMEZONE", "UTC")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.infrastructure.database import Base, get_db
from app.interfaces.api.deps import get_current_user
from app.application.services.auth_service import hash_password
from app.domain.models.business import Business
from app.domain.models.user import User
from app.domain.models.whatsapp_connection import WhatsAppConnection
from app.domain.models.chat_message import ChatMessage
from app.domain.models.automation_rule import AutomationRule
from app.infrastructure.repositories.business_repository import SQLAlchemyBusinessRepository
from app.infrastructure.repositories.connection_repository import SQLAlchemyConnectionRepository
from app.infrastructure.repositories.message_repository import SQLAlchemyMessageRepository
from app.infrastructure.repositories.automation_repository import SQLAlchemyAutomationRuleRepository


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    db = testing_session_local()
    try:
        yield db
    finally:
        db.close()
        engine.dispose()


def _make_user(db, email: str) -> User:
    user = User(name="Owner", email=email, password_hash=hash_password("secret123"))
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def user(db_session):
    return _make_user(db_session, "owner@example.com")


@pytest.fixture
def other_user(db_session):
    return _make_user(db_session, "other@example.com")


@pytest.fixture
def business_repo(db_session):
    return SQLAlchemyBusinessRepository(db_session, Business)


@pytest.fixture
def connection_repo(db_session):
    return SQLAlchemyConnectionRepository(db_session, WhatsAppConnection)


@pytest.fixture
def message_repo(db_session):
    return SQLAlchemyMessageRepository(db_session, ChatMessage)


@pytest.fixture
def rule_repo(db_session):
    return SQLAlchemyAutomationRuleRepository(db_session, AutomationRule)


def _make_business(db, owner: User, name: str = "Sunrise Bakery") -> Business:
    business = Business(
        user_id=owner.id,
        name=name,
        industry="Food",
        description="Neighbourhood bakery",
        business_info="Open 7am-7pm, delivery within 5km",
    )
    db.add(business)
    db.commit()
    db.refresh(business)
    return business


@pytest.fixture
def business(db_session, user):
    return _make_business(db_session, user)


@pytest.fixture
def other_business(db_session, other_user):
    return _make_business(db_session, other_user, name="Other Shop")


@pytest.fixture
def anonymous_client(db_session):
    app.dependency_overrides[get_db] = lambda: db_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def client(db_session, user):
    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_current_user] = lambda: user
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
