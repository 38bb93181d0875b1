"""Configuration et fixtures pytest"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("SCHEDULER_ENABLED", "false")

import pytest
from datetime import datetime, timedelta
from fastapi.testclient import TestClient
from jose import jwt
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.core.config import settings
from app.core.database import Base, get_db
from app.main import app
from app.models import (
    User,
    Group,
    GroupMember,
    Fridge,
    Food,
    UserDevice,
    Role,
    Permission,
    UserRole,
    RolePermission,
)

SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL, connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def make_access_token(email: str, expires_in: timedelta = timedelta(hours=1)) -> str:
    payload = {
        "sub": "6f1c2d8e-0000-4000-8000-000000000001",
        "email": email,
        "aud": "authenticated",
        "role": "authenticated",
        "exp": datetime.utcnow() + expires_in,
    }
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALGORITHM)


@pytest.fixture(scope="function")
def db():
    """Base de données SQLite recréée pour chaque test"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def test_user(db):
    user = User(email="an@example.com", name="An")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def test_user2(db):
    user = User(email="binh@example.com", name="Binh")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def test_group(db, test_user, test_user2):
    """Groupe de deux membres : An et Binh"""
    group = Group(name="Nhà mình", owner_id=test_user.id)
    db.add(group)
    db.flush()
    db.add_all(
        [
            GroupMember(group_id=group.id, user_id=test_user.id),
            GroupMember(group_id=group.id, user_id=test_user2.id),
        ]
    )
    db.commit()
    db.refresh(group)
    return group


@pytest.fixture
def test_fridge(db, test_group):
    fridge = Fridge(name="Tủ lạnh bếp", group_id=test_group.id)
    db.add(fridge)
    db.commit()
    db.refresh(fridge)
    return fridge


@pytest.fixture
def test_food(db):
    food = Food(name="Sữa tươi", category="dairy")
    db.add(food)
    db.commit()
    db.refresh(food)
    return food


@pytest.fixture
def user_tokens(db, test_user):
    """An a trois appareils dont un avec un jeton 'null' mal enregistré"""
    db.add_all(
        [
            UserDevice(user_id=test_user.id, fcm_token="a", platform="android"),
            UserDevice(user_id=test_user.id, fcm_token="null", platform="ios"),
            UserDevice(user_id=test_user.id, fcm_token="b", platform="ios"),
        ]
    )
    db.commit()


@pytest.fixture
def admin_user(db, test_user):
    """Donne à test_user le rôle admin avec la permission manage_notifications"""
    role = Role(name="admin")
    permission = Permission(name="manage_notifications")
    db.add_all([role, permission])
    db.flush()
    db.add_all(
        [
            UserRole(user_id=test_user.id, role_id=role.id),
            RolePermission(role_id=role.id, permission_id=permission.id),
        ]
    )
    db.commit()
    return test_user


@pytest.fixture
def auth_headers(test_user):
    return {"Authorization": f"Bearer {make_access_token(test_user.email)}"}


@pytest.fixture
def auth_headers_user2(test_user2):
    return {"Authorization": f"Bearer {make_access_token(test_user2.email)}"}
