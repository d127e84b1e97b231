"""
Storage tests — every test runs against MemStorage and SqlStorage (in-memory SQLite).
"""

import pytest

from omav import schemas
from omav.database import Base, make_engine, make_session_factory
from omav.models import ProjectType
from omav.storage import MemStorage, SqlStorage, build_storage


@pytest.fixture(params=["memory", "sql"])
def store(request):
    if request.param == "memory":
        return MemStorage()
    engine = make_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    return SqlStorage(make_session_factory(engine))


def make_form(**overrides):
    data = dict(
        name="Ravi Kumar", phone="9876543210", email="ravi@example.com", city="Patna",
        land_size="2400 sq ft",
        land_dimension_north_feet="40", land_dimension_south_feet="40",
        land_dimension_east_feet="60", land_dimension_west_feet="60",
        land_facing="East", project_type="Residential",
    )
    data.update(overrides)
    return schemas.ContactFormCreate(**data)


def test_seeds_sample_projects(store):
    projects = store.get_projects()
    assert [p.id for p in projects] == [1, 2, 3]
    assert [p.title for p in store.get_featured_projects()] == [p.title for p in projects]


def test_projects_by_type(store):
    assert [p.title for p in store.get_projects_by_type("institutional")] == ["Modern School Campus"]
    assert store.get_projects_by_type("industrial") == []


def test_create_and_get_project(store):
    project = store.create_project(schemas.ProjectCreate(
        title="Riverside Apartments", description="Twelve-unit block.",
        project_type=ProjectType.RESIDENTIAL, image_url="https://example.com/a.png",
        completed_date="Mar 2024",
    ))
    assert project.id == 4
    assert store.get_project(4).title == "Riverside Apartments"
    assert store.get_project(4).featured is False
    assert store.get_project(99) is None
    assert len(store.get_featured_projects()) == 3


def test_contact_form_lifecycle(store):
    first = store.create_contact_form(make_form())
    second = store.create_contact_form(make_form(email=None))
    assert (first.id, second.id) == (1, 2)
    assert first.is_processed is False
    assert first.land_dimension_north_inches == "0"
    assert store.get_contact_form(2).email is None

    processed = store.mark_contact_form_processed(1)
    assert processed.is_processed is True
    assert store.get_contact_form(1).is_processed is True
    assert store.get_contact_form(2).is_processed is False
    assert store.mark_contact_form_processed(99) is None
    assert [f.id for f in store.get_contact_forms()] == [1, 2]


def test_user_lifecycle(store):
    user = store.create_user(schemas.UserCreate(
        username="office", password_hash="hash", name="Office", role="viewer"))
    assert user.id == 1
    assert user.last_login is None
    assert store.get_user_by_username("office").password_hash == "hash"
    assert store.get_user_by_username("nobody") is None
    assert store.get_user(99) is None

    updated = store.update_last_login(user.id)
    assert updated.last_login is not None
    assert store.get_user(user.id).last_login is not None
    assert "password_hash" not in updated.public().model_dump()


def test_build_storage_rejects_unknown_backend():
    assert isinstance(build_storage("memory"), MemStorage)
    with pytest.raises(ValueError, match="Unknown STORAGE_BACKEND"):
        build_storage("redis")
