"""
Storage layer — the site's entire persistence surface behind one interface.

Route handlers only ever see `Storage`; which implementation backs it is
decided by settings.STORAGE_BACKEND and injected through `get_storage`.

- MemStorage: dicts in process memory. A restart loses everything.
- SqlStorage: SQLAlchemy tables (users, contact_forms, projects).
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from . import models, schemas
from .config import settings

logger = logging.getLogger(__name__)


SAMPLE_PROJECTS = [
    schemas.ProjectCreate(
        title="Modern Villa in Patna",
        description="A 3-story luxury residence with custom interiors, delivered 2 months ahead of schedule.",
        project_type=models.ProjectType.RESIDENTIAL,
        image_url="https://i.postimg.cc/ZnDBFR3h/a-3d-render-of-a-modern-posh-3bhk-home-exterior-th-dei-WOEw-TTs-Gokm-Ig-Xwsa-A-MZR3p-Mgb-T2u-Pc-LRo6-h6uw.png",
        completed_date="Jan 2023",
        featured=True,
    ),
    schemas.ProjectCreate(
        title="Tech Park Office Complex",
        description="A 50,000 sq. ft. modern office space with sustainable design elements and smart building features.",
        project_type=models.ProjectType.COMMERCIAL,
        image_url="https://i.postimg.cc/q7dtGWtg/anujkumar4655-3-D-view-2-Story-Building-Wooden-Exterior-Car-in-t-20736489-be69-4047-b1f9-70cc5f89c239.png",
        completed_date="Oct 2022",
        featured=True,
    ),
    schemas.ProjectCreate(
        title="Modern School Campus",
        description="A comprehensive educational facility with classrooms, laboratories, and sports facilities.",
        project_type=models.ProjectType.INSTITUTIONAL,
        image_url="https://i.postimg.cc/Fs7JFy5F/a-photo-of-a-modern-duplex-house-with-two-stories-Pf9j7z-DASUGb3-K3-TItu-In-A-M0-E3v-Wcs-Rvq-Rct-Flj3o-Gb-A.png",
        completed_date="Aug 2022",
        featured=True,
    ),
]


class Storage(ABC):
    """Everything the routes are allowed to ask of a datastore."""

    # --- Users ---

    @abstractmethod
    def get_user(self, user_id: int) -> Optional[schemas.UserRecord]:
        pass

    @abstractmethod
    def get_user_by_username(self, username: str) -> Optional[schemas.UserRecord]:
        pass

    @abstractmethod
    def create_user(self, user: schemas.UserCreate) -> schemas.UserRecord:
        pass

    @abstractmethod
    def update_last_login(self, user_id: int) -> Optional[schemas.UserRecord]:
        pass

    # --- Contact forms ---

    @abstractmethod
    def get_contact_forms(self) -> List[schemas.ContactForm]:
        pass

    @abstractmethod
    def get_contact_form(self, form_id: int) -> Optional[schemas.ContactForm]:
        pass

    @abstractmethod
    def create_contact_form(self, form: schemas.ContactFormCreate) -> schemas.ContactForm:
        pass

    @abstractmethod
    def mark_contact_form_processed(self, form_id: int) -> Optional[schemas.ContactForm]:
        pass

    # --- Projects ---

    @abstractmethod
    def get_projects(self) -> List[schemas.Project]:
        pass

    @abstractmethod
    def get_projects_by_type(self, project_type: str) -> List[schemas.Project]:
        pass

    @abstractmethod
    def get_project(self, project_id: int) -> Optional[schemas.Project]:
        pass

    @abstractmethod
    def get_featured_projects(self) -> List[schemas.Project]:
        pass

    @abstractmethod
    def create_project(self, project: schemas.ProjectCreate) -> schemas.Project:
        pass

    def seed_projects(self):
        for project in SAMPLE_PROJECTS:
            self.create_project(project)


class MemStorage(Storage):
    """Dict-backed storage. Ids start at 1 and only ever increase."""

    def __init__(self, seed: bool = True):
        self._users: dict[int, schemas.UserRecord] = {}
        self._contact_forms: dict[int, schemas.ContactForm] = {}
        self._projects: dict[int, schemas.Project] = {}
        self._next_user_id = 1
        self._next_contact_form_id = 1
        self._next_project_id = 1
        if seed:
            self.seed_projects()

    def get_user(self, user_id):
        return self._users.get(user_id)

    def get_user_by_username(self, username):
        return next((u for u in self._users.values() if u.username == username), None)

    def create_user(self, user):
        record = schemas.UserRecord(
            id=self._next_user_id,
            username=user.username,
            password_hash=user.password_hash,
            name=user.name,
            role=user.role,
            created_at=datetime.utcnow(),
            last_login=None,
        )
        self._next_user_id += 1
        self._users[record.id] = record
        return record

    def update_last_login(self, user_id):
        user = self._users.get(user_id)
        if not user:
            return None
        updated = user.model_copy(update={"last_login": datetime.utcnow()})
        self._users[user_id] = updated
        return updated

    def get_contact_forms(self):
        return list(self._contact_forms.values())

    def get_contact_form(self, form_id):
        return self._contact_forms.get(form_id)

    def create_contact_form(self, form):
        record = schemas.ContactForm(
            **form.model_dump(),
            id=self._next_contact_form_id,
            created_at=datetime.utcnow(),
            is_processed=False,
        )
        self._next_contact_form_id += 1
        self._contact_forms[record.id] = record
        return record

    def mark_contact_form_processed(self, form_id):
        form = self._contact_forms.get(form_id)
        if not form:
            return None
        updated = form.model_copy(update={"is_processed": True})
        self._contact_forms[form_id] = updated
        return updated

    def get_projects(self):
        return list(self._projects.values())

    def get_projects_by_type(self, project_type):
        return [p for p in self._projects.values() if p.project_type == project_type]

    def get_project(self, project_id):
        return self._projects.get(project_id)

    def get_featured_projects(self):
        return [p for p in self._projects.values() if p.featured]

    def create_project(self, project):
        record = schemas.Project(**project.model_dump(), id=self._next_project_id)
        self._next_project_id += 1
        self._projects[record.id] = record
        return record


class SqlStorage(Storage):
    """SQLAlchemy-backed storage. One short-lived session per call."""

    def __init__(self, session_factory, seed: bool = True):
        self._session_factory = session_factory
        if seed:
            with self._session_factory() as db:
                has_projects = db.query(models.Project).first() is not None
            if not has_projects:
                self.seed_projects()

    def get_user(self, user_id):
        with self._session_factory() as db:
            user = db.query(models.User).filter(models.User.id == user_id).first()
            return schemas.UserRecord.model_validate(user) if user else None

    def get_user_by_username(self, username):
        with self._session_factory() as db:
            user = db.query(models.User).filter(models.User.username == username).first()
            return schemas.UserRecord.model_validate(user) if user else None

    def create_user(self, user):
        with self._session_factory() as db:
            db_user = models.User(**user.model_dump())
            db.add(db_user)
            db.commit()
            db.refresh(db_user)
            return schemas.UserRecord.model_validate(db_user)

    def update_last_login(self, user_id):
        with self._session_factory() as db:
            user = db.query(models.User).filter(models.User.id == user_id).first()
            if not user:
                return None
            user.last_login = datetime.utcnow()
            db.commit()
            db.refresh(user)
            return schemas.UserRecord.model_validate(user)

    def get_contact_forms(self):
        with self._session_factory() as db:
            forms = db.query(models.ContactForm).order_by(models.ContactForm.id).all()
            return [schemas.ContactForm.model_validate(f) for f in forms]

    def get_contact_form(self, form_id):
        with self._session_factory() as db:
            form = db.query(models.ContactForm).filter(models.ContactForm.id == form_id).first()
            return schemas.ContactForm.model_validate(form) if form else None

    def create_contact_form(self, form):
        with self._session_factory() as db:
            db_form = models.ContactForm(**form.model_dump(), is_processed=False)
            db.add(db_form)
            db.commit()
            db.refresh(db_form)
            return schemas.ContactForm.model_validate(db_form)

    def mark_contact_form_processed(self, form_id):
        with self._session_factory() as db:
            form = db.query(models.ContactForm).filter(models.ContactForm.id == form_id).first()
            if not form:
                return None
            form.is_processed = True
            db.commit()
            db.refresh(form)
            return schemas.ContactForm.model_validate(form)

    def get_projects(self):
        with self._session_factory() as db:
            projects = db.query(models.Project).order_by(models.Project.id).all()
            return [schemas.Project.model_validate(p) for p in projects]

    def get_projects_by_type(self, project_type):
        with self._session_factory() as db:
            projects = db.query(models.Project).filter(
                models.Project.project_type == project_type
            ).order_by(models.Project.id).all()
            return [schemas.Project.model_validate(p) for p in projects]

    def get_project(self, project_id):
        with self._session_factory() as db:
            project = db.query(models.Project).filter(models.Project.id == project_id).first()
            return schemas.Project.model_validate(project) if project else None

    def get_featured_projects(self):
        with self._session_factory() as db:
            projects = db.query(models.Project).filter(
                models.Project.featured.is_(True)
            ).order_by(models.Project.id).all()
            return [schemas.Project.model_validate(p) for p in projects]

    def create_project(self, project):
        with self._session_factory() as db:
            data = project.model_dump()
            data["project_type"] = project.project_type.value
            db_project = models.Project(**data)
            db.add(db_project)
            db.commit()
            db.refresh(db_project)
            return schemas.Project.model_validate(db_project)


def build_storage(backend: str = None) -> Storage:
    """Construct the storage named by settings.STORAGE_BACKEND."""
    backend = backend or settings.STORAGE_BACKEND
    if backend == "memory":
        return MemStorage()
    if backend == "sql":
        from .database import Base, SessionLocal, engine
        Base.metadata.create_all(bind=engine)
        return SqlStorage(SessionLocal)
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend}. Available: ['memory', 'sql']")


_storage: Optional[Storage] = None


def get_storage() -> Storage:
    """FastAPI dependency — the process-wide storage, built on first use."""
    global _storage
    if _storage is None:
        _storage = build_storage()
        logger.info("Using %s storage", type(_storage).__name__)
    return _storage
