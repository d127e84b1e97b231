from sqlalchemy import Column, Integer, String, DateTime, Text, Boolean
from datetime import datetime
from .database import Base
import enum


class ProjectType(str, enum.Enum):
    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INSTITUTIONAL = "institutional"


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    VIEWER = "viewer"


class User(Base):
    """Admin dashboard accounts."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, nullable=False)
    password_hash = Column(String, nullable=False)
    name = Column(String, nullable=True)
    role = Column(String, default=UserRole.VIEWER.value)  # 'admin' | 'viewer'
    created_at = Column(DateTime, default=datetime.utcnow)
    last_login = Column(DateTime, nullable=True)


class ContactForm(Base):
    """Lead-capture submissions from the contact, hero and popup forms."""
    __tablename__ = "contact_forms"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=True)
    phone = Column(String, nullable=False)
    city = Column(String, nullable=False)
    land_size = Column(String, nullable=False)
    land_dimension_north_feet = Column(String, nullable=False)
    land_dimension_north_inches = Column(String, nullable=False)
    land_dimension_south_feet = Column(String, nullable=False)
    land_dimension_south_inches = Column(String, nullable=False)
    land_dimension_east_feet = Column(String, nullable=False)
    land_dimension_east_inches = Column(String, nullable=False)
    land_dimension_west_feet = Column(String, nullable=False)
    land_dimension_west_inches = Column(String, nullable=False)
    land_facing = Column(String, nullable=False)
    project_type = Column(String, nullable=False)
    message = Column(Text, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    is_processed = Column(Boolean, default=False, nullable=False)


class Project(Base):
    """Portfolio entries shown on the projects pages."""
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    project_type = Column(String, nullable=False)  # ProjectType value
    image_url = Column(String, nullable=False)
    completed_date = Column(String, nullable=False)
    featured = Column(Boolean, default=False, nullable=False)
