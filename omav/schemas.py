from pydantic import BaseModel, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime
from .models import ProjectType

# Wire format is camelCase (what the site's forms post); attributes stay snake_case.

NOT_SPECIFIED = "Not specified"


class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


# --- Contact forms ---

class ContactFormBase(CamelModel):
    name: str = Field(min_length=3)
    phone: str = Field(min_length=10)
    email: Optional[EmailStr] = None
    city: str = Field(min_length=1)
    land_size: str = Field(min_length=1)
    land_dimension_north_feet: str = Field(min_length=1)
    land_dimension_north_inches: str = "0"
    land_dimension_south_feet: str = Field(min_length=1)
    land_dimension_south_inches: str = "0"
    land_dimension_east_feet: str = Field(min_length=1)
    land_dimension_east_inches: str = "0"
    land_dimension_west_feet: str = Field(min_length=1)
    land_dimension_west_inches: str = "0"
    land_facing: str = Field(min_length=1)
    project_type: str = Field(min_length=1)
    message: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ContactFormCreate(ContactFormBase):
    pass


class HeroContactCreate(CamelModel):
    """Short form used by the hero section and the popup — no land details."""
    name: str = Field(min_length=3)
    phone: str = Field(min_length=10)
    email: Optional[EmailStr] = None
    project_type: str = Field(min_length=1)
    message: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def to_contact_form(self) -> ContactFormCreate:
        """Fill the full-form fields the short form never asks for."""
        return ContactFormCreate(
            name=self.name,
            phone=self.phone,
            email=self.email,
            city=NOT_SPECIFIED,
            land_size=NOT_SPECIFIED,
            land_dimension_north_feet="0",
            land_dimension_north_inches="0",
            land_dimension_south_feet="0",
            land_dimension_south_inches="0",
            land_dimension_east_feet="0",
            land_dimension_east_inches="0",
            land_dimension_west_feet="0",
            land_dimension_west_inches="0",
            land_facing=NOT_SPECIFIED,
            project_type=self.project_type,
            message=self.message,
        )


class ContactForm(ContactFormBase):
    id: int
    created_at: datetime
    is_processed: bool = False


class ContactFormCreated(BaseModel):
    message: str
    id: int


# --- Projects ---

class ProjectBase(CamelModel):
    title: str
    description: str
    project_type: ProjectType
    image_url: str
    completed_date: str
    featured: bool = False


class ProjectCreate(ProjectBase):
    pass


class Project(ProjectBase):
    id: int


# --- Users ---

class UserCreate(BaseModel):
    username: str
    password_hash: str
    name: Optional[str] = None
    role: str = "viewer"


class User(CamelModel):
    """Public view of an admin account — never carries the password hash."""
    id: int
    username: str
    name: Optional[str] = None
    role: str
    created_at: Optional[datetime] = None
    last_login: Optional[datetime] = None


class UserRecord(User):
    password_hash: str

    def public(self) -> User:
        return User(**self.model_dump(exclude={"password_hash"}))


class LoginRequest(BaseModel):
    username: str
    password: str
