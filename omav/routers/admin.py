"""
Admin endpoints — session login/logout and the contact-form dashboard.

Login sets an HttpOnly session cookie; every dashboard route requires it.
"""

import csv
import io
import logging
from datetime import date
from typing import List, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from .. import schemas
from ..auth import SessionStore, authenticate, get_current_user, get_session_store
from ..config import settings
from ..storage import Storage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"])

FormStatus = Literal["all", "processed", "unprocessed"]

CSV_HEADERS = [
    "ID", "Name", "Email", "Phone", "City", "Land Size",
    "North (ft)", "North (in)", "South (ft)", "South (in)",
    "East (ft)", "East (in)", "West (ft)", "West (in)",
    "Facing", "Project Type", "Message", "Created At", "Processed",
]

# Leading characters a spreadsheet would evaluate as a formula
FORMULA_PREFIXES = ("=", "+", "-", "@", "\t", "\r")


def filter_forms(forms: List[schemas.ContactForm], form_status: str) -> List[schemas.ContactForm]:
    """Same split as the dashboard tabs."""
    if form_status == "processed":
        return [f for f in forms if f.is_processed]
    if form_status == "unprocessed":
        return [f for f in forms if not f.is_processed]
    return forms


def spreadsheet_safe(value: str) -> str:
    if value and value.startswith(FORMULA_PREFIXES):
        return "'" + value
    return value


def contact_forms_csv(forms: List[schemas.ContactForm]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(CSV_HEADERS)
    for f in forms:
        text = [
            f.name, f.email or "", f.phone, f.city, f.land_size,
            f.land_dimension_north_feet, f.land_dimension_north_inches,
            f.land_dimension_south_feet, f.land_dimension_south_inches,
            f.land_dimension_east_feet, f.land_dimension_east_inches,
            f.land_dimension_west_feet, f.land_dimension_west_inches,
            f.land_facing, f.project_type, f.message or "",
        ]
        writer.writerow([
            f.id, *(spreadsheet_safe(v) for v in text),
            f.created_at.isoformat(), "Yes" if f.is_processed else "No",
        ])
    return buffer.getvalue()


# --- Session ---

@router.post("/login", response_model=schemas.User)
def login(req: schemas.LoginRequest, response: Response,
          storage: Storage = Depends(get_storage),
          sessions: SessionStore = Depends(get_session_store)):
    user = authenticate(storage, req.username, req.password)
    if not user:
        logger.warning("Failed admin login for '%s'", req.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
        )

    user = storage.update_last_login(user.id)
    token = sessions.create(user.id)
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.SESSION_MAX_AGE_SECONDS,
        httponly=True,
        secure=settings.SESSION_COOKIE_SECURE,
        samesite="lax",
    )
    logger.info("Admin '%s' logged in", user.username)
    return user.public()


@router.post("/logout")
def logout(request: Request, response: Response,
           sessions: SessionStore = Depends(get_session_store)):
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if token:
        sessions.destroy(token)
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
    return {"message": "Logged out successfully"}


@router.get("/user", response_model=schemas.User)
def current_user(user: schemas.UserRecord = Depends(get_current_user)):
    return user.public()


# --- Dashboard ---

@router.get("/dashboard/contact-forms", response_model=List[schemas.ContactForm])
def list_contact_forms(form_status: FormStatus = Query("all", alias="status"),
                       storage: Storage = Depends(get_storage),
                       user: schemas.UserRecord = Depends(get_current_user)):
    return filter_forms(storage.get_contact_forms(), form_status)


@router.get("/dashboard/contact-forms/export")
def export_contact_forms(form_status: FormStatus = Query("all", alias="status"),
                         storage: Storage = Depends(get_storage),
                         user: schemas.UserRecord = Depends(get_current_user)):
    forms = filter_forms(storage.get_contact_forms(), form_status)
    filename = f"contact-forms-{date.today().isoformat()}.csv"
    return Response(
        content=contact_forms_csv(forms),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.patch("/dashboard/contact-forms/{form_id}/process", response_model=schemas.ContactForm)
def process_contact_form(form_id: int,
                         storage: Storage = Depends(get_storage),
                         user: schemas.UserRecord = Depends(get_current_user)):
    form = storage.mark_contact_form_processed(form_id)
    if not form:
        raise HTTPException(status_code=404, detail="Contact form not found")
    logger.info("Contact form %d marked processed by '%s'", form_id, user.username)
    return form
