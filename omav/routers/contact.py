import logging

from fastapi import APIRouter, Depends, status

from .. import schemas
from ..storage import Storage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(tags=["contact"])

SUBMITTED = "Form submitted successfully"


@router.post("/contact", response_model=schemas.ContactFormCreated,
             status_code=status.HTTP_201_CREATED)
def submit_contact_form(form: schemas.ContactFormCreate,
                        storage: Storage = Depends(get_storage)):
    saved = storage.create_contact_form(form)
    logger.info("Contact form %d submitted", saved.id)
    return {"message": SUBMITTED, "id": saved.id}


@router.post("/hero-contact", response_model=schemas.ContactFormCreated,
             status_code=status.HTTP_201_CREATED)
def submit_hero_contact(form: schemas.HeroContactCreate,
                        storage: Storage = Depends(get_storage)):
    """Short form: land details are stored as placeholders."""
    saved = storage.create_contact_form(form.to_contact_form())
    logger.info("Hero contact form %d submitted", saved.id)
    return {"message": SUBMITTED, "id": saved.id}
