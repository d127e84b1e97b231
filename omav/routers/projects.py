from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from .. import schemas
from ..storage import Storage, get_storage

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=List[schemas.Project])
def list_projects(project_type: Optional[str] = Query(None, alias="type"),
                  storage: Storage = Depends(get_storage)):
    if project_type:
        return storage.get_projects_by_type(project_type)
    return storage.get_projects()


@router.get("/featured", response_model=List[schemas.Project])
def featured_projects(storage: Storage = Depends(get_storage)):
    return storage.get_featured_projects()


@router.get("/{project_id}", response_model=schemas.Project)
def get_project(project_id: str, storage: Storage = Depends(get_storage)):
    try:
        pk = int(project_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid project ID")
    project = storage.get_project(pk)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")
    return project
