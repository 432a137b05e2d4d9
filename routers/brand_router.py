from fastapi import APIRouter, Depends, HTTPException

from core.auth import get_current_user
from core.database import get_store
from crud.brand_crud import (
    create_brand,
    delete_brand,
    get_owned_brand,
    link_project,
    list_brands,
    unlink_project,
    update_brand,
)
from crud.project_crud import get_owned_project
from crud.store import EntityStore, clear_nulls
from schemas.brand_schema import BrandCreate, BrandProjectLink, BrandResponse, BrandUpdate

router = APIRouter(prefix="/brands", tags=["Brands"])


def get_owned_brand_or_404(
    brand_id: str,
    store: EntityStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    brand = get_owned_brand(store, brand_id, current_user.id)
    if not brand:
        raise HTTPException(status_code=404, detail="Brand not found")
    return brand


@router.get("/", response_model=list[BrandResponse])
def list_all(store: EntityStore = Depends(get_store), current_user=Depends(get_current_user)):
    return list_brands(store, current_user.id)


@router.post("/", response_model=BrandResponse, status_code=201)
def create(payload: BrandCreate, store: EntityStore = Depends(get_store), current_user=Depends(get_current_user)):
    return create_brand(store, current_user.id, payload)


@router.patch("/{brand_id}", response_model=BrandResponse)
def update(payload: BrandUpdate, brand=Depends(get_owned_brand_or_404), store: EntityStore = Depends(get_store)):
    values, rejected = clear_nulls("brands", payload.model_dump(exclude_unset=True))
    if rejected:
        raise HTTPException(status_code=422, detail=f"Cannot clear required field(s): {', '.join(rejected)}")
    if "name" in values:
        values["name"] = values["name"].strip()
    updated = update_brand(store, brand["id"], values)
    if not updated:
        raise HTTPException(status_code=404, detail="Brand not found")
    return updated


@router.delete("/{brand_id}", status_code=204)
def delete(brand=Depends(get_owned_brand_or_404), store: EntityStore = Depends(get_store)):
    if not delete_brand(store, brand["id"]):
        raise HTTPException(status_code=404, detail="Brand not found")
    return None


@router.put("/{brand_id}/projects/{project_id}", response_model=BrandProjectLink)
def link(
    project_id: str,
    brand=Depends(get_owned_brand_or_404),
    store: EntityStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    if not get_owned_project(store, project_id, current_user.id):
        raise HTTPException(status_code=404, detail="Project not found")
    return link_project(store, brand["id"], project_id)


@router.delete("/{brand_id}/projects/{project_id}", status_code=204)
def unlink(project_id: str, brand=Depends(get_owned_brand_or_404), store: EntityStore = Depends(get_store)):
    if not unlink_project(store, brand["id"], project_id):
        raise HTTPException(status_code=404, detail="Project is not linked to this brand")
    return None
