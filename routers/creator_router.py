from fastapi import APIRouter, Depends, HTTPException

from core.auth import get_current_user
from core.database import get_store
from crud.brand_crud import get_owned_brand
from crud.creator_crud import (
    create_creator,
    delete_creator,
    get_owned_creator,
    link_brand,
    list_creators,
    rename_creator,
    unlink_brand,
)
from crud.store import EntityStore
from schemas.brand_schema import CreatorBrandLink, CreatorCreate, CreatorResponse

router = APIRouter(prefix="/creators", tags=["Creators"])


def get_owned_creator_or_404(
    creator_id: str,
    store: EntityStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    creator = get_owned_creator(store, creator_id, current_user.id)
    if not creator:
        raise HTTPException(status_code=404, detail="Creator not found")
    return creator


@router.get("/", response_model=list[CreatorResponse])
def list_all(store: EntityStore = Depends(get_store), current_user=Depends(get_current_user)):
    return list_creators(store, current_user.id)


@router.post("/", response_model=CreatorResponse, status_code=201)
def create(payload: CreatorCreate, store: EntityStore = Depends(get_store), current_user=Depends(get_current_user)):
    return create_creator(store, current_user.id, payload.name)


@router.patch("/{creator_id}", response_model=CreatorResponse)
def rename(payload: CreatorCreate, creator=Depends(get_owned_creator_or_404), store: EntityStore = Depends(get_store)):
    updated = rename_creator(store, creator["id"], payload.name)
    if not updated:
        raise HTTPException(status_code=404, detail="Creator not found")
    return updated


@router.delete("/{creator_id}", status_code=204)
def delete(creator=Depends(get_owned_creator_or_404), store: EntityStore = Depends(get_store)):
    if not delete_creator(store, creator["id"]):
        raise HTTPException(status_code=404, detail="Creator not found")
    return None


@router.put("/{creator_id}/brands/{brand_id}", response_model=CreatorBrandLink)
def link(
    brand_id: str,
    creator=Depends(get_owned_creator_or_404),
    store: EntityStore = Depends(get_store),
    current_user=Depends(get_current_user),
):
    if not get_owned_brand(store, brand_id, current_user.id):
        raise HTTPException(status_code=404, detail="Brand not found")
    return link_brand(store, creator["id"], brand_id)


@router.delete("/{creator_id}/brands/{brand_id}", status_code=204)
def unlink(brand_id: str, creator=Depends(get_owned_creator_or_404), store: EntityStore = Depends(get_store)):
    if not unlink_brand(store, creator["id"], brand_id):
        raise HTTPException(status_code=404, detail="Brand is not linked to this creator")
    return None
