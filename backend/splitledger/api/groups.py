from fastapi import APIRouter, Depends, HTTPException

from splitledger.core.errors import GroupNotFoundError, InvalidNameError
from splitledger.core.store import GroupStore, get_store
from splitledger.schemas.group import (
    GroupCreate, GroupUpdate, GroupResponse, GroupListResponse,
    SimplifyResponse, BalancesResponse, SettlementsResponse,
)
from splitledger.services.group_service import (
    create_group, list_groups, get_group, update_group, delete_group,
    toggle_simplify, get_group_balances, get_group_settlements,
)

router = APIRouter(prefix="/api/groups", tags=["groups"])


@router.post("", response_model=GroupResponse, status_code=201)
async def create(
    body: GroupCreate,
    store: GroupStore = Depends(get_store),
):
    try:
        return await create_group(store, body.name)
    except InvalidNameError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=list[GroupListResponse])
async def list_all(store: GroupStore = Depends(get_store)):
    return await list_groups(store)


@router.get("/{group_id}", response_model=GroupResponse)
async def get(
    group_id: int,
    store: GroupStore = Depends(get_store),
):
    try:
        return await get_group(store, group_id)
    except GroupNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{group_id}", response_model=GroupResponse)
async def update(
    group_id: int,
    body: GroupUpdate,
    store: GroupStore = Depends(get_store),
):
    try:
        return await update_group(store, group_id, body.name)
    except InvalidNameError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except GroupNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{group_id}", status_code=204)
async def delete(
    group_id: int,
    store: GroupStore = Depends(get_store),
):
    try:
        await delete_group(store, group_id)
    except GroupNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{group_id}/simplify", response_model=SimplifyResponse)
async def simplify(
    group_id: int,
    store: GroupStore = Depends(get_store),
):
    try:
        return SimplifyResponse(simplify_debts=await toggle_simplify(store, group_id))
    except GroupNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{group_id}/balances", response_model=BalancesResponse)
async def balances(
    group_id: int,
    store: GroupStore = Depends(get_store),
):
    try:
        return BalancesResponse(balances=await get_group_balances(store, group_id))
    except GroupNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{group_id}/settlements", response_model=SettlementsResponse)
async def settlements(
    group_id: int,
    store: GroupStore = Depends(get_store),
):
    try:
        return SettlementsResponse(settlements=await get_group_settlements(store, group_id))
    except GroupNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
