from fastapi import APIRouter, Depends, HTTPException

from splitledger.core.errors import GroupNotFoundError, InvalidNameError, MemberConflictError, MemberNotFoundError
from splitledger.core.store import GroupStore, get_store
from splitledger.models.member import Member
from splitledger.schemas.member import MemberCreate
from splitledger.services.member_service import add_member, remove_member

router = APIRouter(prefix="/api/groups/{group_id}/members", tags=["members"])


@router.post("", response_model=Member, status_code=201)
async def create(
    group_id: int,
    body: MemberCreate,
    store: GroupStore = Depends(get_store),
):
    try:
        return await add_member(store, group_id, body.name)
    except (InvalidNameError, MemberConflictError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except GroupNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{member_id}", status_code=204)
async def delete(
    group_id: int,
    member_id: int,
    store: GroupStore = Depends(get_store),
):
    try:
        await remove_member(store, group_id, member_id)
    except MemberConflictError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (GroupNotFoundError, MemberNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))
