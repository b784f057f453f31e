from fastapi import APIRouter, Depends, HTTPException

from splitledger.core.errors import (
    EventNotFoundError, GroupNotFoundError, InvalidExpenseError, MemberNotFoundError,
)
from splitledger.core.store import GroupStore, get_store
from splitledger.models.expense import Expense, SettlementPayment
from splitledger.schemas.expense import ExpenseCreate, ExpenseUpdate, SettleRequest
from splitledger.services.expense_service import add_expense, update_expense, delete_event, settle

router = APIRouter(prefix="/api/groups/{group_id}", tags=["expenses"])


@router.post("/expenses", response_model=Expense, status_code=201)
async def create_expense(
    group_id: int,
    body: ExpenseCreate,
    store: GroupStore = Depends(get_store),
):
    try:
        return await add_expense(
            store, group_id, body.description, body.amount, body.payer, body.participants,
            category=body.category, notes=body.notes,
        )
    except InvalidExpenseError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (GroupNotFoundError, MemberNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/expenses/{expense_id}", response_model=Expense)
async def edit_expense(
    group_id: int,
    expense_id: int,
    body: ExpenseUpdate,
    store: GroupStore = Depends(get_store),
):
    try:
        return await update_expense(
            store, group_id, expense_id, body.description, body.amount, body.payer, body.participants,
            category=body.category, notes=body.notes,
        )
    except InvalidExpenseError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (GroupNotFoundError, MemberNotFoundError, EventNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/expenses/{expense_id}", status_code=204)
async def remove_expense(
    group_id: int,
    expense_id: int,
    store: GroupStore = Depends(get_store),
):
    try:
        await delete_event(store, group_id, expense_id)
    except (GroupNotFoundError, EventNotFoundError) as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/settle", response_model=SettlementPayment, status_code=201)
async def settle_debt(
    group_id: int,
    body: SettleRequest,
    store: GroupStore = Depends(get_store),
):
    # Unknown members are a bad request here rather than a 404.
    try:
        return await settle(store, group_id, body.from_user, body.to_user, body.amount)
    except (InvalidExpenseError, MemberNotFoundError) as e:
        raise HTTPException(status_code=400, detail=str(e))
    except GroupNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
