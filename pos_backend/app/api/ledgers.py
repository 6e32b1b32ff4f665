"""Invoice ledger routes: the input adapter between the POS page and a session's ledger."""

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from pos_backend.app.db.session import get_db
from pos_backend.app.schemas.ledger import DiscountUpdate, InvoiceSnapshotRead, LineCreate, LineUpdate
from pos_backend.app.services.catalog import get_item
from pos_backend.app.services.ledger import InvoiceSnapshot
from pos_backend.app.services.ledger_sessions import LedgerRegistry, get_ledger_registry

router = APIRouter(prefix="/ledgers", tags=["ledgers"])


def _snapshot_read(session_id: str, snapshot: InvoiceSnapshot) -> InvoiceSnapshotRead:
    return InvoiceSnapshotRead(
        session_id=session_id,
        lines=[
            {
                "id": line.id,
                "name": line.name,
                "quantity": line.quantity,
                "unit_price": str(line.unit_price),
                "line_total": str(line.line_total),
            }
            for line in snapshot.lines
        ],
        grand_total=str(snapshot.grand_total),
        discount_percent=str(snapshot.discount_percent),
        discount_amount=str(snapshot.discount_amount),
        net_payable=str(snapshot.net_payable),
    )


@router.post("", response_model=InvoiceSnapshotRead, status_code=status.HTTP_201_CREATED)
def open_ledger(registry: LedgerRegistry = Depends(get_ledger_registry)):
    session_id, ledger = registry.create()
    return _snapshot_read(session_id, ledger.snapshot())


@router.get("/{session_id}", response_model=InvoiceSnapshotRead)
def read_ledger(session_id: str, registry: LedgerRegistry = Depends(get_ledger_registry)):
    return _snapshot_read(session_id, registry.get(session_id).snapshot())


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def discard_ledger(session_id: str, registry: LedgerRegistry = Depends(get_ledger_registry)):
    registry.discard(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{session_id}/lines", response_model=InvoiceSnapshotRead, status_code=status.HTTP_201_CREATED)
def add_line(
    session_id: str,
    payload: LineCreate,
    db: Session = Depends(get_db),
    registry: LedgerRegistry = Depends(get_ledger_registry),
):
    ledger = registry.get(session_id)
    if payload.item_id is not None:
        item = get_item(db, payload.item_id)
        if not item:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
        name, unit_price = item.title, item.price
    else:
        name, unit_price = payload.name, payload.unit_price
    with ledger.lock:
        ledger.add_line(name, unit_price)
        return _snapshot_read(session_id, ledger.snapshot())


@router.patch("/{session_id}/lines/{line_id}", response_model=InvoiceSnapshotRead)
def update_line(
    session_id: str,
    line_id: int,
    payload: LineUpdate,
    registry: LedgerRegistry = Depends(get_ledger_registry),
):
    ledger = registry.get(session_id)
    with ledger.lock:
        ledger.update_line(line_id, quantity=payload.quantity, unit_price=payload.unit_price)
        return _snapshot_read(session_id, ledger.snapshot())


@router.delete("/{session_id}/lines/{line_id}", response_model=InvoiceSnapshotRead)
def remove_line(session_id: str, line_id: int, registry: LedgerRegistry = Depends(get_ledger_registry)):
    ledger = registry.get(session_id)
    with ledger.lock:
        ledger.remove_line(line_id)
        return _snapshot_read(session_id, ledger.snapshot())


@router.put("/{session_id}/discount", response_model=InvoiceSnapshotRead)
def set_discount(
    session_id: str,
    payload: DiscountUpdate,
    registry: LedgerRegistry = Depends(get_ledger_registry),
):
    ledger = registry.get(session_id)
    return _snapshot_read(session_id, ledger.set_discount_percent(payload.discount_percent))
