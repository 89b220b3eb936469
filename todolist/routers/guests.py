"""Guest records: admins manage them, a guest can read its own."""
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from todolist.database import get_db
from todolist.dependencies import require_admin, require_guest
from todolist.exceptions import NotFound
from todolist.models import Guest
from todolist.schemas.auth import PrincipalPayload
from todolist.schemas.guest import GuestResponse, GuestSearch, GuestUpdate
from todolist.schemas.pagination import Page
from todolist.services.pagination import paginate

router = APIRouter(prefix="/todoList", tags=["guests"])


def _get_guest(db: Session, guest_id: str) -> Guest:
    guest = db.query(Guest).filter(Guest.id == guest_id).first()
    if not guest:
        raise NotFound("Guest not found")
    return guest


@router.get("/guest/guests/me", response_model=GuestResponse)
def get_me(db: Session = Depends(get_db), guest: PrincipalPayload = Depends(require_guest)):
    return GuestResponse.model_validate(_get_guest(db, guest.id))


@router.patch("/admin/guests", response_model=Page[GuestResponse])
def search_guests(
    data: GuestSearch,
    db: Session = Depends(get_db),
    admin: PrincipalPayload = Depends(require_admin),
):
    q = db.query(Guest).filter(Guest.deleted_at.is_(None)).order_by(Guest.created_at.desc(), Guest.id)
    rows, pagination = paginate(q, data.page, data.limit)
    return Page[GuestResponse](pagination=pagination, data=[GuestResponse.model_validate(g) for g in rows])


@router.get("/admin/guests/{guest_id}", response_model=GuestResponse)
def admin_get_guest(guest_id: str, db: Session = Depends(get_db), admin: PrincipalPayload = Depends(require_admin)):
    return GuestResponse.model_validate(_get_guest(db, guest_id))


@router.put("/admin/guests/{guest_id}", response_model=GuestResponse)
def admin_update_guest(
    guest_id: str,
    data: GuestUpdate,
    db: Session = Depends(get_db),
    admin: PrincipalPayload = Depends(require_admin),
):
    guest = _get_guest(db, guest_id)
    if "deleted_at" in data.model_fields_set:
        guest.deleted_at = data.deleted_at
    db.commit()
    db.refresh(guest)
    return GuestResponse.model_validate(guest)


@router.delete("/admin/guests/{guest_id}", status_code=204)
def admin_delete_guest(guest_id: str, db: Session = Depends(get_db), admin: PrincipalPayload = Depends(require_admin)):
    """Hard delete."""
    db.delete(_get_guest(db, guest_id))
    db.commit()
    return Response(status_code=204)
