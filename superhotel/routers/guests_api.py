from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response

from ..dependencies import get_accommodation_manager, get_guest_manager
from ..models import Guest, GuestBuilder
from ..services import AccommodationManager, GuestManager
from .schemas import GuestIn, GuestOut, RoomOut

router = APIRouter(prefix="/api/v1/guests", tags=["guests"])


def require_guest(guest_id: int, guests: GuestManager) -> Guest:
    guest = guests.find_guest_by_id(guest_id)
    if not guest:
        raise HTTPException(status_code=404, detail="Guest not found")
    return guest


@router.get("", response_model=List[GuestOut])
def api_guests(name: Optional[str] = None, guests: GuestManager = Depends(get_guest_manager)):
    if name:
        return guests.find_guests_by_name(name.strip())
    return guests.find_all_guests()

@router.post("", response_model=GuestOut, status_code=201)
def api_create_guest(payload: GuestIn, guests: GuestManager = Depends(get_guest_manager)):
    guest = GuestBuilder(**payload.model_dump()).build()
    guests.create_guest(guest)
    return guest

@router.get("/{guest_id}", response_model=GuestOut)
def api_guest(guest_id: int, guests: GuestManager = Depends(get_guest_manager)):
    return require_guest(guest_id, guests)

@router.put("/{guest_id}", response_model=GuestOut)
def api_update_guest(guest_id: int, payload: GuestIn, guests: GuestManager = Depends(get_guest_manager)):
    require_guest(guest_id, guests)
    guest = GuestBuilder(id=guest_id, **payload.model_dump()).build()
    guests.update_guest(guest)
    return guest

@router.delete("/{guest_id}", status_code=204)
def api_delete_guest(guest_id: int, guests: GuestManager = Depends(get_guest_manager)):
    guests.delete_guest(require_guest(guest_id, guests))
    return Response(status_code=204)

@router.get("/{guest_id}/room", response_model=RoomOut)
def api_guest_room(guest_id: int, guests: GuestManager = Depends(get_guest_manager), stays: AccommodationManager = Depends(get_accommodation_manager)):
    room = stays.find_room_by_guest(require_guest(guest_id, guests))
    if not room:
        raise HTTPException(status_code=404, detail="Guest has no current stay")
    return room
