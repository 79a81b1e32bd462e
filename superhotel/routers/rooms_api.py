from datetime import date
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response

from ..dependencies import get_accommodation_manager, get_room_manager
from ..models import Room, RoomBuilder
from ..services import AccommodationManager, RoomManager
from .schemas import AvailabilityOut, GuestOut, RoomIn, RoomOut

router = APIRouter(prefix="/api/v1/rooms", tags=["rooms"])


def require_room(room_id: int, rooms: RoomManager) -> Room:
    room = rooms.find_room_by_id(room_id)
    if not room:
        raise HTTPException(status_code=404, detail="Room not found")
    return room


@router.get("", response_model=List[RoomOut])
def api_rooms(rooms: RoomManager = Depends(get_room_manager)):
    return rooms.find_all_rooms()

@router.post("", response_model=RoomOut, status_code=201)
def api_create_room(payload: RoomIn, rooms: RoomManager = Depends(get_room_manager)):
    room = RoomBuilder(**payload.model_dump()).build()
    rooms.create_room(room)
    return room

@router.get("/{room_id}", response_model=RoomOut)
def api_room(room_id: int, rooms: RoomManager = Depends(get_room_manager)):
    return require_room(room_id, rooms)

@router.put("/{room_id}", response_model=RoomOut)
def api_update_room(room_id: int, payload: RoomIn, rooms: RoomManager = Depends(get_room_manager)):
    require_room(room_id, rooms)
    room = RoomBuilder(id=room_id, **payload.model_dump()).build()
    rooms.update_room(room)
    return room

@router.delete("/{room_id}", status_code=204)
def api_delete_room(room_id: int, rooms: RoomManager = Depends(get_room_manager)):
    rooms.delete_room(require_room(room_id, rooms))
    return Response(status_code=204)

@router.get("/{room_id}/guest", response_model=GuestOut)
def api_room_guest(room_id: int, rooms: RoomManager = Depends(get_room_manager), stays: AccommodationManager = Depends(get_accommodation_manager)):
    guest = stays.find_guest_by_room(require_room(room_id, rooms))
    if not guest:
        raise HTTPException(status_code=404, detail="Room has no current stay")
    return guest

@router.get("/{room_id}/availability", response_model=AvailabilityOut)
def api_room_availability(room_id: int, date_from: date, date_to: date, rooms: RoomManager = Depends(get_room_manager), stays: AccommodationManager = Depends(get_accommodation_manager)):
    free = stays.is_room_free(require_room(room_id, rooms), date_from, date_to)
    return AvailabilityOut(room_id=room_id, date_from=date_from, date_to=date_to, free=free)
