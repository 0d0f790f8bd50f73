from pydantic import BaseModel

from reservation_frontend.app.services.models import Reservation


class ReservationDraftIn(BaseModel):
    name: str = ""
    date: str = ""
    time: str = ""


class ReservationDraftOut(BaseModel):
    name: str
    date: str
    time: str


class ViewStateOut(BaseModel):
    reservations: list[Reservation]
    loading: bool
    error: str | None
    draft: ReservationDraftOut
