from fastapi import APIRouter, Depends

from reservation_frontend.app.core.http_client import get_reservations_api
from reservation_frontend.app.routers.schemas import ReservationDraftIn, ReservationDraftOut, ViewStateOut
from reservation_frontend.app.services.api_client import ReservationsApi
from reservation_frontend.app.services.reservations import FormDraft, ReservationClientView


router = APIRouter()


def _state_out(view: ReservationClientView) -> ViewStateOut:
    return ViewStateOut(
        reservations=view.state.reservations,
        loading=view.state.loading,
        error=view.state.error,
        draft=ReservationDraftOut(name=view.draft.name, date=view.draft.date, time=view.draft.time),
    )


@router.get("/view", response_model=ViewStateOut)
async def view_state(api: ReservationsApi = Depends(get_reservations_api)) -> ViewStateOut:
    view = await ReservationClientView(api).mount()
    return _state_out(view)


@router.post("/view/reservations", response_model=ViewStateOut)
async def submit_draft(
    payload: ReservationDraftIn,
    api: ReservationsApi = Depends(get_reservations_api),
) -> ViewStateOut:
    # Failures are reported in the body's "error" field, never as an HTTP error
    view = await ReservationClientView(api).mount()
    await view.create_reservation(FormDraft(name=payload.name, date=payload.date, time=payload.time))
    return _state_out(view)
