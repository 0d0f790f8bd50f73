import json
from html import escape

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from reservation_frontend.app.core.http_client import get_reservations_api
from reservation_frontend.app.services.api_client import ReservationsApi
from reservation_frontend.app.services.formatting import format_reservation_time
from reservation_frontend.app.services.reservations import FormDraft, ReservationClientView


router = APIRouter()


def _field(field_id: str, label: str, input_type: str, value: str) -> str:
    return (
        f'<div><label for="{field_id}">{escape(label)}</label>'
        f'<input type="{input_type}" id="{field_id}" name="{field_id}" value="{escape(value)}" required></div>'
    )


def render_page(view: ReservationClientView) -> str:
    messages = view.catalog
    state = view.state
    draft = view.draft

    disabled = " disabled" if state.loading else ""
    button_label = messages.submitting if state.loading else messages.submit
    error_html = f'<p class="error-message">{escape(state.error)}</p>' if state.error else ""

    if state.loading:
        list_html = f"<p>{escape(messages.loading)}</p>"
    elif not state.reservations:
        list_html = "" if state.error else f"<p>{escape(messages.empty)}</p>"
    else:
        items = "".join(
            f'<li data-key="{escape(reservation.key)}"><strong>{escape(reservation.name)}</strong> - '
            f"{escape(format_reservation_time(reservation, messages.locale))}</li>"
            for reservation in state.reservations
        )
        list_html = f"<ul>{items}</ul>"

    # The onsubmit handler disables the button while the browser waits for the response
    return f"""<!DOCTYPE html>
<html lang="{messages.locale}">
<head><meta charset="utf-8"><title>{escape(messages.title)}</title></head>
<body>
<div class="App">
<h1>{escape(messages.title)}</h1>
<form method="post" action="/" onsubmit="var b=this.querySelector('button');b.disabled=true;b.textContent={escape(json.dumps(messages.submitting, ensure_ascii=False))};">
<h2>{escape(messages.form_heading)}</h2>
{_field("name", messages.name_label, "text", draft.name)}
{_field("date", messages.date_label, "date", draft.date)}
{_field("time", messages.time_label, "time", draft.time)}
<button type="submit"{disabled}>{escape(button_label)}</button>
{error_html}
</form>
<h2>{escape(messages.list_heading)}</h2>
{list_html}
</div>
</body>
</html>"""


@router.get("/", response_class=HTMLResponse)
async def reservation_page(api: ReservationsApi = Depends(get_reservations_api)) -> HTMLResponse:
    view = await ReservationClientView(api).mount()
    return HTMLResponse(render_page(view))


@router.post("/", response_class=HTMLResponse)
async def submit_reservation(
    request: Request,
    api: ReservationsApi = Depends(get_reservations_api),
) -> Response:
    form = await request.form()
    draft = FormDraft(
        name=str(form.get("name", "")),
        date=str(form.get("date", "")),
        time=str(form.get("time", "")),
    )
    view = await ReservationClientView(api).mount()
    if await view.create_reservation(draft):
        # Post/redirect/get so a browser reload does not resubmit the form
        return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
    return HTMLResponse(render_page(view))
