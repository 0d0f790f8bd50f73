from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from loguru import logger

from reservation_frontend.app.core.config import settings
from reservation_frontend.app.core.exceptions import (
    MalformedResponseError,
    NetworkError,
    TransportError,
    ValidationError,
)
from reservation_frontend.app.services.api_client import ReservationsApi
from reservation_frontend.app.services.messages import MessageCatalog, catalog_for
from reservation_frontend.app.services.models import Reservation


@dataclass
class FormDraft:
    """Unsubmitted form values; ``date`` is YYYY-MM-DD and ``time`` HH:MM."""

    name: str = ""
    date: str = ""
    time: str = ""

    def is_complete(self) -> bool:
        return bool(self.name and self.date and self.time)

    def combined_datetime(self) -> str:
        # Seconds are always zero and no offset is attached
        return f"{self.date}T{self.time}:00"

    def clear(self) -> None:
        self.name = ""
        self.date = ""
        self.time = ""


@dataclass
class ViewState:
    reservations: list[Reservation] = field(default_factory=list)
    loading: bool = False
    error: str | None = None


class ReservationClientView:
    """Local state and operations behind the reservation page.

    A view is created per mount and discarded afterwards. Both operations
    catch every client error at their boundary and surface it through
    ``state.error``; nothing is re-raised to the caller.

    Overlapping fetches on the same view resolve last-request-wins: a response
    belonging to an older fetch is dropped instead of overwriting the list.
    """

    def __init__(
        self,
        api: ReservationsApi,
        catalog: MessageCatalog | None = None,
        draft: FormDraft | None = None,
    ) -> None:
        self.api = api
        self.catalog = catalog or catalog_for(settings.LOCALE)
        self.draft = draft or FormDraft()
        self.state = ViewState()
        self._in_flight = 0
        self._fetch_generation = 0

    @contextmanager
    def _operation(self) -> Iterator[None]:
        self._in_flight += 1
        self.state.loading = True
        self.state.error = None
        try:
            yield
        finally:
            self._in_flight -= 1
            self.state.loading = self._in_flight > 0

    async def mount(self) -> "ReservationClientView":
        await self.fetch_reservations()
        return self

    async def fetch_reservations(self) -> None:
        """Replace the displayed list with the server's current collection."""
        self._fetch_generation += 1
        generation = self._fetch_generation

        with self._operation():
            # error is only written on failure; the clear happens when the operation starts
            error = None
            try:
                reservations = await self.api.list_reservations()
            except MalformedResponseError:
                reservations, error = [], self.catalog.invalid_format
            except (TransportError, NetworkError) as exc:
                logger.warning("Failed to fetch reservations: {}", exc.message)
                reservations, error = [], self.catalog.fetch_failed.format(detail=exc.message)

            if generation != self._fetch_generation:
                logger.debug("Dropping stale reservation list (fetch {} of {})", generation, self._fetch_generation)
                return

            self.state.reservations = reservations
            if error is not None:
                self.state.error = error
            logger.debug("Loaded {} reservations", len(reservations))

    def _validate_draft(self, draft: FormDraft) -> None:
        if not draft.is_complete():
            raise ValidationError(self.catalog.fill_all_fields)

    async def create_reservation(self, draft: FormDraft | None = None) -> bool:
        """Submit the draft, then refresh the list. Returns whether it was created."""
        if draft is not None:
            self.draft = draft
        draft = self.draft

        try:
            self._validate_draft(draft)
        except ValidationError as exc:
            self.state.error = exc.message
            self.state.loading = self._in_flight > 0
            logger.info("Reservation draft rejected: missing fields")
            return False

        with self._operation():
            try:
                await self.api.create_reservation(name=draft.name, datetime=draft.combined_datetime())
            except (TransportError, NetworkError) as exc:
                logger.warning("Failed to create reservation: {}", exc.message)
                self.state.error = self.catalog.create_failed.format(detail=exc.message)
                return False

            logger.info("Reservation created for {} at {}", draft.name, draft.combined_datetime())
            draft.clear()
            await self.fetch_reservations()
        return True
