from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class Reservation(BaseModel):
    """A reservation as returned by the remote API."""

    model_config = ConfigDict(extra="ignore")

    # MongoDB-backed deployments send "_id", others "id"
    id: str | int | None = Field(default=None, validation_alias=AliasChoices("_id", "id"))
    name: str
    # Either the combined timestamp or the legacy date/time pair is present
    datetime: str | None = None
    date: str | None = None
    time: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def coerce_numeric_name(cls, v: object) -> object:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def key(self) -> str:
        return "" if self.id is None else str(self.id)


class ReservationCreateIn(BaseModel):
    name: str = Field(min_length=1)
    # Timezone-naive "YYYY-MM-DDTHH:MM:00"
    datetime: str = Field(min_length=1)
