from dataclasses import dataclass

from loguru import logger


@dataclass(frozen=True)
class MessageCatalog:
    """User-visible strings for one locale."""

    locale: str
    title: str
    form_heading: str
    name_label: str
    date_label: str
    time_label: str
    submit: str
    submitting: str
    list_heading: str
    loading: str
    empty: str
    fill_all_fields: str
    invalid_format: str
    fetch_failed: str  # takes {detail}
    create_failed: str  # takes {detail}


JA = MessageCatalog(
    locale="ja",
    title="予約システム",
    form_heading="新しい予約を作成",
    name_label="名前:",
    date_label="日付:",
    time_label="時間:",
    submit="予約を作成",
    submitting="作成中...",
    list_heading="既存の予約",
    loading="読み込み中...",
    empty="予約はありません。",
    fill_all_fields="すべてのフィールドを入力してください。",
    invalid_format="Received invalid data format from server.",
    fetch_failed="予約の取得に失敗しました: {detail}",
    create_failed="予約の作成に失敗しました: {detail}",
)

EN = MessageCatalog(
    locale="en",
    title="Reservation System",
    form_heading="Create a new reservation",
    name_label="Name:",
    date_label="Date:",
    time_label="Time:",
    submit="Create reservation",
    submitting="Creating...",
    list_heading="Existing reservations",
    loading="Loading...",
    empty="No reservations.",
    fill_all_fields="Please fill in all fields.",
    invalid_format="Received invalid data format from server.",
    fetch_failed="Failed to fetch reservations: {detail}",
    create_failed="Failed to create reservation: {detail}",
)

CATALOGS = {catalog.locale: catalog for catalog in (JA, EN)}


def catalog_for(locale: str) -> MessageCatalog:
    catalog = CATALOGS.get(locale.lower().replace("_", "-").split("-")[0])
    if catalog is None:
        logger.warning("Unknown locale {!r}, falling back to ja", locale)
        return JA
    return catalog
