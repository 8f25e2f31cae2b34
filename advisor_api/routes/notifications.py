"""Notification and watchlist endpoints."""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from advisor_api.domain.entities import NotificationType
from advisor_api.domain.exceptions import DataNotFoundError
from advisor_api.routes.dependencies import get_profile_store
from advisor_api.storage import LocalProfileStore

router = APIRouter()
watchlist_router = APIRouter()


class NotificationModel(BaseModel):
    id: str
    type: NotificationType
    title: str
    message: str
    timestamp: str
    read: bool


class NotificationsResponse(BaseModel):
    notifications: list[NotificationModel]
    unread: int


class WatchlistResponse(BaseModel):
    instrument_ids: list[str]


# ============================================================================
# Notifications
# ============================================================================


@router.get("", response_model=NotificationsResponse)
def list_notifications(
    store: LocalProfileStore = Depends(get_profile_store),
) -> NotificationsResponse:
    """List notifications with the unread count."""
    return NotificationsResponse(
        notifications=[NotificationModel(**n.to_dict()) for n in store.load_notifications()],
        unread=store.unread_count(),
    )


@router.post("/{notification_id}/read", response_model=NotificationModel)
def mark_read(
    notification_id: str,
    store: LocalProfileStore = Depends(get_profile_store),
) -> NotificationModel:
    """Mark a notification as read.

    Raises:
        HTTPException 404: if the id is unknown
    """
    try:
        notification = store.mark_notification_read(notification_id)
    except DataNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return NotificationModel(**notification.to_dict())


@router.delete("/{notification_id}")
def clear(
    notification_id: str,
    store: LocalProfileStore = Depends(get_profile_store),
) -> dict:
    """Remove a notification.

    Raises:
        HTTPException 404: if the id is unknown
    """
    try:
        store.clear_notification(notification_id)
    except DataNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return {"cleared": notification_id}


# ============================================================================
# Watchlist
# ============================================================================


@watchlist_router.get("", response_model=WatchlistResponse)
def read_watchlist(store: LocalProfileStore = Depends(get_profile_store)) -> WatchlistResponse:
    return WatchlistResponse(instrument_ids=store.load_watchlist())


@watchlist_router.put("/{instrument_id}", response_model=WatchlistResponse)
def add_to_watchlist(
    instrument_id: str,
    store: LocalProfileStore = Depends(get_profile_store),
) -> WatchlistResponse:
    """Add an instrument to the watchlist (no-op if already present)."""
    return WatchlistResponse(instrument_ids=store.add_to_watchlist(instrument_id))


@watchlist_router.delete("/{instrument_id}", response_model=WatchlistResponse)
def remove_from_watchlist(
    instrument_id: str,
    store: LocalProfileStore = Depends(get_profile_store),
) -> WatchlistResponse:
    return WatchlistResponse(instrument_ids=store.remove_from_watchlist(instrument_id))
