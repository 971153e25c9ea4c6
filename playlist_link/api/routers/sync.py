"""Sync slot endpoints.

One JSON document can be uploaded and downloaded again; each upload
replaces the previous one.
"""

import logging

from fastapi import APIRouter, Body, Depends

from playlist_link.api.dependencies import get_sync_store_dep
from playlist_link.api.models.requests import (
    SyncDownloadResponse,
    SyncUploadRequest,
    SyncUploadResponse,
)
from playlist_link.core.exceptions import InvalidInputError
from playlist_link.database.sync_store import SyncStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["sync"])


@router.post(
    "/sync-upload",
    response_model=SyncUploadResponse,
    summary="Upload sync data",
    description="Store a JSON value, replacing whatever was stored before.",
    operation_id="sync_upload",
    responses={400: {"description": "Missing data"}},
)
async def sync_upload(
    payload: SyncUploadRequest | None = Body(default=None),
    store: SyncStore = Depends(get_sync_store_dep),
) -> SyncUploadResponse:
    """Store uploaded data in the sync slot.

    Raises:
        InvalidInputError: If the body has no ``data`` (400)
    """
    if payload is None or payload.data is None:
        raise InvalidInputError("No data provided")

    store.store(payload.data)
    return SyncUploadResponse(message="Data uploaded successfully")


@router.get(
    "/sync-download",
    response_model=SyncDownloadResponse,
    summary="Download sync data",
    description="Return the most recently uploaded JSON value.",
    operation_id="sync_download",
    responses={404: {"description": "Nothing uploaded yet"}},
)
async def sync_download(
    store: SyncStore = Depends(get_sync_store_dep),
) -> SyncDownloadResponse:
    """Return the stored sync data.

    Raises:
        SyncDataNotFoundError: If nothing has been uploaded (404)
    """
    return SyncDownloadResponse(data=store.retrieve())
