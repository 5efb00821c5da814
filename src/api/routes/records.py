"""GET /records endpoints: read-only access to the served collection."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from src.api.dependencies import get_store
from src.config.settings import settings
from src.storage.record_store import RecordStore

router = APIRouter()


@router.get("/records")
def list_records(store: RecordStore = Depends(get_store)) -> list[dict[str, Any]]:
    """Every record of the collection, in store order."""
    return list(store.collection(settings.RECORDS_COLLECTION))


@router.get("/records/{record_id}")
def get_record(record_id: str, store: RecordStore = Depends(get_store)) -> dict[str, Any]:
    record = store.get(settings.RECORDS_COLLECTION, record_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Record not found")
    return record
