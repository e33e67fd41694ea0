from fastapi import APIRouter, Depends

from jobly.api.deps import get_store
from jobly.db.store import Store

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health")
def health():
    return {"status": "ok"}


@router.get("/db/health")
def db_health(store: Store = Depends(get_store)):
    """Round-trips one statement; a store failure surfaces as the usual 500 DB_ERROR."""
    store.rows("SELECT 1 AS ok", op="health.db")
    return {"status": "ok", "db": "connected", "dialect": store.dialect_name}
