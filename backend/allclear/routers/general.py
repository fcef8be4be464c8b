from fastapi import APIRouter, Request

router = APIRouter(prefix="/api", tags=["general"])

@router.get("/health")
def health_check(request: Request):
    """
    Report API liveness and database connectivity
    """
    db = getattr(request.app.state, "db", None)
    connected = db is not None and db.ping()
    return {
        "status": "OK",
        "message": "AllClear API is running",
        "database": "Connected" if connected else "Disconnected",
    }
