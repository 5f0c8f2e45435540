from fastapi import Request
from app.db import Storage

def get_storage(request: Request) -> Storage:
    """Dependency de FastAPI: el store vive en app.state, creado por create_app()."""
    return request.app.state.storage
