import os
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from dotenv import load_dotenv

from app.db import Storage, build_storage

from app.routers import user as user_router
from app.routers import progress as progress_router
from app.routers import activities as activities_router
from app.routers import skills as skills_router
from app.routers import dashboard as dashboard_router

# /audio -> <PUBLIC_DIR>/audio
from app.core.settings_static import AUDIO_DIR

load_dotenv()
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

API_PREFIX = "/api"

# ==== Errores: siempre {"message": ...} ====
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )

async def invalid_request_handler(request: Request, exc: RequestValidationError):
    # JSON mal formado o ids no numéricos en la ruta
    logging.getLogger("api").warning("invalid request %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"message": "Invalid request"})


def create_app(storage: Storage | None = None) -> FastAPI:
    """
    El store se construye (y se siembra) antes de crear la app, y se guarda en app.state.
    Los tests pasan su propio MemStorage.
    """
    app = FastAPI(title="KidsLearn API")
    app.state.storage = storage if storage is not None else build_storage()

    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, invalid_request_handler)

    # ==== CORS ====
    origins = os.getenv("CORS_ORIGINS", "")
    origins_list = [o.strip() for o in origins.split(",")] if origins else ["http://localhost:5173"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ==== Routers ====
    app.include_router(user_router.router, prefix=API_PREFIX)
    app.include_router(progress_router.router, prefix=API_PREFIX)
    app.include_router(activities_router.router, prefix=API_PREFIX)
    app.include_router(skills_router.router, prefix=API_PREFIX)
    app.include_router(dashboard_router.router, prefix=API_PREFIX)

    # Audios estáticos; si el archivo no existe, 404
    app.mount("/audio", StaticFiles(directory=str(AUDIO_DIR)), name="audio")

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", "5000")))
