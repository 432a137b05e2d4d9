from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from core.config import settings
from core.database import Base, engine
from core.exceptions import register_exception_handlers
from core.logging import setup_logging
from routers import auth_router, project_router, task_router, section_router
from routers import schedule_cell_router, preference_router, shared_router
from routers import brand_router, creator_router

setup_logging()

Base.metadata.create_all(bind=engine)

app = FastAPI(title="Project Board API")

# Respect X-Forwarded-Proto/Host when behind a proxy (Docker/nginx/etc.)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router.router)
app.include_router(project_router.router)
app.include_router(task_router.router)
app.include_router(section_router.router)
app.include_router(schedule_cell_router.router)
app.include_router(preference_router.router)
app.include_router(shared_router.router)
app.include_router(brand_router.router)
app.include_router(creator_router.router)


@app.get("/")
def root():
    return {"message": "Project Board API Ready"}


@app.get("/health")
def health():
    return {"status": "ok"}
