import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware
from fastapi.staticfiles import StaticFiles
from core.database import Base, engine
from core.logging_config import configure_logging
from routers import project_router, auth_router, admin_router
from models import project, media, session
from core.config import settings

configure_logging()

Base.metadata.create_all(bind=engine)

app = FastAPI(title="Portfolio Backend API")

# Respect X-Forwarded-Proto/Host when behind a proxy (Docker/nginx/etc.)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(project_router.router)
app.include_router(auth_router.router)
app.include_router(admin_router.router)

# Uploaded media
os.makedirs(settings.MEDIA_DIR, exist_ok=True)
app.mount(
    settings.MEDIA_URL_PATH,
    StaticFiles(directory=settings.MEDIA_DIR),
    name="media",
)

@app.get("/")
def root():
    return {"message": "Portfolio API ready"}
