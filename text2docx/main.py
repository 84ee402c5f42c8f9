from dotenv import load_dotenv; load_dotenv()
import logging
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from text2docx.config import get_settings
from text2docx.routes.convert import error_response, router as convert_router

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Text to DOCX API", version="0.1.0")

# CORS for Dify and browser callers
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS", "PATCH", "DELETE", "POST", "PUT"],
    allow_headers=[
        "X-CSRF-Token", "X-Requested-With", "Accept", "Accept-Version", "Content-Length",
        "Content-MD5", "Content-Type", "Date", "X-Api-Version",
    ],
)

app.include_router(convert_router, prefix="/api/text-to-docx", tags=["convert"])

# HEAD, TRACE etc. never reach a route; keep the same 405 body for them
@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        resp = error_response(405, "Method not allowed")
        resp.headers.update(exc.headers or {})
        return resp
    return await http_exception_handler(request, exc)

if settings.blob_backend == "local":
    Path(settings.local_output_dir).mkdir(parents=True, exist_ok=True)
    app.mount("/files", StaticFiles(directory=settings.local_output_dir), name="files")

@app.get("/healthz")
def healthz():
    return {"ok": True}
