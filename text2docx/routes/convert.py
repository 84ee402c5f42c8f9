from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.concurrency import run_in_threadpool
from typing import Optional, Union
from datetime import datetime, timezone
from uuid import uuid4
import logging, traceback

from text2docx.config import Settings, get_settings
from text2docx.models.document import DocumentModel, OutputFile
from text2docx.models.schemas import (
    ConvertRequest,
    DifyFile,
    DifyMetadata,
    DifyResponse,
    ErrorResponse,
    TextResponse,
)
from text2docx.services.builder import build, build_plain
from text2docx.services.exporter import DOCX_EXT, DOCX_MIME, docx_filename, render_docx
from text2docx.services.storage import BlobStore, make_store
from text2docx.services.tokenizer import tokenize

router = APIRouter()
logger = logging.getLogger(__name__)

INVALID_INPUT = "Invalid input"
INVALID_TEXT = "Text field is required and must be a string"

def get_blob_store(settings: Settings = Depends(get_settings)) -> BlobStore:
    return make_store(settings)

def error_response(status_code: int, error: str, message: Optional[str] = None, details: Optional[str] = None):
    body = ErrorResponse(error=error, message=message, details=details)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))

async def _parse_request(request: Request) -> Union[ConvertRequest, JSONResponse]:
    try:
        raw = await request.json()
    except ValueError:
        raw = None
    # text is checked by hand so every bad text gets the same fixed message
    if not isinstance(raw, dict) or not isinstance(raw.get("text"), str) or not raw["text"]:
        return error_response(400, INVALID_INPUT, INVALID_TEXT)
    try:
        return ConvertRequest.model_validate(raw)
    except ValidationError as e:
        err = e.errors()[0]
        field = ".".join(str(p) for p in err.get("loc", ()))
        return error_response(400, INVALID_INPUT, f"{field}: {err.get('msg')}")

def build_model(req: ConvertRequest) -> DocumentModel:
    if req.format == "plain":
        return build_plain(req.text)
    return build(tokenize(req.text))

def _dify_response(req: ConvertRequest, model: DocumentModel, out: OutputFile) -> DifyResponse:
    created = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return DifyResponse(
        files=[DifyFile(
            id=out.file_id,
            filename=out.filename,
            mime_type=out.mime_type,
            size=out.size,
            url=out.url,
        )],
        metadata=DifyMetadata(paragraphs=len(model), characters=len(req.text), created_at=created),
    )

@router.options("")
def preflight():
    return Response(status_code=200)

@router.api_route("", methods=["GET", "PUT", "PATCH", "DELETE"], include_in_schema=False)
def method_not_allowed():
    return error_response(405, "Method not allowed")

@router.post("", response_model=Union[TextResponse, DifyResponse],
             responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def text_to_docx(
    request: Request,
    settings: Settings = Depends(get_settings),
    store: BlobStore = Depends(get_blob_store),
):
    parsed = await _parse_request(request)
    if isinstance(parsed, JSONResponse):
        return parsed
    req = parsed

    try:
        model = build_model(req)
        file_id = str(uuid4())
        filename = docx_filename(req.filename, file_id)
        data = await run_in_threadpool(render_docx, model, filename[:-len(DOCX_EXT)], settings.doc_author)
        out = OutputFile(data=data, file_id=file_id, filename=filename, mime_type=DOCX_MIME)
        out.url = await store.put(out.filename, out.data, out.mime_type)
    except Exception as e:
        logger.exception("Error converting text to DOCX")
        details = traceback.format_exc() if settings.development else None
        return error_response(500, "Conversion failed", str(e), details)

    logger.info("Converted %d chars (%s) -> %s, %d paragraphs", len(req.text), req.format, out.filename, len(model))
    if req.response_format == "dify":
        return _dify_response(req, model, out)
    return TextResponse(text=out.url)
