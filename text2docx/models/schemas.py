from pydantic import BaseModel, Field, ConfigDict, StrictStr
from typing import List, Optional, Literal

class ConvertRequest(BaseModel):
    model_config = ConfigDict(extra='ignore')

    text: StrictStr = Field(..., min_length=1, description="Plain text or Markdown to convert")
    filename: Optional[StrictStr] = Field(None, description="Base name; any extension is replaced by .docx")
    format: Literal["markdown", "plain"] = "markdown"
    # "dify" returns the workflow-tool file envelope instead of {"text": url}
    response_format: Literal["text", "dify"] = "text"

class TextResponse(BaseModel):
    text: str

class DifyFile(BaseModel):
    dify_model_identity: str = "__dify__file__"
    id: str
    type: str = "document"
    transfer_method: str = "tool_file"
    filename: str
    extension: str = ".docx"
    mime_type: str
    size: int
    url: str

class DifyMetadata(BaseModel):
    paragraphs: int
    characters: int
    created_at: str # ISO-8601, UTC

class DifyResponse(BaseModel):
    status: str = "success"
    files: List[DifyFile]
    metadata: DifyMetadata

class ErrorResponse(BaseModel):
    error: str
    message: Optional[str] = None
    details: Optional[str] = None # traceback, development only
