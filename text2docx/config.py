# text2docx/config.py
import os
from functools import lru_cache
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

class Settings(BaseModel):
    app_env: str = "production"
    log_level: str = "INFO"

    blob_backend: Literal["vercel", "minio", "local"] = "vercel"
    blob_read_write_token: Optional[str] = None
    blob_api_url: str = "https://blob.vercel-storage.com"
    blob_api_version: str = "7"

    minio_endpoint: str = "localhost:9000"
    minio_access_key: Optional[str] = None
    minio_secret_key: Optional[str] = None
    minio_bucket: str = "documents"
    minio_secure: bool = False
    minio_public_url: Optional[str] = Field(default=None, description="Object URL prefix; defaults to the endpoint")

    local_output_dir: str = Field(default="generated", description="Directory the local backend writes to")
    public_base_url: str = Field(default="http://localhost:8000", description="Prefix for local-backend URLs")
    doc_author: str = "text2docx"

    @property
    def minio_base_url(self) -> str:
        if self.minio_public_url:
            return self.minio_public_url
        scheme = "https" if self.minio_secure else "http"
        return f"{scheme}://{self.minio_endpoint}"

    @property
    def development(self) -> bool:
        return self.app_env.lower() == "development"

def load_settings() -> Settings:
    """Build Settings from <FIELD> environment variables (upper-cased); unset fields keep defaults."""
    data = {}
    for name in Settings.model_fields:
        val = os.getenv(name.upper())
        if val:
            data[name] = val
    return Settings(**data)

@lru_cache
def get_settings() -> Settings:
    return load_settings()
