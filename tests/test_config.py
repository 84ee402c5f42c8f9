import pytest
from pydantic import ValidationError

from text2docx.config import load_settings

def test_defaults(monkeypatch):
    for name in ("APP_ENV", "BLOB_BACKEND", "BLOB_API_URL"):
        monkeypatch.delenv(name, raising=False)
    s = load_settings()
    assert s.blob_backend == "vercel"
    assert s.blob_api_url == "https://blob.vercel-storage.com"
    assert not s.development

def test_env_overrides(monkeypatch):
    monkeypatch.setenv("APP_ENV", "Development")
    monkeypatch.setenv("BLOB_BACKEND", "minio")
    monkeypatch.setenv("MINIO_SECURE", "true")
    s = load_settings()
    assert s.development
    assert s.blob_backend == "minio"
    assert s.minio_secure is True

def test_invalid_backend_raises(monkeypatch):
    monkeypatch.setenv("BLOB_BACKEND", "ftp")
    with pytest.raises(ValidationError):
        load_settings()
