# upload.py
import os
import logging
from dataclasses import dataclass
from pathlib import Path
from uuid import uuid4
from typing import AsyncIterator
from fastapi import Request
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from domain.entities.errors import ValidationFailed

logger = logging.getLogger(__name__)

UPLOAD_DIR = os.environ.get("UPLOAD_DIR", "uploads")
ALLOWED_EXTENSIONS = {"png", "jpg", "jpeg", "gif", "webp"}
MAX_UPLOAD_BYTES = int(os.environ.get("MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))


@dataclass(frozen=True)
class UploadedImage:
    path: str | None
    stored: bool = False


def _extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


async def store_image(file: UploadFile) -> str:
    """Valida e grava a imagem em UPLOAD_DIR; devolve o caminho relativo salvo."""
    extension = _extension(file.filename or "")
    if extension not in ALLOWED_EXTENSIONS:
        raise ValidationFailed("Imagem inválida ou não permitida")
    if not (file.content_type or "").startswith("image/"):
        raise ValidationFailed("Imagem inválida ou não permitida")

    content = await file.read()
    if len(content) > MAX_UPLOAD_BYTES:
        raise ValidationFailed("Imagem excede o tamanho máximo permitido")

    directory = Path(UPLOAD_DIR)
    directory.mkdir(parents=True, exist_ok=True)
    filename = f"{uuid4().hex}.{extension}"
    await run_in_threadpool((directory / filename).write_bytes, content)
    logger.info("Imagem salva em %s", directory / filename)
    return f"{directory.name}/{filename}"


def discard_upload(image: UploadedImage | None) -> None:
    """Remove a imagem gravada para uma requisição que não foi concluída."""
    if not image or not image.stored:
        return
    target = Path(UPLOAD_DIR) / Path(image.path).name
    target.unlink(missing_ok=True)
    logger.info("Imagem %s descartada", target)


def upload_image(field: str = "foto"):
    """
    Dependência de upload de um único arquivo no campo `field` do multipart.
    Se o campo vier como texto (ex.: a URL da foto atual), o valor é repassado sem gravação.
    """
    async def _upload(request: Request) -> AsyncIterator[UploadedImage]:
        form = await request.form()
        value = form.get(field)
        if isinstance(value, UploadFile):
            image = UploadedImage(path=await store_image(value), stored=True) if value.filename else UploadedImage(path=None)
        else:
            image = UploadedImage(path=value or None)

        try:
            yield image
        except Exception:
            # autorização, 404, CPF inválido ou falha no banco: a imagem não fica órfã
            discard_upload(image)
            raise
    return _upload
