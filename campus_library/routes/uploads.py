"""
Campus Library Backend — Uploaded File Serving
================================================

What:  GET /server/uploads/{path} returns a stored upload.
Why:   Entity records hold public paths (bookImage, pdfPath, images) that the
       browser loads directly.

Security:
    - FileService.resolve_public_path keeps the path inside STORAGE_ROOT
      (../ tricks → 400)
    - Missing files → 404
"""

from fastapi import APIRouter
from fastapi.responses import FileResponse

from campus_library.config import settings
from campus_library.exceptions import NotFoundError
from campus_library.services.file_service import file_service

router = APIRouter(tags=["Uploads"])


@router.get(
    settings.upload_url_prefix + "/{file_path:path}",
    summary="Serve an uploaded file",
    responses={200: {"description": "File contents"}, 404: {"description": "File not found"}},
)
async def serve_upload(file_path: str) -> FileResponse:
    full_path = file_service.resolve_public_path(file_path)
    if not full_path.is_file():
        raise NotFoundError(resource="file", resource_id=file_path)

    # Media type is guessed from the extension
    return FileResponse(
        path=str(full_path),
        headers={"Cache-Control": "public, max-age=86400"},
    )
