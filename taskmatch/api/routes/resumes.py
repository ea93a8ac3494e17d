"""
Resume routes.

Uploads carry file metadata only; the download is a generated placeholder.
"""
from typing import List
from urllib.parse import quote

from fastapi import APIRouter, Depends, Request, Response, status

from taskmatch.api.deps import require_freelancer
from taskmatch.core.rate_limit import RATE_RESUME_UPLOAD, limiter
from taskmatch.core.store import MarketplaceStore, get_store
from taskmatch.models.resume import Resume
from taskmatch.models.user import User
from taskmatch.schemas.base import MessageResponse
from taskmatch.schemas.resume import ResumeUpload
from taskmatch.services.resume_service import ResumeService

router = APIRouter(prefix="/resumes", tags=["resumes"])

resume_service = ResumeService()


def content_disposition(filename: str) -> str:
    """
    Attachment header safe for any file name.

    Header values go out as latin-1, so `filename` carries an ASCII
    fallback and `filename*` the exact UTF-8 name.
    """
    fallback = "".join(
        ch if 32 <= ord(ch) < 127 and ch not in '"\\' else "_" for ch in filename
    )
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


@router.get("", response_model=List[Resume])
async def list_resumes(
    current_user: User = Depends(require_freelancer),
    store: MarketplaceStore = Depends(get_store),
):
    return resume_service.resumes_for_user(store, current_user.id)


@router.post("", response_model=Resume, status_code=status.HTTP_201_CREATED)
@limiter.limit(RATE_RESUME_UPLOAD)
async def upload_resume(
    request: Request,
    payload: ResumeUpload,
    current_user: User = Depends(require_freelancer),
    store: MarketplaceStore = Depends(get_store),
):
    """
    Add a resume (PDF or Word, up to 5 MB, at most 5 per user).

    The first resume uploaded becomes the active one.
    """
    return await resume_service.add_resume(store, current_user.id, payload)


@router.put("/{resume_id}/active", response_model=Resume)
async def set_active_resume(
    resume_id: str,
    current_user: User = Depends(require_freelancer),
    store: MarketplaceStore = Depends(get_store),
):
    """Make this resume the one sent with applications."""
    return await resume_service.set_active_resume(store, current_user.id, resume_id)


@router.delete("/{resume_id}", response_model=MessageResponse)
async def delete_resume(
    resume_id: str,
    current_user: User = Depends(require_freelancer),
    store: MarketplaceStore = Depends(get_store),
):
    await resume_service.delete_resume(store, current_user.id, resume_id)
    return MessageResponse(message="Resume deleted")


@router.get("/{resume_id}/download")
async def download_resume(
    resume_id: str,
    current_user: User = Depends(require_freelancer),
    store: MarketplaceStore = Depends(get_store),
):
    resume = resume_service.get_resume(store, current_user.id, resume_id)
    return Response(
        content=resume_service.render_download(resume),
        media_type=resume.content_type,
        headers={"Content-Disposition": content_disposition(resume.name)},
    )
