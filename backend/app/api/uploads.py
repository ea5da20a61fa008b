"""Profile picture upload endpoint."""

from fastapi import APIRouter, Depends, File, UploadFile, status

from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.upload import UploadResponse
from backend.app.services.uploads import save_profile_picture

router = APIRouter(prefix="/upload", tags=["uploads"])


@router.post("/profile-picture", response_model=UploadResponse, status_code=status.HTTP_200_OK)
async def upload_profile_picture(
    profile_picture: UploadFile = File(..., alias="profilePicture"),
    current_user: User = Depends(get_current_user),
):
    return await save_profile_picture(profile_picture)
