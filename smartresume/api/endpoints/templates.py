from fastapi import APIRouter, Depends
from typing import List

from smartresume.api.deps import get_current_user
from smartresume.models.user import User
from smartresume.schemas.template import TemplateInfo
from smartresume.services.pdf_service import list_templates

router = APIRouter()


@router.get("", response_model=List[TemplateInfo])
def read_templates(current_user: User = Depends(get_current_user)):
    return list_templates()
