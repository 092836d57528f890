"""
Template router for listing format templates.
"""
import logging
from typing import List
from fastapi import APIRouter

from models.template_models import FormatTemplateRead
from services.template_store import TemplateStore
from utils.response_utils import error_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["templates"])


@router.get("/templates", response_model=List[FormatTemplateRead])
async def list_templates():
    """
    List all format templates.

    The default templates are seeded the first time the table is empty.
    """
    try:
        templates = await TemplateStore().list_templates()
    except Exception as e:
        logger.error(f"Failed to fetch templates: error={e}", exc_info=True)
        return error_response(500, "Failed to fetch templates", str(e))

    return [FormatTemplateRead.model_validate(template) for template in templates]
