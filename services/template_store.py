"""TemplateStore for reading and seeding format templates."""
import logging
from typing import Dict, List, Optional

from sqlmodel import select

from models.db_models import FormatTemplateModel
from services.database import get_async_session
from services.default_templates import DEFAULT_TEMPLATES

logger = logging.getLogger(__name__)


class TemplateStore:
    """Read-mostly access to the format_templates table.

    The only write is the one-time seeding of the default templates the
    first time the table is found empty.
    """

    async def list_templates(self) -> List[FormatTemplateModel]:
        """
        Return all templates ordered by id, seeding defaults if none exist.

        Returns:
            Templates in insertion order
        """
        async with get_async_session() as session:
            result = await session.execute(
                select(FormatTemplateModel).order_by(FormatTemplateModel.id)
            )
            templates = list(result.scalars().all())

        if not templates:
            logger.info("No format templates found, seeding defaults")
            templates = await self.insert_defaults(DEFAULT_TEMPLATES)

        logger.info(f"Loaded format templates: count={len(templates)}")
        return templates

    async def get_by_id(self, template_id: int) -> Optional[FormatTemplateModel]:
        """Return the template with the given id, or None."""
        async with get_async_session() as session:
            result = await session.execute(
                select(FormatTemplateModel).where(FormatTemplateModel.id == template_id)
            )
            return result.scalar_one_or_none()

    async def insert_defaults(self, templates: List[Dict[str, str]]) -> List[FormatTemplateModel]:
        """
        Insert template records and return them with their generated ids.

        Args:
            templates: Dicts with name, description and prompt keys

        Returns:
            The inserted rows, in the order given
        """
        records = [FormatTemplateModel(**template) for template in templates]

        async with get_async_session() as session:
            session.add_all(records)
            await session.commit()
            for record in records:
                await session.refresh(record)

        logger.info(f"Inserted format templates: count={len(records)}")
        return records
