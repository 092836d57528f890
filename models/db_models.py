"""SQLModel table definitions for format templates and transcript history.

Tables are created on startup (see services.database.init_db); there is no
migration tooling.
"""
from sqlmodel import SQLModel, Field
from sqlalchemy import Column, Text
from typing import Optional
from datetime import datetime


class FormatTemplateModel(SQLModel, table=True):
    """A named prompt used to reformat transcripts."""
    __tablename__ = "format_templates"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    description: str
    prompt: str = Field(sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column_kwargs={"name": "created_at"}
    )
    updated_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column_kwargs={"name": "updated_at"}
    )


class TranscriptHistoryModel(SQLModel, table=True):
    """A processed transcript saved by the user."""
    __tablename__ = "transcript_history"

    id: Optional[int] = Field(default=None, primary_key=True)
    video_id: str = Field(sa_column_kwargs={"name": "video_id"})
    video_title: str = Field(sa_column_kwargs={"name": "video_title"})
    original_transcript: str = Field(sa_column=Column("original_transcript", Text, nullable=False))
    formatted_transcript: str = Field(sa_column=Column("formatted_transcript", Text, nullable=False))
    format_template_id: Optional[int] = Field(
        default=None,
        foreign_key="format_templates.id",
        sa_column_kwargs={"name": "format_template_id"}
    )
    custom_prompt: Optional[str] = Field(default=None, sa_column=Column("custom_prompt", Text))
    created_at: datetime = Field(
        default_factory=datetime.utcnow,
        sa_column_kwargs={"name": "created_at"}
    )
