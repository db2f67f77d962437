"""Pydantic models for the polyblog content core."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Locale(str, Enum):
    UZ = "uz"
    RU = "ru"
    EN = "en"


# Primary, secondary, tertiary
SUPPORTED_LOCALES: tuple[Locale, ...] = (Locale.UZ, Locale.RU, Locale.EN)

DEFAULT_LOCALE = Locale.EN


# --- Content Record ---

class ContentRecord(BaseModel):
    """One post with independent per-locale translations.

    The content fields hold raw, untrusted HTML exactly as stored.
    """

    id: Optional[str] = None
    slug: str = ""
    title_uz: Optional[str] = ""
    title_ru: Optional[str] = ""
    title_en: Optional[str] = ""
    content_uz: Optional[str] = ""
    content_ru: Optional[str] = ""
    content_en: Optional[str] = ""
    excerpt_uz: Optional[str] = ""
    excerpt_ru: Optional[str] = ""
    excerpt_en: Optional[str] = ""
    featured_image: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    reading_time: Optional[int] = None
    published_at: Optional[datetime] = None


# --- Web payloads ---

class RenderRequest(BaseModel):
    record: ContentRecord
    locale: Optional[str] = None


class RenderedPost(BaseModel):
    locale: Locale
    title: str = ""
    html: str = ""
    reading_time: int = 1
    description: str = ""


# --- Config ---

class SiteConfig(BaseModel):
    name: str = "polyblog"
    base_url: str = "http://localhost:8000"
    author: str = ""


class ContentConfig(BaseModel):
    default_locale: Locale = DEFAULT_LOCALE
    words_per_minute: int = Field(default=200, gt=0)


class AppConfig(BaseModel):
    site: SiteConfig = Field(default_factory=SiteConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
