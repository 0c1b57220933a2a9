from __future__ import annotations

import logging
from dataclasses import dataclass

from learnhub.services.document import PageLayout, paginate, render_pdf, study_guide_filename
from learnhub.services.llm.base import TextGenerator
from learnhub.services.llm.prompts import study_guide_prompt

logger = logging.getLogger(__name__)

NO_INFORMATION = "No information found."
FETCH_FAILED = "Failed to fetch information."

PDF_MEDIA_TYPE = "application/pdf"


@dataclass
class StudyGuideExport:
    filename: str
    content: bytes
    page_count: int
    media_type: str = PDF_MEDIA_TYPE


async def fetch_study_guide_text(generator: TextGenerator, query: str) -> str:
    """Generated study guide body, or a sentinel string. Never raises."""
    try:
        text = await generator.generate(study_guide_prompt(query))
    except Exception:
        logger.warning("Study guide provider (%s) error for %r", getattr(generator, "name", "?"), query, exc_info=True)
        return FETCH_FAILED

    if not text:
        logger.info("Study guide provider returned no text for %r", query)
        return NO_INFORMATION
    return text


def build_study_guide_pdf(query: str, body: str, layout: PageLayout | None = None) -> StudyGuideExport:
    doc = paginate(body, layout)
    heading = " ".join(query.split())
    content = render_pdf(doc, title=f"Study Guide: {heading}")
    return StudyGuideExport(
        filename=study_guide_filename(query),
        content=content,
        page_count=len(doc.pages),
    )


async def build_study_guide(generator: TextGenerator, query: str, layout: PageLayout | None = None) -> StudyGuideExport:
    body = await fetch_study_guide_text(generator, query)
    export = build_study_guide_pdf(query, body, layout)
    logger.info("Study guide for %r: %d page(s), %d bytes", query, export.page_count, len(export.content))
    return export
