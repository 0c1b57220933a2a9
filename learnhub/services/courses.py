from __future__ import annotations

import logging
import re

from learnhub.models.resource import Resource, ResourceType
from learnhub.services.llm.base import TextGenerator
from learnhub.services.llm.prompts import courses_prompt

logger = logging.getLogger(__name__)

# [title](url); title does not cross lines, url stops at whitespace or ")"
_MD_LINK_RE = re.compile(r"\[(.*?)\]\(([^\s)]+)\)")


def _ensure_scheme(url: str) -> str:
    if url.startswith("http://") or url.startswith("https://"):
        return url
    return f"https://{url}"


def extract_course_links(text: str | None) -> list[Resource]:
    """
    Pull every markdown link out of generated text, first to last.

    Purely syntactic: neither the title nor the link is checked beyond
    adding a missing scheme.
    """
    if not text:
        return []

    courses: list[Resource] = []
    for m in _MD_LINK_RE.finditer(text):
        title = m.group(1).strip()
        link = _ensure_scheme(m.group(2).strip())
        courses.append(
            Resource(
                id=f"course-{len(courses) + 1}",
                title=title,
                link=link,
                type=ResourceType.course,
            )
        )
    return courses


async def fetch_courses(generator: TextGenerator, query: str) -> list[Resource]:
    """Ask the text provider for free courses and extract them. Never raises."""
    try:
        text = await generator.generate(courses_prompt(query))
    except Exception:
        logger.warning("Course provider (%s) error for %r", getattr(generator, "name", "?"), query, exc_info=True)
        return []

    courses = extract_course_links(text)
    if not courses:
        logger.info("Course provider returned zero links for %r", query)
    else:
        logger.info("Extracted %d course(s) for %r", len(courses), query)
    return courses
