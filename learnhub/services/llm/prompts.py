from __future__ import annotations

# Only sent by backends that take a separate system message (OpenAI).
LEARNING_ASSISTANT_SYSTEM = """You are a helpful learning assistant.
You recommend free, reputable learning material and write clear study guides.
Use markdown links in the form [Name](https://url) whenever you cite a resource.
"""

COURSES_PROMPT_TEMPLATE = "List free online courses about {query} with their names and valid links."

STUDY_GUIDE_PROMPT_TEMPLATE = """Provide a detailed, structured study guide on {query}.
Sections:
1. Introduction
2. Key Concepts & Definitions
3. Step-by-Step Learning Path
4. Recommended Books & Courses
5. Hands-on Projects & Practice Problems
6. Advanced Topics
7. FAQs and Additional Resources
Format the response as readable paragraphs."""


def courses_prompt(query: str) -> str:
    return COURSES_PROMPT_TEMPLATE.format(query=query)


def study_guide_prompt(query: str) -> str:
    return STUDY_GUIDE_PROMPT_TEMPLATE.format(query=query)
