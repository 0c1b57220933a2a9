from __future__ import annotations

from typing import Protocol


class GenerationError(Exception):
    """Text provider failed or returned a body without usable text."""


class TextGenerator(Protocol):
    name: str

    async def generate(self, prompt: str) -> str:
        ...
