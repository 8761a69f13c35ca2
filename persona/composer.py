"""
Persona instruction composition.

The instructions sent to the realtime API are layered from three ordered
sources: the base Kira template (parameterized by spice level), the static
operator addendum, and the sections merged at runtime. Composition is a pure
function over those sources and is recomputed on every read.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence

from .spice import resolve_spice, spice_policy
from .templates import (
    RUNTIME_SECTIONS_HEADER,
    STATIC_PERSONA_HEADER,
    render_base_persona,
)

logger = logging.getLogger(__name__)

MAX_TITLE_CHARS = 120
MAX_TEXT_CHARS = 40000
DEFAULT_PREVIEW_CHARS = 800


@dataclass(frozen=True)
class PersonaSection:
    title: str
    text: str


@dataclass(frozen=True)
class MergeResult:
    merged_count: int
    total_sections: int


def _coerce_str(value: Any) -> str:
    """Accept strings and plain numbers; anything else counts as empty"""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def render_static_block(static_persona: Optional[str]) -> Optional[str]:
    if not static_persona or not static_persona.strip():
        return None
    return f"{STATIC_PERSONA_HEADER}\n{static_persona.strip()}"


def render_sections_block(sections: Sequence[PersonaSection]) -> Optional[str]:
    if not sections:
        return None
    blocks = [f"## {section.title}\n{section.text}" for section in sections]
    return RUNTIME_SECTIONS_HEADER + "\n\n" + "\n\n".join(blocks)


def instruction_sources(
    spice_level: Optional[int],
    static_persona: Optional[str],
    sections: Sequence[PersonaSection],
) -> List[Optional[str]]:
    """Instruction blocks in their fixed order: base, static, runtime"""
    return [
        render_base_persona(spice_policy(spice_level)),
        render_static_block(static_persona),
        render_sections_block(sections),
    ]


def compose_instructions(blocks: Iterable[Optional[str]]) -> str:
    """Join the non-empty blocks, preserving order"""
    return "\n\n".join(block.strip() for block in blocks if block and block.strip())


class PersonaComposer:
    """Holds runtime persona sections and builds the instruction string

    Sections are only ever appended (``merge``) or dropped all at once
    (``clear``). Each public operation is a single critical section.
    """

    def __init__(self, static_persona: str = "", default_spice: Any = 1):
        self.static_persona = static_persona or ""
        self.default_spice = default_spice
        self._sections: List[PersonaSection] = []
        self._lock = threading.Lock()

    @property
    def sections(self) -> List[PersonaSection]:
        with self._lock:
            return list(self._sections)

    @property
    def total_sections(self) -> int:
        with self._lock:
            return len(self._sections)

    def resolve_spice(self, requested: Any = None) -> Optional[int]:
        return resolve_spice(requested, self.default_spice)

    def compose(self, spice: Any = None) -> str:
        """Build the full instruction text

        Args:
            spice: Requested spice level; None uses the configured default.
                Out-of-range or unparseable values get the default policy.
        """
        level = self.resolve_spice(spice)
        with self._lock:
            sections = tuple(self._sections)
        return compose_instructions(instruction_sources(level, self.static_persona, sections))

    def merge(self, entries: Optional[Iterable[Any]]) -> MergeResult:
        """Append valid sections in order

        Entries without usable text are dropped silently. Blank titles become
        ``Section <n>`` where n is the section's position in the sequence.
        """
        candidates = list(entries) if isinstance(entries, (list, tuple)) else []

        with self._lock:
            merged = 0
            for entry in candidates:
                if not isinstance(entry, dict):
                    continue
                text = _coerce_str(entry.get("text")).strip()[:MAX_TEXT_CHARS]
                if not text.strip():
                    continue
                title = _coerce_str(entry.get("title")).strip()[:MAX_TITLE_CHARS]
                if not title:
                    title = f"Section {len(self._sections) + 1}"
                self._sections.append(PersonaSection(title=title, text=text))
                merged += 1
            total = len(self._sections)

        logger.info(f"Merged {merged} persona section(s), {total} total")
        return MergeResult(merged_count=merged, total_sections=total)

    def clear(self) -> int:
        with self._lock:
            dropped = len(self._sections)
            self._sections.clear()
        logger.info(f"Cleared {dropped} persona section(s)")
        return 0

    def snapshot(self, spice: Any = None, preview_chars: int = DEFAULT_PREVIEW_CHARS) -> dict:
        """Debug view of the current persona state"""
        level = self.resolve_spice(spice)
        with self._lock:
            sections = tuple(self._sections)
        instructions = compose_instructions(instruction_sources(level, self.static_persona, sections))
        preview = instructions[:preview_chars]
        if len(instructions) > preview_chars:
            preview += "..."
        return {
            "spice": level,
            "spice_policy": spice_policy(level),
            "has_static_persona": bool(self.static_persona.strip()),
            "total_sections": len(sections),
            "section_titles": [section.title for section in sections],
            "instructions_length": len(instructions),
            "preview": preview,
        }
