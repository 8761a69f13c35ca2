"""Kira persona: spice policies, base template and runtime sections"""

from .composer import (
    MAX_TEXT_CHARS,
    MAX_TITLE_CHARS,
    MergeResult,
    PersonaComposer,
    PersonaSection,
    compose_instructions,
    instruction_sources,
)
from .spice import DEFAULT_SPICE_POLICY, SPICE_POLICIES, resolve_spice, spice_policy
from .templates import FOUNDER_PLAYBOOK, RUNTIME_SECTIONS_HEADER, STATIC_PERSONA_HEADER

__all__ = [
    "DEFAULT_SPICE_POLICY",
    "FOUNDER_PLAYBOOK",
    "MAX_TEXT_CHARS",
    "MAX_TITLE_CHARS",
    "MergeResult",
    "PersonaComposer",
    "PersonaSection",
    "RUNTIME_SECTIONS_HEADER",
    "SPICE_POLICIES",
    "STATIC_PERSONA_HEADER",
    "compose_instructions",
    "instruction_sources",
    "resolve_spice",
    "spice_policy",
]
