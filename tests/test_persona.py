"""PersonaComposer and spice policy tests."""

from __future__ import annotations

import pytest

from persona import (
    DEFAULT_SPICE_POLICY,
    FOUNDER_PLAYBOOK,
    MAX_TEXT_CHARS,
    MAX_TITLE_CHARS,
    RUNTIME_SECTIONS_HEADER,
    SPICE_POLICIES,
    STATIC_PERSONA_HEADER,
    PersonaComposer,
    compose_instructions,
    resolve_spice,
    spice_policy,
)


class TestSpicePolicy:
    @pytest.mark.parametrize("level", [0, 1, 2, 3])
    def test_every_level_in_range_has_a_policy(self, level: int) -> None:
        assert spice_policy(level) == SPICE_POLICIES[level]

    @pytest.mark.parametrize("level", [-1, 4, 5, 99, None])
    def test_out_of_range_falls_back(self, level) -> None:
        assert spice_policy(level) == DEFAULT_SPICE_POLICY

    def test_resolve_parses_strings(self) -> None:
        assert resolve_spice("2") == 2
        assert resolve_spice(" 3 ") == 3

    def test_resolve_missing_uses_default(self) -> None:
        assert resolve_spice(None, default="0") == 0
        assert resolve_spice("", default=2) == 2

    def test_resolve_garbage_is_none(self) -> None:
        assert resolve_spice("spicy") is None
        assert resolve_spice("1.5") is None
        assert spice_policy(resolve_spice("spicy")) == DEFAULT_SPICE_POLICY


class TestCompose:
    def test_base_template_contains_persona_and_playbook(self, composer: PersonaComposer) -> None:
        text = composer.compose()
        assert "You are **Kira**" in text
        assert FOUNDER_PLAYBOOK in text
        assert SPICE_POLICIES[1] in text

    def test_spice_override(self, composer: PersonaComposer) -> None:
        assert SPICE_POLICIES[3] in composer.compose(spice="3")
        assert SPICE_POLICIES[0] in composer.compose(spice=0)

    @pytest.mark.parametrize("spice", ["-1", "99", "lots"])
    def test_bad_spice_uses_default_policy(self, composer: PersonaComposer, spice: str) -> None:
        text = composer.compose(spice=spice)
        assert DEFAULT_SPICE_POLICY in text
        for policy in SPICE_POLICIES.values():
            assert policy not in text

    def test_static_persona_is_optional(self) -> None:
        assert STATIC_PERSONA_HEADER not in PersonaComposer(static_persona="   ").compose()

        text = PersonaComposer(static_persona="Always mention the free tier.").compose()
        assert f"{STATIC_PERSONA_HEADER}\nAlways mention the free tier." in text

    def test_layer_order(self) -> None:
        composer = PersonaComposer(static_persona="STATIC")
        composer.merge([{"title": "Runtime", "text": "RUNTIME"}])
        text = composer.compose()
        assert text.index("You are **Kira**") < text.index("STATIC") < text.index(RUNTIME_SECTIONS_HEADER)

    def test_compose_instructions_skips_empty_blocks(self) -> None:
        assert compose_instructions(["a", None, "  ", "b"]) == "a\n\nb"


class TestMerge:
    def test_empty_text_is_dropped(self, composer: PersonaComposer) -> None:
        result = composer.merge([{"text": ""}])
        assert result.merged_count == 0
        assert result.total_sections == 0
        assert RUNTIME_SECTIONS_HEADER not in composer.compose()

    def test_whitespace_and_malformed_entries_are_dropped(self, composer: PersonaComposer) -> None:
        result = composer.merge([
            {"title": "blank", "text": "   "},
            "not a mapping",
            None,
            {"title": "no text"},
            {"text": ["list"]},
            {"title": "ok", "text": "kept"},
        ])
        assert result.merged_count == 1
        assert result.total_sections == 1
        assert [section.title for section in composer.sections] == ["ok"]

    def test_non_list_input_merges_nothing(self, composer: PersonaComposer) -> None:
        assert composer.merge(None).merged_count == 0
        assert composer.merge("text").merged_count == 0
        assert composer.merge({"text": "x"}).merged_count == 0

    def test_merged_section_appears_after_previous_ones(self, composer: PersonaComposer) -> None:
        composer.merge([{"title": "First", "text": "one"}])
        result = composer.merge([{"title": "A", "text": "x"}])
        assert result.merged_count == 1
        assert result.total_sections == 2

        text = composer.compose()
        assert "## A\nx" in text
        assert text.index("## First\none") < text.index("## A\nx")

    def test_sections_are_appended_not_replaced(self, composer: PersonaComposer) -> None:
        composer.merge([{"title": "Same", "text": "v1"}])
        composer.merge([{"title": "Same", "text": "v2"}])
        assert [section.text for section in composer.sections] == ["v1", "v2"]

    def test_blank_title_gets_positional_label(self, composer: PersonaComposer) -> None:
        composer.merge([{"title": "Named", "text": "a"}])
        composer.merge([{"text": "b"}, {"title": "   ", "text": "c"}])
        assert [section.title for section in composer.sections] == ["Named", "Section 2", "Section 3"]

    def test_title_and_text_are_truncated(self, composer: PersonaComposer) -> None:
        composer.merge([{"title": "t" * 500, "text": "x" * (MAX_TEXT_CHARS + 100)}])
        section = composer.sections[0]
        assert len(section.title) == MAX_TITLE_CHARS
        assert len(section.text) == MAX_TEXT_CHARS

    def test_numeric_text_is_accepted(self, composer: PersonaComposer) -> None:
        assert composer.merge([{"title": 7, "text": 42}]).merged_count == 1
        assert composer.sections[0].title == "7"
        assert composer.sections[0].text == "42"


class TestClear:
    def test_clear_removes_runtime_header(self, composer: PersonaComposer) -> None:
        composer.merge([{"title": "A", "text": "x"}, {"title": "B", "text": "y"}])
        assert composer.clear() == 0
        assert composer.total_sections == 0
        text = composer.compose()
        assert RUNTIME_SECTIONS_HEADER not in text
        assert "## A" not in text

    def test_merge_after_clear_restarts_labels(self, composer: PersonaComposer) -> None:
        composer.merge([{"text": "a"}])
        composer.clear()
        composer.merge([{"text": "b"}])
        assert [section.title for section in composer.sections] == ["Section 1"]


class TestSnapshot:
    def test_snapshot_fields(self) -> None:
        composer = PersonaComposer(static_persona="notes", default_spice="2")
        composer.merge([{"title": "A", "text": "x"}])
        snapshot = composer.snapshot(preview_chars=50)
        assert snapshot["spice"] == 2
        assert snapshot["spice_policy"] == SPICE_POLICIES[2]
        assert snapshot["has_static_persona"] is True
        assert snapshot["total_sections"] == 1
        assert snapshot["section_titles"] == ["A"]
        assert snapshot["instructions_length"] == len(composer.compose())
        assert snapshot["preview"].endswith("...")
        assert len(snapshot["preview"]) == 53
