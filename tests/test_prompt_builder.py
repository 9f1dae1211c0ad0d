"""Tests for carousel system and user prompt building."""

import json

import pytest

from chainlinked.carousel.prompt_builder import (
    GENERIC_CTA_INSTRUCTION,
    NO_CTA_INSTRUCTION,
    TONE_GUIDANCE,
    build_carousel_system_prompt,
    build_carousel_user_prompt,
    build_cta_instruction,
    build_personalization_block,
    build_slot_requirements,
)
from chainlinked.models import (
    CarouselGenerationInput,
    CarouselTone,
    CtaType,
    PersonalizationContext,
    StyleProfile,
)

from conftest import CTA, HEADING, TITLE


@pytest.fixture
def request_data(analysis) -> CarouselGenerationInput:
    return CarouselGenerationInput(
        topic="Remote work habits",
        template_analysis=analysis,
    )


class TestGenerationInput:
    """Tests for tone and CTA fallbacks on the request model."""

    def test_unknown_tone_falls_back(self, analysis) -> None:
        """Test unknown tones become professional."""
        data = CarouselGenerationInput(topic="x", tone="sarcastic", template_analysis=analysis)
        assert data.tone is CarouselTone.PROFESSIONAL

    def test_known_tone_kept(self, analysis) -> None:
        """Test valid tones pass through as strings or enums."""
        assert (
            CarouselGenerationInput(topic="x", tone="match-my-style", template_analysis=analysis).tone
            is CarouselTone.MATCH_MY_STYLE
        )
        assert (
            CarouselGenerationInput(
                topic="x", tone=CarouselTone.CASUAL, template_analysis=analysis
            ).tone
            is CarouselTone.CASUAL
        )

    def test_unknown_cta_falls_back(self, analysis) -> None:
        """Test unknown CTA types become unset."""
        data = CarouselGenerationInput(topic="x", cta_type="carrier-pigeon", template_analysis=analysis)
        assert data.cta_type is None

    def test_camel_case_input(self, analysis) -> None:
        """Test wire names are accepted."""
        data = CarouselGenerationInput.model_validate(
            {
                "topic": "x",
                "keyPoints": ["a"],
                "ctaType": "save",
                "templateAnalysis": analysis.model_dump(by_alias=True),
            }
        )
        assert data.key_points == ["a"]
        assert data.cta_type is CtaType.SAVE
        assert data.template_analysis == analysis


class TestSystemPrompt:
    """Tests for build_carousel_system_prompt."""

    def test_sections_in_order(self, request_data) -> None:
        """Test the prompt carries every section in a fixed order."""
        prompt = build_carousel_system_prompt(request_data)
        headings = [
            "## Your Mission",
            "## Writing Style",
            "## Audience Context",
            "## Template Structure",
            "## Content Slots to Fill",
            "## Critical Guidelines",
            "## Output Format",
        ]
        positions = [prompt.index(h) for h in headings]
        assert positions == sorted(positions)
        assert "Create content for a 3-slide LinkedIn carousel" in prompt

    def test_default_audience(self, request_data) -> None:
        """Test audience and industry defaults."""
        prompt = build_carousel_system_prompt(request_data)
        assert "- Target audience: LinkedIn professionals" in prompt
        assert "- Industry/niche: general business and professional development" in prompt

    def test_audience_from_user_context(self, analysis) -> None:
        """Test audience falls back to the personalization context."""
        data = CarouselGenerationInput(
            topic="x",
            template_analysis=analysis,
            user_context=PersonalizationContext(target_audience="CFOs", industry="Fintech"),
        )
        prompt = build_carousel_system_prompt(data)
        assert "- Target audience: CFOs" in prompt
        assert "- Industry/niche: Fintech" in prompt

    @pytest.mark.parametrize("tone", list(CarouselTone))
    def test_tone_guidance(self, analysis, tone: CarouselTone) -> None:
        """Test each tone injects its guidance block."""
        data = CarouselGenerationInput(topic="x", tone=tone, template_analysis=analysis)
        assert TONE_GUIDANCE[tone] in build_carousel_system_prompt(data)

    def test_structure_and_slots(self, request_data) -> None:
        """Test slide structure and slot requirements are rendered."""
        prompt = build_carousel_system_prompt(request_data)
        assert 'Template: "Bold Listicle" with 3 slides' in prompt
        assert "Slide 1 (Hook):" in prompt
        assert "  - Has image placeholder" in prompt
        assert "Slide 3 (Cta):" in prompt
        assert f"- {TITLE} [REQUIRED]" in prompt
        assert "  Max characters: 60" in prompt

    def test_style_profile_section(self, analysis) -> None:
        """Test a style profile adds the style fragment."""
        data = CarouselGenerationInput(
            topic="x", template_analysis=analysis, style_profile=StyleProfile()
        )
        prompt = build_carousel_system_prompt(data)
        assert "## Author Style Profile\nWRITING STYLE REQUIREMENTS:" in prompt

    def test_no_personalization_without_context(self, request_data) -> None:
        """Test personalization sections are absent without a context."""
        prompt = build_carousel_system_prompt(request_data)
        assert "## About the Author" not in prompt
        assert "## Author Style Profile" not in prompt


class TestPersonalizationBlock:
    """Tests for build_personalization_block."""

    def test_empty_context(self) -> None:
        """Test nothing is rendered without facts."""
        assert build_personalization_block(None, CarouselTone.PROFESSIONAL) == ""
        assert build_personalization_block(PersonalizationContext(), CarouselTone.CASUAL) == ""

    def test_only_present_fields(self) -> None:
        """Test absent fields are skipped."""
        block = build_personalization_block(
            PersonalizationContext(name="Dana", company_name="Acme"), CarouselTone.PROFESSIONAL
        )
        assert "## About the Author\n- Name: Dana" in block
        assert "- Headline" not in block
        assert "## Company Context\n- Company: Acme" in block
        assert "## Brand Voice" not in block

    def test_recent_posts_filtered_and_clipped(self) -> None:
        """Test short posts are dropped and long ones clipped."""
        long_post = "x" * 300
        ctx = PersonalizationContext(recent_posts=["too short", long_post])
        block = build_personalization_block(ctx, CarouselTone.PROFESSIONAL)
        assert "Reference these recent posts for style context:" in block
        assert "too short" not in block
        assert f'1. "{"x" * 200}..."' in block

    def test_recent_posts_limited(self) -> None:
        """Test at most five posts outside match-my-style."""
        posts = [f"Post number {i} with enough text" for i in range(8)]
        block = build_personalization_block(
            PersonalizationContext(recent_posts=posts), CarouselTone.CASUAL
        )
        assert "5. " in block
        assert "6. " not in block

    def test_match_my_style_wording(self) -> None:
        """Test match-my-style uses stronger wording and longer samples."""
        posts = [f"Post number {i} with enough text" for i in range(8)]
        ctx = PersonalizationContext(
            recent_posts=posts + ["y" * 500],
            tone_of_voice="Warm and direct",
        )
        block = build_personalization_block(ctx, CarouselTone.MATCH_MY_STYLE)
        assert "CRITICAL: Replicate the exact voice" in block
        assert "The brand voice below is mandatory" in block
        assert "8. " in block
        assert f'9. "{"y" * 400}..."' in block

    def test_saved_ideas(self) -> None:
        """Test saved ideas render as content preferences."""
        ctx = PersonalizationContext(saved_ideas=["An idea worth saving for later"])
        block = build_personalization_block(ctx, CarouselTone.PROFESSIONAL)
        assert "## Content Preferences (Posts the author found interesting)" in block
        assert '1. "An idea worth saving for later"' in block


class TestSlotRequirements:
    """Tests for build_slot_requirements."""

    def test_placeholder_clipped_and_escaped(self, analysis) -> None:
        """Test long or quoted placeholders cannot break the prompt."""
        slot = analysis.slots[0].model_copy(update={"placeholder": 'Say "hi"\n' + "z" * 60})
        text = build_slot_requirements([slot])
        assert 'Example/placeholder: "Say \\"hi\\"\\n' in text
        assert "..." in text
        assert "z" * 45 not in text


class TestCtaInstruction:
    """Tests for build_cta_instruction."""

    def test_unset(self) -> None:
        assert build_cta_instruction(None, None) == GENERIC_CTA_INSTRUCTION

    def test_none(self) -> None:
        assert build_cta_instruction(CtaType.NONE, None) == NO_CTA_INSTRUCTION

    def test_custom(self) -> None:
        """Test custom CTA text is used literally."""
        assert build_cta_instruction(CtaType.CUSTOM, " Book a demo ") == (
            'Use this CTA approach: "Book a demo"'
        )
        assert build_cta_instruction(CtaType.CUSTOM, "  ") == GENERIC_CTA_INSTRUCTION

    def test_named(self) -> None:
        assert build_cta_instruction(CtaType.SAVE, None) == "CTA style: Save this for later reference"


class TestUserPrompt:
    """Tests for build_carousel_user_prompt."""

    def test_topic_and_default_key_points(self, request_data) -> None:
        """Test topic and the key point fallback."""
        prompt = build_carousel_user_prompt(request_data)
        assert "**Topic**: Remote work habits" in prompt
        assert "None specified - generate based on topic" in prompt
        assert GENERIC_CTA_INSTRUCTION in prompt
        assert "**Additional Context**" not in prompt

    def test_key_points_numbered(self, analysis) -> None:
        """Test key points are enumerated."""
        data = CarouselGenerationInput(
            topic="x", key_points=["Async first", "Clear docs"], template_analysis=analysis
        )
        assert "1. Async first\n2. Clear docs" in build_carousel_user_prompt(data)

    def test_slot_list_json(self, request_data) -> None:
        """Test the slot list is a JSON array with 1-based slide numbers."""
        prompt = build_carousel_user_prompt(request_data)
        start = prompt.index("**Slots to Fill** (6 total):\n") + len("**Slots to Fill** (6 total):\n")
        end = prompt.index("\n\nRemember:")
        slots = json.loads(prompt[start:end])
        assert slots[0] == {"id": TITLE, "type": "title", "maxLength": 60, "slide": 1}
        assert [s["id"] for s in slots][2] == HEADING
        assert slots[4] == {"id": CTA, "type": "cta", "maxLength": 80, "slide": 3}

    def test_no_cta_reminder(self, analysis) -> None:
        """Test the closing reminder changes when no CTA is wanted."""
        data = CarouselGenerationInput(
            topic="x", cta_type="none", additional_context=" Keep it short ", template_analysis=analysis
        )
        prompt = build_carousel_user_prompt(data)
        assert NO_CTA_INSTRUCTION in prompt
        assert "- Final slide should close with a memorable takeaway" in prompt
        assert "drive maximum engagement" not in prompt
        assert "**Additional Context**:\nKeep it short" in prompt
