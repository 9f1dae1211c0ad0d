"""Shared fixtures for carousel engine tests."""

import pytest

from chainlinked.carousel import analyze_template
from chainlinked.config.settings import clear_settings_cache
from chainlinked.models import CanvasTemplate, TemplateAnalysis

SAMPLE_TEMPLATE = {
    "id": "tpl-listicle",
    "name": "Bold Listicle",
    "category": "listicle",
    "brandColors": ["#0A66C2", "#ffffff"],
    "fonts": ["Inter"],
    "defaultSlides": [
        {
            "id": "s0",
            "backgroundColor": "#0A66C2",
            "elements": [
                {
                    "type": "text",
                    "id": "subtitle",
                    "text": "Supporting subtitle",
                    "fontSize": 40,
                    "x": 80,
                    "y": 300,
                    "width": 900,
                    "height": 120,
                    "fill": "#ffffff",
                },
                {
                    "type": "text",
                    "id": "title",
                    "text": "Your Hook Title Here",
                    "fontSize": 64,
                    "x": 80,
                    "y": 100,
                    "width": 900,
                    "height": 160,
                },
                {"type": "image", "id": "photo", "src": "https://example.com/a.png", "x": 0, "y": 800},
            ],
        },
        {
            "id": "s1",
            "backgroundColor": "#f3f2ef",
            "elements": [
                {"type": "text", "id": "badge", "text": "01", "fontSize": 96, "x": 60, "y": 40},
                {
                    "type": "text",
                    "id": "heading",
                    "text": "Key Point Heading",
                    "fontSize": 48,
                    "x": 80,
                    "y": 200,
                    "width": 880,
                    "height": 100,
                },
                {
                    "type": "text",
                    "id": "body",
                    "text": "Explain the point in a couple of sentences.",
                    "fontSize": 28,
                    "x": 80,
                    "y": 400,
                    "width": 880,
                    "height": 300,
                },
                {"type": "shape", "id": "divider", "x": 80, "y": 350, "width": 200, "height": 4},
            ],
        },
        {
            "id": "s2",
            "elements": [
                {
                    "type": "text",
                    "id": "cta",
                    "text": "Follow for more",
                    "fontSize": 48,
                    "x": 80,
                    "y": 100,
                },
                {
                    "type": "text",
                    "id": "caption",
                    "text": "Share with a friend",
                    "fontSize": 24,
                    "x": 80,
                    "y": 300,
                },
            ],
        },
    ],
}

# Slot ids produced by SAMPLE_TEMPLATE, in analysis order
TITLE = "slot-0-title"
SUBTITLE = "slot-0-subtitle"
HEADING = "slot-1-heading"
BODY = "slot-1-body"
CTA = "slot-2-cta"
CAPTION = "slot-2-caption"


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Fast retries and a fresh settings cache for every test."""
    monkeypatch.setenv("CHAINLINKED_GENERATION_RETRY_MIN_WAIT", "0")
    monkeypatch.setenv("CHAINLINKED_GENERATION_RETRY_MAX_WAIT", "0")
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def template() -> CanvasTemplate:
    """Three-slide listicle template: hook, numbered content, CTA."""
    return CanvasTemplate.model_validate(SAMPLE_TEMPLATE)


@pytest.fixture
def analysis(template: CanvasTemplate) -> TemplateAnalysis:
    return analyze_template(template)


@pytest.fixture
def good_content() -> dict[str, str]:
    """Content filling every slot within its limit."""
    return {
        TITLE: "5 Habits That Changed My Career Forever",
        SUBTITLE: "Small daily choices compound into big results over time",
        HEADING: "Write every single morning before email",
        BODY: "Thirty minutes of focused writing each morning clarified my thinking "
        "and gave me a backlog of ideas for the rest of the week.",
        CTA: "Follow for more career insights!",
        CAPTION: "Share this with a friend who needs it",
    }
