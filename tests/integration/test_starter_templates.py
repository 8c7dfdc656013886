"""
Integration test for the starter templates through the full pipeline.
Tests: LaTeX source -> DocumentTree -> preview elements -> export document.

Both dialects describe the same two-section resume, so they must produce
trees of the same shape:
- Heading (name + contact line)
- EDUCATION / EXPERIENCE sections with one entry each
- Four-field entries (heading, right field, subheading, right field)
- Bullets, including a titled bullet in the modern template
"""

import pytest

from dossier.config import load_render_config
from dossier.contexts.parsing import parse_document
from dossier.contexts.rendering import build_export_document, render_preview
from dossier.contexts.studio import STARTER_TEMPLATES, get_starter_template


@pytest.mark.integration
def test_classic_template_tree():
    """Test parsing the classic (\\name / \\hfill) starter."""
    tree = parse_document(get_starter_template("classic"))

    assert tree.name == "YOUR NAME"
    assert tree.contact == "email@example.com | Phone | Location"
    assert [section.title for section in tree.sections] == ["EDUCATION", "EXPERIENCE"]

    education = tree.sections[0].entries[0]
    assert education.heading == "University Name"
    assert education.right_field_1 == "Location"
    assert education.subheading == "Degree"
    assert education.right_field_2 == "Date"
    assert education.bullets == ["GPA: ...", "Relevant Coursework: ..."]

    experience = tree.sections[1].entries[0]
    assert experience.heading == "Company Name"
    assert experience.bullets == ["Description of achievements..."]


@pytest.mark.integration
def test_modern_template_tree():
    """Test parsing the modern (center block / \\resumeSubheading) starter."""
    tree = parse_document(get_starter_template("modern"))

    assert tree.name == "<b>Your Name</b>"
    assert tree.contact == "123-456-7890 | you@example.com | City, Country"
    assert [section.title for section in tree.sections] == ["Education", "Experience"]

    education = tree.sections[0].entries[0]
    assert education.heading == "University Name"
    assert education.right_field_1 == "City, Country"
    assert education.subheading == "Bachelor of Science in Major"
    assert education.right_field_2 == "Sep. 2022 -- Jun. 2026"
    assert education.bullets == [
        "GPA: 3.9/4.0",
        "<b>Coursework</b>: Data Structures, Linear Algebra",
    ]

    experience = tree.sections[1].entries[0]
    assert experience.subheading == "Role"
    assert experience.bullets == ["Describe an achievement with <b>measurable</b> impact"]


@pytest.mark.integration
@pytest.mark.parametrize("name", sorted(STARTER_TEMPLATES))
def test_templates_same_shape(name):
    """Test that every starter yields two sections with one entry each."""
    tree = parse_document(get_starter_template(name))

    assert [len(section.entries) for section in tree.sections] == [1, 1]
    assert tree.entry_count == 2


@pytest.mark.integration
@pytest.mark.parametrize("name", sorted(STARTER_TEMPLATES))
def test_templates_render(name):
    """Test preview and export rendering of every starter."""
    config = load_render_config()
    tree = parse_document(get_starter_template(name))

    preview = render_preview(tree, config)
    assert preview.css_class == "document"
    assert len(preview.find_all("section")) == 2
    assert len(preview.find_all("bullet")) == tree.bullet_count

    html = build_export_document(tree, config)
    assert html.count("<section>") == 2
    assert html.count("<li>") == tree.bullet_count
    assert "\\" not in html.split("<body>")[1]


@pytest.mark.integration
def test_unknown_template():
    """Test error for an unknown starter name."""
    with pytest.raises(ValueError, match="Unknown template 'fancy'"):
        get_starter_template("fancy")
