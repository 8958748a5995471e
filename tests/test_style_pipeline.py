"""
Tests for hex color validation and _definitions.scss rendering.
"""

import pytest

from core.errors import ConfigError
from core.services.style_pipeline import generate_styles, is_hex_color, validate_hex_color


@pytest.mark.parametrize("value", ["#fff", "#FFF", "#0a0d10", "#ABCDEF", "#aBc", "#123456"])
def test_accepts_three_and_six_digit_hex(value):
    assert is_hex_color(value)


@pytest.mark.parametrize(
    "value",
    ["fff", "#ff", "#ffff", "#fffffff", "#ggg", "#12345g", "red", "", " #fff", "#fff ", "#fff\n"],
)
def test_rejects_other_strings(value):
    assert not is_hex_color(value)


def test_validate_hex_color_reports_the_offending_variable(reporter):
    assert validate_hex_color("#12", "CUSTOM_RED_COLOR", reporter) is False

    errors = reporter.of("error")
    assert errors == [
        "Invalid hex color format for CUSTOM_RED_COLOR: #12 (expected format: #RGB or #RRGGBB)"
    ]


def test_generates_definitions_with_defaults(make_settings, reporter):
    settings = make_settings(icon_url=None)

    output = generate_styles(settings, reporter)

    assert output == settings.custom_root / "styles" / "_definitions.scss"
    content = output.read_text(encoding="utf-8")
    assert content.startswith('@use "sass:color";\n')
    assert "$primary: #0a0d10 !default;" in content
    assert "$secondary: #0a0d10 !default;" in content
    assert "$red: #d74949 !default;" in content
    assert "$green: #319236 !default;" in content
    assert "$text-muted: #888 !default;" in content
    assert "$secondary-background: #f1f1f1 !default;" in content
    assert "$secondary-text-color: #7a7a7a !default;" in content
    assert "$force-link-underline: true !default;" in content
    assert "$lighter-primary-hover: true !default;" in content
    assert "$lighter-secondary-hover: true !default;" in content
    assert "$header-logo: true !default;" in content
    assert content.endswith("$signup-state-disabled: color.change($body-color, $alpha: 0.45) !default;\n")


def test_colors_are_written_verbatim_and_booleans_lowercase(make_settings, reporter):
    settings = make_settings(
        custom_primary_color="#ABC",
        custom_force_link_underline="no",
        custom_header_logo="False",
    )

    content = generate_styles(settings, reporter).read_text(encoding="utf-8")

    assert "$primary: #ABC !default;" in content
    assert "$force-link-underline: false !default;" in content
    assert "$header-logo: false !default;" in content
    assert "$lighter-primary-hover: true !default;" in content


def test_reports_each_resolved_color(make_settings, reporter):
    generate_styles(make_settings(custom_green_color="#00ff00"), reporter)

    info = reporter.of("info")
    assert "  Primary: #0a0d10" in info
    assert "  Green: #00ff00" in info
    assert "  Secondary Text: #7a7a7a" in info
    assert any(m.startswith("File size: ") for m in info)


def test_invalid_color_aborts_without_writing(make_settings, reporter):
    settings = make_settings(custom_secondary_color="#12345", custom_red_color="nope")

    with pytest.raises(ConfigError):
        generate_styles(settings, reporter)

    assert not (settings.custom_root / "styles" / "_definitions.scss").exists()
    # Stops at the first invalid color.
    errors = reporter.of("error")
    assert len(errors) == 1
    assert "CUSTOM_SECONDARY_COLOR" in errors[0]
