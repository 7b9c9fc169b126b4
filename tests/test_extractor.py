"""Tests for metadata extraction."""

from __future__ import annotations

import pytest

from guidesite.config import DEFAULT_GLYPH
from guidesite.ingestion.extractor import extract_metadata, find_overview, find_title


class TestTitle:
    """Title extraction."""

    def test_leading_markers_and_digits_stripped(self) -> None:
        metadata = extract_metadata("# 01-introduction to spring\n", "01-introduction.md")
        assert metadata.title == "introduction to spring"

    def test_first_heading_wins(self) -> None:
        text = "Intro text\n\n## First\n\n# Second\n"
        assert find_title(text) == "First"

    def test_heading_inside_code_fence_ignored(self) -> None:
        text = "```bash\n# install the cli\n```\n\n# Real Title\n"
        assert find_title(text) == "Real Title"

    def test_fallback_to_filename(self) -> None:
        """Without a heading the title-cased filename is used."""
        metadata = extract_metadata("Just prose.\n", "README.md")
        assert metadata.title == "Readme"

    def test_fallback_uses_slug_words(self) -> None:
        metadata = extract_metadata("", "03-spring-boot-setup.md")
        assert metadata.title == "Spring Boot Setup"

    def test_noise_only_heading_falls_back(self) -> None:
        metadata = extract_metadata("# 42\n", "answers.md")
        assert metadata.title == "Answers"

    def test_hash_without_space_is_not_a_heading(self) -> None:
        assert find_title("#hashtag\n") == ""

    def test_inline_code_heading_kept_whole(self) -> None:
        metadata = extract_metadata("# `@Autowired` explained\n", "05-autowired.md")
        assert metadata.title == "`@Autowired` explained"

    def test_unclosed_fence_is_text(self) -> None:
        """A fence that never closes does not hide the headings after it."""
        text = "```java\nclass A {}\n\n# Real Title\n"
        assert extract_metadata(text, "x.md").title == "Real Title"

    def test_front_matter_title_wins(self) -> None:
        text = "---\ntitle: 02 - Explicit Title\n---\n# Heading Title\n"
        assert extract_metadata(text, "x.md").title == "Explicit Title"


class TestOverview:
    """Overview extraction."""

    def test_overview_section(self) -> None:
        text = "# Spring\n\n## Overview\nSpring Boot is...\n"
        assert extract_metadata(text, "spring.md").overview == "Spring Boot is..."

    def test_blank_lines_are_skipped(self) -> None:
        text = "## Overview\n\n\n  Spring Boot   is fast.  \nMore.\n"
        assert find_overview(text) == "Spring Boot is fast."

    def test_missing_section_is_empty(self) -> None:
        assert extract_metadata("# Title\n\nBody\n", "t.md").overview == ""

    def test_heading_match_is_case_sensitive(self) -> None:
        assert find_overview("## overview\nSomething\n") == ""

    def test_empty_section_is_empty(self) -> None:
        assert find_overview("## Overview\n\n## Details\nText\n") == ""

    def test_code_first_is_empty(self) -> None:
        assert find_overview("## Overview\n```java\nclass A {}\n```\n") == ""

    def test_unclosed_fence_first_is_empty(self) -> None:
        assert find_overview("## Overview\n```java\nclass A {}\n") == ""

    def test_overview_inside_fence_ignored(self) -> None:
        text = "```md\n## Overview\nfake\n```\n"
        assert find_overview(text) == ""

    def test_front_matter_summary_wins(self) -> None:
        text = "---\nsummary: From the preamble\n---\n## Overview\nFrom the body\n"
        assert extract_metadata(text, "x.md").overview == "From the preamble"


class TestGlyph:
    """Glyph extraction."""

    def test_glyph_at_start(self) -> None:
        assert extract_metadata("📘 Notes\n", "n.md").glyph == "📘"

    def test_glyph_in_heading(self) -> None:
        assert extract_metadata("# 🌱 01-introduction\n", "n.md").glyph == "🌱"

    def test_default_glyph(self) -> None:
        assert extract_metadata("# Plain\n", "n.md").glyph == DEFAULT_GLYPH

    def test_configured_default_glyph(self) -> None:
        assert extract_metadata("# Plain\n", "n.md", default_glyph="*").glyph == "*"

    def test_front_matter_emoji_wins(self) -> None:
        text = "---\nemoji: 🧪\n---\n# 🌱 Title\n"
        assert extract_metadata(text, "n.md").glyph == "🧪"


class TestSequenceNumber:
    """Sequence number extraction."""

    def test_from_filename(self) -> None:
        assert extract_metadata("", "03-spring-boot-setup.md").sequence_number == 3

    def test_absent(self) -> None:
        assert extract_metadata("", "README.md").sequence_number is None

    def test_zero(self) -> None:
        assert extract_metadata("", "00-preface.md").sequence_number == 0

    def test_front_matter_order_wins(self) -> None:
        text = "---\norder: 7\n---\n"
        assert extract_metadata(text, "03-x.md").sequence_number == 7

    @pytest.mark.parametrize("order", ["true", "later", "[1]", "\"\u00b2\"", "\"-3\""])
    def test_invalid_front_matter_order_ignored(self, order: str) -> None:
        text = f"---\norder: {order}\n---\n"
        assert extract_metadata(text, "03-x.md").sequence_number == 3


class TestDeterminism:
    """Extraction is a pure function of its inputs."""

    def test_repeated_calls_are_identical(self) -> None:
        text = "# 🌱 01 - Intro\n\n## Overview\nFirst line.\n"
        results = {extract_metadata(text, "01-intro.md") for _ in range(5)}
        assert len(results) == 1
