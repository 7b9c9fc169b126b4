"""Shared fixtures: a small study-guide corpus on disk."""

from __future__ import annotations

from pathlib import Path

import pytest

INTRODUCTION = """\
# 🌱 01-introduction to spring

## Overview
Spring Boot is an opinionated framework for Spring applications.

## Key Points

| Feature | Purpose |
|---------|---------|
| Starters | Dependency bundles |

```java
@SpringBootApplication
public class App {}
```
"""

SETUP = """\
---
title: Spring Boot Setup
order: 3
---
# 03 - Setting things up

## Overview

Install a JDK and generate a project.
"""

README = "Plain notes with no heading at all.\n"


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    """Content directory with two numbered guides, a readme and a stray asset."""
    root = tmp_path / "content"
    root.mkdir()
    (root / "01-introduction.md").write_text(INTRODUCTION, encoding="utf-8")
    (root / "03-spring-boot-setup.md").write_text(SETUP, encoding="utf-8")
    (root / "README.md").write_text(README, encoding="utf-8")
    (root / "diagram.png").write_bytes(b"\x89PNG\r\n")
    return root
