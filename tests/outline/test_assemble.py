from __future__ import annotations

import json

import pytest

from docoutline.outline import (
    BATCH_PROFILE,
    INTERACTIVE_PROFILE,
    DocumentStructure,
    HeadingLevel,
    derive_title,
    extract_outline,
    get_profile,
)


@pytest.mark.parametrize(
    ("identifier", "expected"),
    [
        ("Annual-Report_2024.pdf", "Annual Report 2024"),
        ("report.PDF", "report.PDF"),
        ("my.pdf.pdf", "my.pdf"),
        ("  spaced_name  ", "spaced name"),
        (".pdf", ".pdf"),
        ("__-.pdf", "__-.pdf"),
        ("", "Untitled"),
        (None, "Untitled"),
    ],
)
def test_derive_title(identifier, expected: str) -> None:
    assert derive_title(identifier) == expected


def test_chapter_then_numbered_end_to_end() -> None:
    text = "Chapter 1 Overview\n\nSome body text.\n\n2. Background\n\nMore text."
    result = extract_outline("Chapter-Doc.pdf", text, BATCH_PROFILE)
    assert result.to_dict() == {
        "title": "Chapter Doc",
        "outline": [
            {"level": "H1", "text": "Chapter 1 Overview", "page": 1},
            {"level": "H1", "text": "Background", "page": 1},
        ],
    }


def test_empty_text_yields_empty_outline() -> None:
    for text in ("", None, "\n\n\n"):
        result = extract_outline("Empty_Doc.pdf", text)
        assert result == DocumentStructure(title="Empty Doc", outline=())


@pytest.mark.parametrize(("profile", "cap"), [(BATCH_PROFILE, 50), (INTERACTIVE_PROFILE, 20)])
def test_outline_is_a_prefix_capped_by_profile(profile, cap: int) -> None:
    text = "\n".join(f"{index}. Topic {index}" for index in range(1, 61))
    result = extract_outline("many.pdf", text, profile)
    assert len(result.outline) == cap
    assert [item.text for item in result.outline] == [f"Topic {i}" for i in range(1, cap + 1)]


def test_fallback_engages_when_no_rule_matches() -> None:
    text = (
        "This opening paragraph has plenty of words in it\nand continues here.\n\n"
        "Second block lacks any marker\nbut is long enough."
    )
    result = extract_outline("plain.pdf", text)
    assert [(item.level, item.text, item.page) for item in result.outline] == [
        (HeadingLevel.H1, "This opening paragraph has plenty of words in it", 1),
        (HeadingLevel.H1, "Second block lacks any marker", 1),
    ]
    assert len(result.outline) <= BATCH_PROFILE.fallback_paragraph_count


def test_rule_hits_suppress_fallback() -> None:
    text = "INTRODUCTION\n\nA long paragraph that would otherwise become a pseudo heading."
    result = extract_outline("doc.pdf", text)
    assert [item.text for item in result.outline] == ["INTRODUCTION"]


def test_reclassifying_is_byte_identical() -> None:
    text = "\fABSTRACT\nbody\n\n1. Introduction\n\n\f2.1 Scope of Work\ntext\n\nSECTION 3"
    first = extract_outline("paper.pdf", text, "interactive")
    second = extract_outline("paper.pdf", text, "interactive")
    assert first.to_json() == second.to_json()
    assert all(item.page >= 1 for item in first.outline)
    assert json.loads(first.to_json())["outline"][2] == {
        "level": "H2",
        "text": "Scope of Work",
        "page": 2,
    }


def test_unknown_profile_name_is_rejected() -> None:
    assert get_profile("Interactive") is INTERACTIVE_PROFILE
    with pytest.raises(ValueError) as exc:
        get_profile("desktop")
    assert exc.value.args[0] == "unknown_profile"
