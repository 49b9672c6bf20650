"""Tests for single and bulk export formatting."""

from __future__ import annotations

from component_hub.export import (
    code_fence_for,
    format_bulk,
    format_code_block,
    format_entry_blocks,
    format_single,
)
from component_hub.seed import build_seed_catalog


def test_format_single_returns_code_unchanged():
    code = "  const x = 1;\n\n"
    assert format_single(code) == code


def test_format_code_block_layout():
    block = format_code_block("src/Button.tsx", "export {}")
    assert block == "**src/Button.tsx**\n```typescript\nexport {}\n```\n\n"


def test_format_code_block_custom_language():
    block = format_code_block("hooks.py", "pass", "python")
    assert block.startswith("**hooks.py**\n```python\n")


def test_plain_entry_produces_one_block(make_entry):
    entry = make_entry(file_path="p1", code="c1")
    assert format_entry_blocks(entry) == ["**p1**\n```typescript\nc1\n```\n\n"]


def test_composite_entry_produces_block_per_variant_ignoring_own_code(make_entry, make_variant):
    entry = make_entry(
        file_path="src/pages/auth/",
        code="// placeholder",
        variants=(make_variant("A", file_path="p2a", code="ca"), make_variant("B", file_path="p2b", code="cb")),
    )

    blocks = format_entry_blocks(entry)

    assert len(blocks) == 2
    assert blocks[0].startswith("**p2a**")
    assert blocks[1].startswith("**p2b**")
    assert all("placeholder" not in block for block in blocks)


def test_format_bulk_mixed_entries(make_entry, make_variant):
    plain = make_entry(id="1", file_path="p1", code="c1")
    composite = make_entry(
        id="2",
        category="Pages",
        variants=(make_variant("A", file_path="p2a", code="ca"), make_variant("B", file_path="p2b", code="cb")),
    )

    text = format_bulk([plain, composite])

    assert text == (
        "**p1**\n```typescript\nc1\n```\n\n"
        "**p2a**\n```typescript\nca\n```\n\n"
        "**p2b**\n```typescript\ncb\n```"
    )


def test_format_bulk_empty_is_empty_string():
    assert format_bulk([]) == ""


def test_format_bulk_trims_trailing_whitespace(make_entry):
    text = format_bulk([make_entry(code="c1")])
    assert not text.endswith(("\n", " "))
    assert text.endswith("```")


def test_code_fence_default_is_three_backticks():
    assert code_fence_for("const a = `template`;") == "```"


def test_code_fence_grows_past_embedded_fence():
    code = "Example:\n```ts\nfoo()\n```\n"
    assert code_fence_for(code) == "````"


def test_embedded_fence_keeps_block_intact(make_entry):
    entry = make_entry(file_path="README.md", code="````\nnested\n````")

    text = format_bulk([entry])

    assert text.startswith("**README.md**\n`````typescript\n")
    assert text.endswith("\n`````")


def test_seed_catalog_bulk_has_block_per_page():
    entries = build_seed_catalog()
    text = format_bulk(entries)

    assert text.count("**src/") == 8
    assert "**src/pages/auth/LoginPage.tsx**" in text
    assert "**src/pages/auth/RegisterPage.tsx**" in text
    assert "**src/pages/auth/**" not in text
