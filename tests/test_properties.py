"""Property-based tests using Hypothesis.

Verifies invariants of search, grouping, selection, and export formatting.
Each test runs 50 examples in CI, 200 in dev.

Run:
    pytest tests/test_properties.py -v
    pytest tests/test_properties.py -v --hypothesis-seed=0  # reproducible
"""

from __future__ import annotations

import hypothesis.strategies as st
from hypothesis import given, settings

from component_hub.config import _config_to_dict, _dict_to_config
from component_hub.export import format_bulk, format_single
from component_hub.models import CATEGORIES, CatalogEntry, SessionState, UserConfig
from component_hub.query import flatten_groups, query_catalog
from component_hub.selection import SelectionTracker

# ── Hypothesis profiles ─────────────────────────────────────────────
settings.register_profile("ci", max_examples=50, deadline=None)
settings.register_profile("dev", max_examples=200, deadline=None)
settings.load_profile("ci")

# ── Custom strategies ────────────────────────────────────────────────

_NAME_ALPHABET = st.characters(
    whitelist_categories=("Lu", "Ll", "Nd"),
    whitelist_characters=" -_",
    max_codepoint=127,
)
_names = st.text(_NAME_ALPHABET, min_size=1, max_size=24)
_tags = st.lists(st.text(_NAME_ALPHABET, min_size=1, max_size=12), max_size=5).map(tuple)


@st.composite
def catalog_entries(draw: st.DrawFn) -> list[CatalogEntry]:
    """Generate a catalog of plain entries with unique ids."""
    count = draw(st.integers(min_value=0, max_value=12))
    entries = []
    for index in range(count):
        name = draw(_names)
        entries.append(
            CatalogEntry(
                id=str(index),
                name=name,
                description="",
                category=draw(st.sampled_from(CATEGORIES)),
                tags=draw(_tags),
                version="1.0.0",
                file_path=f"src/{index}.tsx",
                code=draw(st.text(max_size=40)),
            )
        )
    return entries


def _swap_case_randomly(text: str, flips: list[bool]) -> str:
    return "".join(
        ch.upper() if flip else ch.lower() for ch, flip in zip(text, flips, strict=False)
    )


# ── Search ───────────────────────────────────────────────────────────


@given(entries=catalog_entries().filter(bool), data=st.data())
def test_name_substring_in_any_case_is_found(entries, data):
    entry = data.draw(st.sampled_from(entries))
    start = data.draw(st.integers(min_value=0, max_value=len(entry.name) - 1))
    end = data.draw(st.integers(min_value=start + 1, max_value=len(entry.name)))
    flips = data.draw(st.lists(st.booleans(), min_size=end - start, max_size=end - start))
    term = _swap_case_randomly(entry.name[start:end], flips)

    view = query_catalog(entries, term, "all")

    assert entry in list(flatten_groups(view))


# ── Grouping ─────────────────────────────────────────────────────────


@given(entries=catalog_entries())
def test_all_view_partitions_catalog_by_category(entries):
    view = query_catalog(entries, "", "all")

    grouped = list(flatten_groups(view))
    assert sorted(e.id for e in grouped) == sorted(e.id for e in entries)
    assert len({e.id for e in grouped}) == len(grouped)
    assert all(group for group in view.values())
    for category, group in view.items():
        assert all(e.category == category for e in group)


@given(entries=catalog_entries())
def test_unfiltered_view_is_category_then_insertion_order(entries):
    view = query_catalog(entries, "", "all")

    expected = [e for category in CATEGORIES for e in entries if e.category == category]
    assert list(flatten_groups(view)) == expected
    assert list(view) == [c for c in CATEGORIES if any(e.category == c for e in entries)]


# ── Selection ────────────────────────────────────────────────────────


@given(
    initial=st.frozensets(st.text(max_size=6), max_size=8),
    entry_id=st.text(max_size=6),
)
def test_double_toggle_restores_selection(initial, entry_id):
    tracker = SelectionTracker(initial)
    assert tracker.toggle(entry_id).toggle(entry_id) == tracker


# ── Export ───────────────────────────────────────────────────────────


@given(code=st.text())
def test_format_single_is_identity(code):
    assert format_single(code) == code


@given(code=st.sampled_from(["", "```", "````\nx\n````", "a`b``c```d"]) | st.text())
def test_format_single_keeps_fence_like_text(code):
    assert format_single(code) == code


@given(entries=catalog_entries())
def test_bulk_contains_every_code_verbatim(entries):
    text = format_bulk(entries)
    for entry in entries:
        assert f"**{entry.file_path}**" in text
        assert entry.code.rstrip() in text


# ── Config ───────────────────────────────────────────────────────────


@given(
    search=st.text(max_size=20),
    category=st.sampled_from(["all", *CATEGORIES]),
    preview=st.booleans(),
)
def test_config_dict_round_trip(search, category, preview):
    config = UserConfig(
        session=SessionState(search_term=search, category_filter=category),
        show_preview=preview,
    )
    assert _dict_to_config(_config_to_dict(config)) == config
