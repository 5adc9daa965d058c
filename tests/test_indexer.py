import json

import pytest

from lunr_index.core.filters import IndexerFilters
from lunr_index.core.indexer import (
    SearchIndexer,
    load_index,
    summarize_entries,
    write_index,
)
from lunr_index.models.entry import IndexEntry
from lunr_index.models.route import RouteData


def test_build_done_writes_index(guide_site):
    dist, routes = guide_site

    index_path = SearchIndexer(show_progress=False).build_done(dist, routes)

    assert index_path == dist / "search_index.json"
    data = json.loads(index_path.read_text(encoding="utf-8"))
    assert data == [
        {"loc": "/#home", "title": "Home", "content": "Welcome."},
        {"loc": "/guide#setup", "title": "Setup", "content": "Install it."},
        {"loc": "/guide", "title": "Next"},
    ]


def test_pages_are_processed_in_route_order(guide_site):
    dist, routes = guide_site

    entries = SearchIndexer(show_progress=False).build_index(dist, list(reversed(routes)))

    assert [e.loc for e in entries] == ["/guide#setup", "/guide", "/#home"]


def test_custom_index_filename(guide_site):
    dist, routes = guide_site

    index_path = SearchIndexer(index_filename="lunr.json", show_progress=False).build_done(
        dist, routes
    )

    assert index_path.name == "lunr.json"
    assert index_path.exists()


def test_existing_index_is_overwritten(guide_site):
    dist, routes = guide_site
    (dist / "search_index.json").write_text("stale", encoding="utf-8")

    SearchIndexer(show_progress=False).build_done(dist, routes)

    assert len(load_index(dist / "search_index.json")) == 3


def test_missing_page_aborts_build(guide_site):
    dist, routes = guide_site
    routes.append(RouteData(route="/gone", dist_path="/gone/index.html"))

    with pytest.raises(FileNotFoundError):
        SearchIndexer(show_progress=False).build_done(dist, routes)

    assert not (dist / "search_index.json").exists()


def test_filter_errors_propagate(guide_site):
    dist, routes = guide_site

    def broken(entry, idx, entries):
        raise RuntimeError("bad filter")

    indexer = SearchIndexer(IndexerFilters(result_filter=broken), show_progress=False)

    with pytest.raises(RuntimeError, match="bad filter"):
        indexer.build_done(dist, routes)


def test_all_filters_applied(guide_site):
    dist, routes = guide_site
    filters = IndexerFilters(
        route_filter=lambda route, idx, routes: route.route == "/guide",
        heading_filter=lambda idx, el: True,
        content_filter=lambda el: True,
        result_filter=lambda entry, idx, entries: entry.title != "Next",
    )

    entries = SearchIndexer(filters, show_progress=False).build_index(dist, routes)

    assert entries == [
        IndexEntry(loc="/guide", title="Site"),
        IndexEntry(loc="/guide#setup", title="Setup", content="Install it."),
    ]


def test_section_and_unicode_survive_serialization(make_site, tmp_path):
    dist = make_site(
        {
            "ko/index.html": (
                '<section data-adf-section="안내"><h2 id="intro">소개</h2>'
                "<p>검색 색인</p></section>"
            )
        }
    )
    routes = [RouteData(route="/ko", dist_path="/ko/index.html")]

    index_path = SearchIndexer(show_progress=False).build_done(dist, routes)

    raw = index_path.read_text(encoding="utf-8")
    assert "소개" in raw
    assert json.loads(raw) == [
        {"loc": "/ko#intro", "title": "소개", "content": "검색 색인", "section": "안내"}
    ]


def test_unclosed_paragraphs_in_page_file(make_site):
    dist = make_site({"faq.html": "<h2>Q1</h2><p>first<h2>Q2</h2><p>second"})
    routes = [RouteData(route="/faq", dist_path="/faq.html")]

    entries = SearchIndexer(show_progress=False).build_index(dist, routes)

    assert [(e.title, e.content) for e in entries] == [
        ("Q1", "first"),
        ("Q2", "second"),
    ]


def test_round_trip(tmp_path):
    entries = [
        IndexEntry(loc="/a#x", title="X", content="body", section="docs"),
        IndexEntry(loc="/a", title="Y"),
        IndexEntry(loc="/b", title="Z", section="blog"),
    ]

    path = write_index(entries, tmp_path / "index.json")

    assert load_index(path) == entries
    assert [sorted(item) for item in json.loads(path.read_text(encoding="utf-8"))] == [
        ["content", "loc", "section", "title"],
        ["loc", "title"],
        ["loc", "section", "title"],
    ]


def test_summary_and_stats(guide_site):
    dist, routes = guide_site
    indexer = SearchIndexer(show_progress=False)
    index_path = indexer.build_done(dist, routes)

    assert indexer.stats(index_path) == {
        "entry_count": 3,
        "entries_with_content": 2,
        "entries_with_section": 0,
    }
    assert summarize_entries([]) == {"entry_count": 0, "entries_with_content": 0}
