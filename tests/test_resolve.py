"""Tests for walking notebook paths against the Graph listings."""

import asyncio

import pytest

from onenote_kit.errors import InvalidArgumentError, NotFoundError
from onenote_kit.onenote import notebooks, pages, sections


def run(coro):
    return asyncio.run(coro)


class TestFindNotebook:
    def test_case_insensitive(self, journal):
        nb = run(notebooks.find_notebook(journal, "mine"))
        assert nb.id == journal.tree.mine.id

    def test_missing(self, journal):
        with pytest.raises(NotFoundError) as excinfo:
            run(notebooks.find_notebook(journal, "Personal"))
        assert excinfo.value.kind == "notebook"
        assert excinfo.value.name == "Personal"

    def test_blank_name_makes_no_calls(self, journal):
        with pytest.raises(InvalidArgumentError):
            run(notebooks.find_notebook(journal, "  "))
        assert journal.calls == []

    def test_list_notebooks(self, journal):
        result = run(notebooks.list_notebooks(journal))
        assert [nb["displayName"] for nb in result] == ["Mine", "Work"]
        assert result[0]["webUrl"] == "https://onenote.test/Mine"
        assert result[0]["clientUrl"] is None


class TestResolveSection:
    def test_top_level_section_one_listing(self, journal):
        mine = journal.tree.mine
        section = run(sections.resolve_section(journal, mine.id, "quick notes"))

        assert section.display_name == "Quick Notes"
        assert journal.calls == [("sections", mine.id)]

    def test_nested_section_one_listing_per_level(self, journal):
        t = journal.tree
        section = run(sections.resolve_section(journal, t.mine.id, "Journal/2022/2022-05"))

        assert section.id == t.month.id
        assert journal.calls == [
            ("sectionGroups", t.mine.id),
            ("sectionGroups", t.journal.id),
            ("sections", t.year.id),
        ]

    def test_case_variation(self, journal):
        t = journal.tree
        section = run(sections.resolve_section(journal, t.mine.id, "JOURNAL/2022/2022-05"))
        assert section.id == t.month.id

    def test_missing_group_reports_segment_and_path(self, journal):
        t = journal.tree
        with pytest.raises(NotFoundError) as excinfo:
            run(sections.resolve_section(journal, t.mine.id, "Journal/2023/2023-01"))

        err = excinfo.value
        assert err.kind == "section group"
        assert err.name == "2023"
        assert err.path == "Journal/2023/2023-01"
        assert "2023" in str(err) and "Journal/2023/2023-01" in str(err)
        # Stops at the first failure.
        assert len(journal.calls) == 2

    def test_missing_section(self, journal):
        t = journal.tree
        with pytest.raises(NotFoundError) as excinfo:
            run(sections.resolve_section(journal, t.mine.id, "Journal/2022/2022-06"))
        assert excinfo.value.kind == "section"
        assert excinfo.value.name == "2022-06"

    def test_no_backtracking_into_duplicate_groups(self, make_graph):
        g = make_graph()
        nb = g.add_notebook("NB")
        first = g.add_group(nb, "Archive")
        second = g.add_group(nb, "archive")
        g.add_section(first, "Old")
        g.add_section(second, "Target")

        with pytest.raises(NotFoundError) as excinfo:
            run(sections.resolve_section(g, nb.id, "Archive/Target"))
        assert excinfo.value.name == "Target"
        assert ("sections", second.id) not in g.calls

    def test_duplicate_sections_first_listed_wins(self, make_graph):
        g = make_graph()
        nb = g.add_notebook("NB")
        first = g.add_section(nb, "Notes")
        g.add_section(nb, "NOTES")
        assert run(sections.resolve_section(g, nb.id, "notes")).id == first.id

    def test_segment_list_with_slash_in_name(self, make_graph):
        g = make_graph()
        nb = g.add_notebook("NB")
        group = g.add_group(nb, "Q1/Q2")
        target = g.add_section(group, "Plans")
        assert run(sections.resolve_section(g, nb.id, ["Q1/Q2", "Plans"])).id == target.id

    def test_follows_next_links(self, make_graph):
        g = make_graph(page_size=2)
        nb = g.add_notebook("NB")
        for name in ("a", "b", "c", "d"):
            g.add_section(nb, name)
        target = g.add_section(nb, "e")

        assert run(sections.resolve_section(g, nb.id, "E")).id == target.id
        assert g.calls == [("sections", nb.id)] * 3

    def test_list_sections(self, journal):
        result = run(sections.list_sections(journal, journal.tree.mine.id))
        assert [s["displayName"] for s in result] == ["Quick Notes"]
        assert result[0]["clientUrl"] == "onenote:s/Quick Notes"


class TestResolvePage:
    def test_resolves_section_then_title(self, journal):
        t = journal.tree
        page = run(pages.resolve_page(journal, t.mine.id, "Journal/2022/2022-05/2022-05-05"))

        assert page.title == "2022-05-05"
        assert journal.calls[-1] == ("pages", t.month.id)
        assert len(journal.calls) == 4

    def test_section_and_page(self, graph):
        nb = graph.add_notebook("NB")
        sec = graph.add_section(nb, "A")
        graph.add_page(sec, "B")
        page = run(pages.resolve_page(graph, nb.id, "a/b"))
        assert page.title == "B"
        assert graph.calls == [("sections", nb.id), ("pages", sec.id)]

    def test_bare_page_name_rejected_before_any_call(self, journal):
        with pytest.raises(InvalidArgumentError):
            run(pages.resolve_page(journal, journal.tree.mine.id, "2022-05-05"))
        assert journal.calls == []

    def test_missing_page_reports_full_path(self, journal):
        with pytest.raises(NotFoundError) as excinfo:
            run(pages.resolve_page(journal, journal.tree.mine.id, "Journal/2022/2022-05/2022-05-31"))
        assert excinfo.value.kind == "page"
        assert excinfo.value.path == "Journal/2022/2022-05/2022-05-31"

    def test_missing_section_reports_full_page_path(self, journal):
        with pytest.raises(NotFoundError) as excinfo:
            run(pages.resolve_page(journal, journal.tree.mine.id, "Journal/2022/2022-07/2022-07-01"))
        assert excinfo.value.kind == "section"
        assert excinfo.value.path == "Journal/2022/2022-07/2022-07-01"

    def test_page_content(self, journal):
        page_id = journal.pages[journal.tree.month.id][1].id
        assert run(pages.get_page_content(journal, page_id)) == b"Some text content"

    def test_list_pages(self, journal):
        result = run(pages.list_pages(journal, journal.tree.month.id))
        assert [p["title"] for p in result] == ["2022-05-04", "2022-05-05"]
        assert result[1]["webUrl"] == "https://onenote.test/p/2022-05-05"
