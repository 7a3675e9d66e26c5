"""In-memory stand-in for the parts of GraphServiceClient the kit uses."""

import itertools
from types import SimpleNamespace

import pytest


def make_links(web=None, client=None):
    return SimpleNamespace(
        one_note_web_url=SimpleNamespace(href=web) if web else None,
        one_note_client_url=SimpleNamespace(href=client) if client else None,
    )


def _model(**fields):
    fields.setdefault("created_date_time", None)
    fields.setdefault("last_modified_date_time", None)
    return SimpleNamespace(**fields)


class FakeCollection:
    """A collection request builder: get() plus with_url() for next links."""

    def __init__(self, graph, kind, owner, items):
        self._graph = graph
        self._kind = kind
        self._owner = owner
        self._items = list(items)

    def _page(self, index):
        size = self._graph.page_size or max(len(self._items), 1)
        chunk = self._items[index * size:(index + 1) * size]
        more = (index + 1) * size < len(self._items)
        next_link = f"https://graph.test/{self._kind}/{self._owner}?page={index + 1}" if more else None
        return SimpleNamespace(value=chunk, odata_next_link=next_link)

    async def get(self):
        self._graph.calls.append((self._kind, self._owner))
        return self._page(0)

    def with_url(self, url):
        return FakeNextPage(self, int(url.rsplit("=", 1)[1]))


class FakeNextPage:
    def __init__(self, collection, index):
        self._collection = collection
        self._index = index

    async def get(self):
        c = self._collection
        c._graph.calls.append((c._kind, c._owner))
        return c._page(self._index)


class FakeContent:
    def __init__(self, graph, page_id):
        self._graph = graph
        self._page_id = page_id

    async def get(self):
        self._graph.calls.append(("content", self._page_id))
        return self._graph.content[self._page_id]


class FakeContainer:
    """A notebook or section group item builder."""

    def __init__(self, graph, owner):
        self._graph = graph
        self._owner = owner

    @property
    def section_groups(self):
        return FakeCollection(self._graph, "sectionGroups", self._owner, self._graph.groups.get(self._owner, []))

    @property
    def sections(self):
        return FakeCollection(self._graph, "sections", self._owner, self._graph.sections.get(self._owner, []))


class FakeOnenote:
    def __init__(self, graph):
        self._graph = graph

    @property
    def notebooks(self):
        graph = self._graph
        collection = FakeCollection(graph, "notebooks", "me", graph.notebooks)
        collection.by_notebook_id = lambda notebook_id: FakeContainer(graph, notebook_id)
        return collection

    @property
    def section_groups(self):
        return SimpleNamespace(by_section_group_id=lambda group_id: FakeContainer(self._graph, group_id))

    @property
    def sections(self):
        graph = self._graph

        def by_id(section_id):
            return SimpleNamespace(pages=FakeCollection(graph, "pages", section_id, graph.pages.get(section_id, [])))

        return SimpleNamespace(by_onenote_section_id=by_id)

    @property
    def pages(self):
        graph = self._graph
        return SimpleNamespace(
            by_onenote_page_id=lambda page_id: SimpleNamespace(content=FakeContent(graph, page_id))
        )


class FakeGraph:
    """Builds a notebook tree and records every request made against it."""

    def __init__(self, page_size=None):
        self.page_size = page_size
        self.calls = []
        self.notebooks = []
        self.groups = {}
        self.sections = {}
        self.pages = {}
        self.content = {}
        self._ids = itertools.count(1)
        self.me = SimpleNamespace(onenote=FakeOnenote(self))

    def _next_id(self, prefix):
        return f"{prefix}-{next(self._ids)}"

    def add_notebook(self, name):
        nb = _model(id=self._next_id("nb"), display_name=name, is_shared=False,
                    links=make_links(f"https://onenote.test/{name}"))
        self.notebooks.append(nb)
        return nb

    def add_group(self, parent, name):
        group = _model(id=self._next_id("sg"), display_name=name)
        self.groups.setdefault(parent.id, []).append(group)
        return group

    def add_section(self, parent, name):
        section = _model(id=self._next_id("sec"), display_name=name,
                         links=make_links(f"https://onenote.test/s/{name}", f"onenote:s/{name}"))
        self.sections.setdefault(parent.id, []).append(section)
        return section

    def add_page(self, section, title, content=b""):
        page = _model(id=self._next_id("pg"), title=title, content_url=None,
                      links=make_links(f"https://onenote.test/p/{title}", f"onenote:p/{title}"))
        self.pages.setdefault(section.id, []).append(page)
        self.content[page.id] = content
        return page


@pytest.fixture
def graph():
    return FakeGraph()


@pytest.fixture
def journal():
    """Notebook 'Mine' holding Journal/2022/2022-05/2022-05-05."""
    g = FakeGraph()
    mine = g.add_notebook("Mine")
    g.add_notebook("Work")
    journal = g.add_group(mine, "Journal")
    year = g.add_group(journal, "2022")
    month = g.add_section(year, "2022-05")
    g.add_page(month, "2022-05-04", b"Yesterday")
    g.add_page(month, "2022-05-05", b"Some text content")
    g.add_section(mine, "Quick Notes")
    g.tree = SimpleNamespace(mine=mine, journal=journal, year=year, month=month)
    return g


@pytest.fixture
def make_graph():
    return FakeGraph
