"""
Public gallery view model: text search, category filter and pagination over
the tool list fetched once per view.

``GalleryState`` is immutable; each ``with_*`` method returns a new state.
Changing a filter always goes back to page 1, and page numbers are clamped
to the pages the filtered list actually has.
"""
import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace

PAGE_SIZE = 6

ToolItem = Mapping[str, object]


def _text(value: object) -> str:
    return str(value or "")


def categories(tools: Sequence[ToolItem]) -> list[str]:
    """Distinct trimmed categories, sorted case-insensitively."""
    names = {_text(tool.get("category")).strip() for tool in tools}
    return sorted((name for name in names if name), key=str.casefold)


def matches(tool: ToolItem, search: str = "", category: str = "") -> bool:
    needle = search.strip().lower()
    haystack = " ".join(
        _text(tool.get(name)) for name in ("title", "description", "category")
    ).lower()
    if needle not in haystack:
        return False
    return not category or _text(tool.get("category")).strip() == category


def filter_tools(tools: Sequence[ToolItem], search: str = "", category: str = "") -> list[ToolItem]:
    return [tool for tool in tools if matches(tool, search, category)]


def page_count(total: int, page_size: int = PAGE_SIZE) -> int:
    return max(1, math.ceil(total / page_size))


def clamp_page(page: int, total: int, page_size: int = PAGE_SIZE) -> int:
    return min(max(1, page), page_count(total, page_size))


def paginate(items: Sequence[ToolItem], page: int, page_size: int = PAGE_SIZE) -> list[ToolItem]:
    page = clamp_page(page, len(items), page_size)
    start = (page - 1) * page_size
    return list(items[start:start + page_size])


@dataclass(frozen=True)
class GalleryState:
    tools: tuple[ToolItem, ...] = ()
    search: str = ""
    category: str = ""
    page: int = 1
    page_size: int = PAGE_SIZE

    def __post_init__(self):
        # Every state, however built, shows a page that exists
        page = clamp_page(self.page, len(self.filtered), self.page_size)
        object.__setattr__(self, "page", page)

    @classmethod
    def from_tools(cls, tools: Sequence[ToolItem], page_size: int = PAGE_SIZE) -> "GalleryState":
        return cls(tools=tuple(tools), page_size=page_size)

    @property
    def filtered(self) -> list[ToolItem]:
        return filter_tools(self.tools, self.search, self.category)

    @property
    def categories(self) -> list[str]:
        return categories(self.tools)

    @property
    def total_pages(self) -> int:
        return page_count(len(self.filtered), self.page_size)

    @property
    def visible(self) -> list[ToolItem]:
        return paginate(self.filtered, self.page, self.page_size)

    def with_tools(self, tools: Sequence[ToolItem]) -> "GalleryState":
        return replace(self, tools=tuple(tools), page=1)

    def with_search(self, search: str) -> "GalleryState":
        return replace(self, search=search, page=1)

    def with_category(self, category: str) -> "GalleryState":
        return replace(self, category=category, page=1)

    def with_page(self, page: int) -> "GalleryState":
        return replace(self, page=page)

    def next_page(self) -> "GalleryState":
        return self.with_page(self.page + 1)

    def previous_page(self) -> "GalleryState":
        return self.with_page(self.page - 1)

    def clear_filters(self) -> "GalleryState":
        return replace(self, search="", category="", page=1)
