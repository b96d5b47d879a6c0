import strawberry
from strawberry.types import Info

from toolcatalog.core.exceptions import NotFound
from toolcatalog.graphql.types import Tool, tool_from_model
from toolcatalog.services import tool_details, tools


@strawberry.type
class Query:
    @strawberry.field
    async def tools(self, info: Info) -> list[Tool]:
        async with info.context["session_factory"]() as session:
            return [tool_from_model(t) for t in await tools.list_tools(session)]

    @strawberry.field
    async def tool(self, info: Info, id: int) -> Tool | None:
        async with info.context["session_factory"]() as session:
            try:
                tool = await tools.get_tool(session, id)
            except NotFound:
                return None
            details = await tool_details.get_tool_detail_by_tool_id(session, id)
            return tool_from_model(tool, details)

    @strawberry.field
    async def tool_by_slug(self, info: Info, slug: str) -> Tool | None:
        """Tool with its details, addressed by the detail page slug."""
        async with info.context["session_factory"]() as session:
            try:
                detail = await tool_details.get_tool_detail_by_slug(session, slug)
            except NotFound:
                return None
            return tool_from_model(detail.tool, detail)

    @strawberry.field
    async def categories(self, info: Info) -> list[str]:
        async with info.context["session_factory"]() as session:
            return await tools.list_categories(session)
