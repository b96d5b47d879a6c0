import strawberry
from strawberry.types import Info

from toolcatalog.core.exceptions import NotFound
from toolcatalog.graphql.types import Tool, ToolDetail, detail_from_model, tool_from_model
from toolcatalog.services import tool_details, tools


@strawberry.input
class ToolInput:
    title: str
    description: str
    link_url: str
    category: str | None = None
    image_url: str | None = None
    badge: str | None = None


@strawberry.input
class ToolDetailInput:
    tool_id: int
    slug: str
    owner: str | None = None
    owner_contact: str | None = None
    update_schedule: str | None = None
    data_source: str | None = None
    data_source_url: str | None = None
    access_requirements: str | None = None
    tags: str | None = None
    content_md: str | None = None
    changelog_md: str | None = None
    content_html: str | None = None
    changelog_html: str | None = None


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_tool(self, info: Info, input: ToolInput) -> Tool:
        async with info.context["session_factory"]() as session:
            tool = await tools.create_tool(session, strawberry.asdict(input))
            return tool_from_model(tool)

    @strawberry.mutation
    async def update_tool(self, info: Info, id: int, input: ToolInput) -> Tool:
        async with info.context["session_factory"]() as session:
            tool = await tools.update_tool(session, id, strawberry.asdict(input))
            return tool_from_model(tool)

    @strawberry.mutation
    async def delete_tool(self, info: Info, id: int) -> bool:
        async with info.context["session_factory"]() as session:
            try:
                await tools.delete_tool(session, id)
            except NotFound:
                return False
            return True

    @strawberry.mutation
    async def upsert_tool_detail(self, info: Info, input: ToolDetailInput) -> ToolDetail:
        async with info.context["session_factory"]() as session:
            detail, _ = await tool_details.upsert_tool_detail(session, strawberry.asdict(input))
            return detail_from_model(detail)
