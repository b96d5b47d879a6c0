import logging

import strawberry
from strawberry.fastapi import GraphQLRouter

from toolcatalog.core.database import AsyncSessionLocal
from toolcatalog.core.exceptions import CatalogError
from toolcatalog.graphql.queries import Query
from toolcatalog.graphql.mutations import Mutation

logger = logging.getLogger(__name__)


async def get_context():
    """
    Provide session factory to resolvers.

    Each resolver opens its own session from the factory; an async session
    must not be shared by resolvers running concurrently.
    """
    return {
        "session_factory": AsyncSessionLocal,
    }


class CatalogSchema(strawberry.Schema):
    """Schema that tags catalog errors with the same code the REST API returns."""

    def process_errors(self, errors, execution_context=None):
        for error in errors:
            original = error.original_error
            if isinstance(original, CatalogError):
                error.extensions = {**(error.extensions or {}), "code": original.code}
                logger.warning("GraphQL %s: %s", original.code, original.detail)
            else:
                logger.error("GraphQL error: %s", error.message, exc_info=original)


schema = CatalogSchema(
    query=Query,
    mutation=Mutation,
)

graphql_router = GraphQLRouter(
    schema,
    context_getter=get_context,
)
