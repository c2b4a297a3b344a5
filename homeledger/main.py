"""
HomeLedger - Mortgage and Real Estate Tracking API

Main FastAPI application entry point. Mounts the GraphQL endpoint, wires
resolver groups to the shared store and provides the process entry point.

Version: 1.0.0
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from sqlalchemy.exc import SQLAlchemyError
from strawberry.fastapi import GraphQLRouter

from homeledger.config import settings
from homeledger.db import Store, get_store, init_db
# Import logging configuration (initializes logging)
from homeledger.logging_config import get_logger
from homeledger.resolvers import AuthResolvers, MortgageResolvers, PropertyResolvers
from homeledger.schema import schema

# Get logger for this module
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifecycle manager.

    Handles startup and shutdown events for the application.
    """
    # Startup
    logger.info("=" * 60)
    logger.info("HomeLedger API Starting")
    logger.info(f"Version: {app.version}")
    logger.info("=" * 60)

    yield  # Application runs here

    # Shutdown
    logger.info("HomeLedger API Shutting Down")
    logger.info("=" * 60)


async def get_context(store: Store = Depends(get_store)) -> dict:
    """Resolver groups for one GraphQL request, bound to the shared store."""
    return {
        "auth": AuthResolvers(store.users),
        "mortgage": MortgageResolvers(store.calculations, store.users),
        "properties": PropertyResolvers(store.properties, store.users),
    }


# Create FastAPI application instance
app = FastAPI(
    title="HomeLedger",
    description="GraphQL API for mortgage calculations and real estate property tracking.",
    version="1.0.0",
    lifespan=lifespan
)

graphql_app = GraphQLRouter(schema, context_getter=get_context)
app.include_router(graphql_app, prefix="/graphql", tags=["GraphQL"])

logger.info("GraphQL endpoint registered at /graphql")


def run():
    """
    Connect to the database, then serve the API.

    A failed connection is logged and startup stops there; the server is
    not started.
    """
    try:
        init_db()
    except SQLAlchemyError as e:
        logger.error(f"Error starting the server or connecting to the database: {e}")
        return
    logger.info("Connected to the database")

    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
