"""FastAPI application serving the agent catalog."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from catalog.cancellation import ListingCancelled
from catalog.chat_client import ChatModelProvider
from catalog.config import configure_logging, get_bind_address, get_server_config
from catalog.registry import AgentRegistry
from catalog.sample_agents import SAMPLE_AGENTS
from catalog_server.agent_routes import router as agent_router

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

# nginx's "client closed request"; the client never sees it
CLIENT_CLOSED_REQUEST = 499


def create_app(registry: AgentRegistry | None = None) -> FastAPI:
    """Build the application.

    Args:
        registry: registry to serve; the sample agents are registered when omitted
    """
    server_config = get_server_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Register agents once on startup."""
        configure_logging(server_config["log_level"])
        if registry is not None:
            app.state.registry = registry
        else:
            app.state.registry = AgentRegistry.from_definitions(
                SAMPLE_AGENTS, ChatModelProvider()
            )
        logger.info("registered %d agents: %s", len(app.state.registry), app.state.registry.names)
        yield

    app = FastAPI(
        title="Agent Catalog API",
        description="Lists hosted agents and their display metadata",
        version=VERSION,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=server_config["cors_origins"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(ListingCancelled)
    async def listing_cancelled_handler(request: Request, exc: ListingCancelled) -> Response:
        # no partial body for a cancelled listing
        logger.info("listing cancelled: %s %s", request.method, request.url.path)
        return Response(status_code=CLIENT_CLOSED_REQUEST)

    app.include_router(agent_router)

    @app.get("/")
    def root(request: Request):
        """Health check endpoint."""
        return {
            "status": "ok",
            "version": VERSION,
            "agents": len(request.app.state.registry),
            "endpoints": {
                "agents": "/agents",
                "agent": "/agents/{name}",
            },
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    host, port = get_bind_address()
    uvicorn.run(app, host=host, port=port)
