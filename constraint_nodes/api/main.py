"""Constraint Nodes API - template nodes and HTML for layout constraints.

This API converts parsed constraint groups without parsing them itself:
- Template nodes (JSON trees consumed by HTML templates)
- Rendered HTML fragments
- Instance color palettes
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from constraint_nodes import __version__, config
from constraint_nodes.api.routes import nodes, palettes, render
from constraint_nodes.palette import get_palette_registry

# Configure logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup: Pre-load registries
    logger.info("Loading palette definitions...")
    palette_registry = get_palette_registry()
    logger.info(f"Loaded {palette_registry.count()} palettes")

    logger.info("Constraint Nodes API ready")
    yield
    # Shutdown
    logger.info("Shutting down Constraint Nodes API")


# Create FastAPI app
app = FastAPI(
    title="Constraint Nodes API",
    description="""
## Template Nodes for Layout Constraints

Post a parsed constraint group, get back either the node tree the HTML
templates consume or the rendered fragment.

### Key Endpoints

- `POST /v1/nodes/constraint-group` - Node tree for a constraint group
- `POST /v1/nodes/constraint` - Node tree for a single constraint
- `POST /v1/render/constraint-group` - Rendered HTML fragment
- `GET /v1/palettes` - List instance color palettes
""",
    version=__version__,
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with /v1 prefix
app.include_router(nodes.router, prefix="/v1")
app.include_router(render.router, prefix="/v1")
app.include_router(palettes.router, prefix="/v1")


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "service": "Constraint Nodes API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "nodes": "/v1/nodes",
            "render": "/v1/render",
            "palettes": "/v1/palettes",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    palette_stats = get_palette_registry().get_stats()
    return {
        "status": "healthy",
        "palettes_loaded": palette_stats["palettes_loaded"],
        "default_palette": palette_stats["default_palette"],
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "constraint_nodes.api.main:app",
        host=config.HOST,
        port=config.PORT,
        reload=True,
    )
