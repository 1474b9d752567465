"""
# `app/main.py` - Application entry point

## Overview
Creates the FastAPI app, configures logging and CORS, registers the error
envelope handlers and mounts the routers.

---

## Public routers
- `/carts`
- `/products`
- `/config`
- `/whatsapp`

## Admin routers (prefix `/admin`)
- `/products`
- `/config`
- `/uploads`

All admin routers are protected with `require_admin` in their modules.

---

## Run
    uvicorn app.main:app --reload   (from the `backend/` directory)
"""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.core.errors import register_exception_handlers
from app.routers import carts, products, store_config, uploads, whatsapp


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Cart & Catalog API",
        description="Shopping cart, product catalog and WhatsApp ordering backend.",
        version="1.0.0",
        redirect_slashes=False,
    )

    # Configure CORS (allow front-end domain or all origins as specified)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include public routers
    app.include_router(carts.router)
    app.include_router(products.router)
    app.include_router(store_config.router)
    app.include_router(whatsapp.router)

    # Include admin routers (with prefix /admin)
    app.include_router(products.admin_router, prefix="/admin")
    app.include_router(store_config.admin_router, prefix="/admin")
    app.include_router(uploads.admin_router, prefix="/admin")

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app


app = create_app()

# Run the app directly with uvicorn (for development)
if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
