from contextlib import asynccontextmanager

from fastapi import FastAPI

from shared.config.database import dispose_engine
from shared.config.settings import get_settings

from services.product_service.main import product_app, init_product_store


# Starlette does not run the lifespan of mounted apps, so the cluster app
# prepares the product store itself.
@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_product_store()
    yield
    await dispose_engine()


settings = get_settings()
app = FastAPI(title="Inventory", version="1.0.0", lifespan=lifespan)


@app.get("/health")
async def health_check():
    return {"status": "ok", "env": settings.env}


app.mount("/api", product_app)
