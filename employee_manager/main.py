# employee_manager/main.py
import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager
from employee_manager.routes import employee_router
from employee_manager.database import connect_store, close_store, insert_sample_data
from employee_manager.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    store = connect_store()
    if settings.SEED_SAMPLE_DATA:
        insert_sample_data(store)
    yield
    # Shutdown
    close_store()

app = FastAPI(title="Employee Manager", lifespan=lifespan)

app.include_router(employee_router, prefix=settings.API_PREFIX, tags=["employees"])

@app.get("/")
async def root():
    return {"message": "Welcome to the Employee Manager"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "employee_manager.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
