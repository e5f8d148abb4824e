from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from tonaddr.api.routes import address
from tonaddr.config import settings
import logging

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)

app = FastAPI(
    title="TON Address Converter API",
    description="Conversion between raw and user-friendly TON address formats",
    version="1.0.0"
)

allowed_origins = settings.allowed_origins
allowed_origins.extend([
    "http://localhost:3000",
    "http://localhost:5173"
])

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(address.router, prefix="/v1/address", tags=["address"])


@app.get("/")
async def root():
    return {"message": "TON Address Converter API", "status": "active"}

@app.get("/health")
async def health_check():
    return {"status": "healthy"}
