from fastapi import APIRouter

from caesar_breaker.api.v1.endpoints import analyze, decrypt, encrypt, tables

api_router = APIRouter()

api_router.include_router(
    analyze.router,
    prefix="/analyze",
    tags=["Analysis"],
)

api_router.include_router(
    decrypt.router,
    prefix="/decrypt",
    tags=["Decryption"],
)

api_router.include_router(
    encrypt.router,
    prefix="/encrypt",
    tags=["Encryption"],
)

api_router.include_router(
    tables.router,
    prefix="/tables",
    tags=["Tables"],
)
