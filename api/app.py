"""FastAPI application exposing the waste disposal matching engine."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from api.disposal_api import router as disposal_router

app = FastAPI(
    title="Waste Disposal Matching Engine",
    description="Waste classification, disposal-center ranking and environmental impact scoring",
    version="1.0.0"
)

app.include_router(disposal_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health():
    return {"status": "ok", "service": "waste-disposal-matching"}
