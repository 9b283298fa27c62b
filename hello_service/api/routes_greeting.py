"""Greeting endpoint."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

GREETING = "Hello, World! This is my CI/CD pipeline running on Google Cloud Run!"

router = APIRouter(tags=["greeting"])


@router.get("/", response_class=PlainTextResponse)
async def greeting():
    return GREETING
