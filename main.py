# main.py

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ai.gemini import GeminiGateway
from core.config import configure_logging, get_settings
from core.errors import InternalError
from core.pipeline import generate_itinerary, to_response
from core.result import Err

# Charge les variables d'environnement (.env)
load_dotenv()

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title="AI Trip Planner", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_gateway() -> GeminiGateway:
    return GeminiGateway(settings)


@app.get("/health")
def health():
    return {"status": "ok", "model": settings.gemini_model}


@app.post("/api/generate-itinerary")
async def generate_itinerary_endpoint(request: Request):
    # Raw JSON body, same camelCase keys as the form. No request model: every
    # field check belongs to the pipeline so that errors keep its payload shape.
    try:
        payload = await request.json()
    except ValueError as e:
        result = Err(InternalError(e))
    else:
        result = await run_in_threadpool(generate_itinerary, payload, get_gateway())
    body, status = to_response(result)
    return JSONResponse(body, status_code=status)
