"""
inertial-dsp - API de filtragem e detecção

API para suavização, detecção de movimento e ZUPT sobre
amostras de sensores inerciais de eixo único.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from inertial_dsp import __version__
from inertial_dsp.infrastructure.config import get_settings, setup_logging
from inertial_dsp.interface.router import router


setup_logging(get_settings().log_level)

app = FastAPI(
    title="inertial-dsp",
    description="API de filtragem e detecção para dead-reckoning inercial.",
    version=__version__
)

# CORS
origins = [
    "http://localhost",
    "http://localhost:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Router
app.include_router(router)


@app.get("/", summary="Health check")
def read_root():
    return {"status": "inertial-dsp online", "version": __version__}


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8001, reload=True)
