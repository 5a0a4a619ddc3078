"""FastAPI application for the drilling rotation generator."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from drillrota import __version__
from routers import export, schedule

app = FastAPI(
    title="Drill Rota Generator",
    description="Three-supervisor drilling rotation with constant double coverage",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins in development
    allow_credentials=False,  # Must be False when allow_origins is "*"
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"],
)

app.include_router(schedule.router, prefix="/api/schedule", tags=["schedule"])
app.include_router(export.router, prefix="/api/export", tags=["export"])


@app.get("/")
def root():
    return {"message": "Drill Rota Generator API", "docs": "/docs"}
