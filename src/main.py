# main.py
import os
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

load_dotenv()

from application.controllers.autentication_controller import router as auth_router
from application.controllers.empreendedor_controller import router as empreendedor_router
from domain.entities.errors import EmpreendedorError

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="API Empreendedores", version="0.1.0")

origins = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(EmpreendedorError)
def empreendedor_error_handler(request: Request, exc: EmpreendedorError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

app.include_router(auth_router)
app.include_router(empreendedor_router)

@app.get("/health")
def health():
    return {"status": "ok"}
