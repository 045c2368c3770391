from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from indicacoes import __version__
from indicacoes.core.config import get_settings
from indicacoes.core.logging import setup_logging
from indicacoes.web.auth_router import auth_router
from indicacoes.web.router import web_router

# Configurar logging antes de criar app
setup_logging()
settings = get_settings()

app = FastAPI(
    title="Indicações API",
    description="Gestão de indicações, pagamentos de bônus e comprovantes",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router)
app.include_router(web_router)


@app.get("/health")
async def health_check():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
