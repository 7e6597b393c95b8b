from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from plagiasure.config import CORS_ORIGINS, HOST, PORT
from plagiasure.logger import logger
from plagiasure.routers.plagiarism import router as plagiarism_router
from plagiasure.routers.reports import router as reports_router

app = FastAPI(title="PlagiaSure")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(plagiarism_router)
app.include_router(reports_router)


@app.get("/health")
def health():
    return {"status": "ok"}


logger.info("PlagiaSure API ready")


def run(host: str = HOST, port: int = PORT):
    import uvicorn

    logger.info(f"Starting HTTP API server on {host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == "__main__":
    run()
