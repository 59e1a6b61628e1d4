from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from pathlib import Path
from app.domains.transactions.routes import router as transaction_router
from app.domains.transactions.services import TransactionService
from app.shared.monobank_service import MonobankAPI
from app.config.setting import settings
import logging
from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s - %(message)s"
)

INDEX_PAGE = Path(__file__).parent / "app" / "web" / "index.html"

app = FastAPI(title=settings.app_name)

logging.info(f"Allowed origins: {settings.parsed_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.parsed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
async def startup():
    monobank_api = MonobankAPI(
        settings.monobank_api_url,
        settings.monobank_api_token,
        settings.monobank_account,
        timeout=settings.monobank_timeout_seconds,
    )
    if not monobank_api.token:
        logging.warning("MONOBANK_API_TOKEN is not set; /api/transactions will answer 500")

    # One service per process: it owns the statement cache
    app.state.transaction_service = TransactionService(
        monobank_api,
        cooldown_seconds=settings.cooldown_seconds,
        lookback_days=settings.lookback_days,
    )

@app.get("/", include_in_schema=False)
def index():
    return FileResponse(INDEX_PAGE)


app.include_router(transaction_router, prefix="/api", tags=["Transaction"])


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000)
