from fastapi import APIRouter, Request, Depends
from fastapi.responses import JSONResponse
import logging
from app.domains.transactions.exceptions import (
    ConfigurationError,
    NoDataAvailable,
    RateLimited,
)
from app.domains.transactions.services import TransactionService

logger = logging.getLogger(__name__)

router = APIRouter()

# Dependency to get the transaction service from app.state
def get_transaction_service(request: Request) -> TransactionService:
    return request.app.state.transaction_service

@router.get("/transactions")
async def get_transactions(
    service: TransactionService = Depends(get_transaction_service)
):
    try:
        result = await service.get_transactions()
        return result.to_response()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)})
    except RateLimited as e:
        logger.info(f"Rate limited, nothing cached yet; retry in {e.retry_after}s")
        return JSONResponse(
            status_code=429,
            content={"error": "Rate limit exceeded", "retryAfter": e.retry_after},
            headers={"Retry-After": str(e.retry_after)},
        )
    except NoDataAvailable as e:
        logger.error(f"Error fetching transactions: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to fetch transactions"})
