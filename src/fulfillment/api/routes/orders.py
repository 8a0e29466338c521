"""Order endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from ...schemas.orders import OrderQuoteResponse, OrderRequest
from ...services.orders.service import quote_order

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("/quote", response_model=OrderQuoteResponse, status_code=status.HTTP_200_OK)
def quote(payload: OrderRequest) -> OrderQuoteResponse:
    try:
        return quote_order(payload)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except Exception as exc:
        logging.exception(f"Error processing order: {exc}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Order processing failed: {str(exc)}",
        ) from exc
