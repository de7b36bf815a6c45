"""
API routes for the quote service.
Defines the single-quote and quote-collection endpoints.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request

from store import QuoteStore
from utils import api_logger, QuoteNotFoundError, ErrorCodes
from .models import QuoteResponse, ErrorResponse

router = APIRouter()


def get_quote_store(request: Request) -> QuoteStore:
    """从应用状态获取启动时加载的语录集合"""
    return request.app.state.quote_store


@router.get(
    "/quote",
    response_model=QuoteResponse,
    responses={404: {"model": ErrorResponse}},
    tags=["Quotes"]
)
async def get_quote(
    id: Optional[str] = Query(None, description="语录ID"),
    category: Optional[str] = Query(None, description="分类（区分大小写）"),
    store: QuoteStore = Depends(get_quote_store)
):
    """获取单条语录：按ID、按分类随机或全集随机"""
    quote = store.select_quote(quote_id=id, category=category)
    if quote is None:
        raise QuoteNotFoundError(
            f"No quote matches id={id!r} category={category!r}",
            ErrorCodes.QUOTE_NOT_FOUND,
            context={"id": id, "category": category}
        )

    api_logger.debug(f"[API] Selected quote {quote.id}")
    return QuoteResponse(**quote.model_dump())


@router.get("/quotes", response_model=List[QuoteResponse], tags=["Quotes"])
async def get_quotes(
    category: Optional[str] = Query(None, description="分类（区分大小写）"),
    store: QuoteStore = Depends(get_quote_store)
):
    """获取语录列表，可按分类过滤；无匹配时返回空数组"""
    quotes = store.list_quotes(category=category)
    return [QuoteResponse(**quote.model_dump()) for quote in quotes]
