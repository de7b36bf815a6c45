"""
API data models for the quote service.
Pydantic models for response serialization.
"""

from pydantic import BaseModel, Field


class QuoteResponse(BaseModel):
    """语录响应模型"""
    id: int = Field(..., description="语录ID")
    text: str = Field(..., description="语录内容")
    author: str = Field(..., description="作者")
    category: str = Field(..., description="分类标签")

    class Config:
        from_attributes = True


class ErrorResponse(BaseModel):
    """错误响应模型"""
    error: str = Field(..., description="错误信息")
