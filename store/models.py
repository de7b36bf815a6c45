"""
Quote data model for the quote service.
Quotes are immutable records created once at startup.
"""

from pydantic import BaseModel, Field, validator


class Quote(BaseModel):
    """语录模型"""
    id: int = Field(..., gt=0, description="语录ID，进程生命周期内唯一且稳定")
    text: str = Field(..., min_length=1, description="语录内容")
    author: str = Field(..., min_length=1, description="作者")
    category: str = Field(..., min_length=1, description="分类标签（小写）")

    @validator('text', 'author', 'category')
    def validate_not_blank(cls, v):
        if not v.strip():
            raise ValueError("Value must not be blank")
        return v

    @validator('category')
    def validate_category_lowercase(cls, v):
        if v != v.lower():
            raise ValueError(f"Category must be lowercase: {v!r}")
        return v

    class Config:
        frozen = True
