"""
Read-only quote operations for the quote service.
Lookup by id, category filtering and uniform random selection over an
immutable in-memory quote set.
"""

import json
import random
import re
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from utils import store_logger, ValidationError, ErrorCodes, UnifiedConfigManager
from .models import Quote
from .quotes import DEFAULT_QUOTES

# 开头的十进制整数部分（仅 ASCII 数字），如 "12abc" -> 12、"2.5" -> 2
LEADING_INT_PATTERN = re.compile(r"\s*([+-]?\d+)", re.ASCII)


class QuoteStore:
    """内存语录集合，启动后不再修改"""

    def __init__(self, quotes: Iterable[Quote] = DEFAULT_QUOTES,
                 rng: Optional[random.Random] = None):
        self._quotes: Tuple[Quote, ...] = tuple(quotes)
        self._rng = rng or random.Random()
        self._validate_unique_ids()
        store_logger.info(f"[QuoteStore] Loaded {len(self._quotes)} quotes")

    def _validate_unique_ids(self) -> None:
        seen = set()
        for quote in self._quotes:
            if quote.id in seen:
                raise ValidationError(
                    f"Duplicate quote id: {quote.id}",
                    ErrorCodes.VALIDATION_DUPLICATE_ID,
                    context={"id": quote.id}
                )
            seen.add(quote.id)

    @classmethod
    def from_file(cls, path: Union[str, Path], rng: Optional[random.Random] = None) -> "QuoteStore":
        """从JSON文件加载语录（对象数组）"""
        path = Path(path)
        store_logger.info(f"[QuoteStore] Loading quotes from {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValidationError(
                f"Failed to read quote file {path}: {e}",
                ErrorCodes.VALIDATION_INVALID_FILE,
                context={"path": str(path)}
            ) from e

        if not isinstance(raw, list) or not raw:
            raise ValidationError(
                f"Quote file {path} must contain a non-empty JSON array",
                ErrorCodes.VALIDATION_INVALID_FILE,
                context={"path": str(path)}
            )

        quotes = []
        for index, item in enumerate(raw):
            if not isinstance(item, dict):
                raise ValidationError(
                    f"Quote #{index} in {path} is not an object",
                    ErrorCodes.VALIDATION_INVALID_QUOTE,
                    context={"path": str(path), "index": index}
                )
            try:
                quotes.append(Quote(**item))
            except PydanticValidationError as e:
                raise ValidationError(
                    f"Invalid quote #{index} in {path}: {e}",
                    ErrorCodes.VALIDATION_INVALID_QUOTE,
                    context={"path": str(path), "index": index}
                ) from e

        return cls(quotes, rng=rng)

    @classmethod
    def from_config(cls, config: UnifiedConfigManager) -> "QuoteStore":
        """根据 quote_config 创建语录集合"""
        quote_config = config.get_quote_config()
        rng = random.Random(quote_config.random_seed) if quote_config.random_seed is not None else None

        if quote_config.data_file:
            return cls.from_file(config.resolve_path(quote_config.data_file), rng=rng)
        return cls(DEFAULT_QUOTES, rng=rng)

    @property
    def quotes(self) -> Tuple[Quote, ...]:
        return self._quotes

    def __len__(self) -> int:
        return len(self._quotes)

    def find_by_id(self, quote_id: Union[str, int]) -> Optional[Quote]:
        """按ID查找语录，ID没有整数前缀时视为未找到"""
        match = LEADING_INT_PATTERN.match(str(quote_id)) if quote_id is not None else None
        if match is None:
            store_logger.debug(f"[QuoteStore] Unparseable quote id: {quote_id!r}")
            return None

        target = int(match.group(1))
        return next((quote for quote in self._quotes if quote.id == target), None)

    def filter_by_category(self, category: str) -> List[Quote]:
        """按分类精确匹配（区分大小写）"""
        return [quote for quote in self._quotes if quote.category == category]

    def random_quote(self, category: Optional[str] = None) -> Optional[Quote]:
        """随机选取一条语录，可限定分类"""
        candidates = self.filter_by_category(category) if category else self._quotes
        if not candidates:
            return None
        return self._rng.choice(candidates)

    def select_quote(self, quote_id: Optional[str] = None,
                     category: Optional[str] = None) -> Optional[Quote]:
        """单条语录查询

        优先级：id > category > 全集随机。id 存在时不再考虑 category。
        """
        if quote_id:
            return self.find_by_id(quote_id)
        if category:
            return self.random_quote(category)
        return self.random_quote()

    def list_quotes(self, category: Optional[str] = None) -> List[Quote]:
        """语录列表查询，结果可能为空"""
        if category:
            return self.filter_by_category(category)
        return list(self._quotes)
