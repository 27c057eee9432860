from datetime import datetime
from typing import List, Mapping, Tuple

from pydantic import BaseModel, ConfigDict

# Category name -> documented method names, in page order
MethodCatalog = Mapping[str, Tuple[str, ...]]


class CategoryReport(BaseModel):
    """Documented vs implemented methods for one API package"""
    model_config = ConfigDict(frozen=True)

    name: str
    matched: List[str] = []  # documented and implemented, catalog spelling
    missing: List[str] = []  # documented, not implemented
    extra: List[str] = []  # implemented but not on the documentation page

    @property
    def documented_count(self) -> int:
        return len(self.matched) + len(self.missing)


class ProgressReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    percentage: float
    generated_at: datetime
    categories: List[CategoryReport]
    markdown: str
