"""Pagination metadata carried in the X-Pagination response header."""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class PaginationMetadata(BaseModel):
    previous_page_link: str = ""
    next_page_link: str = ""
    total_count: int
    page_size: int
    current_page: int
    total_pages: int

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    def to_header(self) -> str:
        """Compact JSON with camelCase keys."""
        return self.model_dump_json(by_alias=True)
