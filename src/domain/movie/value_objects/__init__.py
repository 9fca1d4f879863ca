"""Movie Value Objects"""
from .page import DEFAULT_PAGE_SIZE, Page, paginate

__all__ = ["DEFAULT_PAGE_SIZE", "Page", "paginate"]
