# ward_core/common/api/pagination.py
from rest_framework.pagination import PageNumberPagination


class DefaultPagination(PageNumberPagination):
    """Paged list contract: { count, next, previous, results }."""
    page_size = 25
    page_size_query_param = "page_size"
    max_page_size = 200
