from rest_framework.pagination import PageNumberPagination


class StandardResultsSetPagination(PageNumberPagination):
    """Page-number pagination; ``PAGE_SIZE`` by default, capped ``page_size`` override."""

    page_size_query_param = "page_size"
    max_page_size = 100
