import math

from django.conf import settings
from rest_framework import serializers
from rest_framework.pagination import BasePagination
from rest_framework.response import Response


class PageParamsSerializer(serializers.Serializer):
    page = serializers.IntegerField(min_value=1, default=1)
    limit = serializers.IntegerField(min_value=1, required=False)


class PageLimitPagination(BasePagination):
    """
    page/limit pagination that reports total and totalPages.

    A page past the end is not an error: it comes back empty with the same
    meta so the client can step back.
    """

    def get_default_limit(self):
        return settings.NOTES_PAGE_SIZE

    def get_max_limit(self):
        return settings.NOTES_MAX_PAGE_SIZE

    def paginate_queryset(self, queryset, request, view=None):
        params = PageParamsSerializer(data=request.query_params)
        params.is_valid(raise_exception=True)

        self.page = params.validated_data["page"]
        requested = params.validated_data.get("limit") or self.get_default_limit()
        self.limit = min(requested, self.get_max_limit())
        self.total = queryset.count()

        offset = (self.page - 1) * self.limit
        if offset >= self.total:
            return []
        return list(queryset[offset:offset + self.limit])

    def get_meta(self):
        return {
            "total": self.total,
            "page": self.page,
            "limit": self.limit,
            "totalPages": math.ceil(self.total / self.limit),
        }

    def get_paginated_response(self, data):
        return Response({"success": True, "result": data, "meta": self.get_meta()})
