import logging

from django.db.models import Count
from rest_framework import generics, status
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from core.permissions import IsOwner
from .models import Category
from .serializers import CategorySerializer

logger = logging.getLogger(__name__)


def _owned_categories(user):
    return (
        Category.objects.filter(user=user)
        .annotate(note_count=Count("note_links"))
        .order_by("name", "id")
    )


class CategoryListCreateView(generics.ListCreateAPIView):
    serializer_class = CategorySerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None

    def get_queryset(self):
        return _owned_categories(self.request.user)

    def list(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response({"success": True, "result": serializer.data})

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        category = serializer.save(user=request.user)
        logger.info("Category %s created by user %s", category.pk, request.user.pk)
        return Response(
            {"success": True, "result": self.get_serializer(category).data},
            status=status.HTTP_201_CREATED,
        )


class CategoryDetailView(generics.RetrieveUpdateDestroyAPIView):
    serializer_class = CategorySerializer
    permission_classes = [IsAuthenticated, IsOwner]

    def get_queryset(self):
        return _owned_categories(self.request.user)

    def get_object(self):
        try:
            category = self.get_queryset().get(pk=self.kwargs["pk"])
        except Category.DoesNotExist:
            raise NotFound("Category not found")
        self.check_object_permissions(self.request, category)
        return category

    def retrieve(self, request, *args, **kwargs):
        return Response({"success": True, "result": self.get_serializer(self.get_object()).data})

    def update(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_object(), data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        return Response({"success": True, "result": serializer.data})

    def destroy(self, request, *args, **kwargs):
        category = self.get_object()
        category_id = category.pk
        # join rows cascade; notes stay
        category.delete()
        logger.info("Category %s deleted by user %s", category_id, request.user.pk)
        return Response({"success": True, "message": "Category deleted successfully"})
