import logging

from django.db import transaction
from rest_framework import generics, status
from rest_framework.exceptions import NotFound
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.pagination import PageLimitPagination
from core.permissions import IsOwner
from .filters import NoteFilterSerializer, filter_notes, order_notes, with_categories
from .models import Note
from .serializers import NoteSerializer, NoteWriteSerializer

logger = logging.getLogger(__name__)


def _note_filters(request):
    filters = NoteFilterSerializer(data=request.query_params)
    filters.is_valid(raise_exception=True)
    return filters.validated_data


class NoteListCreateView(generics.ListCreateAPIView):
    """Unpinned notes of the current user, searched, filtered and paginated."""

    permission_classes = [IsAuthenticated]
    pagination_class = PageLimitPagination

    def get_serializer_class(self):
        if self.request.method == "POST":
            return NoteWriteSerializer
        return NoteSerializer

    def get_queryset(self):
        filters = _note_filters(self.request)
        queryset = filter_notes(
            self.request.user,
            pinned=False,
            search=filters["search"],
            category=filters["category"],
        )
        return with_categories(order_notes(queryset, filters["sort_by"]))

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        note = serializer.save(user=request.user)
        logger.info("Note %s created by user %s", note.pk, request.user.pk)
        return Response(
            {"success": True, "result": NoteSerializer(note).data},
            status=status.HTTP_201_CREATED,
        )


class PinnedNoteListView(generics.ListAPIView):
    """Pinned notes sit outside search and sort; only the category filter applies."""

    serializer_class = NoteSerializer
    permission_classes = [IsAuthenticated]
    pagination_class = None

    def get_queryset(self):
        filters = _note_filters(self.request)
        queryset = filter_notes(self.request.user, pinned=True, category=filters["category"])
        return with_categories(order_notes(queryset))

    def list(self, request, *args, **kwargs):
        notes = list(self.get_queryset())
        return Response(
            {
                "success": True,
                "result": self.get_serializer(notes, many=True).data,
                "meta": {"total": len(notes)},
            }
        )


class NotePinToggleView(APIView):
    permission_classes = [IsAuthenticated]

    def patch(self, request, pk):
        with transaction.atomic():
            note = (
                Note.objects.select_for_update()
                .filter(pk=pk, user=request.user)
                .only("id", "is_pinned")
                .first()
            )
            if note is None:
                raise NotFound("Note not found or access denied")

            is_pinned = not note.is_pinned
            # queryset update keeps updated_at untouched so pinning doesn't reorder the list
            Note.objects.filter(pk=note.pk, user=request.user).update(is_pinned=is_pinned)

        logger.info("Note %s %s by user %s", note.pk, "pinned" if is_pinned else "unpinned", request.user.pk)
        return Response(
            {
                "success": True,
                "message": f"Note {'pinned' if is_pinned else 'unpinned'} successfully",
                "result": {"id": note.pk, "isPinned": is_pinned},
            }
        )


class NoteDetailView(generics.RetrieveUpdateDestroyAPIView):
    permission_classes = [IsAuthenticated, IsOwner]
    lookup_field = "slug"

    def get_serializer_class(self):
        if self.request.method in ("PUT", "PATCH"):
            return NoteWriteSerializer
        return NoteSerializer

    def get_queryset(self):
        return with_categories(Note.objects.filter(user=self.request.user))

    def get_object(self):
        note = self.get_queryset().filter(slug=self.kwargs["slug"]).first()
        if note is None:
            raise NotFound("Note not found")
        self.check_object_permissions(self.request, note)
        return note

    def retrieve(self, request, *args, **kwargs):
        return Response({"success": True, "result": NoteSerializer(self.get_object()).data})

    def update(self, request, *args, **kwargs):
        # PUT is treated as a partial update as well
        serializer = self.get_serializer(self.get_object(), data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        note = serializer.save()
        logger.info("Note %s updated by user %s", note.pk, request.user.pk)

        note = self.get_queryset().get(pk=note.pk)
        return Response({"success": True, "result": NoteSerializer(note).data})

    def destroy(self, request, *args, **kwargs):
        note = self.get_object()
        note_id = note.pk
        note.delete()
        logger.info("Note %s deleted by user %s", note_id, request.user.pk)
        return Response({"success": True, "message": "Note deleted successfully"})
