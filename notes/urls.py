from django.urls import path
from .views import NoteListCreateView, PinnedNoteListView, NotePinToggleView, NoteDetailView

urlpatterns = [
    path("", NoteListCreateView.as_view(), name="note-list"),
    path("pinned/", PinnedNoteListView.as_view(), name="note-pinned"),
    path("<int:pk>/pin/", NotePinToggleView.as_view(), name="note-pin"),
    path("<slug:slug>/", NoteDetailView.as_view(), name="note-detail"),
]
