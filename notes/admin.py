from django.contrib import admin
from .models import Note, NoteCategory


class NoteCategoryInline(admin.TabularInline):
    model = NoteCategory
    extra = 0


@admin.register(Note)
class NoteAdmin(admin.ModelAdmin):
    list_display = ["id", "title", "slug", "user", "is_pinned", "updated_at"]
    list_filter = ["is_pinned"]
    search_fields = ["title", "slug"]
    readonly_fields = ["slug", "created_at", "updated_at"]
    inlines = [NoteCategoryInline]
