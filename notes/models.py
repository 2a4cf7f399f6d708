from django.db import models
from django.contrib.auth.models import User

from categories.models import Category


class Note(models.Model):
    user = models.ForeignKey(User, on_delete=models.CASCADE)
    title = models.CharField(max_length=200)
    slug = models.SlugField(max_length=255)
    content = models.TextField(blank=True)
    is_pinned = models.BooleanField(default=False)
    categories = models.ManyToManyField(Category, through="NoteCategory", related_name="notes")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["user", "slug"], name="uniq_note_slug_per_user")
        ]
        indexes = [
            models.Index(fields=["user", "is_pinned"], name="note_user_pinned_idx"),
        ]

    def __str__(self):
        return self.title

    def set_categories(self, category_ids):
        """Replace every category association of this note. Run inside a transaction."""
        NoteCategory.objects.filter(note=self).delete()
        NoteCategory.objects.bulk_create(
            [NoteCategory(note=self, category_id=category_id) for category_id in category_ids]
        )


class NoteCategory(models.Model):
    note = models.ForeignKey(Note, on_delete=models.CASCADE, related_name="category_links")
    category = models.ForeignKey(Category, on_delete=models.CASCADE, related_name="note_links")

    class Meta:
        db_table = "notes_note_categories"
        constraints = [
            models.UniqueConstraint(fields=["note", "category"], name="uniq_note_category")
        ]
