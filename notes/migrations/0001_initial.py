from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
        ("categories", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Note",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("slug", models.SlugField(max_length=255)),
                ("content", models.TextField(blank=True)),
                ("is_pinned", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to="auth.user")),
            ],
        ),
        migrations.CreateModel(
            name="NoteCategory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("category", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="note_links", to="categories.category")),
                ("note", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="category_links", to="notes.note")),
            ],
            options={
                "db_table": "notes_note_categories",
            },
        ),
        migrations.AddField(
            model_name="note",
            name="categories",
            field=models.ManyToManyField(related_name="notes", through="notes.NoteCategory", to="categories.category"),
        ),
        migrations.AddConstraint(
            model_name="note",
            constraint=models.UniqueConstraint(fields=("user", "slug"), name="uniq_note_slug_per_user"),
        ),
        migrations.AddIndex(
            model_name="note",
            index=models.Index(fields=["user", "is_pinned"], name="note_user_pinned_idx"),
        ),
        migrations.AddConstraint(
            model_name="notecategory",
            constraint=models.UniqueConstraint(fields=("note", "category"), name="uniq_note_category"),
        ),
    ]
