from django.contrib import admin

from .models import Review


@admin.register(Review)
class ReviewAdmin(admin.ModelAdmin):
    list_display = ("store", "author", "rating", "created")
    list_filter = ("rating",)
    search_fields = ("store__name", "author__email", "text")
    raw_id_fields = ("store", "author")
