from django.contrib import admin

from .models import Store, StoreTag


class StoreTagInline(admin.TabularInline):
    model = StoreTag
    extra = 0
    fields = ("name", "position")


@admin.register(Store)
class StoreAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "author", "address", "created")
    search_fields = ("name", "description", "address")
    readonly_fields = ("slug",)
    raw_id_fields = ("author",)
    inlines = [StoreTagInline]
