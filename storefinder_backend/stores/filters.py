import django_filters

from stores.models import Store


class StoreFilter(django_filters.FilterSet):
    tag = django_filters.CharFilter(method="filter_tag")
    author = django_filters.NumberFilter(field_name="author_id")

    class Meta:
        model = Store
        fields = ["tag", "author"]

    def filter_tag(self, queryset, name, value):
        return queryset.tagged(value)
