from rest_framework import serializers

from stores.models import Store


class StoreLocationSerializer(serializers.Serializer):
    type = serializers.CharField()
    coordinates = serializers.ListField(child=serializers.FloatField())
    address = serializers.CharField()


class StoreSerializer(serializers.ModelSerializer):
    """
    Read-only store representation for the JSON API.
    """

    tags = serializers.ListField(child=serializers.CharField(), read_only=True)
    location = StoreLocationSerializer(read_only=True)
    author = serializers.CharField(source="author.name", read_only=True)

    class Meta:
        model = Store
        fields = [
            "id",
            "name",
            "slug",
            "description",
            "tags",
            "created",
            "location",
            "photo",
            "author",
        ]
        read_only_fields = fields


class StoreSearchResultSerializer(serializers.ModelSerializer):
    class Meta:
        model = Store
        fields = ["slug", "name"]


class NearbyStoreSerializer(serializers.ModelSerializer):
    location = StoreLocationSerializer(read_only=True)
    distance = serializers.FloatField(read_only=True)

    class Meta:
        model = Store
        fields = ["slug", "name", "description", "location", "photo", "distance"]


class TagCountSerializer(serializers.Serializer):
    tag = serializers.CharField()
    count = serializers.IntegerField()


class TopStoreSerializer(serializers.ModelSerializer):
    average_rating = serializers.FloatField(read_only=True)
    review_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Store
        fields = ["slug", "name", "photo", "average_rating", "review_count"]
