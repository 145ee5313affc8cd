# stores/views/api.py

"""
STORE JSON API (read-only, AllowAny)

- GET /api/stores/                 list, filterable by ?tag= and ?author=
- GET /api/stores/<slug>/          single store
- GET /api/stores/near/?lat=&lng=  nearest stores within the default radius
- GET /api/stores/top/             top-rated stores (>= 2 reviews)
- GET /api/search/?q=              name / description search
- GET /api/tags/                   tag usage counts
"""

from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from stores.filters import StoreFilter
from stores.models import Store
from stores.serializers import (
    NearbyStoreSerializer,
    StoreSearchResultSerializer,
    StoreSerializer,
    TagCountSerializer,
    TopStoreSerializer,
)
from stores.services.exceptions import InvalidCoordinatesError


class StoreViewSet(viewsets.ReadOnlyModelViewSet):
    """
    Store API
    """

    queryset = Store.objects.visible().order_by("-created")
    serializer_class = StoreSerializer
    permission_classes = [AllowAny]
    filterset_class = StoreFilter
    lookup_field = "slug"

    @extend_schema(
        parameters=[
            OpenApiParameter("lat", float, required=True),
            OpenApiParameter("lng", float, required=True),
            OpenApiParameter("distance", int, required=False, description="metres"),
        ],
        responses={200: NearbyStoreSerializer(many=True)},
    )
    @action(detail=False, methods=["get"], url_path="near")
    def near(self, request):
        """
        GET /api/stores/near/?lat=..&lng=..

        Rules:
        - lat/lng are required and range-checked
        - at most 10 stores, nearest first
        """
        distance = request.query_params.get("distance")
        try:
            max_distance = float(distance) if distance else None
            stores = Store.objects.near(
                request.query_params.get("lng"),
                request.query_params.get("lat"),
                max_distance=max_distance,
            )
        except (InvalidCoordinatesError, ValueError) as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(NearbyStoreSerializer(stores, many=True).data)

    @extend_schema(responses={200: TopStoreSerializer(many=True)})
    @action(detail=False, methods=["get"], url_path="top")
    def top(self, request):
        return Response(TopStoreSerializer(Store.objects.top_stores(), many=True).data)


@extend_schema(
    parameters=[OpenApiParameter("q", str, required=True)],
    responses={200: StoreSearchResultSerializer(many=True)},
)
@api_view(["GET"])
@permission_classes([AllowAny])
def search_stores(request):
    stores = Store.objects.search(request.query_params.get("q", ""))
    return Response(StoreSearchResultSerializer(stores, many=True).data)


@extend_schema(responses={200: TagCountSerializer(many=True)})
@api_view(["GET"])
@permission_classes([AllowAny])
def tags_list(request):
    return Response(TagCountSerializer(Store.objects.tags_list(), many=True).data)
