from rest_framework import status, viewsets
from rest_framework.response import Response

from apps.authentication.permissions import IsActiveUser, IsAdminOrReadOnly
from . import services
from .models import Campaign
from .serializers import (
    CampaignCreateSerializer,
    CampaignDetailSerializer,
    CampaignSerializer,
    CampaignUpdateSerializer,
)


class CampaignViewSet(viewsets.ModelViewSet):
    permission_classes = [IsActiveUser, IsAdminOrReadOnly]
    serializer_class = CampaignSerializer
    queryset = Campaign.objects.all()

    def get_queryset(self):
        return services.list_campaigns(self.request.user)

    def get_object(self):
        return services.get_campaign(self.kwargs['pk'], self.request.user)

    def retrieve(self, request, *args, **kwargs):
        campaign = self.get_object()
        for field, value in services.campaign_stats(campaign).items():
            setattr(campaign, field, value)
        return Response(CampaignDetailSerializer(campaign, context={'request': request}).data)

    def create(self, request, *args, **kwargs):
        serializer = CampaignCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        campaign = services.create_campaign(**serializer.validated_data)
        return Response(CampaignSerializer(campaign).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        campaign = self.get_object()
        serializer = CampaignUpdateSerializer(data=request.data, partial=kwargs.get('partial', False))
        serializer.is_valid(raise_exception=True)
        campaign = services.update_campaign(campaign, **serializer.validated_data)
        return Response(CampaignSerializer(campaign).data)

    def destroy(self, request, *args, **kwargs):
        services.delete_campaign(self.get_object())
        return Response(status=status.HTTP_204_NO_CONTENT)
