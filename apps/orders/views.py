from rest_framework import status, viewsets
from rest_framework.response import Response

from apps.authentication.permissions import IsActiveUser
from . import services
from .models import Order
from .serializers import (
    OrderCreateSerializer,
    OrderFilterSerializer,
    OrderSerializer,
    OrderUpdateSerializer,
)


class OrderViewSet(viewsets.ModelViewSet):
    permission_classes = [IsActiveUser]
    serializer_class = OrderSerializer
    queryset = Order.objects.all()

    def get_queryset(self):
        filters = OrderFilterSerializer(data=self.request.query_params)
        filters.is_valid(raise_exception=True)
        return services.list_orders(
            self.request.user,
            campaign_id=filters.validated_data.get('campaign'),
            start_date=filters.validated_data.get('start_date'),
            end_date=filters.validated_data.get('end_date'),
        )

    def get_object(self):
        return services.get_order(self.kwargs['pk'], self.request.user)

    def create(self, request, *args, **kwargs):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        order = services.create_order(
            campaign_id=serializer.validated_data['campaign_id'],
            products=serializer.validated_data['products'],
            order_date=serializer.validated_data.get('order_date'),
            user=request.user,
        )
        return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        order = self.get_object()
        serializer = OrderUpdateSerializer(data=request.data, partial=kwargs.get('partial', False))
        serializer.is_valid(raise_exception=True)
        order = services.update_order(order, **serializer.validated_data)
        return Response(OrderSerializer(order).data)

    def destroy(self, request, *args, **kwargs):
        services.delete_order(self.get_object())
        return Response(status=status.HTTP_204_NO_CONTENT)
