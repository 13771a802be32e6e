from rest_framework import serializers
from .models import Order


class LineItemSerializer(serializers.Serializer):
    name = serializers.CharField(allow_blank=True, max_length=200)
    qty = serializers.IntegerField(required=False, allow_null=True)
    base_price = serializers.DecimalField(max_digits=12, decimal_places=2, required=False, allow_null=True)


class OrderCampaignSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    reference_id = serializers.CharField()
    title = serializers.CharField()
    sales_person_id = serializers.IntegerField()


class OrderSerializer(serializers.ModelSerializer):
    campaign = OrderCampaignSerializer(read_only=True)

    class Meta:
        model = Order
        fields = (
            'id', 'reference_id', 'campaign_id', 'campaign', 'products', 'order_total',
            'snapshot_rate', 'commission_amount', 'status', 'order_date',
            'created_at', 'updated_at',
        )
        read_only_fields = fields


class OrderCreateSerializer(serializers.Serializer):
    campaign_id = serializers.IntegerField()
    products = LineItemSerializer(many=True, allow_empty=True)
    order_date = serializers.DateField(required=False, allow_null=True)


class OrderUpdateSerializer(serializers.Serializer):
    IMMUTABLE_FIELDS = {
        'campaign_id': 'Campaign cannot be changed after order creation',
        'campaign': 'Campaign cannot be changed after order creation',
        'reference_id': 'reference_id cannot be changed',
        'snapshot_rate': 'snapshot_rate is fixed when the order is created',
    }

    products = LineItemSerializer(many=True, required=False, allow_empty=True)
    status = serializers.ChoiceField(choices=Order.STATUS_CHOICES, required=False)
    order_date = serializers.DateField(required=False)

    def validate(self, data):
        errors = {
            field: message
            for field, message in self.IMMUTABLE_FIELDS.items()
            if field in self.initial_data
        }
        if errors:
            raise serializers.ValidationError(errors)
        return data


class OrderFilterSerializer(serializers.Serializer):
    campaign = serializers.IntegerField(required=False)
    start_date = serializers.DateField(required=False)
    end_date = serializers.DateField(required=False)
