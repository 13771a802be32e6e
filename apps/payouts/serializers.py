from django.utils import timezone
from rest_framework import serializers


class PayoutQuerySerializer(serializers.Serializer):
    year = serializers.IntegerField(required=False, min_value=2000, max_value=9999)
    month = serializers.IntegerField(required=False, min_value=1, max_value=12)

    def validate(self, data):
        today = timezone.localdate()
        data.setdefault('year', today.year)
        data.setdefault('month', today.month)
        return data


class CampaignBreakdownSerializer(serializers.Serializer):
    campaign_id = serializers.IntegerField()
    reference_id = serializers.CharField()
    title = serializers.CharField()
    order_count = serializers.IntegerField()
    total_sales = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_commission = serializers.DecimalField(max_digits=14, decimal_places=2)


class PayoutSerializer(serializers.Serializer):
    year = serializers.IntegerField()
    month = serializers.IntegerField()
    total_commission = serializers.DecimalField(max_digits=14, decimal_places=2)
    campaigns = CampaignBreakdownSerializer(many=True)


class SalesPersonPayoutSerializer(serializers.Serializer):
    user_id = serializers.IntegerField()
    name = serializers.CharField()
    current_rate = serializers.DecimalField(max_digits=5, decimal_places=2)
    total_commission = serializers.DecimalField(max_digits=14, decimal_places=2)
    campaigns = CampaignBreakdownSerializer(many=True)


class TeamPayoutSerializer(serializers.Serializer):
    year = serializers.IntegerField()
    month = serializers.IntegerField()
    grand_total_commission = serializers.DecimalField(max_digits=16, decimal_places=2)
    sales_persons = SalesPersonPayoutSerializer(many=True)
