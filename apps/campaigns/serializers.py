from rest_framework import serializers

from apps.authentication.serializers import UserSummarySerializer
from .models import Campaign


class CampaignSerializer(serializers.ModelSerializer):
    type = serializers.CharField(source='campaign_type', read_only=True)
    sales_person = UserSummarySerializer(read_only=True)
    order_count = serializers.SerializerMethodField()

    class Meta:
        model = Campaign
        fields = (
            'id', 'reference_id', 'title', 'platform', 'type', 'url', 'status',
            'start_date', 'end_date', 'sales_person_id', 'sales_person',
            'order_count', 'created_at', 'updated_at',
        )
        read_only_fields = fields

    def get_order_count(self, obj):
        # Only present on list querysets annotated by the service layer
        return getattr(obj, 'order_count', None)


class CampaignDetailSerializer(CampaignSerializer):
    # Set on the instance from campaign_stats() by the view
    total_revenue = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)
    total_commission = serializers.DecimalField(max_digits=14, decimal_places=2, read_only=True)

    class Meta(CampaignSerializer.Meta):
        fields = CampaignSerializer.Meta.fields + ('total_revenue', 'total_commission')
        read_only_fields = fields


class CampaignCreateSerializer(serializers.Serializer):
    title = serializers.CharField(min_length=3, max_length=200)
    platform = serializers.ChoiceField(choices=Campaign.PLATFORM_CHOICES)
    type = serializers.ChoiceField(choices=Campaign.TYPE_CHOICES, source='campaign_type')
    url = serializers.URLField(max_length=500)
    sales_person_id = serializers.IntegerField()
    start_date = serializers.DateField(required=False, allow_null=True)
    end_date = serializers.DateField(required=False, allow_null=True)

    def validate(self, data):
        start_date, end_date = data.get('start_date'), data.get('end_date')
        if start_date and end_date and start_date > end_date:
            raise serializers.ValidationError({'end_date': 'end_date must not be before start_date'})
        return data


class CampaignUpdateSerializer(serializers.Serializer):
    IMMUTABLE_FIELDS = {
        'sales_person_id': 'Sales person cannot be changed after campaign creation',
        'sales_person': 'Sales person cannot be changed after campaign creation',
        'reference_id': 'reference_id cannot be changed',
    }

    title = serializers.CharField(min_length=3, max_length=200, required=False)
    platform = serializers.ChoiceField(choices=Campaign.PLATFORM_CHOICES, required=False)
    type = serializers.ChoiceField(choices=Campaign.TYPE_CHOICES, source='campaign_type', required=False)
    url = serializers.URLField(max_length=500, required=False)
    status = serializers.ChoiceField(choices=Campaign.STATUS_CHOICES, required=False)
    start_date = serializers.DateField(required=False, allow_null=True)
    end_date = serializers.DateField(required=False, allow_null=True)

    def validate(self, data):
        errors = {
            field: message
            for field, message in self.IMMUTABLE_FIELDS.items()
            if field in self.initial_data
        }
        if errors:
            raise serializers.ValidationError(errors)
        return data
