from decimal import Decimal

from django.core.serializers.json import DjangoJSONEncoder
from django.db import models
from django.utils import timezone


class Order(models.Model):
    class Meta:
        app_label = 'orders'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['campaign', 'status'], name='order_campaign_status_idx'),
            models.Index(fields=['status', 'order_date'], name='order_status_date_idx'),
        ]

    STATUS_CHOICES = [
        ('active', 'Active'),
        ('cancelled', 'Cancelled'),
    ]

    # e.g. FB-001-01, assigned once on creation
    reference_id = models.CharField(max_length=48, unique=True, editable=False)
    campaign = models.ForeignKey('campaigns.Campaign', on_delete=models.CASCADE, related_name='orders')
    # [{"name": ..., "qty": ..., "base_price": "12.50"}, ...]
    products = models.JSONField(default=list, encoder=DjangoJSONEncoder)
    order_total = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    # Sales person's commission rate when the order was created; never refreshed
    snapshot_rate = models.DecimalField(max_digits=5, decimal_places=2, editable=False)
    commission_amount = models.DecimalField(max_digits=12, decimal_places=2, default=Decimal('0.00'))
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='active')
    order_date = models.DateField(default=timezone.localdate)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return self.reference_id
