from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models


class Campaign(models.Model):
    class Meta:
        app_label = 'campaigns'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['sales_person', 'status'], name='campaign_sales_status_idx'),
            models.Index(fields=['platform', 'created_at'], name='campaign_platform_created_idx'),
        ]

    PLATFORM_CHOICES = [
        ('facebook', 'Facebook'),
        ('instagram', 'Instagram'),
    ]

    TYPE_CHOICES = [
        ('post', 'Post'),
        ('live', 'Live'),
        ('event', 'Event'),
    ]

    # Status choices
    STATUS_CHOICES = [
        ('active', 'Active'),
        ('paused', 'Paused'),
        ('completed', 'Completed')
    ]

    # Assigned once on creation, e.g. FB-001
    reference_id = models.CharField(max_length=32, unique=True, editable=False)
    title = models.CharField(max_length=200)
    platform = models.CharField(max_length=20, choices=PLATFORM_CHOICES)
    campaign_type = models.CharField(max_length=20, choices=TYPE_CHOICES)
    url = models.URLField(max_length=500)
    sales_person = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='campaigns',
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='active')
    start_date = models.DateField(null=True, blank=True)
    end_date = models.DateField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def clean(self):
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValidationError("start_date must not be after end_date")

    def save(self, *args, **kwargs):
        if not self.reference_id:
            raise ValidationError("Campaign cannot be saved without a reference_id")
        if self.pk:  # Updating existing
            old_instance = Campaign.objects.filter(pk=self.pk).values(
                'reference_id', 'sales_person_id'
            ).first()
            if old_instance:
                if old_instance['reference_id'] != self.reference_id:
                    raise ValidationError("reference_id cannot be changed")
                if old_instance['sales_person_id'] != self.sales_person_id:
                    raise ValidationError("Sales person cannot be changed after campaign creation")
        self.clean()
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.reference_id} {self.title}"
