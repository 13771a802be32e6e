from django.db import models


class Counter(models.Model):
    """Last allocated value of a named sequence (e.g. ``campaign_facebook``)."""

    class Meta:
        app_label = 'sequences'

    key = models.CharField(max_length=100, unique=True)
    seq = models.PositiveBigIntegerField(default=0)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.key} -> {self.seq}"
