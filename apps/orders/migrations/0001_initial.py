import django.core.serializers.json
import django.db.models.deletion
import django.utils.timezone
from decimal import Decimal
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('campaigns', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Order',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('reference_id', models.CharField(editable=False, max_length=48, unique=True)),
                ('products', models.JSONField(default=list, encoder=django.core.serializers.json.DjangoJSONEncoder)),
                ('order_total', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('snapshot_rate', models.DecimalField(decimal_places=2, editable=False, max_digits=5)),
                ('commission_amount', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=12)),
                ('status', models.CharField(choices=[('active', 'Active'), ('cancelled', 'Cancelled')], default='active', max_length=20)),
                ('order_date', models.DateField(default=django.utils.timezone.localdate)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('campaign', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='orders', to='campaigns.campaign')),
            ],
            options={
                'ordering': ['-created_at'],
                'indexes': [
                    models.Index(fields=['campaign', 'status'], name='order_campaign_status_idx'),
                    models.Index(fields=['status', 'order_date'], name='order_status_date_idx'),
                ],
            },
        ),
    ]
