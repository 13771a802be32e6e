import strawberry_django
from strawberry import auto
from apps.campaigns.graphql.types import CampaignType
from apps.orders.models import Order


@strawberry_django.type(Order)
class OrderType:
    id: auto
    reference_id: auto
    campaign: CampaignType
    products: auto
    order_total: auto
    snapshot_rate: auto
    commission_amount: auto
    status: auto
    order_date: auto
    created_at: auto
