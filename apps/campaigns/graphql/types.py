import strawberry_django
from strawberry import auto
from apps.authentication.graphql.types import UserType
from apps.campaigns.models import Campaign


@strawberry_django.type(Campaign)
class CampaignType:
    id: auto
    reference_id: auto
    title: auto
    platform: auto
    campaign_type: auto
    url: auto
    status: auto
    start_date: auto
    end_date: auto
    sales_person: UserType
    created_at: auto
