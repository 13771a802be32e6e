import datetime
import strawberry
from typing import Optional
from strawberry.types import Info

from apps.campaigns import services
from core.graphql.permissions import require_admin
from .types import CampaignType


@strawberry.input
class CampaignInput:
    title: str
    platform: str
    campaign_type: str
    url: str
    sales_person_id: strawberry.ID
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None


@strawberry.type
class CampaignMutations:

    @strawberry.mutation
    def create_campaign(self, info: Info, input: CampaignInput) -> CampaignType:
        require_admin(info)
        return services.create_campaign(
            title=input.title,
            platform=input.platform,
            campaign_type=input.campaign_type,
            url=input.url,
            sales_person_id=input.sales_person_id,
            start_date=input.start_date,
            end_date=input.end_date,
        )
