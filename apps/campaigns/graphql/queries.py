import strawberry
from typing import List
from strawberry.types import Info

from apps.campaigns import services
from core.graphql.permissions import current_user
from .types import CampaignType


@strawberry.type
class CampaignQueries:

    @strawberry.field
    def campaigns(self, info: Info) -> List[CampaignType]:
        return services.list_campaigns(current_user(info))

    @strawberry.field
    def campaign(self, info: Info, id: strawberry.ID) -> CampaignType:
        return services.get_campaign(id, current_user(info))
