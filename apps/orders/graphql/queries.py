import strawberry
from typing import List, Optional
from strawberry.types import Info

from apps.orders import services
from core.graphql.permissions import current_user
from .types import OrderType


@strawberry.type
class OrderQueries:

    @strawberry.field
    def orders(self, info: Info, campaign_id: Optional[strawberry.ID] = None) -> List[OrderType]:
        return services.list_orders(current_user(info), campaign_id=campaign_id)

    @strawberry.field
    def order(self, info: Info, id: strawberry.ID) -> OrderType:
        return services.get_order(id, current_user(info))
