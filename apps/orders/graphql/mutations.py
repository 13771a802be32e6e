import datetime
import strawberry
from decimal import Decimal
from typing import List, Optional
from strawberry.types import Info

from apps.orders import services
from core.graphql.permissions import current_user
from .types import OrderType


@strawberry.input
class LineItemInput:
    name: str
    qty: int
    base_price: Decimal


@strawberry.input
class OrderInput:
    campaign_id: strawberry.ID
    products: List[LineItemInput]
    order_date: Optional[datetime.date] = None


@strawberry.type
class OrderMutations:

    @strawberry.mutation
    def create_order(self, info: Info, input: OrderInput) -> OrderType:
        user = current_user(info)
        return services.create_order(
            campaign_id=input.campaign_id,
            products=[
                {'name': item.name, 'qty': item.qty, 'base_price': item.base_price}
                for item in input.products
            ],
            order_date=input.order_date,
            user=user,
        )
