import strawberry
from typing import List
from strawberry.types import Info

from apps.authentication import services
from core.graphql.permissions import require_admin
from .types import UserType


@strawberry.type
class AuthQueries:

    @strawberry.field
    def users(self, info: Info) -> List[UserType]:
        require_admin(info)
        return services.list_users()

    @strawberry.field
    def user(self, info: Info, id: strawberry.ID) -> UserType:
        require_admin(info)
        return services.get_user(id)
