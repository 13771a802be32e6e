import strawberry
from apps.authentication.graphql.queries import AuthQueries
from apps.campaigns.graphql.mutations import CampaignMutations
from apps.campaigns.graphql.queries import CampaignQueries
from apps.orders.graphql.mutations import OrderMutations
from apps.orders.graphql.queries import OrderQueries


@strawberry.type
class Query(CampaignQueries, OrderQueries, AuthQueries):
    pass


@strawberry.type
class Mutation(CampaignMutations, OrderMutations):
    pass


schema = strawberry.Schema(query=Query, mutation=Mutation)
