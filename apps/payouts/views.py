from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from apps.authentication.permissions import IsActiveUser, IsAdmin
from . import services
from .serializers import PayoutQuerySerializer, PayoutSerializer, TeamPayoutSerializer


def _period(request):
    query = PayoutQuerySerializer(data=request.query_params)
    query.is_valid(raise_exception=True)
    return query.validated_data['year'], query.validated_data['month']


@api_view(['GET'])
@permission_classes([IsActiveUser])
def my_payout(request):
    """Commission earned by the calling sales person in a month"""
    year, month = _period(request)
    payout = services.get_my_payout(request.user, year, month)
    return Response(PayoutSerializer(payout).data)


@api_view(['GET'])
@permission_classes([IsActiveUser, IsAdmin])
def team_payout(request):
    """Commission of every sales person in a month"""
    year, month = _period(request)
    payout = services.get_team_payout(year, month)
    return Response(TeamPayoutSerializer(payout).data)
