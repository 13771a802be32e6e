import strawberry_django
from strawberry import auto
from apps.authentication.models import User


@strawberry_django.type(User)
class UserType:
    id: auto
    name: auto
    username: auto
    role: auto
    commission_rate: auto
    status: auto
    date_joined: auto
