from django.urls import path
from . import views

urlpatterns = [
    path('me/', views.my_payout, name='my_payout'),
    path('team/', views.team_payout, name='team_payout'),
]
