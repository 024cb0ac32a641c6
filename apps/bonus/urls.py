from django.urls import path
from . import views

app_name = 'bonus'

urlpatterns = [
    path('calculate/', views.calculate_bonus_points, name='calculate'),
]
