from django.urls import path
from . import views

app_name = 'procurement'

urlpatterns = [
    # POST /procurement - record produce bought (managers only)
    path('procurement', views.ProcurementCreateView.as_view(), name='procurement-create'),
]
