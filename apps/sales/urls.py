from django.urls import path
from . import views

app_name = 'sales'

urlpatterns = [
    # POST /sales/cash   - record a cash sale (sales agents only)
    # POST /sales/credit - record a credit sale (sales agents only)
    path('cash', views.CashSaleCreateView.as_view(), name='cash-sale-create'),
    path('credit', views.CreditSaleCreateView.as_view(), name='credit-sale-create'),
]
