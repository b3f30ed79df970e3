from django.contrib import admin
from .models import CashSale, CreditSale


class ReadOnlySaleAdmin(admin.ModelAdmin):
    """Sales are recorded through the API and never edited afterwards."""

    search_fields = ['produce_name', 'buyer_name', 'sales_agent_name']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(CashSale)
class CashSaleAdmin(ReadOnlySaleAdmin):
    list_display = [
        'produce_name',
        'tonnage',
        'amount_paid',
        'buyer_name',
        'sales_agent_name',
        'date',
        'time',
    ]
    list_filter = ['date']
    date_hierarchy = 'date'


@admin.register(CreditSale)
class CreditSaleAdmin(ReadOnlySaleAdmin):
    list_display = [
        'produce_name',
        'tonnage',
        'amount_due',
        'buyer_name',
        'nin',
        'location',
        'due_date',
        'dispatch_date',
    ]
    list_filter = ['due_date', 'location']
    search_fields = ReadOnlySaleAdmin.search_fields + ['nin', 'contact']
    date_hierarchy = 'due_date'
