from django.contrib import admin
from .models import ProcurementRecord


@admin.register(ProcurementRecord)
class ProcurementRecordAdmin(admin.ModelAdmin):
    """
    Read-only admin for procurement records.

    Records are created through the API and never edited afterwards.
    """

    list_display = [
        'produce_name',
        'produce_type',
        'tonnage',
        'cost',
        'selling_price',
        'dealer_name',
        'branch',
        'date',
    ]
    list_filter = ['branch', 'produce_type', 'date']
    search_fields = ['produce_name', 'dealer_name', 'contact']
    date_hierarchy = 'date'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
