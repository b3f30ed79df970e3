from apps.common.serializers import CamelCaseModelSerializer, iso_date, presence_messages
from .models import ProcurementRecord


class ProcurementRecordSerializer(CamelCaseModelSerializer):
    """
    Input and output serializer for procurement records.

    Field rules come from the model; only messages for missing or
    malformed values are declared here.
    """

    class Meta:
        model = ProcurementRecord
        fields = [
            'id',
            'produce_name',
            'produce_type',
            'date',
            'time',
            'tonnage',
            'cost',
            'dealer_name',
            'branch',
            'contact',
            'selling_price',
        ]
        read_only_fields = ['id']
        extra_kwargs = {
            'produce_name': presence_messages('Name of produce'),
            'produce_type': presence_messages('Type of produce'),
            'date': iso_date('Date'),
            'time': presence_messages('Time'),
            'tonnage': presence_messages('Tonnage', invalid='Tonnage must be a number'),
            'cost': presence_messages('Cost', invalid='Cost must be a number'),
            'dealer_name': presence_messages('Dealer Name'),
            'branch': presence_messages('Branch', invalid_choice='Branch must be either Maganjo or Matugga'),
            'contact': presence_messages('Contact'),
            'selling_price': presence_messages('Selling Price', invalid='Selling Price must be a number'),
        }
