from django.db import models
import uuid

from apps.common.validators import (
    MIN_AMOUNT,
    MIN_NAME_LENGTH,
    MIN_TONNAGE,
    MinimumLengthValidator,
    MinimumValueValidator,
    alphabetic,
    alphanumeric,
    phone_number,
)


class Branch(models.TextChoices):
    MAGANJO = 'Maganjo', 'Maganjo'
    MATUGGA = 'Matugga', 'Matugga'


class ProcurementRecord(models.Model):
    """Produce bought from a dealer and brought into a branch."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # Produce
    produce_name = models.CharField(
        max_length=100,
        validators=[alphanumeric('Name of produce must be alpha-numeric')],
    )
    produce_type = models.CharField(
        max_length=100,
        validators=[
            alphabetic('Type of produce must be alphabetic characters only'),
            MinimumLengthValidator(MIN_NAME_LENGTH, message='Type of produce must be at least 2 characters'),
        ],
    )

    # When
    date = models.DateField()
    time = models.CharField(max_length=20)

    # Quantities and money (UGX)
    tonnage = models.IntegerField(
        validators=[MinimumValueValidator(MIN_TONNAGE, message='Tonnage must be at least 100')],
    )
    cost = models.IntegerField(
        validators=[MinimumValueValidator(MIN_AMOUNT, message='Cost must be at least 10000')],
    )
    selling_price = models.IntegerField(
        validators=[MinimumValueValidator(MIN_AMOUNT, message='Selling price must be at least 10000')],
    )

    # Dealer
    dealer_name = models.CharField(
        max_length=100,
        validators=[
            alphanumeric('Dealer Name must be alpha-numeric'),
            MinimumLengthValidator(MIN_NAME_LENGTH, message='Dealer Name must be at least 2 characters'),
        ],
    )
    contact = models.CharField(max_length=30, validators=[phone_number()])

    branch = models.CharField(
        max_length=20,
        choices=Branch.choices,
        error_messages={'invalid_choice': 'Branch must be either Maganjo or Matugga'},
    )

    class Meta:
        db_table = 'procurement_records'
        indexes = [
            models.Index(fields=['branch', 'date'], name='procurement_branch_date_idx'),
        ]

    def __str__(self):
        return f"{self.produce_name} ({self.tonnage} kg) - {self.branch} {self.date}"
