from django.db import models
import uuid

from apps.common.validators import (
    MIN_AMOUNT,
    MIN_NAME_LENGTH,
    MIN_NIN_LENGTH,
    MIN_TONNAGE,
    MinimumLengthValidator,
    MinimumValueValidator,
    alphanumeric,
    nin_format,
    phone_number,
)


class SaleType(models.TextChoices):
    CASH = 'Cash', 'Cash'
    CREDIT = 'Credit', 'Credit'


class SaleRecord(models.Model):
    """
    Produce handed over to a buyer.

    A sale is either paid on the spot (CashSale) or deferred (CreditSale).
    Each variant is its own table with the fields it requires; ``type``
    names the variant and is fixed by the model, never by the client.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    produce_name = models.CharField(
        max_length=100,
        validators=[alphanumeric('Produce Name must be alpha-numeric')],
    )
    tonnage = models.IntegerField(
        validators=[MinimumValueValidator(MIN_TONNAGE, message='Tonnage must be at least 100')],
    )
    buyer_name = models.CharField(
        max_length=100,
        validators=[
            alphanumeric('Buyer Name must be alpha-numeric'),
            MinimumLengthValidator(MIN_NAME_LENGTH, message='Buyer Name must be at least 2 characters'),
        ],
    )
    sales_agent_name = models.CharField(
        max_length=100,
        validators=[
            alphanumeric('Sales Agent Name must be alpha-numeric'),
            MinimumLengthValidator(MIN_NAME_LENGTH, message='Sales Agent Name must be at least 2 characters'),
        ],
    )

    class Meta:
        abstract = True

    def __str__(self):
        return f"{self.type} sale: {self.produce_name} ({self.tonnage} kg) to {self.buyer_name}"


class CashSale(SaleRecord):
    """Sale paid in full at the time of sale."""

    type = models.CharField(
        max_length=10,
        choices=SaleType.choices,
        default=SaleType.CASH,
        editable=False,
    )
    amount_paid = models.IntegerField(
        validators=[MinimumValueValidator(MIN_AMOUNT, message='Amount Paid must be at least 10000')],
    )
    date = models.DateField()
    time = models.CharField(max_length=20)

    class Meta:
        db_table = 'cash_sales'
        indexes = [
            models.Index(fields=['date'], name='cash_sales_date_idx'),
        ]


class CreditSale(SaleRecord):
    """Sale on credit; the buyer is identified by NIN and pays by ``due_date``."""

    type = models.CharField(
        max_length=10,
        choices=SaleType.choices,
        default=SaleType.CREDIT,
        editable=False,
    )
    produce_type = models.CharField(
        max_length=100,
        validators=[
            alphanumeric('Produce Type must be alpha-numeric'),
            MinimumLengthValidator(MIN_NAME_LENGTH, message='Produce Type must be at least 2 characters'),
        ],
    )
    amount_due = models.IntegerField(
        validators=[MinimumValueValidator(MIN_AMOUNT, message='Amount Due must be at least 10000')],
    )
    nin = models.CharField(
        max_length=14,
        validators=[
            nin_format(),
            MinimumLengthValidator(MIN_NIN_LENGTH, message='NIN must be at least 13 characters'),
        ],
    )
    location = models.CharField(
        max_length=100,
        validators=[
            alphanumeric('Location must be alpha-numeric'),
            MinimumLengthValidator(MIN_NAME_LENGTH, message='Location must be at least 2 characters'),
        ],
    )
    contact = models.CharField(max_length=30, validators=[phone_number()])
    due_date = models.DateField()
    dispatch_date = models.DateField()

    class Meta:
        db_table = 'credit_sales'
        indexes = [
            models.Index(fields=['due_date'], name='credit_sales_due_date_idx'),
            models.Index(fields=['nin'], name='credit_sales_nin_idx'),
        ]
