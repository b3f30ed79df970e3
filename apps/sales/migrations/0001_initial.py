import uuid
import apps.common.validators
import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='CashSale',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('produce_name', models.CharField(max_length=100, validators=[django.core.validators.RegexValidator('^[a-zA-Z0-9\\s]+$', code='alphanumeric', message='Produce Name must be alpha-numeric')])),
                ('tonnage', models.IntegerField(validators=[apps.common.validators.MinimumValueValidator(100, message='Tonnage must be at least 100')])),
                ('buyer_name', models.CharField(max_length=100, validators=[django.core.validators.RegexValidator('^[a-zA-Z0-9\\s]+$', code='alphanumeric', message='Buyer Name must be alpha-numeric'), apps.common.validators.MinimumLengthValidator(2, message='Buyer Name must be at least 2 characters')])),
                ('sales_agent_name', models.CharField(max_length=100, validators=[django.core.validators.RegexValidator('^[a-zA-Z0-9\\s]+$', code='alphanumeric', message='Sales Agent Name must be alpha-numeric'), apps.common.validators.MinimumLengthValidator(2, message='Sales Agent Name must be at least 2 characters')])),
                ('type', models.CharField(choices=[('Cash', 'Cash'), ('Credit', 'Credit')], default='Cash', editable=False, max_length=10)),
                ('amount_paid', models.IntegerField(validators=[apps.common.validators.MinimumValueValidator(10000, message='Amount Paid must be at least 10000')])),
                ('date', models.DateField()),
                ('time', models.CharField(max_length=20)),
            ],
            options={
                'db_table': 'cash_sales',
                'indexes': [models.Index(fields=['date'], name='cash_sales_date_idx')],
            },
        ),
        migrations.CreateModel(
            name='CreditSale',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('produce_name', models.CharField(max_length=100, validators=[django.core.validators.RegexValidator('^[a-zA-Z0-9\\s]+$', code='alphanumeric', message='Produce Name must be alpha-numeric')])),
                ('tonnage', models.IntegerField(validators=[apps.common.validators.MinimumValueValidator(100, message='Tonnage must be at least 100')])),
                ('buyer_name', models.CharField(max_length=100, validators=[django.core.validators.RegexValidator('^[a-zA-Z0-9\\s]+$', code='alphanumeric', message='Buyer Name must be alpha-numeric'), apps.common.validators.MinimumLengthValidator(2, message='Buyer Name must be at least 2 characters')])),
                ('sales_agent_name', models.CharField(max_length=100, validators=[django.core.validators.RegexValidator('^[a-zA-Z0-9\\s]+$', code='alphanumeric', message='Sales Agent Name must be alpha-numeric'), apps.common.validators.MinimumLengthValidator(2, message='Sales Agent Name must be at least 2 characters')])),
                ('type', models.CharField(choices=[('Cash', 'Cash'), ('Credit', 'Credit')], default='Credit', editable=False, max_length=10)),
                ('produce_type', models.CharField(max_length=100, validators=[django.core.validators.RegexValidator('^[a-zA-Z0-9\\s]+$', code='alphanumeric', message='Produce Type must be alpha-numeric'), apps.common.validators.MinimumLengthValidator(2, message='Produce Type must be at least 2 characters')])),
                ('amount_due', models.IntegerField(validators=[apps.common.validators.MinimumValueValidator(10000, message='Amount Due must be at least 10000')])),
                ('nin', models.CharField(max_length=14, validators=[django.core.validators.RegexValidator('^[A-Z0-9]{13,14}$', code='nin', message='NIN must be valid format'), apps.common.validators.MinimumLengthValidator(13, message='NIN must be at least 13 characters')])),
                ('location', models.CharField(max_length=100, validators=[django.core.validators.RegexValidator('^[a-zA-Z0-9\\s]+$', code='alphanumeric', message='Location must be alpha-numeric'), apps.common.validators.MinimumLengthValidator(2, message='Location must be at least 2 characters')])),
                ('contact', models.CharField(max_length=30, validators=[django.core.validators.RegexValidator('^\\+?[0-9\\s-]{10,}$', code='phone', message='Contact must be a valid phone number')])),
                ('due_date', models.DateField()),
                ('dispatch_date', models.DateField()),
            ],
            options={
                'db_table': 'credit_sales',
                'indexes': [
                    models.Index(fields=['due_date'], name='credit_sales_due_date_idx'),
                    models.Index(fields=['nin'], name='credit_sales_nin_idx'),
                ],
            },
        ),
    ]
