import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Event",
            fields=[
                ("id", models.CharField(max_length=64, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("starts_on", models.DateTimeField()),
                ("ends_on", models.DateTimeField()),
                ("location", models.CharField(max_length=255)),
            ],
            options={
                "db_table": "events",
                "ordering": ["starts_on", "id"],
                "indexes": [
                    models.Index(fields=["starts_on"], name="events_starts_on_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="TicketSale",
            fields=[
                ("id", models.CharField(max_length=64, primary_key=True, serialize=False)),
                ("user_id", models.CharField(max_length=64)),
                ("purchase_date", models.DateTimeField()),
                ("price_in_cents", models.PositiveIntegerField()),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="sales",
                        to="ticketing.event",
                    ),
                ),
            ],
            options={
                "db_table": "ticket_sales",
                "indexes": [
                    models.Index(
                        fields=["event", "purchase_date"],
                        name="ticket_sales_event_date_idx",
                    ),
                ],
            },
        ),
    ]
