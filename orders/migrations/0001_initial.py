import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("stripe_id", models.CharField(max_length=255, unique=True)),
                ("event_id", models.CharField(blank=True, default="", max_length=64)),
                ("buyer_id", models.CharField(blank=True, default="", max_length=64)),
                ("total_amount", models.CharField(default="0", max_length=32)),
                ("created_at", models.DateTimeField()),
            ],
            options={
                "ordering": ["-created_at", "id"],
                "indexes": [
                    models.Index(fields=["buyer_id", "-created_at"], name="order_buyer_created_idx"),
                    models.Index(fields=["event_id"], name="order_event_idx"),
                ],
            },
        ),
    ]
