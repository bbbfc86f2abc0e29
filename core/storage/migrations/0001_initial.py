import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="PropertyRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("postcode", models.CharField(max_length=16)),
                ("address_lines", models.TextField()),
                ("position", models.PositiveIntegerField()),
            ],
            options={
                "db_table": "propmon_properties",
                "ordering": ["position"],
            },
        ),
        migrations.CreateModel(
            name="MonitoredItemRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("position", models.PositiveIntegerField()),
                ("description", models.CharField(max_length=255)),
                ("period_for_next_action", models.CharField(max_length=16)),
                ("notice_every", models.PositiveIntegerField()),
                ("last_action_performed", models.DateField()),
                ("advance_notice", models.PositiveIntegerField()),
                ("period_for_next_notice", models.CharField(max_length=16)),
                ("email_sent_on", models.DateField(blank=True, null=True)),
                ("property", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="monitored_items", to="propmon_storage.propertyrecord")),
            ],
            options={
                "db_table": "propmon_monitored_items",
                "ordering": ["position"],
            },
        ),
        migrations.CreateModel(
            name="InventoryItemRecord",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("position", models.PositiveIntegerField()),
                ("description", models.CharField(max_length=255)),
                ("manufacturer", models.CharField(blank=True, default="", max_length=255)),
                ("model", models.CharField(blank=True, default="", max_length=255)),
                ("serial_number", models.CharField(blank=True, default="", max_length=255)),
                ("supplier", models.CharField(blank=True, default="", max_length=255)),
                ("purchase_date", models.DateField(blank=True, null=True)),
                ("property", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="inventory_items", to="propmon_storage.propertyrecord")),
            ],
            options={
                "db_table": "propmon_inventory_items",
                "ordering": ["position"],
            },
        ),
        migrations.AddConstraint(
            model_name="propertyrecord",
            constraint=models.UniqueConstraint(fields=("postcode", "address_lines"), name="uq_propmon_property_address"),
        ),
        migrations.AddConstraint(
            model_name="monitoreditemrecord",
            constraint=models.UniqueConstraint(fields=("property", "description"), name="uq_propmon_monitored_item"),
        ),
        migrations.AddConstraint(
            model_name="inventoryitemrecord",
            constraint=models.UniqueConstraint(fields=("property", "description"), name="uq_propmon_inventory_item"),
        ),
    ]
