"""
PropMon Storage — Snapshot Tables
===================================
Relational form of the registry snapshot.

RULES:
- position columns preserve insertion order on reload
- Derived schedule dates are NOT stored; they are recomputed
- Address lines are stored newline-joined in one column
- Rows are replaced wholesale on each store
"""

from django.db import models


class PropertyRecord(models.Model):
    postcode = models.CharField(max_length=16)
    address_lines = models.TextField()
    position = models.PositiveIntegerField()

    class Meta:
        app_label = "propmon_storage"
        db_table = "propmon_properties"
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(
                fields=["postcode", "address_lines"],
                name="uq_propmon_property_address",
            ),
        ]

    def __str__(self):
        return f"{self.address_lines.replace(chr(10), ', ')} {self.postcode}"


class MonitoredItemRecord(models.Model):
    property = models.ForeignKey(
        PropertyRecord,
        on_delete=models.CASCADE,
        related_name="monitored_items",
    )
    position = models.PositiveIntegerField()
    description = models.CharField(max_length=255)
    period_for_next_action = models.CharField(max_length=16)
    notice_every = models.PositiveIntegerField()
    last_action_performed = models.DateField()
    advance_notice = models.PositiveIntegerField()
    period_for_next_notice = models.CharField(max_length=16)
    email_sent_on = models.DateField(null=True, blank=True)

    class Meta:
        app_label = "propmon_storage"
        db_table = "propmon_monitored_items"
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(
                fields=["property", "description"],
                name="uq_propmon_monitored_item",
            ),
        ]

    def __str__(self):
        return self.description


class InventoryItemRecord(models.Model):
    property = models.ForeignKey(
        PropertyRecord,
        on_delete=models.CASCADE,
        related_name="inventory_items",
    )
    position = models.PositiveIntegerField()
    description = models.CharField(max_length=255)
    manufacturer = models.CharField(max_length=255, blank=True, default="")
    model = models.CharField(max_length=255, blank=True, default="")
    serial_number = models.CharField(max_length=255, blank=True, default="")
    supplier = models.CharField(max_length=255, blank=True, default="")
    purchase_date = models.DateField(null=True, blank=True)

    class Meta:
        app_label = "propmon_storage"
        db_table = "propmon_inventory_items"
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(
                fields=["property", "description"],
                name="uq_propmon_inventory_item",
            ),
        ]

    def __str__(self):
        return self.description
