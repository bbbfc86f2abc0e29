"""
Tests for core.primitives — Address, MonitoredItem, InventoryItem, Property.
"""

import pytest
from datetime import date, timedelta

from core.primitives import (
    Address,
    DuplicateError,
    InventoryItem,
    MonitoredItem,
    NotFoundError,
    PostCode,
    Property,
    ValidationError,
)
from core.time.periods import Period

LINES = ("99 The Street", "The Town", "The County")
ADDRESS = Address(PostCode("CW3 9ST"), LINES)
OTHER_ADDRESS = Address(PostCode("CW3 9SU"), LINES)
START = date(2021, 11, 1)


def _item(description="Gas safety check", **overrides) -> MonitoredItem:
    fields = dict(
        description=description,
        period_for_next_action=Period.YEARLY,
        notice_every=1,
        last_action_performed=START,
        advance_notice=1,
        period_for_next_notice=Period.WEEKLY,
    )
    fields.update(overrides)
    return MonitoredItem(**fields)


# ── Address ──────────────────────────────────────────────────

class TestAddress:
    def test_string_rendering(self):
        assert str(ADDRESS) == "99 The Street, The Town, The County CW3 9ST"

    def test_postcode_normalised(self):
        assert PostCode("  cw3   9st ").value == "CW3 9ST"

    def test_plain_string_postcode_accepted(self):
        assert Address("CW3 9ST", LINES) == ADDRESS

    def test_blank_postcode_rejected(self):
        with pytest.raises(ValidationError, match="postcode was null"):
            PostCode("   ")

    def test_empty_lines_rejected(self):
        with pytest.raises(ValidationError, match="empty"):
            Address(PostCode("CW3 9ST"), ())

    def test_blank_line_rejected(self):
        with pytest.raises(ValidationError, match="blank"):
            Address(PostCode("CW3 9ST"), ("99 The Street", " "))

    def test_control_character_in_line_rejected(self):
        with pytest.raises(ValidationError, match="control characters"):
            Address(PostCode("CW3 9ST"), ("99 The\x0bStreet",))

    def test_control_character_in_postcode_rejected(self):
        with pytest.raises(ValidationError, match="control characters"):
            PostCode("CW3\x009ST")

    def test_ordering_by_postcode_first(self):
        assert ADDRESS < OTHER_ADDRESS

    def test_record_round_trip(self):
        assert Address.from_dict(ADDRESS.to_dict()) == ADDRESS


# ── MonitoredItem ────────────────────────────────────────────

class TestMonitoredItemSchedule:
    def test_yearly_action_weekly_notice(self):
        item = _item()
        assert item.time_for_next_action == date(2022, 11, 1)
        assert item.time_for_next_notice == date(2022, 10, 25)

    def test_action_performed_recomputes_both_dates(self):
        item = _item().action_performed(date(2022, 11, 3))
        assert item.last_action_performed == date(2022, 11, 3)
        assert item.time_for_next_action == date(2023, 11, 3)
        assert item.time_for_next_notice == date(2023, 10, 27)

    def test_changing_recurrence_recomputes_notice(self):
        item = _item().with_period_for_next_action(Period.MONTHLY).with_notice_every(6)
        assert item.time_for_next_action == date(2022, 5, 1)
        assert item.time_for_next_notice == date(2022, 4, 24)

    def test_changing_notice_leaves_action(self):
        item = _item().with_advance_notice(2).with_period_for_next_notice(Period.MONTHLY)
        assert item.time_for_next_action == date(2022, 11, 1)
        assert item.time_for_next_notice == date(2022, 9, 1)

    def test_notice_may_fall_before_last_action(self):
        item = _item(
            period_for_next_action=Period.WEEKLY,
            advance_notice=1,
            period_for_next_notice=Period.MONTHLY,
        )
        assert item.time_for_next_notice < item.last_action_performed

    def test_original_is_unchanged_by_updates(self):
        item = _item()
        item.action_performed(date(2023, 1, 1))
        assert item.last_action_performed == START


class TestMonitoredItemOverdue:
    def test_boundary_is_not_overdue(self):
        item = _item()
        assert not item.overdue(item.time_for_next_action)

    def test_day_after_is_overdue(self):
        item = _item()
        assert item.overdue(item.time_for_next_action + timedelta(days=1))

    def test_notice_due_is_strictly_after(self):
        item = _item()
        assert not item.notice_due(item.time_for_next_notice)
        assert item.notice_due(item.time_for_next_notice + timedelta(days=1))

    def test_null_date_rejected(self):
        with pytest.raises(ValidationError):
            _item().overdue(None)


class TestMonitoredItemValidation:
    @pytest.mark.parametrize("overrides,message", [
        ({"description": ""}, "description not specified"),
        ({"description": None}, "description not specified"),
        ({"period_for_next_action": None}, "period was null"),
        ({"notice_every": 0}, "noticeEvery less than 1"),
        ({"advance_notice": 0}, "advanceNotice less than 1"),
        ({"last_action_performed": None}, "lastActioned was null"),
        ({"period_for_next_notice": None}, "periodForNextNotice was null"),
        ({"description": "Gas\x01"}, "description contains control characters"),
        ({"description": "Gas\rcheck"}, "description contains control characters"),
    ])
    def test_invalid_construction(self, overrides, message):
        with pytest.raises(ValidationError, match=message):
            _item(**overrides)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            _item(notice_every=-1)

    def test_next_action_beyond_last_calendar_year(self):
        with pytest.raises(ValidationError, match="schedule out of date range"):
            _item(notice_every=10000, last_action_performed=date(2025, 1, 1))

    def test_next_notice_before_first_calendar_day(self):
        with pytest.raises(ValidationError, match="schedule out of date range"):
            _item(
                period_for_next_action=Period.WEEKLY,
                last_action_performed=date(1, 1, 1),
                advance_notice=2,
            )

    def test_out_of_range_update_rejected(self):
        with pytest.raises(ValidationError, match="schedule out of date range"):
            _item().action_performed(date(9999, 6, 1))


class TestMonitoredItemIdentity:
    def test_equal_by_description_only(self):
        assert _item() == _item(notice_every=3, period_for_next_action=Period.WEEKLY)

    def test_ordered_by_next_action(self):
        later = _item("Boiler service", last_action_performed=date(2022, 1, 1))
        earlier = _item("Gutters", last_action_performed=date(2021, 1, 1))
        assert sorted([later, earlier]) == [earlier, later]

    def test_display_dates(self):
        dates = _item().display_dates()
        assert dates["last_action"] == "01/11/2021"
        assert dates["next_action"] == "01/11/2022"
        assert dates["email_sent"] == ""


class TestMonitoredItemRecord:
    def test_derived_dates_not_stored(self):
        record = _item().to_dict()
        assert "timeForNextAction" not in record
        assert "emailSentOn" not in record
        assert record["lastActionPerformed"] == "2021-11-01"

    def test_email_sent_on_is_kept(self):
        item = _item().with_email_sent_on(date(2022, 10, 26))
        restored = MonitoredItem.from_dict(item.to_dict())
        assert restored.email_sent_on == date(2022, 10, 26)
        assert restored.time_for_next_notice == item.time_for_next_notice

    def test_missing_field_rejected(self):
        record = _item().to_dict()
        del record["noticeEvery"]
        with pytest.raises(ValidationError, match="noticeEvery"):
            MonitoredItem.from_dict(record)

    def test_unknown_period_rejected(self):
        record = _item().to_dict()
        record["periodForNextAction"] = "FORTNIGHTLY"
        with pytest.raises(ValidationError, match="not a known period"):
            MonitoredItem.from_dict(record)


# ── InventoryItem ────────────────────────────────────────────

class TestInventoryItem:
    def test_string_rendering(self):
        item = InventoryItem("Boiler", "Worcester", "Greenstar", "SN123")
        assert str(item) == "Boiler, Worcester, Greenstar, SN123"

    def test_description_required(self):
        with pytest.raises(ValidationError, match="description was missing"):
            InventoryItem("")

    def test_null_text_field_rejected(self):
        with pytest.raises(ValidationError, match="manufacturer was null"):
            InventoryItem("Boiler", manufacturer=None)

    @pytest.mark.parametrize("fields,label", [
        ({"description": "Boiler\x02"}, "description"),
        ({"description": "Boiler", "supplier": "Acme\x1b"}, "supplier"),
    ])
    def test_control_characters_rejected(self, fields, label):
        with pytest.raises(ValidationError, match=f"{label} contains control characters"):
            InventoryItem(**fields)

    def test_tab_and_newline_allowed(self):
        item = InventoryItem("Boiler", model="A\tB\nC")
        assert item.model == "A\tB\nC"

    def test_ordering_by_manufacturer_model_serial(self):
        a = InventoryItem("Cooker", "Bosch", "X1", "2")
        b = InventoryItem("Fridge", "Bosch", "X1", "10")
        c = InventoryItem("Boiler", "Alpha", "Z9", "1")
        assert sorted([a, b, c]) == [c, b, a]

    def test_empty_fields_omitted_from_record(self):
        record = InventoryItem("Boiler", manufacturer="Worcester").to_dict()
        assert record == {"description": "Boiler", "manufacturer": "Worcester"}

    def test_purchase_date_round_trip(self):
        item = InventoryItem("Boiler", purchase_date=date(2020, 3, 4))
        assert InventoryItem.from_dict(item.to_dict()).purchase_date == date(2020, 3, 4)
        assert item.purchase_date_display == "04/03/2020"


# ── Property ─────────────────────────────────────────────────

class TestProperty:
    def test_add_item_stamps_owner(self):
        prop = Property(ADDRESS)
        adopted = prop.add_item(_item())
        assert adopted.owner == ADDRESS
        assert prop.monitored_items == (adopted,)

    def test_duplicate_item_rejected(self):
        prop = Property(ADDRESS, monitored_items=[_item()])
        with pytest.raises(DuplicateError, match="already exists"):
            prop.add_item(_item())

    def test_same_description_allowed_across_kinds(self):
        prop = Property(ADDRESS, monitored_items=[_item("Boiler")])
        prop.add_item(InventoryItem("Boiler"))
        assert len(prop.inventory_items) == 1

    def test_find_item_by_description(self):
        prop = Property(
            ADDRESS,
            monitored_items=[_item("Boiler")],
            inventory_items=[InventoryItem("Boiler", manufacturer="Worcester")],
        )
        assert prop.find_monitored_item("Boiler").period_for_next_action is Period.YEARLY
        assert prop.find_inventory_item("Boiler").manufacturer == "Worcester"
        assert prop.find_monitored_item("Cooker") is None
        assert prop.find_inventory_item("Cooker") is None

    def test_replace_missing_item_rejected(self):
        with pytest.raises(NotFoundError, match="Property: item Gas safety check not found"):
            Property(ADDRESS).replace_item(_item())

    def test_remove_item_returns_stored_item(self):
        prop = Property(ADDRESS, monitored_items=[_item()])
        removed = prop.remove_item(_item())
        assert removed.owner == ADDRESS
        assert prop.monitored_items == ()

    def test_copy_is_independent(self):
        prop = Property(ADDRESS, monitored_items=[_item()])
        clone = prop.copy()
        clone.add_item(_item("Boiler service"))
        assert len(prop.monitored_items) == 1
        assert clone == prop

    def test_items_overdue(self):
        prop = Property(ADDRESS, monitored_items=[_item()])
        assert not prop.are_items_overdue(date(2022, 11, 1))
        assert prop.are_items_overdue(date(2022, 11, 2))
        assert prop.are_notices_overdue(date(2022, 10, 26))

    def test_record_round_trip_restores_owner(self):
        prop = Property(
            ADDRESS,
            monitored_items=[_item()],
            inventory_items=[InventoryItem("Boiler", "Worcester")],
        )
        restored = Property.from_dict(prop.to_dict())
        assert restored == prop
        assert restored.monitored_items[0].owner == ADDRESS
        assert restored.inventory_items[0].owner == ADDRESS
