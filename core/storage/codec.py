"""
PropMon Storage — XML Snapshot Codec
======================================
serialize registry snapshot ⇄ byte stream.

Document shape:
    <properties>
      <property>
        <address><line>99 The Street</line>...</address>
        <postcode>CW3 9ST</postcode>
        <item>          one per monitored item
          <description/> <periodForNextAction/> <noticeEvery/>
          <lastActionPerformed/> <advanceNotice/> <periodForNextNotice/>
          <emailSentOn/>            (only when set)
        </item>
        <inventory>     one per inventory item
          <description/> <manufacturer/> <model/> <serialNumber/>
          <supplier/> <purchaseDate/>      (absent fields omitted)
        </inventory>
      </property>
    </properties>

Next-action / next-notice dates are never written; they are
recomputed from the stored inputs when the snapshot is decoded.
Malformed input fails the whole decode (no partial recovery).
Text nodes are read back verbatim; indentation only ever lands
between elements.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Iterable, List

from core.primitives.errors import MonitorError
from core.primitives.property_aggregate import Property
from core.storage.errors import StorageLoadError

ROOT_TAG = "properties"
PROPERTY_TAG = "property"
ADDRESS_TAG = "address"
LINE_TAG = "line"
POSTCODE_TAG = "postcode"
MONITORED_ITEM_TAG = "item"
INVENTORY_ITEM_TAG = "inventory"

ENCODING = "utf-8"


# ══════════════════════════════════════════════════════════════
# ENCODE
# ══════════════════════════════════════════════════════════════

def _append_record(parent: ET.Element, tag: str, record: dict) -> None:
    element = ET.SubElement(parent, tag)
    for key, value in record.items():
        ET.SubElement(element, key).text = str(value)


def build_document(properties: Iterable[Property]) -> ET.Element:
    root = ET.Element(ROOT_TAG)
    for prop in properties:
        record = prop.to_dict()
        element = ET.SubElement(root, PROPERTY_TAG)
        address = ET.SubElement(element, ADDRESS_TAG)
        for line in record["address"]:
            ET.SubElement(address, LINE_TAG).text = line
        ET.SubElement(element, POSTCODE_TAG).text = record["postcode"]
        for item in record["monitoredItems"]:
            _append_record(element, MONITORED_ITEM_TAG, item)
        for item in record["inventoryItems"]:
            _append_record(element, INVENTORY_ITEM_TAG, item)
    return root


def encode_snapshot(properties: Iterable[Property]) -> bytes:
    root = build_document(properties)
    ET.indent(root)
    return ET.tostring(root, encoding=ENCODING, xml_declaration=True)


# ══════════════════════════════════════════════════════════════
# DECODE
# ══════════════════════════════════════════════════════════════

def _record_of(element: ET.Element) -> dict:
    return {child.tag: child.text or "" for child in element}


def _property_record(element: ET.Element) -> dict:
    address = element.find(ADDRESS_TAG)
    postcode = element.find(POSTCODE_TAG)
    if address is None or postcode is None:
        raise StorageLoadError(
            "PropertyRead: property element without address or postcode"
        )
    return {
        "address": [line.text or "" for line in address.findall(LINE_TAG)],
        "postcode": postcode.text or "",
        "monitoredItems": [
            _record_of(item) for item in element.findall(MONITORED_ITEM_TAG)
        ],
        "inventoryItems": [
            _record_of(item) for item in element.findall(INVENTORY_ITEM_TAG)
        ],
    }


def decode_snapshot(data: bytes) -> List[Property]:
    """
    Rebuild properties (with children and owner references) from bytes.

    Raises:
        StorageLoadError: unparseable XML, wrong root, or an invalid record
    """
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise StorageLoadError(f"PropertyRead: Exception occurred - {exc}") from exc

    if root.tag != ROOT_TAG:
        raise StorageLoadError(
            f"PropertyRead: expected <{ROOT_TAG}> root, found <{root.tag}>"
        )

    properties: List[Property] = []
    for element in root.findall(PROPERTY_TAG):
        try:
            properties.append(Property.from_dict(_property_record(element)))
        except MonitorError as exc:
            if isinstance(exc, StorageLoadError):
                raise
            raise StorageLoadError(
                f"PropertyRead: Exception occurred - {exc}"
            ) from exc
    return properties
