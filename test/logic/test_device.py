"""Tests for device slugs.

Covers both separator behaviours: the default literal `.` and the
permissive single-character wildcard (`strict=False`).
"""

import dataclasses

import pytest

from orion.core import Device, InvalidDeviceError


def test_device_from_parts():
    # Valid new device with A-Z
    assert Device.from_parts("PORT", "NODE", "DRIVER") is not None

    # Invalid new device
    assert Device.from_parts("PORT-INV", "NODE@", "DRIVERS.") is None

    assert Device.from_parts("port$", "node", "driver") is None
    device = Device.from_parts("port-10", "node_2", "drivers1")
    assert device.slug == "port-10@node_2.drivers1"


def test_device_from_slug():
    assert Device.from_slug("port@node.driver") is not None
    assert Device.from_slug("port@node.driver.driver") is None
    assert Device.from_slug("port.10@node$1.driver") is None
    assert Device.from_slug("port-10@node_2.drivers1") is not None


def test_device_get_slug():
    assert Device.from_slug("port@node.driver").slug == "port@node.driver"
    assert Device.from_parts("port", "node", "driver").slug == "port@node.driver"


def test_device_get_port_node_and_driver():
    for device in (
        Device.from_slug("port@node.driver"),
        Device.from_parts("port", "node", "driver"),
    ):
        assert device.port == "port"
        assert device.node == "node"
        assert device.driver == "driver"
        assert device.parts == ("port", "node", "driver")


@pytest.mark.parametrize(
    "parts",
    [
        ("port", "node", "driver"),
        ("temp1", "core-isa-000", "lm-sensors"),
        ("temp_0", "arduino100", "arduino_usb"),
        ("-", "_", "0"),
        ("", "", ""),
        ("p", "", "d"),
    ],
)
def test_device_round_trip(parts):
    device = Device.from_parts(*parts)
    assert device is not None
    assert Device.from_slug(device.slug).parts == parts


def test_device_empty_parts_are_valid():
    device = Device.from_slug("@.")
    assert device is not None
    assert device.parts == ("", "", "")
    assert Device.from_parts("", "", "").slug == "@."


@pytest.mark.parametrize(
    "slug",
    [
        "",
        "portnode.driver",
        "port@nodedriver",
        "port@@node.driver",
        "pört@node.driver",
        "port@node.drivér",
        "port @node.driver",
        "port@node.driver\n",
        "port@node.[V]",
    ],
)
def test_device_from_slug_invalid(slug):
    assert Device.from_slug(slug) is None
    assert not Device.is_valid_slug(slug)


def test_device_non_string_input():
    assert Device.from_slug(None) is None
    assert Device.from_parts(1, "node", "driver") is None


# ============================================================================
# separator


def test_strict_separator_rejects_other_characters():
    assert Device.from_slug("port@node:driver") is None
    assert Device.from_slug("port@node-driver") is None
    assert not Device.is_valid_slug("port@node:driver")


def test_permissive_separator_accepts_any_character():
    device = Device.from_slug("port@node:driver", strict=False)
    assert device.parts == ("port", "node", "driver")
    # canonical slug always uses the dot
    assert device.slug == "port@node.driver"
    assert Device.is_valid_slug("port@node:driver", strict=False)


def test_permissive_separator_backtracks_into_node():
    # no separator left over: the wildcard takes the last node character
    device = Device.from_slug("port@node-driver", strict=False)
    assert device.parts == ("port", "node-drive", "")
    assert device.slug == "port@node-drive."


def test_permissive_separator_still_needs_three_groups():
    assert Device.from_slug("port@node.driver.driver", strict=False) is None
    assert Device.from_slug("port@node\ndriver", strict=False) is None
    assert Device.from_slug("port", strict=False) is None


def test_permissive_separator_without_driver():
    # the wildcard separator takes the last node character
    assert Device.from_slug("port@node", strict=False).parts == ("port", "nod", "")
    assert Device.from_slug("port@node") is None


def test_from_parts_same_in_both_modes():
    for strict in (True, False):
        assert Device.from_parts("port", "node", "driver", strict=strict) is not None
        assert Device.from_parts("port", "no.de", "driver", strict=strict) is None
        assert Device.from_parts("port", "node", "dri:ver", strict=strict) is None


# ============================================================================


def test_device_direct_construction_validates():
    assert Device("port", "node", "driver").slug == "port@node.driver"
    with pytest.raises(InvalidDeviceError):
        Device("port$", "node", "driver")
    with pytest.raises(ValueError):
        Device("port", "no@de", "driver")


def test_device_is_immutable():
    device = Device.from_slug("port@node.driver")
    with pytest.raises(dataclasses.FrozenInstanceError):
        device.port = "other"


def test_device_equality_and_display():
    a = Device.from_slug("port@node.driver")
    b = Device.from_parts("port", "node", "driver")
    c = Device.from_slug("port@node.other")
    assert a == b
    assert a != c
    assert hash(a) == hash(b)
    assert len({a, b, c}) == 2
    assert str(a) == "port@node.driver"
    assert "port@node.driver" in repr(a)
