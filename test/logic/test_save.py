from datetime import datetime, timedelta, timezone

import pytest

from orion.core import (
    Device,
    InvalidDeviceError,
    MeasurementsList,
    ParseMeasurementsListError,
)
from orion.types.point import MeasurementPoint
from orion.util import (
    InvalidTimestampError,
    add_value,
    build_point,
    create_line_for,
    path_for,
)

TIMESTAMP = "1985-04-12T23:20:50.52Z"
LINE = "1985-04-12T23:20:50.520000+00:00 3[V] -5[A]\n"


@pytest.fixture
def point():
    return build_point("port@node.driver", "3.0[V] -5[A]", TIMESTAMP)


# ============================================================================
# MeasurementPoint


def test_point_line(point):
    assert point.timestamp == "1985-04-12T23:20:50.520000+00:00"
    assert point.to_line() == LINE
    assert create_line_for(point) == LINE


def test_point_is_stored_in_utc():
    tz = timezone(timedelta(hours=-8))
    mp = MeasurementPoint(
        datetime(1996, 12, 19, 16, 39, 57, tzinfo=tz),
        Device.from_slug("port@node.driver"),
        MeasurementsList.parse("1[K]"),
    )
    assert mp.date.tzinfo == timezone.utc
    assert mp.timestamp == "1996-12-20T00:39:57.000000+00:00"


def test_point_rejects_incomplete_data():
    device = Device.from_slug("port@node.driver")
    data = MeasurementsList.parse("1[K]")
    with pytest.raises(ValueError):
        MeasurementPoint(datetime(2020, 1, 1), device, data)
    with pytest.raises(ValueError):
        MeasurementPoint.now(device, MeasurementsList.empty())
    with pytest.raises(TypeError):
        MeasurementPoint.now("port@node.driver", data)


def test_point_now():
    before = datetime.now(timezone.utc)
    mp = MeasurementPoint.now(
        Device.from_slug("port@node.driver"), MeasurementsList.parse("1[K]")
    )
    assert before <= mp.date <= datetime.now(timezone.utc)


# ============================================================================
# build_point


def test_build_point(point):
    assert point.device == Device.from_parts("port", "node", "driver")
    assert str(point.data) == "3[V] -5[A]"
    assert point.date == datetime(
        1985, 4, 12, 23, 20, 50, 520000, tzinfo=timezone.utc
    )


def test_build_point_now():
    mp = build_point("port@node.driver", "1[V]")
    assert (datetime.now(timezone.utc) - mp.date).total_seconds() < 5
    assert build_point("port@node.driver", "1[V]", "").date.tzinfo == timezone.utc


def test_build_point_validation_order():
    # timestamp first, then value, then device
    with pytest.raises(InvalidTimestampError):
        build_point("bad$", "bad", "yesterday")
    with pytest.raises(ParseMeasurementsListError):
        build_point("bad$", "bad", TIMESTAMP)
    with pytest.raises(InvalidDeviceError):
        build_point("bad$", "1[V]", TIMESTAMP)


def test_build_point_separator_modes():
    with pytest.raises(InvalidDeviceError):
        build_point("port@node:driver", "1[V]", TIMESTAMP)
    mp = build_point("port@node:driver", "1[V]", TIMESTAMP, strict=False)
    assert mp.device.slug == "port@node.driver"


# ============================================================================
# files


def test_path_for_daily(point, tmp_path):
    assert path_for(point, tmp_path) == tmp_path / "driver/node/port/1985/4/12/data.txt"


def test_path_for_flat(point, tmp_path):
    assert path_for(point, tmp_path, "flat") == tmp_path / "driver/node/port.txt"


def test_path_for_unknown_layout(point, tmp_path):
    with pytest.raises(ValueError):
        path_for(point, tmp_path, "weekly")


def test_add_value_creates_and_appends(point, tmp_path):
    path = add_value(point, tmp_path)
    assert path == tmp_path / "driver/node/port/1985/4/12/data.txt"
    assert path.read_text(encoding="utf-8") == LINE

    add_value(point, str(tmp_path))
    assert path.read_text(encoding="utf-8") == LINE * 2


def test_add_value_flat(point, tmp_path):
    path = add_value(point, tmp_path, layout="flat")
    assert path.read_text(encoding="utf-8") == LINE


def test_add_value_non_ascii_unit(tmp_path):
    mp = build_point("port@node.driver", "50[Ω]", TIMESTAMP)
    path = add_value(mp, tmp_path)
    assert path.read_text(encoding="utf-8").endswith(" 50[Ω]\n")


def test_add_value_unwritable(point, tmp_path):
    blocker = tmp_path / "driver"
    blocker.write_text("not a directory")
    with pytest.raises(OSError):
        add_value(point, tmp_path)


def test_point_line_keeps_microseconds_on_whole_seconds():
    mp = build_point("port@node.driver", "1[V]", "2015-06-01T12:00:00Z")
    assert mp.to_line() == "2015-06-01T12:00:00.000000+00:00 1[V]\n"
    assert len(mp.to_line()) == len(build_point("p@n.d", "1[V]", TIMESTAMP).to_line())
