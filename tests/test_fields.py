import datetime as dt
from decimal import Decimal

import pytest

from dxspots import fields
from dxspots.fields import FieldConversionError


def test_clean_line_strips_telnet_noise():
    assert fields.clean_line("\x07DX de K1ABC: 7030.0 W1AW\r\n") == "DX de K1ABC: 7030.0 W1AW"
    assert fields.clean_line("  \x00\x7f ") == ""


def test_callsign_is_uppercased():
    assert fields.callsign({"spotter": " k1abc/p "}, "spotter") == "K1ABC/P"


@pytest.mark.parametrize("captures", [{}, {"spotter": None}, {"spotter": ""}, {"spotter": "   "}])
def test_callsign_required(captures):
    with pytest.raises(FieldConversionError) as err:
        fields.callsign(captures, "spotter")
    assert err.value.field_name == "spotter"


@pytest.mark.parametrize("raw", ["7030.0", "14025", "1296000.125"])
def test_frequency_kept_exactly(raw):
    value = fields.frequency({"frequency": raw})
    assert value == Decimal(raw)
    assert str(value) == raw


@pytest.mark.parametrize("raw", ["notanumber", "1e3", "-7030.0", "+7030", "NaN", "7030.", ""])
def test_frequency_rejects_non_decimal(raw):
    with pytest.raises(FieldConversionError) as err:
        fields.frequency({"frequency": raw})
    assert err.value.text == raw


@pytest.mark.parametrize(
    "raw, expected",
    [("1234", dt.time(12, 34)), ("0000", dt.time(0, 0)), ("18", dt.time(18, 0)), (None, None)],
)
def test_time_of_day(raw, expected):
    assert fields.time_of_day({"time": raw}) == expected


@pytest.mark.parametrize("raw", ["2400", "1260", "123", "ab", ""])
def test_time_of_day_rejects_garbage(raw):
    with pytest.raises(FieldConversionError):
        fields.time_of_day({"time": raw})


def test_integer_absent_versus_zero():
    assert fields.integer({}, "k_index") is None
    assert fields.integer({"k_index": "0"}, "k_index") == 0
    assert fields.integer({"snr": "-12"}, "snr") == -12
    with pytest.raises(FieldConversionError):
        fields.integer({"k_index": ""}, "k_index")


def test_text_normalizes_empty_to_absent():
    assert fields.text({"comment": "CW 599   "}, "comment") == "CW 599"
    assert fields.text({"comment": "   "}, "comment") is None
    assert fields.text({"comment": None}, "comment") is None


@pytest.mark.parametrize(
    "khz, band",
    [("1840.0", "160M"), ("14000", "20M"), ("14350", "20M"), ("144300.0", "2M"), ("12000", None)],
)
def test_band_for(khz, band):
    assert fields.band_for(Decimal(khz)) == band


@pytest.mark.parametrize(
    "comment, mode",
    [("ft8 -12 dB", "FT8"), ("LSB", "LSB"), ("599 into N. MI", None), ("", None), (None, None)],
)
def test_mode_from_comment(comment, mode):
    assert fields.mode_from_comment(comment) == mode


@pytest.mark.parametrize(
    "helper, name, raw",
    [
        (fields.frequency, "frequency", "٧٠٣٠.٠"),
        (fields.time_of_day, "time", "١٢٣٤"),
        (fields.integer, "k_index", "٣"),
    ],
)
def test_numeric_helpers_accept_ascii_digits_only(helper, name, raw):
    with pytest.raises(FieldConversionError):
        helper({name: raw}, name)
