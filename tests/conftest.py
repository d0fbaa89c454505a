import pandas as pd
import pytest

from elpris_dash.data.normalization import normalize_tariff_frame

TZ = "UTC"


def make_raw(prices, start="2024-01-01 00:00", tax=0.0, net=0.0, vat=1.0, tz=TZ):
    """Canonical newest-first tariff frame with one row per hourly market price."""
    dates = pd.date_range(start=start, periods=len(prices), freq="h")
    raw = pd.DataFrame(
        {
            "date": dates,
            "market_price": prices,
            "electricity_tax": tax,
            "net_tarif": net,
            "vat": vat,
        }
    )
    return normalize_tariff_frame(raw, tz)


def ts(text, tz=TZ):
    return pd.Timestamp(text, tz=tz)


@pytest.fixture
def six_hours():
    return make_raw([10, 20, 30, 40, 50, 60])


@pytest.fixture
def day_of_tariffs():
    prices = [50, 45, 40, 38, 42, 60, 90, 120, 110, 95, 80, 70, 65, 60, 62, 75, 100, 140, 150, 130, 100, 80, 65, 55]
    return make_raw(prices, tax=70.0, net=20.0, vat=1.25)
