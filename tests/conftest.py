from datetime import date

import pytest

from xoso_checker.core.prizes import PrizeType
from xoso_checker.schemas.lottery import PrizeRecord

DRAW_DATE = date(2026, 2, 9)

XOSO_ME_PAGE = """
<html><body>
<div class="header"><a href="/">xoso.me</a> 1 2 3</div>
<h2 class="title">XSMN Thứ Hai ngày 09-02-2026</h2>
<table class="kqxs" data-station="tp-hcm">
  <tr><th>Giải</th><th>TP. HCM</th></tr>
  <tr><td>G.8</td><td>47</td></tr>
  <tr><td>G.7</td><td>815</td></tr>
  <tr><td>G.6</td><td>4821 - 0937 - 1620</td></tr>
  <tr><td>G.5</td><td>3456</td></tr>
  <tr><td>G.4</td><td>11111 22222 33333 44444 55555 66666 77777</td></tr>
  <tr><td>G.3</td><td><div>80808</div><div>90909</div></td></tr>
  <tr><td>G.2</td><td>12121</td></tr>
  <tr><td>G.1</td><td>34343</td></tr>
  <tr><td>ĐB</td><td>123456</td></tr>
  <tr><td>Thống kê</td><td>00 - 99</td></tr>
</table>
<div class="station-name">Đồng Tháp</div>
<table class="kqxs">
  <tr><td>G.8</td><td>12</td></tr>
  <tr><td>G.7</td><td>9 | 345</td></tr>
  <tr><td>ĐB</td><td>654321</td></tr>
</table>
</body></html>
"""

MINH_NGOC_PAGE = """
<html><body>
<table class="bkqmiennam"><tr>
<td>
  <table class="rightcl">
    <tr><td class="tinh" colspan="2">Tây Ninh</td></tr>
    <tr><td class="giai8">Giải tám</td><td>05</td></tr>
    <tr><td class="giaidb">Giải ĐB</td><td>000111</td></tr>
  </table>
</td>
<td>
  <table class="rightcl">
    <tr><td class="tinh" colspan="2">Bình Thuận</td></tr>
    <tr><td>Giải tám</td><td><div>71</div></td></tr>
    <tr><td>Giải bảy</td><td><div>602</div></td></tr>
    <tr><td>Giải sáu</td><td><div>1234</div><div>5678</div><div>9012</div></td></tr>
    <tr><td>Giải năm</td><td><div>3344</div></td></tr>
    <tr><td>Giải tư</td><td>10001-20002-30003-40004-50005-60006-70007</td></tr>
    <tr><td>Giải ba</td><td>81818.92929</td></tr>
    <tr><td>Giải nhì</td><td>13579</td></tr>
    <tr><td>Giải nhất</td><td>24680</td></tr>
    <tr><td>Giải đặc biệt</td><td>975310</td></tr>
  </table>
</td>
</tr></table>
</body></html>
"""


@pytest.fixture
def draw_date():
    return DRAW_DATE


@pytest.fixture
def xoso_me_page():
    return XOSO_ME_PAGE


@pytest.fixture
def minh_ngoc_page():
    return MINH_NGOC_PAGE


@pytest.fixture
def make_record():
    def _make(prize_type: PrizeType, value: str, order: int = 0, station: str = "TP"):
        return PrizeRecord(
            station_code=station,
            draw_date=DRAW_DATE,
            prize_type=prize_type,
            prize_order=order,
            prize_value=value,
        )

    return _make
