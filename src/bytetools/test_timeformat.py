import re
import time

from bytetools.bytestring import ByteString
from bytetools.timeformat import TimeFormat, format_time, local_time_fields


class TestFormatTime:
    def setup_method(self):
        self.epoch = 1_700_000_000

    def test_layouts(self):
        assert re.fullmatch(rb"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}", format_time(self.epoch))
        assert re.fullmatch(rb"\d{4}-\d{2}-\d{2}", format_time(self.epoch, TimeFormat.Date))
        assert re.fullmatch(rb"\d{2}:\d{2}:\d{2}", format_time(self.epoch, TimeFormat.Time))

    def test_matches_local_time(self):
        expected = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(self.epoch)).encode("ascii")
        assert ByteString.format_time(self.epoch) == expected

    def test_date_and_time_compose_datetime(self):
        whole = format_time(self.epoch)
        assert whole == format_time(self.epoch, TimeFormat.Date) + b" " + format_time(self.epoch, TimeFormat.Time)

    def test_fields(self):
        year, month, day, hour, minute, second = local_time_fields(self.epoch)
        assert 1 <= month <= 12
        assert 1 <= day <= 31
        assert year == 2023
        assert 0 <= hour < 24 and 0 <= minute < 60 and 0 <= second < 62
