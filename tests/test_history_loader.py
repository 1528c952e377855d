"""tests/test_history_loader.py"""
import json
from datetime import date
from pathlib import Path

import pytest
from lottorecur.models.draw import Draw
from lottorecur.utils.history_loader import load_history, parse_date, parse_draw_record, validate_draw


def _record(dato="02.01.2016", **overrides):
    record = {"dato": dato}
    record.update({f"nr{i}": i for i in range(1, 9)})
    record.update(overrides)
    return record


class TestParseDrawRecord:
    def test_valid_record(self):
        draw = parse_draw_record(_record())
        assert draw.draw_date == date(2016, 1, 2)
        assert draw.numbers == (1, 2, 3, 4, 5, 6, 7, 8)
        assert draw.extra_number == 8

    def test_iso_date_accepted(self):
        assert parse_date("2016-01-02") == date(2016, 1, 2)

    def test_bad_date(self):
        with pytest.raises(ValueError):
            parse_draw_record(_record(dato="2016/01/02"))

    def test_missing_field(self):
        record = _record()
        del record["nr8"]
        with pytest.raises(ValueError, match="nr8"):
            parse_draw_record(record)

    def test_non_integer_number(self):
        with pytest.raises(ValueError):
            parse_draw_record(_record(nr3="x"))


class TestValidateDraw:
    def test_wrong_slot_count(self):
        assert validate_draw(Draw(date(2016, 1, 2), (1, 2, 3))) is False

    def test_valid(self):
        assert validate_draw(Draw(date(2016, 1, 2), (1, 2, 3, 4, 5, 6, 7, 8))) is True


class TestLoadHistory:
    def test_skips_bad_records_and_sorts(self, tmp_path):
        path = tmp_path / "lotto.json"
        path.write_text(json.dumps([
            _record(dato="09.01.2016"),
            _record(dato="not a date"),
            {"dato": "16.01.2016"},
            _record(dato="02.01.2016"),
        ]), encoding="utf-8")
        draws = load_history(path)
        assert [d.draw_date for d in draws] == [date(2016, 1, 2), date(2016, 1, 9)]

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "lotto.json"
        path.write_text(json.dumps({"dato": "02.01.2016"}), encoding="utf-8")
        with pytest.raises(ValueError):
            load_history(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_history(tmp_path / "nope.json")

    def test_bundled_sample(self):
        draws = load_history(Path(__file__).parent.parent / "data" / "lotto.json")
        assert len(draws) == 10
        assert draws[0].draw_date == date(2026, 1, 3)
