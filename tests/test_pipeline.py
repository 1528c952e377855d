"""tests/test_pipeline.py"""
import json
from datetime import date

import pytest
from lottorecur.models.draw import Draw
from lottorecur.models.recurrence_predictor import RecurrencePredictor
from lottorecur.pipeline.number_report import build_number_report, summarize_predictions
from lottorecur.pipeline.ticket_checker import Ticket, check_tickets, compare_ticket, find_draw
from lottorecur.utils.config import get_engine_config, get_min_iqr_sample, get_number_range


TWO_DRAWS = [
    Draw(date(2026, 1, 3), (1, 2, 3, 4, 5, 6, 7, 8)),
    Draw(date(2026, 1, 10), (1, 9, 10, 11, 12, 13, 14, 15)),
]


class TestNumberReport:
    def test_rows_ordered_by_count_then_number(self):
        rows = build_number_report(TWO_DRAWS)
        assert [r["number"] for r in rows[:3]] == [1, 2, 3]
        assert rows[0]["count"] == 2
        assert len(rows) == 15

    def test_row_values(self):
        row = build_number_report(TWO_DRAWS)[0]
        assert row["average_gap_days"] == 7.0
        assert row["last_seen"] == date(2026, 1, 10)
        assert row["predicted_next"] == date(2026, 1, 17)
        assert row["predicted_week"] == 3

    def test_single_appearance_row_has_blanks(self):
        row = next(r for r in build_number_report(TWO_DRAWS) if r["number"] == 15)
        assert row["average_gap_days"] is None
        assert row["predicted_next"] is None
        assert row["predicted_week"] is None

    def test_summary(self):
        summary = summarize_predictions(TWO_DRAWS, date(2026, 1, 17), 0)
        assert summary["numbers"] == [1]
        assert summary["matched_count"] == 1
        assert summary["total_numbers"] == 34

    def test_summary_custom_predictor(self):
        predictor = RecurrencePredictor(number_range=(1, 10))
        summary = summarize_predictions(TWO_DRAWS, date(2026, 1, 20), 2, predictor)
        assert summary["numbers"] == []
        assert summary["total_numbers"] == 10


class TestTicketChecker:
    def setup_method(self):
        self.tickets = [
            Ticket(date(2026, 1, 10), (2, 3, 4, 5, 6, 7, 8), ticket_id="b"),
            Ticket(date(2026, 1, 10), (1, 9, 10, 20, 21, 22, 15), ticket_id="a"),
            Ticket(date(2026, 1, 3), (1, 2, 3, 4, 5, 6, 7), ticket_id="old"),
        ]

    def test_find_draw(self):
        assert find_draw(TWO_DRAWS, date(2026, 1, 10)) is TWO_DRAWS[1]
        assert find_draw(TWO_DRAWS, date(2026, 1, 11)) is None

    def test_compare_ticket_extra_number(self):
        result = compare_ticket(self.tickets[1], TWO_DRAWS[1])
        assert result["matched_numbers"] == [1, 9, 10]
        assert result["matched_count"] == 3
        assert result["matched_extra_number"] == 15

    def test_check_sorted_best_first(self):
        result = check_tickets(TWO_DRAWS, self.tickets, date(2026, 1, 10))
        assert result["success"] is True
        assert result["winning_numbers"] == [1, 9, 10, 11, 12, 13, 14]
        assert result["extra_number"] == 15
        assert [c["ticket_id"] for c in result["comparisons"]] == ["a", "b"]
        assert result["comparisons"][1]["matched_count"] == 0
        assert result["comparisons"][1]["matched_extra_number"] is None

    def test_missing_draw_returns_error(self):
        result = check_tickets(TWO_DRAWS, self.tickets, date(2026, 2, 1))
        assert result["success"] is False
        assert "No winning row" in result["error"]


class TestConfig:
    def test_engine_config(self):
        cfg = get_engine_config()
        assert cfg["number_range"] == [1, 34]
        assert get_number_range() == (1, 34)
        assert get_min_iqr_sample() == 4


class TestRunPrediction:
    def _write(self, tmp_path, records):
        path = tmp_path / "lotto.json"
        path.write_text(json.dumps(records), encoding="utf-8")
        return str(path)

    def test_prints_matches(self, tmp_path, capsys):
        from scripts.run_prediction import main

        path = self._write(tmp_path, [
            {"dato": "03.01.2026", "nr1": 1, "nr2": 2, "nr3": 3, "nr4": 4,
             "nr5": 5, "nr6": 6, "nr7": 7, "nr8": 8},
            {"dato": "10.01.2026", "nr1": 1, "nr2": 9, "nr3": 10, "nr4": 11,
             "nr5": 12, "nr6": 13, "nr7": 14, "nr8": 15},
        ])
        code = main(["--history", path, "--date", "2026-01-17", "--tolerance", "0", "--report"])
        assert code == 0
        assert "1 of 34 numbers are relevant" in capsys.readouterr().out

    def test_empty_history(self, tmp_path):
        from scripts.run_prediction import main

        path = self._write(tmp_path, [])
        assert main(["--history", path, "--date", "2026-01-17"]) == 1

    def test_negative_tolerance_rejected(self, tmp_path):
        from scripts.run_prediction import main

        path = self._write(tmp_path, [])
        with pytest.raises(SystemExit):
            main(["--history", path, "--tolerance", "-1"])
